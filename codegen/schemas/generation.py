from datetime import datetime

from pydantic import BaseModel


class GeneratedScript(BaseModel):
    generator: str
    content: str
    generated_at: datetime


class GeneratorList(BaseModel):
    generators: list[str]


class SnippetRead(BaseModel):
    key: str
    value: str


class SnippetWrite(BaseModel):
    value: str
