from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# Typical line break and PSR indentation in PHP scripts
DEFAULT_LINE_BREAK = "\n"
DEFAULT_INDENT = "    "


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", case_sensitive=False)

    app_name: str = Field(default="codegen", alias="APP_NAME")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")
    # per-lookup DEBUG records from generators are noisy, keep them opt-in
    log_snippet_lookups: bool = Field(default=False, alias="CODEGEN_LOG_LOOKUPS")

    line_break: str = Field(default=DEFAULT_LINE_BREAK, alias="CODEGEN_LINE_BREAK")
    indent: str = Field(default=DEFAULT_INDENT, alias="CODEGEN_INDENT")
    load_defaults: bool = Field(default=True, alias="CODEGEN_LOAD_DEFAULTS")


@lru_cache()
def get_settings() -> Settings:
    return Settings()
