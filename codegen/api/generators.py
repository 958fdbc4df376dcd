import logging
from datetime import datetime, timezone

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.responses import PlainTextResponse

from codegen.api import deps
from codegen.codegen import Codegen
from codegen.core.errors import GeneratorNotFound
from codegen.schemas.generation import GeneratedScript, GeneratorList

router = APIRouter(prefix="/generators", tags=["generators"])
logger = logging.getLogger(__name__)


@router.get("/", response_model=GeneratorList)
def list_generators(codegen: Codegen = Depends(deps.get_codegen)):
    return GeneratorList(generators=codegen.available_generators())


@router.get("/{name}", response_model=GeneratedScript)
def generate_script(name: str, codegen: Codegen = Depends(deps.get_codegen)):
    content = _generate(codegen, name)
    return GeneratedScript(generator=name, content=content, generated_at=datetime.now(timezone.utc))


@router.get("/{name}/raw", response_class=PlainTextResponse)
def generate_script_raw(name: str, codegen: Codegen = Depends(deps.get_codegen)):
    return PlainTextResponse(_generate(codegen, name))


def _generate(codegen: Codegen, name: str) -> str:
    try:
        content = codegen.generate(name)
    except GeneratorNotFound as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    logger.info("Generated %d chars with generator %s", len(content), name)
    return content
