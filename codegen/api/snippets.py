from fastapi import APIRouter, Depends, HTTPException, status

from codegen.api import deps
from codegen.codegen import Codegen
from codegen.core.errors import SnippetNotFound
from codegen.schemas.generation import SnippetRead, SnippetWrite

router = APIRouter(prefix="/snippets", tags=["snippets"])


@router.get("/", response_model=list[str])
def list_snippets(codegen: Codegen = Depends(deps.get_codegen)):
    return codegen.snippet_keys()


@router.get("/{key}", response_model=SnippetRead)
def get_snippet(key: str, codegen: Codegen = Depends(deps.get_codegen)):
    try:
        value = codegen.get_snippet(key)
    except SnippetNotFound as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    return SnippetRead(key=key, value=value)


@router.put("/{key}", response_model=SnippetRead)
def put_snippet(key: str, payload: SnippetWrite, codegen: Codegen = Depends(deps.get_codegen)):
    codegen.add_snippet(key, payload.value)
    return SnippetRead(key=key, value=payload.value)
