from functools import lru_cache

from codegen.codegen import Codegen
from codegen.content.factory import build_codegen


@lru_cache()
def get_codegen() -> Codegen:
    return build_codegen()
