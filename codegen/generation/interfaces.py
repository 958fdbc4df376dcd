from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from codegen.generation.context import GenerationContext


class Generator(Protocol):
    def __call__(self, ctx: "GenerationContext") -> str: ...
