import logging
from typing import Callable

from codegen.core.config import DEFAULT_INDENT, DEFAULT_LINE_BREAK
from codegen.core.errors import GeneratorNotFound
from codegen.generation.context import GenerationContext
from codegen.generation.fields import enclose_in_single_quotes
from codegen.generation.interfaces import Generator
from codegen.generation.registry import GeneratorRegistry
from codegen.snippets.registry import SnippetRegistry

__all__ = ["Codegen", "Loader", "enclose_in_single_quotes"]

logger = logging.getLogger(__name__)


class Codegen:
    """Snippets, generators and the formatting settings they share."""

    def __init__(self, line_break: str = DEFAULT_LINE_BREAK, indent: str = DEFAULT_INDENT) -> None:
        self.snippets = SnippetRegistry()
        self.generators = GeneratorRegistry()
        self.context = GenerationContext(self.snippets, line_break=line_break, indent=indent)

    @property
    def line_break(self) -> str:
        return self.context.line_break

    @property
    def indent(self) -> str:
        return self.context.indent

    def set_line_break(self, line_break: str) -> None:
        self.context._configure(line_break=line_break)

    def set_indent(self, indent: str) -> None:
        self.context._configure(indent=indent)

    def add_snippet(self, key: str, value: str) -> None:
        self.snippets.add(key, value)

    def get_snippet(self, key: str) -> str:
        return self.snippets.get(key)

    def snippet_keys(self) -> list[str]:
        return self.snippets.keys()

    def register_generator(self, name: str, generator: Generator) -> None:
        self.generators.register(name, generator)

    def available_generators(self) -> list[str]:
        return self.generators.available()

    def generate(self, name: str) -> str:
        try:
            generator = self.generators.get(name)
        except GeneratorNotFound:
            logger.warning("Generator %s not registered", name)
            raise
        # called outside the registry lock so generators can look up freely
        return generator(self.context)

    def load(self, *loaders: "Loader") -> "Codegen":
        for loader in loaders:
            loader(self)
        return self

    def add_default_snippets(self) -> None:
        from codegen.content.snippets import add_default_snippets

        add_default_snippets(self)

    def register_default_generators(self) -> None:
        from codegen.content.factory import register_default_generators

        register_default_generators(self)


Loader = Callable[[Codegen], None]
