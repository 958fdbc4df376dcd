import logging
from typing import Iterable, Mapping, Union

from codegen.core.config import DEFAULT_INDENT, DEFAULT_LINE_BREAK
from codegen.core.errors import SnippetNotFound
from codegen.generation.fields import FieldTable, format_field_table
from codegen.snippets.registry import SnippetRegistry

logger = logging.getLogger(__name__)


class GenerationContext:
    """What a generator sees: formatting settings plus snippet lookup.

    Read-only for generators. The owning Codegen keeps a single context and
    reconfigures it through `_configure`, so generators always observe the
    current configuration but cannot change it.
    """

    def __init__(
        self,
        snippets: SnippetRegistry,
        line_break: str = DEFAULT_LINE_BREAK,
        indent: str = DEFAULT_INDENT,
    ) -> None:
        self._snippets = snippets
        self._line_break = line_break
        self._indent = indent

    @property
    def line_break(self) -> str:
        return self._line_break

    @property
    def indent(self) -> str:
        return self._indent

    def _configure(self, *, line_break: str | None = None, indent: str | None = None) -> None:
        if line_break is not None:
            self._line_break = line_break
        if indent is not None:
            self._indent = indent

    def get_snippet(self, key: str) -> str:
        return self._snippets.get(key)

    def snippet_or_empty(self, key: str) -> str:
        try:
            return self._snippets.get(key)
        except SnippetNotFound:
            logger.debug("Snippet %r not registered, skipping", key)
            return ""

    def lines(self, keys: Iterable[str], prefix: str = "") -> str:
        """Join the given snippets in order, one per line, skipping empty ones."""
        out = ""
        for key in keys:
            snippet = self.snippet_or_empty(key)
            if snippet:
                out += prefix + snippet + self._line_break
        return out

    def fields(self, fields: Union[FieldTable, Mapping[str, str]], depth: int = 1) -> str:
        return format_field_table(fields, indent=self._indent * depth, line_break=self._line_break)
