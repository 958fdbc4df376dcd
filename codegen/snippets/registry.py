from codegen.core.errors import SnippetNotFound
from codegen.core.registry import Registry


class SnippetRegistry(Registry[str]):
    kind = "snippet"
    not_found = SnippetNotFound

    def add(self, key: str, value: str) -> None:
        self._put(key, value)
