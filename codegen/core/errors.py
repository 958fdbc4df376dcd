class CodegenError(Exception):
    pass


class SnippetNotFound(CodegenError, KeyError):
    """Raised when a snippet key was never registered."""

    def __init__(self, key: str) -> None:
        super().__init__(key)
        self.key = key

    def __str__(self) -> str:
        return f"Snippet with such key not found: '{self.key}'"


class GeneratorNotFound(CodegenError, KeyError):
    """Raised when a generator name was never registered."""

    def __init__(self, name: str) -> None:
        super().__init__(name)
        self.name = name

    def __str__(self) -> str:
        return f"Generator with such name not found: '{self.name}'"
