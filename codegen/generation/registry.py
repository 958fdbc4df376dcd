from codegen.core.errors import GeneratorNotFound
from codegen.core.registry import Registry
from codegen.generation.interfaces import Generator


class GeneratorRegistry(Registry[Generator]):
    kind = "generator"
    not_found = GeneratorNotFound

    def register(self, name: str, generator: Generator) -> None:
        self._put(name, generator)

    def available(self) -> list[str]:
        return self.keys()
