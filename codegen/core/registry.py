import logging
import threading
from typing import ClassVar, Dict, Generic, TypeVar

from codegen.core.errors import CodegenError

logger = logging.getLogger(__name__)

T = TypeVar("T")


class Registry(Generic[T]):
    """Name-keyed map guarded by its own lock. Last write wins."""

    kind: ClassVar[str] = "entry"
    not_found: ClassVar[type[CodegenError]] = CodegenError

    def __init__(self) -> None:
        self._registry: Dict[str, T] = {}
        self._lock = threading.Lock()

    def _put(self, key: str, value: T) -> None:
        with self._lock:
            if key in self._registry:
                logger.debug("Replacing %s %r", self.kind, key)
            self._registry[key] = value

    def get(self, key: str) -> T:
        with self._lock:
            if key not in self._registry:
                raise self.not_found(key)
            return self._registry[key]

    def keys(self) -> list[str]:
        with self._lock:
            return sorted(self._registry)

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._registry

    def __len__(self) -> int:
        with self._lock:
            return len(self._registry)
