"""Result cache protocol interface."""

from pathlib import Path
from typing import Any, Callable, Optional, Protocol, runtime_checkable


@runtime_checkable
class ResultCacheProtocol(Protocol):
    """Protocol for persisted key/value lookups shared across runs."""

    @property
    def cache_path(self) -> Path:
        """Backing file path."""
        ...

    def get(self, key: str) -> Optional[Any]:
        """Return the value for key, or None when absent."""
        ...

    def has_key(self, key: str) -> bool:
        """Return True if key has been stored, even with a None value."""
        ...

    def put(self, key: str, value: Any) -> None:
        """Store value unless key is already present."""
        ...

    def get_or_compute(self, key: str, compute: Callable[[], Any]) -> Any:
        """Return the cached value for key, computing and storing it if absent."""
        ...

    def save(self) -> None:
        """Merge in-memory entries into the backing file."""
        ...
