"""Persisted lookup cache for expensive per-(commit, element) results."""

import json
import logging
from pathlib import Path
from typing import Any, Callable, Dict, Optional, Union

from ..errors import CacheIOError

logger = logging.getLogger(__name__)


def cache_key(operation: str, commit_id: str, element: Any) -> str:
    """Build the key used for one operation on one element at one commit."""
    return f"{operation}:{commit_id}:{element}"


def _read_entries(path: Path) -> Dict[str, Any]:
    data = json.loads(path.read_text(encoding="utf-8"))
    if not isinstance(data, dict):
        raise ValueError(f"expected a JSON object, got {type(data).__name__}")
    return data


class ResultCache:
    """Key/value map backed by a JSON file.

    Entries are never replaced once stored in memory: the first ``put`` for a
    key wins for the lifetime of the instance. ``save`` merges the in-memory
    entries into whatever the file holds at that moment, so short-lived runs
    can build up one shared cache. Concurrent saves from separate processes
    are not coordinated; the last writer replaces the whole file.

    Instances are not thread-safe.
    """

    def __init__(self, cache_path: Union[str, Path]):
        self.cache_path = Path(cache_path)
        self.entries: Dict[str, Any] = {}
        self.load_error: Optional[str] = None
        self._load()

    def _load(self) -> None:
        if not self.cache_path.exists():
            return
        try:
            self.entries = _read_entries(self.cache_path)
            logger.debug("Loaded %d cache entries from %s", len(self.entries), self.cache_path)
        except (OSError, ValueError) as e:
            # json.JSONDecodeError and UnicodeDecodeError are ValueErrors
            self.entries = {}
            self.load_error = str(e)
            logger.warning("Ignoring unreadable cache file %s: %s", self.cache_path, e)

    def __contains__(self, key: str) -> bool:
        return key in self.entries

    def __len__(self) -> int:
        return len(self.entries)

    def has_key(self, key: str) -> bool:
        return key in self.entries

    def get(self, key: str) -> Optional[Any]:
        return self.entries.get(key)

    def put(self, key: str, value: Any) -> None:
        # TODO: decide whether callers ever need to overwrite a stored value;
        # for now later puts for an existing key are ignored.
        if key not in self.entries:
            self.entries[key] = value

    def get_or_compute(self, key: str, compute: Callable[[], Any]) -> Any:
        if key in self.entries:
            logger.debug("Result found in cache: %s", key)
            return self.entries[key]
        value = compute()
        self.put(key, value)
        return value

    def save(self) -> None:
        """Write the union of the backing file and in-memory entries."""
        merged: Dict[str, Any] = {}
        if self.cache_path.exists():
            try:
                merged = _read_entries(self.cache_path)
            except ValueError as e:
                logger.warning(
                    "Replacing unreadable cache file %s: %s", self.cache_path, e
                )
            except OSError as e:
                raise CacheIOError(f"Failed to read cache file {self.cache_path}: {e}") from e
        merged.update(self.entries)

        try:
            self.cache_path.parent.mkdir(parents=True, exist_ok=True)
            self.cache_path.write_text(
                json.dumps(merged, indent=2, ensure_ascii=False), encoding="utf-8"
            )
        except (OSError, TypeError) as e:
            raise CacheIOError(f"Failed to write cache file {self.cache_path}: {e}") from e
        logger.debug("Saved %d cache entries to %s", len(merged), self.cache_path)
