"""Document stores: per-key persistence of ContentState aggregates.

A store offers load/save of whole documents plus a per-key lock that the
content service holds around each load-mutate-save cycle. Different keys
never share a lock. File stores on the same directory share their
in-process locks, so separate instances still take turns.
"""

import logging
import os
import tempfile
import threading
import weakref
from abc import ABC, abstractmethod
from collections.abc import Hashable, Iterator
from contextlib import contextmanager
from pathlib import Path

from pydantic import ValidationError

from ..constants import LOCK_TIMEOUT
from ..core.identifiers import validate_content_id
from ..core.lock_manager import acquire_lock, release_lock
from ..errors import StoreError
from ..models import ContentState

logger = logging.getLogger(__name__)


class _KeyLock:
    """Mutex for one key. Registries hold these weakly, so entries vanish once unused."""

    def __init__(self) -> None:
        self._lock = threading.Lock()

    def __enter__(self) -> None:
        self._lock.acquire()

    def __exit__(self, *exc_info: object) -> None:
        self._lock.release()


class _LockRegistry:
    """Weak map from lock ids to key mutexes."""

    def __init__(self) -> None:
        self._locks: weakref.WeakValueDictionary[Hashable, _KeyLock] = (
            weakref.WeakValueDictionary()
        )
        self._guard = threading.Lock()

    def get(self, lock_id: Hashable) -> _KeyLock:
        with self._guard:
            lock = self._locks.get(lock_id)
            if lock is None:
                lock = _KeyLock()
                self._locks[lock_id] = lock
            return lock


# Shared by every FileStore in the process, keyed by (resolved root, key)
_file_locks = _LockRegistry()


class DocumentStore(ABC):
    """Abstract per-key document store."""

    def __init__(self) -> None:
        self._locks = _LockRegistry()

    @abstractmethod
    def load(self, key: str) -> ContentState | None:
        """Load the document stored under key, or None if absent."""

    @abstractmethod
    def save(self, key: str, state: ContentState) -> None:
        """Store the document under key, replacing any previous one."""

    @abstractmethod
    def keys(self) -> list[str]:
        """List stored keys, sorted."""

    def _key_lock(self, key: str) -> _KeyLock:
        return self._locks.get(key)

    @contextmanager
    def lock(self, key: str, operation: str = "write") -> Iterator[None]:
        """Hold the key's lock for the duration of the block."""
        with self._key_lock(key):
            yield


class MemoryStore(DocumentStore):
    """In-memory store for tests and embedding.

    Documents are kept serialized so that callers never share model
    instances with the store.
    """

    def __init__(self) -> None:
        super().__init__()
        self._documents: dict[str, str] = {}

    def load(self, key: str) -> ContentState | None:
        raw = self._documents.get(key)
        if raw is None:
            return None
        return ContentState.model_validate_json(raw)

    def save(self, key: str, state: ContentState) -> None:
        self._documents[key] = state.model_dump_json(by_alias=True)

    def keys(self) -> list[str]:
        return sorted(self._documents)


class FileStore(DocumentStore):
    """JSON file store: one <key>.json document per content id.

    Writes go to a temporary file that replaces the document atomically.
    Each key is additionally guarded by a lock file so that separate
    processes serialize on it too.
    """

    def __init__(self, root: Path, lock_timeout: float = LOCK_TIMEOUT) -> None:
        super().__init__()
        self.root = root
        self.lock_timeout = lock_timeout

    def _key_lock(self, key: str) -> _KeyLock:
        return _file_locks.get((self.root.resolve(), key))

    def path_for(self, key: str) -> Path:
        """Get the document path of a key."""
        return self.root / f"{validate_content_id(key)}.json"

    def load(self, key: str) -> ContentState | None:
        path = self.path_for(key)
        if not path.exists():
            return None
        logger.debug("Loading %s", path)
        try:
            return ContentState.model_validate_json(path.read_text())
        except ValidationError as e:
            raise StoreError(f"Corrupt content document {path}: {e}") from e
        except OSError as e:
            raise StoreError(f"Cannot read content document {path}: {e}") from e

    def save(self, key: str, state: ContentState) -> None:
        path = self.path_for(key)
        data = state.model_dump_json(by_alias=True, indent=2)
        try:
            self.root.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(dir=self.root, prefix=f".{key}.", suffix=".tmp")
            try:
                with os.fdopen(fd, "w") as f:
                    f.write(data)
                os.replace(tmp_name, path)
            except BaseException:
                Path(tmp_name).unlink(missing_ok=True)
                raise
        except OSError as e:
            raise StoreError(f"Cannot write content document {path}: {e}") from e
        logger.debug("Saved %s", path)

    def keys(self) -> list[str]:
        if not self.root.exists():
            return []
        return sorted(p.stem for p in self.root.glob("*.json"))

    @contextmanager
    def lock(self, key: str, operation: str = "write") -> Iterator[None]:
        validate_content_id(key)
        with super().lock(key, operation):
            self.root.mkdir(parents=True, exist_ok=True)
            lock = acquire_lock(self.root, key, operation, timeout=self.lock_timeout)
            try:
                yield
            finally:
                release_lock(self.root, key, lock.owner)
