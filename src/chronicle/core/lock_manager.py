"""Lock manager for file store write serialization.

Provides lock files, one per content id, so that only one writer runs a
load-mutate-save cycle on a document at a time. A lock belongs to the
owner token that created it, not to the process, so writers sharing a
process still exclude each other. Includes stale lock detection (dead
PID or old heartbeat) for crash recovery.

Uses atomic file creation (O_CREAT | O_EXCL) to prevent TOCTOU races.
"""

import contextlib
import logging
import os
import time
from datetime import datetime, timedelta
from pathlib import Path

from ..constants import LOCK_POLL_INTERVAL, LOCK_TIMEOUT
from ..errors import ChronicleError
from ..models import Lock, new_owner_token

logger = logging.getLogger(__name__)

STALE_TIMEOUT_SECONDS = 3600  # 1 hour


class LockError(ChronicleError):
    """Error acquiring or managing a document lock."""

    kind = "lock"
    exit_code = 6


def lock_path(lock_dir: Path, content_id: str) -> Path:
    """Get path to the lock file of a content id."""
    return lock_dir / f"{content_id}.lock"


def _is_pid_running(pid: int) -> bool:
    """Check if a process with given PID is running."""
    try:
        os.kill(pid, 0)  # Signal 0 doesn't kill, just checks
        return True
    except OSError:
        return False


def get_current_lock(lock_dir: Path, content_id: str) -> Lock | None:
    """Get current lock if it exists and is valid.

    Args:
        lock_dir: Directory holding the lock files
        content_id: Content id the lock guards

    Returns:
        Lock if valid lock exists, None otherwise
    """
    path = lock_path(lock_dir, content_id)
    if not path.exists():
        return None

    try:
        return Lock.model_validate_json(path.read_text())
    except (OSError, ValueError):
        # Corrupted or vanished lock file - treat as no lock
        return None


def is_stale_lock(lock: Lock, timeout_seconds: int = STALE_TIMEOUT_SECONDS) -> bool:
    """Check if lock is stale (PID dead or timeout exceeded).

    Args:
        lock: Lock to check
        timeout_seconds: Max time since heartbeat before considered stale

    Returns:
        True if lock is stale and should be cleared
    """
    if not _is_pid_running(lock.pid):
        return True

    age = datetime.now() - lock.last_heartbeat
    return age > timedelta(seconds=timeout_seconds)


def _try_atomic_create(path: Path, lock: Lock) -> bool:
    """Attempt atomic lock file creation.

    Returns:
        True if lock was created, False if file already exists
    """
    try:
        fd = os.open(str(path), os.O_CREAT | os.O_EXCL | os.O_WRONLY)
        try:
            os.write(fd, lock.model_dump_json(indent=2).encode())
        finally:
            os.close(fd)
        return True
    except FileExistsError:
        return False


def acquire_lock(
    lock_dir: Path,
    content_id: str,
    operation: str,
    timeout: float = LOCK_TIMEOUT,
    owner: str | None = None,
) -> Lock:
    """Acquire the lock of a content id, waiting while another owner holds it.

    Args:
        lock_dir: Directory holding the lock files
        content_id: Content id to lock
        operation: Operation acquiring the lock
        timeout: Seconds to wait for an active lock to be released
        owner: Owner token; a lock already held under it is taken over.
            A fresh token is generated when omitted.

    Returns:
        Lock object if acquired

    Raises:
        LockError: If another owner still holds an active lock after timeout
    """
    path = lock_path(lock_dir, content_id)
    lock = Lock(
        pid=os.getpid(),
        owner=owner or new_owner_token(),
        content_id=content_id,
        operation=operation,
    )
    deadline = time.monotonic() + timeout

    while True:
        if _try_atomic_create(path, lock):
            logger.debug("Acquired lock for %s (%s)", content_id, operation)
            return lock

        existing = get_current_lock(lock_dir, content_id)
        if existing is None:
            # Removed between attempts, or still being written - retry
            if time.monotonic() >= deadline:
                raise LockError(f"Unreadable lock file for content {content_id!r}: {path}")
            time.sleep(LOCK_POLL_INTERVAL)
            continue

        if existing.owner == lock.owner:
            # We already own the lock - update it
            path.write_text(lock.model_dump_json(indent=2))
            return lock

        if is_stale_lock(existing):
            logger.warning("Clearing stale lock for %s held by PID %d", content_id, existing.pid)
            with contextlib.suppress(FileNotFoundError):
                path.unlink()
            continue

        if time.monotonic() >= deadline:
            raise LockError(
                f"Content {content_id!r} is locked by PID {existing.pid} "
                f"(operation: {existing.operation})"
            )
        time.sleep(LOCK_POLL_INTERVAL)


def release_lock(lock_dir: Path, content_id: str, owner: str) -> None:
    """Release lock if held by the given owner.

    Args:
        lock_dir: Directory holding the lock files
        content_id: Content id to unlock
        owner: Owner token the lock was acquired with
    """
    existing = get_current_lock(lock_dir, content_id)
    if existing and existing.owner == owner:
        lock_path(lock_dir, content_id).unlink(missing_ok=True)
        logger.debug("Released lock for %s", content_id)
