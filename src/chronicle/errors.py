"""Error taxonomy for chronicle operations.

Every failure an operation can surface is one of these kinds. None of them
are transient: the same input against the same state fails the same way,
so nothing is retried internally.
"""


class ChronicleError(Exception):
    """Base exception for chronicle errors."""

    kind = "error"
    exit_code = 1


class NotFoundError(ChronicleError):
    """Raised when a referenced version or tag does not exist."""

    kind = "not_found"
    exit_code = 4


class ConflictError(ChronicleError):
    """Raised when an operation would violate a uniqueness or state invariant."""

    kind = "conflict"
    exit_code = 5


class InvalidArgumentError(ChronicleError):
    """Raised for malformed ids, names or content."""

    kind = "invalid_argument"
    exit_code = 2


class StoreError(ChronicleError):
    """Raised when a stored document cannot be read or written."""

    kind = "store"
    exit_code = 6
