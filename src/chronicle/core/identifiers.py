"""Argument validation for ids and names coming from callers."""

import re

from ..errors import InvalidArgumentError

CONTENT_ID_PATTERN = re.compile(r"^[A-Za-z0-9][A-Za-z0-9._-]{0,63}$")


def coerce_version_id(value: object) -> int:
    """Convert a caller-supplied version id to a positive int.

    Accepts ints and decimal strings (surrounding whitespace allowed).

    Raises:
        InvalidArgumentError: If the value is not a positive integer
    """
    # bool is an int subclass; True is not a version id
    if isinstance(value, bool):
        raise InvalidArgumentError(f"Invalid version id: {value!r}")
    if isinstance(value, int):
        version_id = value
    elif isinstance(value, str) and value.strip().isdecimal():
        version_id = int(value.strip())
    else:
        raise InvalidArgumentError(f"Invalid version id: {value!r}")
    if version_id < 1:
        raise InvalidArgumentError(f"Version id must be positive: {version_id}")
    return version_id


def validate_content_id(content_id: str) -> str:
    """Check that a content id is usable as a storage key.

    Raises:
        InvalidArgumentError: If the id is empty or contains unsafe characters
    """
    if not isinstance(content_id, str) or not CONTENT_ID_PATTERN.match(content_id):
        raise InvalidArgumentError(f"Invalid content id: {content_id!r}")
    return content_id


def validate_tag_name(name: str) -> str:
    """Check that a tag name is a non-blank string.

    Raises:
        InvalidArgumentError: If the name is empty or whitespace only
    """
    if not isinstance(name, str) or not name.strip():
        raise InvalidArgumentError("Tag name must not be empty")
    return name


def validate_content(content: str) -> str:
    """Check that version content is text.

    Raises:
        InvalidArgumentError: If content is not a string
    """
    if not isinstance(content, str):
        raise InvalidArgumentError(f"Content must be text, got {type(content).__name__}")
    return content


def validate_text(value: str, field: str, *, allow_blank: bool = True) -> str:
    """Check that a free-text argument such as a message or publisher is a string.

    Args:
        value: Caller-supplied value
        field: Argument name used in the error message
        allow_blank: Whether empty or whitespace-only text is accepted

    Raises:
        InvalidArgumentError: If the value is not a string, or is blank when
            blank text is not allowed
    """
    if not isinstance(value, str):
        raise InvalidArgumentError(f"{field} must be text, got {type(value).__name__}")
    if not allow_blank and not value.strip():
        raise InvalidArgumentError(f"{field} must not be empty")
    return value
