"""Diff models for comparisons between two content strings."""

from datetime import datetime

from pydantic import Field

from .base import DocumentModel, utcnow


class DiffHunk(DocumentModel):
    """One hunk of a unified diff.

    Attributes:
        old_start: First line of the hunk in the old text (1-indexed, 0 if empty).
        old_lines: Number of old lines covered by the hunk.
        new_start: First line of the hunk in the new text (1-indexed, 0 if empty).
        new_lines: Number of new lines covered by the hunk.
        lines: Hunk body lines, each prefixed with " ", "-" or "+".
    """

    old_start: int
    old_lines: int
    new_start: int
    new_lines: int
    lines: list[str] = Field(default_factory=list)


class DiffChanges(DocumentModel):
    """Change statistics derived from line-count deltas.

    These are net line-count differences, not counts of added or removed
    lines: replacing one line with another yields zero on every counter.
    """

    additions: int = Field(ge=0)
    deletions: int = Field(ge=0)
    total_changes: int = Field(ge=0)
    timestamp: datetime = Field(default_factory=utcnow)


class ContentDiff(DocumentModel):
    """Result of comparing two content strings.

    Attributes:
        from_: Label of the old side (serialized as "from").
        to: Label of the new side.
        changes: Line-count statistics.
        patch: Unified diff text.
        hunks: Structured hunks matching the patch.
    """

    from_: str = Field(alias="from")
    to: str
    changes: DiffChanges
    patch: str
    hunks: list[DiffHunk] = Field(default_factory=list)
