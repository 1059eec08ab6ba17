"""Diff engine: unified patches and change statistics between two texts.

The patch is a real line-level diff built from difflib's grouped opcodes.
The change statistics are NOT derived from that diff: they are net
line-count deltas between the two texts, kept that way for compatibility
with documents already written by earlier versions of the ledger.
"""

import difflib
from collections.abc import Iterator

from ..constants import DIFF_CONTEXT_LINES, NO_NEWLINE_MARKER, PATCH_SEPARATOR
from ..models import ContentDiff, DiffChanges, DiffHunk

DEFAULT_FILENAME = "content"
DEFAULT_FROM_LABEL = "old version"
DEFAULT_TO_LABEL = "new version"


def split_lines(text: str) -> list[str]:
    """Split text into lines, keeping the trailing newline on each line.

    Unlike str.splitlines, only "\\n" separates lines, and a missing final
    newline stays visible (the last line has no "\\n").
    """
    if not text:
        return []
    parts = text.split("\n")
    lines = [part + "\n" for part in parts[:-1]]
    if parts[-1]:
        lines.append(parts[-1])
    return lines


def count_lines(text: str) -> int:
    """Count lines the way the change statistics do: pieces between "\\n"."""
    return len(text.split("\n"))


def compute_changes(old_text: str, new_text: str) -> DiffChanges:
    """Compute line-count delta statistics.

    Args:
        old_text: Old content
        new_text: New content

    Returns:
        DiffChanges with additions/deletions as net line-count deltas
    """
    delta = count_lines(new_text) - count_lines(old_text)
    return DiffChanges(
        additions=max(0, delta),
        deletions=max(0, -delta),
        total_changes=abs(delta),
    )


def _body_lines(prefix: str, lines: list[str]) -> Iterator[str]:
    for line in lines:
        if line.endswith("\n"):
            yield prefix + line[:-1]
        else:
            yield prefix + line
            yield NO_NEWLINE_MARKER


def _hunk_start(start: int, length: int) -> int:
    # Empty ranges point at the line before the hunk
    return start + 1 if length else start


def compute_hunks(
    old_lines: list[str], new_lines: list[str], context: int = DIFF_CONTEXT_LINES
) -> list[DiffHunk]:
    """Build unified-diff hunks from two line lists.

    Args:
        old_lines: Lines of the old text (with line endings)
        new_lines: Lines of the new text (with line endings)
        context: Number of unchanged context lines around each change

    Returns:
        List of hunks, empty when the texts are identical
    """
    if old_lines == new_lines:
        return []

    matcher = difflib.SequenceMatcher(None, old_lines, new_lines, autojunk=False)
    hunks = []
    for group in matcher.get_grouped_opcodes(context):
        old_lo, old_hi = group[0][1], group[-1][2]
        new_lo, new_hi = group[0][3], group[-1][4]

        body: list[str] = []
        for tag, i1, i2, j1, j2 in group:
            if tag == "equal":
                body.extend(_body_lines(" ", old_lines[i1:i2]))
                continue
            if tag in ("replace", "delete"):
                body.extend(_body_lines("-", old_lines[i1:i2]))
            if tag in ("replace", "insert"):
                body.extend(_body_lines("+", new_lines[j1:j2]))

        hunks.append(
            DiffHunk(
                old_start=_hunk_start(old_lo, old_hi - old_lo),
                old_lines=old_hi - old_lo,
                new_start=_hunk_start(new_lo, new_hi - new_lo),
                new_lines=new_hi - new_lo,
                lines=body,
            )
        )
    return hunks


def render_patch(
    hunks: list[DiffHunk],
    filename: str = DEFAULT_FILENAME,
    from_label: str = DEFAULT_FROM_LABEL,
    to_label: str = DEFAULT_TO_LABEL,
) -> str:
    """Render hunks as unified diff text with an Index header.

    Args:
        hunks: Hunks from compute_hunks
        filename: File name shown in the headers
        from_label: Label of the old side
        to_label: Label of the new side

    Returns:
        Patch text, always ending with a newline
    """
    out = [
        f"Index: {filename}",
        PATCH_SEPARATOR,
        f"--- {filename}\t{from_label}",
        f"+++ {filename}\t{to_label}",
    ]
    for hunk in hunks:
        out.append(
            f"@@ -{hunk.old_start},{hunk.old_lines} +{hunk.new_start},{hunk.new_lines} @@"
        )
        out.extend(hunk.lines)
    return "\n".join(out) + "\n"


def create_patch(
    old_text: str | None,
    new_text: str | None,
    from_label: str = DEFAULT_FROM_LABEL,
    to_label: str = DEFAULT_TO_LABEL,
    *,
    filename: str = DEFAULT_FILENAME,
    context: int = DIFF_CONTEXT_LINES,
) -> str:
    """Create a unified diff patch between two texts."""
    hunks = compute_hunks(split_lines(old_text or ""), split_lines(new_text or ""), context)
    return render_patch(hunks, filename, from_label, to_label)


def compute_diff(
    old_text: str | None,
    new_text: str | None,
    from_label: str = DEFAULT_FROM_LABEL,
    to_label: str = DEFAULT_TO_LABEL,
    *,
    filename: str = DEFAULT_FILENAME,
    context: int = DIFF_CONTEXT_LINES,
) -> ContentDiff:
    """Compare two texts.

    Never fails: None is treated as an empty string.

    Args:
        old_text: Old content
        new_text: New content
        from_label: Label for the old side of the patch
        to_label: Label for the new side of the patch
        filename: File name shown in the patch headers
        context: Context lines per hunk

    Returns:
        ContentDiff with patch, hunks and line-count statistics
    """
    old_text = old_text or ""
    new_text = new_text or ""
    hunks = compute_hunks(split_lines(old_text), split_lines(new_text), context)
    return ContentDiff(
        from_=from_label,
        to=to_label,
        changes=compute_changes(old_text, new_text),
        patch=render_patch(hunks, filename, from_label, to_label),
        hunks=hunks,
    )
