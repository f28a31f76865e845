"""Unified diff rendering for edit results."""

import difflib

NO_NEWLINE_MARKER = "\\ No newline at end of file"


def _split_lines(text: str) -> list[str]:
    """Split on ``\\n`` only, keeping line endings."""
    lines = [line + "\n" for line in text.split("\n")]
    lines[-1] = lines[-1][:-1]
    if not lines[-1]:
        lines.pop()
    return lines


def create_diff(path: str, original: str, modified: str, context_lines: int = 3) -> str:
    """Create a unified diff between two versions of a file.

    A last line without a trailing newline is followed by a
    ``\\ No newline at end of file`` marker, so adding or removing the final
    newline shows up as a change.

    Args:
        path: File path used for both the ``---`` and ``+++`` headers.
        original: Text before the edit.
        modified: Text after the edit.
        context_lines: Unchanged lines shown around each change.

    Returns:
        Unified diff string, empty when the texts are identical.
    """
    diff = difflib.unified_diff(
        _split_lines(original),
        _split_lines(modified),
        fromfile=path,
        tofile=path,
        n=context_lines,
    )

    output = []
    for line in diff:
        output.append(line)
        if not line.endswith("\n"):
            output.append(f"\n{NO_NEWLINE_MARKER}\n")

    text = "".join(output)
    return text[:-1] if text.endswith("\n") else text


def _is_content_line(line: str) -> bool:
    return line.startswith(("+", "-", " ")) and not line.startswith(("---", "+++"))


def trim_diff(diff: str) -> str:
    """Remove the indentation shared by every non-blank diff content line.

    Headers and hunk markers are left alone; the ``+``/``-``/`` `` prefix of
    each content line is kept.
    """
    lines = diff.split("\n")
    content_lines = [line for line in lines if _is_content_line(line)]
    if not content_lines:
        return diff

    indents = [
        len(line[1:]) - len(line[1:].lstrip())
        for line in content_lines
        if line[1:].strip()
    ]
    min_indent = min(indents, default=0)
    if min_indent == 0:
        return diff

    return "\n".join(
        line[0] + line[1:][min_indent:] if _is_content_line(line) else line
        for line in lines
    )
