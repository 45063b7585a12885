"""Line utilities that work alongside wrapping."""

import os
from typing import Callable, Optional

from wraptext.config import WHITESPACE


def dedent(text: str) -> str:
    """
    Removes the leading whitespace shared by every non-blank line.

    Whitespace-only lines are emptied and do not count toward the common
    prefix. Tabs and spaces are compared as-is, so "\\thello" and "  hello"
    share no indent.
    """
    lines = text.split("\n")
    margin = None

    for i, line in enumerate(lines):
        stripped = line.lstrip(WHITESPACE)
        if not stripped:
            lines[i] = ""
            continue

        leading = line[: len(line) - len(stripped)]
        if margin is None:
            margin = leading
        elif margin:
            margin = os.path.commonprefix([margin, leading])

    if margin:
        lines = [line[len(margin):] for line in lines]

    return "\n".join(lines)


def indent(text: str, prefix: str, predicate: Optional[Callable[[str], bool]] = None) -> str:
    """
    Prepends prefix to lines of text.

    Whitespace-only lines are never indented. If predicate is given, only
    lines for which predicate(line) is true get the prefix.
    """
    lines = text.split("\n")

    for i, line in enumerate(lines):
        if not line.strip(WHITESPACE):
            continue
        if predicate is None or predicate(line):
            lines[i] = prefix + line

    return "\n".join(lines)


def center(text: str, pad: str, width: int) -> str:
    """
    Pads text on both sides to the given width.

    When the padding is odd, the extra character goes on the right. Text at
    least as long as width is returned unchanged.

    Raises:
        ValueError: If pad is not a single character
    """
    if len(pad) != 1:
        raise ValueError(f"pad must be a single character (got {pad!r})")

    if len(text) >= width:
        return text

    sides = width - len(text)
    left = pad * (sides // 2)
    right = pad * (sides - sides // 2)
    return left + text + right
