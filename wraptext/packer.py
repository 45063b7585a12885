"""
Greedy line packer.

Consumes the chunk sequence produced by split_chunks() and fills one line at a
time, as full as the effective width allows. Long words are split (or forced
onto an empty line), whitespace at line edges is dropped, and when max_lines
cuts the text short the last line ends with the placeholder.
"""

import logging
from typing import List

from wraptext.config import WHITESPACE, WrapOptions
from wraptext.tokenizer import ChunkCursor, is_whitespace

logger = logging.getLogger(__name__)


class Line:
    """One output row under construction: its chunks and their total length."""

    def __init__(self, indent: str = ""):
        self.indent = indent
        self.chunks: List[str] = []
        self.length = 0

    def push(self, chunk: str):
        self.chunks.append(chunk)
        self.length += len(chunk)

    def pop(self) -> str:
        chunk = self.chunks.pop()
        self.length -= len(chunk)
        return chunk

    @property
    def last(self) -> str:
        return self.chunks[-1]

    def is_empty(self) -> bool:
        return not self.chunks

    def render(self) -> str:
        return self.indent + "".join(self.chunks)


def _fits(remaining: List[str], width: int, drop_whitespace: bool) -> bool:
    """Check if every remaining chunk fits on one line of the given width."""
    total = sum(len(chunk) for chunk in remaining)
    if drop_whitespace and remaining and is_whitespace(remaining[-1]):
        total -= len(remaining[-1])
    return total <= width


def _handle_long_chunk(
    line: Line, cursor: ChunkCursor, width: int, options: WrapOptions, truncating: bool
):
    """
    Deal with a chunk wider than the whole line.

    With break_long_words the chunk is split at the space left on the line
    (at least one character on an empty line, so packing always advances);
    the remainder stays in the cursor for the next line. Otherwise an empty
    line takes the whole chunk. The truncating last line never overflows: it
    takes no minimum slice and no forced chunk.
    """
    chunk = cursor.peek()

    if options.break_long_words:
        space_left = width - line.length
        if space_left < 1 and line.is_empty() and not truncating:
            space_left = 1
        if space_left > 0:
            line.push(chunk[:space_left])
            if chunk[space_left:]:
                cursor.replace_current(chunk[space_left:])
            else:
                cursor.advance()

    elif line.is_empty() and not truncating:
        line.push(cursor.advance())


def _fill_line(
    line: Line, cursor: ChunkCursor, width: int, options: WrapOptions, truncating: bool = False
):
    """Append chunks while they fit, then handle an oversized next chunk."""
    while not cursor.exhausted and line.length + len(cursor.peek()) <= width:
        line.push(cursor.advance())

    if not cursor.exhausted and len(cursor.peek()) > width:
        _handle_long_chunk(line, cursor, width, options, truncating)


def _truncate(lines: List[str], cursor: ChunkCursor, indent: str, options: WrapOptions):
    """
    Build the last allowed line with room for the placeholder and append it.

    If no content fits, the previous line takes the placeholder when it still
    fits within the width; otherwise the line holds only the placeholder.
    """
    width = options.width - len(indent) - len(options.placeholder)

    line = Line(indent)
    _fill_line(line, cursor, width, options, truncating=True)

    # The placeholder always follows a word, never whitespace
    while not line.is_empty() and is_whitespace(line.last):
        line.pop()

    logger.debug(
        f"Truncating at line {len(lines) + 1}: {len(cursor.remaining())} chunks dropped"
    )

    if not line.is_empty():
        line.push(options.placeholder)
        lines.append(line.render())
        return

    if lines:
        previous = lines[-1].rstrip(WHITESPACE)
        if len(previous) + len(options.placeholder) <= options.width:
            lines[-1] = previous + options.placeholder
            return

    line.push(options.placeholder.lstrip(WHITESPACE))
    lines.append(line.render())


def pack_lines(chunks: List[str], options: WrapOptions) -> List[str]:
    """
    Pack chunks into indented lines.

    Args:
        chunks: Output of split_chunks()
        options: Wrapping policy, already checked with validate_policy()

    Returns:
        Rendered lines, each prefixed with its indent
    """
    cursor = ChunkCursor(chunks)
    lines: List[str] = []

    while not cursor.exhausted:
        # Whitespace at the start of every line but the first is dropped
        if lines and options.drop_whitespace and is_whitespace(cursor.peek()):
            cursor.advance()
            if cursor.exhausted:
                break

        indent = options.subsequent_indent if lines else options.initial_indent
        width = options.width - len(indent)
        last_allowed = options.max_lines > 0 and len(lines) == options.max_lines - 1

        if last_allowed and not _fits(cursor.remaining(), width, options.drop_whitespace):
            _truncate(lines, cursor, indent, options)
            return lines

        line = Line(indent)
        _fill_line(line, cursor, width, options)

        if options.drop_whitespace and not line.is_empty() and is_whitespace(line.last):
            line.pop()

        if not line.is_empty():
            lines.append(line.render())

        if last_allowed:
            break

    if not lines and options.max_lines == 1:
        # Nothing to show; a single-line summary still shows the placeholder
        lines.append(options.initial_indent + options.placeholder.lstrip(WHITESPACE))

    return lines
