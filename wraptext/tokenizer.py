"""
Chunk scanner for the wrapping engine.

Text is split into chunks, the indivisible units the line packer works with.
Each chunk is either a run of whitespace or a run of non-whitespace; an em-dash
at the start of a run is a chunk on its own, and with break_on_hyphens the
longest hyphen-terminated prefix of a word is split off so lines can break
after the hyphen.

Example:
    >>> split_chunks("well-known fact")
    ['well-', 'known', ' ', 'fact']
    >>> split_chunks("well-known fact", break_on_hyphens=False)
    ['well-known', ' ', 'fact']
"""

from typing import List, Optional

from wraptext.config import EM_DASH, WHITESPACE


def is_whitespace(chunk: str) -> bool:
    """Check if a chunk holds only whitespace."""
    return not chunk.strip(WHITESPACE)


def _scan_run(text: str, pos: int, whitespace: bool) -> int:
    """Return the index just past the whitespace (or non-whitespace) run at pos."""
    end = len(text)
    while pos < end and (text[pos] in WHITESPACE) == whitespace:
        pos += 1
    return pos


def split_chunks(text: str, break_on_hyphens: bool = True) -> List[str]:
    """
    Split preprocessed text into chunks, left to right.

    Args:
        text: Output of preprocess()
        break_on_hyphens: Whether a word may be split after one of its hyphens

    Returns:
        List of chunks whose concatenation is the input text
    """
    chunks = []
    pos = 0

    while pos < len(text):
        char = text[pos]

        if char in WHITESPACE:
            stop = _scan_run(text, pos, whitespace=True)
        elif char == EM_DASH:
            stop = pos + 1
        else:
            stop = _scan_run(text, pos, whitespace=False)
            if break_on_hyphens:
                # Last hyphen with at least one character before it
                hyphen = text.rfind("-", pos + 1, stop)
                if hyphen != -1:
                    stop = hyphen + 1

        chunks.append(text[pos:stop])
        pos = stop

    return chunks


class ChunkCursor:
    """
    Forward-only cursor over a chunk list.

    The packer peeks at the current chunk before deciding whether to take it,
    and may split an oversized chunk by taking its prefix and putting the
    suffix back with replace_current().
    """

    def __init__(self, chunks: List[str]):
        self._chunks = list(chunks)
        self._pos = 0

    @property
    def exhausted(self) -> bool:
        return self._pos >= len(self._chunks)

    def peek(self) -> Optional[str]:
        """Current chunk, or None once every chunk is consumed."""
        if self.exhausted:
            return None
        return self._chunks[self._pos]

    def advance(self) -> str:
        """Consume and return the current chunk."""
        if self.exhausted:
            raise IndexError("advance() past the last chunk")
        chunk = self._chunks[self._pos]
        self._pos += 1
        return chunk

    def replace_current(self, chunk: str):
        """Substitute the current chunk (used for the remainder of a split word)."""
        if self.exhausted:
            raise IndexError("replace_current() past the last chunk")
        self._chunks[self._pos] = chunk

    def remaining(self) -> List[str]:
        """Chunks not yet consumed, current one included."""
        return self._chunks[self._pos:]
