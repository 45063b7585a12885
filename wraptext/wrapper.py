"""
Wrapping entry points.

Example usage:
    from wraptext import wrap, fill, shorten

    wrap("The quick brown fox jumped over the lazy dog", width=10)
    # ['The quick', 'brown fox', 'jumped', 'over the', 'lazy dog']

    shorten("Hello  world, how are you?", width=11)
    # 'Hello [...]'

Callers wrapping many texts with the same policy should build one
TextWrapper (or one WrapOptions) and reuse it.
"""

import logging
from typing import List, Optional

from wraptext.config import WrapOptions
from wraptext.packer import pack_lines
from wraptext.preprocess import collapse_whitespace, preprocess
from wraptext.tokenizer import split_chunks

logger = logging.getLogger(__name__)


class TextWrapper:
    """Wraps text according to one WrapOptions value."""

    def __init__(self, options: Optional[WrapOptions] = None, **overrides):
        options = options or WrapOptions()
        if overrides:
            options = options.with_overrides(**overrides)
        self.options = options

    def wrap(self, text: str) -> List[str]:
        """
        Split text into lines no wider than options.width.

        Raises:
            WrapConfigError: If the options make wrapping impossible
        """
        self.options.validate_policy()

        text = preprocess(text, self.options)
        chunks = split_chunks(text, self.options.break_on_hyphens)
        lines = pack_lines(chunks, self.options)

        logger.debug(f"Wrapped {len(chunks)} chunks into {len(lines)} lines")
        return lines

    def fill(self, text: str) -> str:
        """Wrap text and join the lines with newlines."""
        return "\n".join(self.wrap(text))

    def shorten(self, text: str) -> str:
        """
        Collapse whitespace and fit text on a single line.

        If the text does not fit, it is cut at a word boundary and the
        placeholder is appended. max_lines is always 1 here; tab and
        whitespace options have nothing left to act on.
        """
        single_line = TextWrapper(self.options, max_lines=1)
        return single_line.fill(collapse_whitespace(text, self.options))


def wrap(text: str, options: Optional[WrapOptions] = None, **overrides) -> List[str]:
    """Wrap a single paragraph, returning a list of lines (see TextWrapper.wrap)."""
    return TextWrapper(options, **overrides).wrap(text)


def fill(text: str, options: Optional[WrapOptions] = None, **overrides) -> str:
    """Wrap a single paragraph, returning one newline-separated string."""
    return TextWrapper(options, **overrides).fill(text)


def shorten(text: str, options: Optional[WrapOptions] = None, **overrides) -> str:
    """Collapse and truncate text to fit one line (see TextWrapper.shorten)."""
    return TextWrapper(options, **overrides).shorten(text)
