"""
wraptext - wrap, fill and shorten text for fixed-width output.

Example usage:
    from wraptext import fill, WrapOptions

    receipt = WrapOptions(width=32, subsequent_indent="  ")
    print(fill(long_text, receipt))
"""

__version__ = "0.1.0"

from wraptext.config import WrapConfigError, WrapOptions
from wraptext.utils import center, dedent, indent
from wraptext.wrapper import TextWrapper, fill, shorten, wrap

__all__ = [
    "TextWrapper",
    "WrapConfigError",
    "WrapOptions",
    "center",
    "dedent",
    "fill",
    "indent",
    "shorten",
    "wrap",
]
