"""Text normalization applied once, before the text is split into chunks."""

from wraptext.config import WrapOptions


def expand_tabs(text: str, tab_size: int) -> str:
    """Replaces every tab with tab_size spaces (not column-aware)."""
    return text.replace("\t", " " * tab_size)


def replace_whitespace(text: str, options: WrapOptions) -> str:
    """Turns tabs, newlines, vertical tabs, form feeds and carriage returns into spaces."""
    return text.translate(options.whitespace_table)


def fix_sentence_endings(text: str, options: WrapOptions) -> str:
    """
    Puts exactly two spaces after sentence-ending punctuation.

    Any non-whitespace character followed by '.', '!' or '?' (and an optional
    closing quote) counts as a sentence ending, so "Mr. Rogers" becomes
    "Mr.  Rogers" as well.
    """
    return options.sentence_ending_re.sub(r"\1  ", text)


def collapse_whitespace(text: str, options: WrapOptions) -> str:
    """Replaces every run of whitespace with a single space."""
    return options.whitespace_run_re.sub(" ", text)


def preprocess(text: str, options: WrapOptions) -> str:
    """
    Normalizes raw text according to the wrapping options.

    Steps run in a fixed order: tab expansion, whitespace replacement,
    then sentence-ending fixes.

    Args:
        text: Raw input text
        options: Wrapping policy

    Returns:
        Text ready for split_chunks()
    """
    if options.expand_tabs:
        text = expand_tabs(text, options.tab_size)

    if options.replace_whitespace:
        text = replace_whitespace(text, options)

    if options.fix_sentence_endings:
        text = fix_sentence_endings(text, options)

    return text
