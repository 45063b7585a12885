"""pytest suite for wrap/fill/shorten behaviour."""

import pytest
from pydantic import ValidationError

from wraptext import TextWrapper, WrapOptions, fill, shorten, wrap

SAMPLE = (
    "The quick brown fox jumped over the lazy dog. Pack my box with five "
    "dozen liquor jugs; how vexingly quick daft zebras jump!"
)


def test_wrap_packs_words_greedily():
    assert wrap("The quick brown fox jumped over the lazy dog", width=10) == [
        "The quick",
        "brown fox",
        "jumped",
        "over the",
        "lazy dog",
    ]


def test_fill_joins_wrapped_lines():
    for width in (5, 10, 17, 40):
        assert fill(SAMPLE, width=width) == "\n".join(wrap(SAMPLE, width=width))


def test_wrap_empty_text_returns_no_lines():
    assert wrap("") == []
    assert wrap("", max_lines=3) == []


def test_wrap_whitespace_only_text_returns_no_lines():
    assert wrap("   \n  ") == []


def test_single_line_limit_on_empty_text_gives_placeholder():
    assert wrap("", max_lines=1) == ["[...]"]
    assert wrap("    ", max_lines=1) == ["[...]"]


def test_lines_never_exceed_width():
    for width in range(1, 40):
        for line in wrap(SAMPLE, width=width):
            assert len(line) <= width


def test_truncated_lines_never_exceed_width():
    for width in range(6, 40):
        lines = wrap(SAMPLE, width=width, max_lines=2)
        assert len(lines) <= 2
        for line in lines:
            assert len(line) <= width


def test_wrap_keeps_every_word():
    assert " ".join(wrap(SAMPLE, width=12)).split() == SAMPLE.split()


def test_width_counts_code_points():
    assert wrap("héllo wörld", width=5) == ["héllo", "wörld"]


def test_word_exactly_filling_the_line_stays_on_it():
    assert wrap("abcde fghij", width=5) == ["abcde", "fghij"]


def test_long_words_are_split():
    assert wrap("abcdefghijklmnop", width=5) == ["abcde", "fghij", "klmno", "p"]


def test_long_word_split_uses_space_left_on_line():
    assert wrap("ab cdefghij", width=6) == ["ab cde", "fghij"]


def test_long_words_kept_whole_when_breaking_disabled():
    assert wrap("abcdefghij short", width=5, break_long_words=False) == [
        "abcdefghij",
        "short",
    ]


def test_long_word_moves_to_next_line_when_breaking_disabled():
    assert wrap("ab abcdefghij", width=5, break_long_words=False) == ["ab", "abcdefghij"]


def test_break_on_hyphens():
    assert wrap("a well-known phrase", width=8) == ["a well-", "known", "phrase"]


def test_hyphenated_word_kept_whole_without_break_on_hyphens():
    assert wrap(
        "a well-known phrase", width=8, break_on_hyphens=False, break_long_words=False
    ) == ["a", "well-known", "phrase"]


def test_initial_and_subsequent_indent():
    assert wrap(
        "The quick brown fox jumped", width=12, initial_indent="* ", subsequent_indent="  "
    ) == ["* The quick", "  brown fox", "  jumped"]


def test_indent_counts_toward_width():
    lines = wrap(SAMPLE, width=20, initial_indent="> ", subsequent_indent=">> ")
    assert lines[0].startswith("> ")
    assert all(line.startswith(">> ") for line in lines[1:])
    assert all(len(line) <= 20 for line in lines)


def test_expand_tabs():
    assert wrap("a\tb", width=20) == ["a        b"]
    assert wrap("a\tb", width=20, tab_size=2) == ["a  b"]
    assert wrap("a\tb", width=20, tabsize=0) == ["ab"]


def test_tabs_without_expansion():
    assert wrap("a\tb", width=20, expand_tabs=False) == ["a b"]
    assert wrap("a\tb", width=20, expand_tabs=False, replace_whitespace=False) == ["a\tb"]


def test_replace_whitespace():
    assert wrap("Hello\nworld", width=20) == ["Hello world"]
    assert wrap("Hello\nworld", width=20, replace_whitespace=False) == ["Hello\nworld"]


def test_fix_sentence_endings():
    assert wrap("Hello. World. Test.", width=40, fix_sentence_endings=True) == [
        "Hello.  World.  Test."
    ]


def test_fix_sentence_endings_collapses_extra_spaces_and_handles_quotes():
    assert fill('He said "hi."   Then left!', width=40, fix_sentence_endings=True) == (
        'He said "hi."  Then left!'
    )


def test_fix_sentence_endings_matches_abbreviations():
    assert fill("Ask Mr. Rogers", width=40, fix_sentence_endings=True) == "Ask Mr.  Rogers"


def test_drop_whitespace():
    assert wrap("  hello   world  ", width=20) == ["  hello   world"]
    assert wrap("  hello   world  ", width=20, drop_whitespace=False) == ["  hello   world  "]


def test_drop_whitespace_removes_leading_space_on_later_lines():
    assert wrap("aaaa bbbb", width=4) == ["aaaa", "bbbb"]
    assert wrap("aaaa bbbb", width=4, drop_whitespace=False) == ["aaaa", " ", "bbbb"]


def test_max_lines_truncates_with_placeholder():
    assert wrap("aa bb cc dd ee ff gg hh", width=10, max_lines=2) == [
        "aa bb cc",
        "dd [...]",
    ]


def test_max_lines_never_emits_extra_line():
    assert wrap("The quick brown fox", width=6, max_lines=2) == ["The", "[...]"]


def test_max_lines_without_truncation_when_text_fits():
    assert wrap("aa bb cc dd ee", width=10, max_lines=2) == ["aa bb cc", "dd ee"]
    assert wrap("Hello world", width=11, max_lines=1) == ["Hello world"]


def test_custom_placeholder():
    assert wrap("one two three", width=5, max_lines=2, placeholder="~") == ["one", "two~"]


def test_placeholder_moves_to_previous_line_when_nothing_fits():
    assert wrap("ab abcdefghijklmno", width=10, max_lines=2, break_long_words=False) == [
        "ab [...]"
    ]


def test_max_lines_uses_indents():
    assert wrap(
        "aa bb cc dd ee ff gg", width=12, max_lines=2, initial_indent="- ", subsequent_indent="  "
    ) == ["- aa bb cc", "  dd [...]"]


def test_shorten_collapses_whitespace_and_truncates():
    assert shorten("Hello  world, how are you?", width=11) == "Hello [...]"


def test_shorten_returns_text_that_fits():
    assert shorten("Hello\n\tworld", width=12) == "Hello world"


def test_shorten_ignores_max_lines():
    assert shorten("aa bb cc dd ee ff", width=12, max_lines=5) == "aa bb [...]"


def test_shorten_custom_placeholder():
    assert shorten("Hello world this is long", width=15, placeholder="...") == "Hello world..."


def test_shorten_long_word_is_cut():
    assert shorten("supercalifragilistic", width=10) == "supe [...]"
    assert shorten("supercalifragilistic", width=10, break_long_words=False) == "[...]"


def test_text_wrapper_reuses_options():
    wrapper = TextWrapper(WrapOptions(width=10))
    assert wrapper.wrap("The quick brown fox") == ["The quick", "brown fox"]
    assert wrapper.fill("The quick brown fox") == "The quick\nbrown fox"
    assert wrapper.shorten("The quick brown fox") == "The [...]"
    assert wrapper.options.max_lines == 0


def test_overrides_apply_on_top_of_options():
    options = WrapOptions(width=10, subsequent_indent="  ")
    assert wrap("The quick brown fox", options, width=12) == ["The quick", "  brown fox"]
    assert options.width == 10


def test_unknown_override_is_rejected():
    with pytest.raises(ValidationError):
        wrap("text", widht=10)
