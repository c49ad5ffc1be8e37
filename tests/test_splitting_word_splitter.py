# tests/test_splitting_word_splitter.py
from __future__ import annotations

import string

import pytest

from spellcheck_core.configuration import SplitterConfiguration
from spellcheck_core.splitting import (
    DoubledWord,
    SpanType,
    WordSpan,
    WordSplitter,
    actual_word,
    remove_mnemonic,
    split_words,
)

# ─────────────────────────────────────────────────────────────────────────────
# Helpers
# ─────────────────────────────────────────────────────────────────────────────


def words(text: str, splitter: WordSplitter | None = None) -> list[str]:
    splitter = splitter or WordSplitter()
    return [s.text_of(text) for s in splitter.iter_word_spans(text)]


def c_string_splitter(**config) -> WordSplitter:
    return WordSplitter(
        SplitterConfiguration(**config),
        is_c_style_code=True,
        span_type=SpanType.STRING_LITERAL | SpanType.NORMAL_STRING,
    )


# ─────────────────────────────────────────────────────────────────────────────
# Plain text
# ─────────────────────────────────────────────────────────────────────────────


@pytest.mark.parametrize("word", ["a" * 2, "hello", "Spelling", "ABCdef", string.ascii_letters])
def test_single_alphabetic_word_is_one_span(word):
    spans = list(WordSplitter().iter_word_spans(word))
    assert spans == [WordSpan(0, len(word))]


def test_basic_punctuation_and_whitespace_break_words():
    assert words("Hello, world! How are you?") == ["Hello", "world", "How", "are", "you"]


@pytest.mark.parametrize("text", ["", "   ", "\t\n"])
def test_empty_or_whitespace_yields_nothing(text):
    assert words(text) == []


def test_single_characters_are_dropped():
    assert words("a b c word") == ["word"]


def test_scanning_twice_gives_identical_spans():
    text = "The quick brown fox's {0} tail &amp; E&xit"
    splitter = WordSplitter()
    assert list(splitter.iter_word_spans(text)) == list(splitter.iter_word_spans(text))


def test_apostrophes_are_kept_inside_and_trimmed_outside():
    assert words("'quoted' don't stop\u2019") == ["quoted", "don't", "stop"]


def test_unicode_letters_stay_in_words():
    assert words("naïve café Straße") == ["naïve", "café", "Straße"]


def test_emoji_and_keycaps_break_words():
    assert words("Nice\U0001F389work") == ["Nice", "work"]
    assert words("1\u20e3 item") == ["item"]


# ─────────────────────────────────────────────────────────────────────────────
# Escape sequences
# ─────────────────────────────────────────────────────────────────────────────


def test_escape_sequences_are_skipped_in_c_style_literals():
    text = "path\\to\\file"
    out = words(text, c_string_splitter())
    assert "path" in out
    assert "to" not in out
    assert all(len(w) > 1 for w in out)
    assert all("\\" not in w for w in out)


def test_backslash_is_a_plain_break_without_escapes():
    assert words("path\\to\\file") == ["path", "to", "file"]


def test_newline_escape_does_not_glue_words():
    assert words("Line one\\nLine two", c_string_splitter()) == ["Line", "one", "Line", "two"]
    assert words("Line one\\nLine two") == ["Line", "one", "nLine", "two"]


@pytest.mark.parametrize(
    "text, expected",
    [
        ("caf\\x41 value", ["caf", "value"]),
        ("\\u00e9tude ok", ["tude", "ok"]),
        ("\\U0001F600smile", ["smile"]),
    ],
)
def test_hex_escapes_are_skipped(text, expected):
    assert words(text, c_string_splitter()) == expected


def test_verbatim_literal_keeps_escape_letters():
    splitter = WordSplitter(
        is_c_style_code=True, span_type=SpanType.STRING_LITERAL | SpanType.VERBATIM_STRING
    )
    assert splitter.can_contain_escaped_characters is False
    assert words('@"C:\\temp\\new"', splitter) == ["temp", "new"]


def test_escaped_ignored_words_are_skipped_everywhere():
    assert words("\\brief Returns the \\note value") == ["Returns", "the", "value"]


@pytest.mark.parametrize("code", [False, True])
def test_configured_doxygen_tags_with_any_letter_are_skipped(code):
    config = dict(ignored_words=["\\param", "\\brief", "\\ingroup", "\\code"])
    splitter = c_string_splitter(**config) if code else WordSplitter(SplitterConfiguration(**config))
    text = "\\param value \\brief text \\ingroup core \\code sample"
    assert words(text, splitter) == ["value", "text", "core", "sample"]


def test_unconfigured_backslash_word_keeps_its_letters():
    assert words("\\param value") == ["param", "value"]


# ─────────────────────────────────────────────────────────────────────────────
# Malformed input degrades to ordinary characters
# ─────────────────────────────────────────────────────────────────────────────


@pytest.mark.parametrize(
    "text, expected",
    [
        ("word \ud83d", ["word"]),
        ("\ud83d word", ["word"]),
        ("abc\\", ["abc"]),
        ("abc \\x", ["abc"]),
        ("abc \\u12", ["abc", "u12"]),
        ("{0:MM", ["MM"]),
    ],
)
def test_malformed_input_never_raises(text, expected):
    splitter = c_string_splitter()
    assert words(text, splitter) == expected
    assert list(split_words(text, splitter=splitter))


# ─────────────────────────────────────────────────────────────────────────────
# XML entities and mnemonics
# ─────────────────────────────────────────────────────────────────────────────


def test_xml_entities_are_skipped():
    assert words("Tom &amp; Jerry &#169; &#x00A9; done") == ["Tom", "Jerry", "done"]


def test_entity_after_word_is_cut_off():
    assert words("Caption&gt;") == ["Caption"]


def test_mnemonic_stays_inside_word_when_ignored():
    text = "E&xit"
    spans = list(WordSplitter().iter_word_spans(text))
    assert spans == [WordSpan(0, 5)]
    assert remove_mnemonic(text, "&") == "Exit"


def test_mnemonic_breaks_when_not_ignored():
    splitter = WordSplitter(SplitterConfiguration(ignore_mnemonics=False))
    assert words("E&xit now", splitter) == ["xit", "now"]


def test_underscore_mnemonic():
    splitter = WordSplitter(SplitterConfiguration(mnemonic="_"))
    assert words("_Open file", splitter) == ["Open", "file"]


# ─────────────────────────────────────────────────────────────────────────────
# Format specifiers
# ─────────────────────────────────────────────────────────────────────────────


@pytest.mark.parametrize(
    "text, expected",
    [
        ("Value {0:N2} is {1}", ["Value", "is"]),
        ('$"Hello {name}, bye"', ["Hello", "bye"]),
        ("Copied %d files in %-8.3lf seconds", ["Copied", "files", "in", "seconds"]),
        ("100% sure", ["100", "sure"]),
        ("Size %zu bytes", ["Size", "bytes"]),
    ],
)
def test_format_specifiers_are_skipped(text, expected):
    assert words(text) == expected


def test_format_specifiers_kept_when_option_off():
    splitter = WordSplitter(SplitterConfiguration(ignore_format_specifiers=False))
    assert words("Copied %d files", splitter) == ["Copied", "files"]
    assert words("{word}", splitter) == ["word"]


# ─────────────────────────────────────────────────────────────────────────────
# Filenames, e-mail addresses, underscores
# ─────────────────────────────────────────────────────────────────────────────


def test_filenames_and_addresses_stay_whole_by_default():
    assert words("see readme.txt or mail me@example.com.") == [
        "see",
        "readme.txt",
        "or",
        "mail",
        "me@example.com",
    ]


def test_filenames_split_when_not_ignored():
    splitter = WordSplitter(SplitterConfiguration(ignore_filenames_and_email_addresses=False))
    assert words("readme.txt me@example.com", splitter) == ["readme", "txt", "me", "example", "com"]


def test_underscore_separator_option():
    assert words("snake_case") == ["snake_case"]
    splitter = WordSplitter(SplitterConfiguration(treat_underscore_as_separator=True))
    assert words("snake_case", splitter) == ["snake", "case"]


# ─────────────────────────────────────────────────────────────────────────────
# Mixed case
# ─────────────────────────────────────────────────────────────────────────────


def test_mixed_case_words_stay_whole_by_default():
    assert words("MyHTTPServer") == ["MyHTTPServer"]


@pytest.mark.parametrize(
    "text, expected",
    [
        ("MyHTTPServer", ["My", "HTTP", "Server"]),
        ("GetIDs", ["Get", "IDs"]),
        ("spellChecker", ["spell", "Checker"]),
        ("iPhone", ["Phone"]),
    ],
)
def test_mixed_case_splitting(text, expected):
    splitter = WordSplitter(SplitterConfiguration(ignore_words_in_mixed_case=False))
    assert words(text, splitter) == expected


def test_mixed_case_term_exceptions_stay_whole():
    config = SplitterConfiguration(
        ignore_words_in_mixed_case=False, deprecated_terms={"NHunspell": "Hunspell"}
    )
    assert words("Use NHunspell today", WordSplitter(config)) == ["Use", "NHunspell", "today"]


def test_mixed_case_with_special_break_char_stays_whole():
    splitter = WordSplitter(SplitterConfiguration(ignore_words_in_mixed_case=False))
    assert words("MyFile.txt", splitter) == ["MyFile.txt"]


# ─────────────────────────────────────────────────────────────────────────────
# Words spanning concatenated string literals
# ─────────────────────────────────────────────────────────────────────────────


def test_words_spanning_string_literals():
    text = '"Hel" + "lo world"'
    splitter = WordSplitter(
        span_type=SpanType.STRING_LITERAL, detect_words_spanning_string_literals=True
    )
    spans = list(splitter.iter_word_spans(text))
    assert [actual_word(text, s) for s in spans] == ["Hello", "world"]


def test_literal_spanning_off_by_default():
    text = '"Hel" + "lo world"'
    assert words(text, WordSplitter(span_type=SpanType.STRING_LITERAL)) == ["Hel", "lo", "world"]


def test_actual_word_strips_concatenation():
    text = 'sp" + "lit'
    assert actual_word(text, WordSpan(0, len(text))) == "split"
    assert actual_word("plain", WordSpan(0, 5)) == "plain"


# ─────────────────────────────────────────────────────────────────────────────
# Span type derivation
# ─────────────────────────────────────────────────────────────────────────────


@pytest.mark.parametrize(
    "span_type, escapes, literal",
    [
        (SpanType.NONE, False, False),
        (SpanType.COMMENT | SpanType.SINGLE_LINE_COMMENT, True, False),
        (SpanType.STRING_LITERAL | SpanType.NORMAL_STRING, True, True),
        (SpanType.STRING_LITERAL | SpanType.INTERPOLATED_STRING, True, True),
        (SpanType.STRING_LITERAL | SpanType.VERBATIM_STRING, False, True),
        (SpanType.STRING_LITERAL | SpanType.RAW_STRING, False, True),
        (SpanType.IDENTIFIER, False, False),
        (SpanType.ATTRIBUTE_VALUE, False, False),
    ],
)
def test_span_type_flags(span_type, escapes, literal):
    splitter = WordSplitter(span_type=span_type)
    assert splitter.can_contain_escaped_characters is escapes
    assert splitter.is_string_literal is literal


def test_explicit_overrides_win_over_span_type():
    splitter = WordSplitter(
        span_type=SpanType.IDENTIFIER, can_contain_escaped_characters=True, is_string_literal=True
    )
    assert splitter.can_contain_escaped_characters is True
    assert splitter.is_string_literal is True


# ─────────────────────────────────────────────────────────────────────────────
# split_words and doubled words
# ─────────────────────────────────────────────────────────────────────────────


def test_doubled_word_record_and_delete_span():
    text = "the the cat"
    out = list(split_words(text))
    assert out[0] == WordSpan(0, 3)
    assert isinstance(out[1], DoubledWord)
    doubled = out[1]
    assert doubled.span == WordSpan(4, 7)
    assert doubled.word == "the"
    fixed = text[: doubled.delete_span.start] + text[doubled.delete_span.end :]
    assert fixed == "the cat"
    assert out[2] == WordSpan(8, 11)


def test_doubled_words_are_case_insensitive():
    out = list(split_words("The the end"))
    assert isinstance(out[1], DoubledWord)


def test_triple_repeat_flags_each_repeat():
    out = list(split_words("the the the end"))
    doubled = [o for o in out if isinstance(o, DoubledWord)]
    assert [d.span for d in doubled] == [WordSpan(4, 7), WordSpan(8, 11)]


@pytest.mark.parametrize("text", ["the, the cat", "thethe", "the cat the"])
def test_not_doubled_without_whitespace_gap(text):
    assert not any(isinstance(o, DoubledWord) for o in split_words(text))


def test_doubled_detection_can_be_disabled():
    config = SplitterConfiguration(detect_doubled_words=False)
    out = list(split_words("the the cat", config))
    assert out == [WordSpan(0, 3), WordSpan(4, 7), WordSpan(8, 11)]


def test_split_words_is_lazy():
    gen = split_words("alpha beta gamma")
    assert next(gen) == WordSpan(0, 5)


@pytest.mark.parametrize(
    "text", ["see file_name file_name here", "Save&As Save&As", "ab12 ab12", "HTTP HTTP"]
)
def test_only_real_words_can_be_doubled(text):
    assert not any(isinstance(o, DoubledWord) for o in split_words(text))


def test_word_that_is_not_real_keeps_the_previous_word():
    out = list(split_words("the x1 the"))
    assert not any(isinstance(o, DoubledWord) for o in out)
    assert len(out) == 3
