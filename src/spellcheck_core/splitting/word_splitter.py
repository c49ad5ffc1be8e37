# src/spellcheck_core/splitting/word_splitter.py

"""
word_splitter.py.

Does: Scan a text range left to right and produce spell-check candidates,
      stepping over escape sequences, XML entities, format specifiers and
      mnemonics, trimming apostrophes/periods, optionally spanning words cut by
      string-literal concatenation, splitting camel case, and flagging doubled
      words.
Returns: WordSplitter (iter_word_spans, actual_word, is_probably_a_real_word)
         and split_words() which adds doubled-word detection.
Used by: checking.check_text(), the demo CLI and external callers.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator

from spellcheck_core.configuration import SplitterConfiguration

from .break_chars import APOSTROPHES, is_digit, is_letter, is_upper, is_word_break
from .case_split import is_mixed_case, split_case_runs
from .skip_rules import (
    skip_escape_sequence,
    skip_format_item,
    skip_printf_specifier,
    skip_xml_entity,
)
from .types import DoubledWord, SpanType, WordSpan

__all__ = ["WordSplitter", "split_words", "actual_word", "remove_mnemonic"]

# ── Logging ──────────────────────────────────────────────────────────────────
log = logging.getLogger(__name__)

# A word containing one of these is never split on case changes
SPECIAL_WORD_BREAK_CHARS = frozenset("_.@")
FILE_EMAIL_SEPARATORS = frozenset(".@")

# Characters allowed between the closing quote of one literal and the opening
# quote of the next: "spl" + "it", "spl" & "it", "spl" + @"it", "spl" _ "it"
_CONCAT_GLUE = frozenset('+&@$R_')
_LITERAL_PREFIXES = frozenset("@$R")


# ─────────────────────────────────────────────────────────────────────────────
# Helpers on finished spans
# ─────────────────────────────────────────────────────────────────────────────


def actual_word(text: str, span: WordSpan) -> str:
    """
    Does: Return the word at `span` without string-concatenation glue, e.g.
          'sp" + "lit' → 'split'.
    Returns: The word text as it should be looked up.
    """
    word = span.text_of(text)
    concat_pos = word.find('"')
    if concat_pos == -1:
        return word

    end = word.find('"', concat_pos + 1)
    if end == -1:
        end = len(word)
    if end < len(word) - 1:
        return word[:concat_pos] + word[end + 1 :]
    return word[:concat_pos]


def remove_mnemonic(word: str, mnemonic: str) -> str:
    """Does: Drop the first mnemonic character ("E&xit" → "Exit")."""
    pos = word.find(mnemonic)
    if pos == -1:
        return word
    return word[:pos] + word[pos + 1 :]


# ─────────────────────────────────────────────────────────────────────────────
# Splitter
# ─────────────────────────────────────────────────────────────────────────────


class WordSplitter:
    """
    Split ranges of text into words for spell checking.

    The splitter is bound to a configuration and to a description of the range
    it is looking at: whether the file is C-style code, what kind of span is
    being split (comment, string literal ...) and whether words cut across
    concatenated string literals should be stitched back together.

    ``can_contain_escaped_characters`` and ``is_string_literal`` are derived
    from ``span_type`` unless given explicitly.

    Example:
        >>> splitter = WordSplitter()
        >>> [s.text_of("Hello, world") for s in splitter.iter_word_spans("Hello, world")]
        ['Hello', 'world']
    """

    def __init__(
        self,
        configuration: SplitterConfiguration | None = None,
        *,
        is_c_style_code: bool = False,
        span_type: SpanType = SpanType.NONE,
        can_contain_escaped_characters: bool | None = None,
        is_string_literal: bool | None = None,
        detect_words_spanning_string_literals: bool = False,
    ) -> None:
        self.configuration = configuration or SplitterConfiguration()
        self.is_c_style_code = is_c_style_code
        self.span_type = span_type
        self.detect_words_spanning_string_literals = detect_words_spanning_string_literals
        self._can_contain_escaped_characters = can_contain_escaped_characters
        self._is_string_literal = is_string_literal

    # ── Range description ────────────────────────────────────────────────────

    @property
    def mnemonic(self) -> str:
        return self.configuration.mnemonic

    @property
    def can_contain_escaped_characters(self) -> bool:
        if self._can_contain_escaped_characters is not None:
            return self._can_contain_escaped_characters
        return self.span_type.can_contain_escapes

    @property
    def is_string_literal(self) -> bool:
        if self._is_string_literal is not None:
            return self._is_string_literal
        return self.span_type.is_string_literal

    def _is_break(self, text: str, index: int, including_mnemonic: bool = False) -> bool:
        return is_word_break(
            text, index, self.configuration, including_mnemonic=including_mnemonic
        )

    def _is_trailing(self, c: str) -> bool:
        return c in APOSTROPHES or c == "." or c == "@" or c == self.mnemonic

    # ── Scanning ─────────────────────────────────────────────────────────────

    def iter_word_spans(self, text: str) -> Iterator[WordSpan]:
        """
        Does: Lazily scan `text` and yield each candidate word span. Each call
              starts a fresh scan.
        Returns: Iterator of WordSpan (case-split pieces are separate spans).
        """
        if not text or text.isspace():
            return

        cfg = self.configuration
        n = len(text)
        i = 0

        while i < n:
            c = text[i]

            if c == "\\":
                i = skip_escape_sequence(
                    text,
                    i,
                    cfg,
                    escapes_allowed=self.can_contain_escaped_characters and self.is_c_style_code,
                ) + 1
                continue

            if c == "&":
                i = skip_xml_entity(text, i) + 1
                continue

            if c == "{" and cfg.ignore_format_specifiers:
                i = skip_format_item(text, i) + 1
                continue

            if c == "%" and cfg.ignore_format_specifiers:
                i = skip_printf_specifier(text, i) + 1
                continue

            if self._is_break(text, i, True):
                i += 1
                continue

            # Find the end of the word
            end = i + 1
            while end < n and not self._is_break(text, end):
                end += 1

            # "Caption&gt;" with an ignored '&' mnemonic only yields "Caption"
            if self.mnemonic == "&" and end < n and text[end] == ";" and cfg.ignore_mnemonics:
                amp = text.rfind("&", i + 1, end)
                if amp != -1:
                    end = amp

            # Named XML entity reference &name;
            if end < n and i > 0 and text[i - 1] == "&" and text[end] == ";":
                i = end + 1
                continue

            while i < end and text[i] in APOSTROPHES:
                i += 1

            end -= 1
            while end > i and self._is_trailing(text[end]):
                end -= 1
            end += 1

            if (
                self.detect_words_spanning_string_literals
                and end < n
                and text[end] == '"'
                and self.is_string_literal
            ):
                end = self._span_string_literals(text, i, end)

            if end - i > 1:
                yield from self._emit(text, i, end)

            i = max(end, i + 1)

    def _span_string_literals(self, text: str, start: int, end: int) -> int:
        """
        Does: Extend a word ending at a closing quote across a concatenation
              ('"sp" + "lit"') into the word that starts the next literal.
        Returns: The new exclusive end, or `end` when there is no such word.
        """
        n = len(text)
        span_end = end + 1
        concat_seen = False

        while span_end < n and (text[span_end] in _CONCAT_GLUE or text[span_end].isspace()):
            c = text[span_end]
            if c in _LITERAL_PREFIXES and (
                span_end + 1 >= n or text[span_end + 1] not in '"@$'
            ):
                break
            if c == "+" or c == "&":
                concat_seen = True
            span_end += 1

        if not (
            concat_seen
            and span_end + 1 < n
            and text[span_end] == '"'
            and not self._is_break(text, span_end + 1)
        ):
            return end

        span_end += 1
        while span_end < n and not self._is_break(text, span_end):
            span_end += 1

        # The continuation must be terminated inside this range
        if span_end >= n:
            return end

        span_end -= 1
        while span_end > start and self._is_trailing(text[span_end]):
            span_end -= 1
        return span_end + 1

    def _emit(self, text: str, start: int, end: int) -> Iterator[WordSpan]:
        cfg = self.configuration
        if cfg.ignore_words_in_mixed_case:
            yield WordSpan(start, end)
            return

        word = text[start:end]
        if not is_mixed_case(word):
            yield WordSpan(start, end)
            return

        # Deprecated/compound terms are reported whole; words with '_', '.', '@'
        # are left for the filename/underscore options to deal with
        if cfg.is_term_exception(word) or any(c in SPECIAL_WORD_BREAK_CHARS for c in word):
            yield WordSpan(start, end)
            return

        for sub_start, sub_end in split_case_runs(text, start, end):
            yield WordSpan(sub_start, sub_end)

    # ── Word helpers ─────────────────────────────────────────────────────────

    def actual_word(self, text: str, span: WordSpan) -> str:
        return actual_word(text, span)

    def is_probably_a_real_word(self, word: str | None) -> bool:
        """
        Does: Classify a standalone candidate without scanning. A word is not
              real when it:
              - contains '.' or '@' (looks like a filename or e-mail address)
              - contains '_' (unless '_' is the mnemonic)
              - contains a digit while words with digits are ignored
              - has no letters
              - is all uppercase while such words are ignored
              - is mixed/camel case and not a configured deprecated/compound term
              - has a character outside the allowed character class
        Returns: True when the word is worth a dictionary lookup.
        """
        if not word or word.isspace():
            return False

        cfg = self.configuration
        word = word.strip()

        if any(c in FILE_EMAIL_SEPARATORS for c in word):
            return False

        if any(
            (c == "_" and self.mnemonic != "_") or (is_digit(c) and cfg.ignore_words_with_digits)
            for c in word
        ):
            return False

        if not any(is_letter(c) and c != self.mnemonic for c in word):
            return False

        if all(is_upper(c) or not is_letter(c) for c in word):
            return not cfg.ignore_words_in_all_uppercase

        if is_mixed_case(word):
            return cfg.is_term_exception(word)

        return not cfg.ignored_character_class.excludes(word)


# ─────────────────────────────────────────────────────────────────────────────
# Public entry point with doubled-word detection
# ─────────────────────────────────────────────────────────────────────────────


def split_words(
    text: str,
    config: SplitterConfiguration | None = None,
    *,
    splitter: WordSplitter | None = None,
    debug: bool = False,
) -> Iterator[WordSpan | DoubledWord]:
    """
    Does: Split `text` into word spans; when doubled-word detection is on, a
          word equal (case-insensitively) to the previous real word with only
          whitespace between them is yielded as a DoubledWord whose delete span
          covers the whitespace and the repeat. Only spans that pass
          is_probably_a_real_word() once the mnemonic is removed take part, so
          "file_name file_name" is never flagged. Every repeat in a run is
          compared with its immediate predecessor, so "the the the" yields two
          records.
    Returns: Lazy iterator of WordSpan | DoubledWord.
    """
    if splitter is None:
        splitter = WordSplitter(config)
    elif config is not None:
        log.warning("split_words: both config and splitter given; using the splitter's configuration")

    detect = splitter.configuration.detect_doubled_words
    previous: WordSpan | None = None
    previous_word = ""

    for span in splitter.iter_word_spans(text):
        word = actual_word(text, span)

        if not splitter.is_probably_a_real_word(remove_mnemonic(word, splitter.mnemonic)):
            yield span
            continue

        if detect and previous is not None:
            gap = text[previous.end : span.start]
            if gap and gap.isspace() and word.casefold() == previous_word.casefold():
                if debug:
                    log.debug("Doubled word %r at %d", word, span.start)
                yield DoubledWord(span, WordSpan(previous.end, span.end), word)
                previous, previous_word = span, word
                continue

        previous, previous_word = span, word
        yield span
