# src/spellcheck_core/checking.py

"""
checking.py.

Does: Run a full spelling pass over one text range: split it into words,
      drop words that are not worth checking, then report doubled words,
      deprecated/compound terms and misspellings against a dictionary oracle.
Returns: check_text() -> list[SpellingIssue]; DictionaryOracle protocol and
         WordListOracle, an in-memory word list.
Used by: The demo CLI ``check`` command and callers that own a dictionary.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum
from typing import Protocol

from spellcheck_core.splitting import (
    DoubledWord,
    WordSpan,
    WordSplitter,
    actual_word,
    remove_mnemonic,
    split_words,
)

__all__ = [
    "MisspellingType",
    "SpellingIssue",
    "DictionaryOracle",
    "WordListOracle",
    "check_text",
]

__docformat__ = "google"

log = logging.getLogger(__name__)

_APOSTROPHE_S = ("'s", "\u2019s")
_TRAILING_RETRY = (".", "-")


class MisspellingType(str, Enum):
    MISSPELLED_WORD = "misspelled_word"
    DOUBLED_WORD = "doubled_word"
    DEPRECATED_TERM = "deprecated_term"
    COMPOUND_TERM = "compound_term"


@dataclass(frozen=True)
class SpellingIssue:
    """One reported problem; `delete_span` is set for doubled words only."""

    kind: MisspellingType
    span: WordSpan
    word: str
    suggestions: tuple[str, ...] = ()
    delete_span: WordSpan | None = None

    def to_dict(self) -> dict:
        out = {
            "kind": self.kind.value,
            "start": self.span.start,
            "end": self.span.end,
            "word": self.word,
        }
        if self.suggestions:
            out["suggestions"] = list(self.suggestions)
        if self.delete_span is not None:
            out["delete"] = [self.delete_span.start, self.delete_span.end]
        return out


class DictionaryOracle(Protocol):
    def should_ignore_word(self, word: str) -> bool: ...

    def is_spelled_correctly(self, word: str) -> bool: ...


class WordListOracle:
    """
    Case-insensitive dictionary backed by a set of known words.

    Example:
        >>> oracle = WordListOracle(["hello", "world"], ignored=["todo"])
        >>> oracle.is_spelled_correctly("Hello"), oracle.should_ignore_word("TODO")
        (True, True)
    """

    def __init__(self, words: Iterable[str] = (), ignored: Iterable[str] = ()) -> None:
        self.words = {w.casefold() for w in words if w}
        self.ignored = {w.casefold() for w in ignored if w}

    def should_ignore_word(self, word: str) -> bool:
        return word.casefold() in self.ignored

    def is_spelled_correctly(self, word: str) -> bool:
        return word.casefold() in self.words


def _is_ignored(word: str, oracle: DictionaryOracle, splitter: WordSplitter) -> bool:
    return oracle.should_ignore_word(word) or splitter.configuration.should_ignore_word(word)


def _accepted_by_retries(
    text: str, span: WordSpan, word: str, oracle: DictionaryOracle, splitter: WordSplitter
) -> bool:
    # Dictionaries often miss the possessive form
    if word.casefold().endswith(_APOSTROPHE_S):
        base = word[:-2]
        if _is_ignored(base, oracle, splitter) or oracle.is_spelled_correctly(base):
            return True

    # "etc." and German compounds such as "Versicherungs-" carry their punctuation
    if span.end < len(text) and text[span.end] in _TRAILING_RETRY:
        extended = word + text[span.end]
        if _is_ignored(extended, oracle, splitter) or oracle.is_spelled_correctly(extended):
            return True

    return False


def check_text(
    text: str,
    oracle: DictionaryOracle,
    splitter: WordSplitter | None = None,
    *,
    debug: bool = False,
) -> list[SpellingIssue]:
    """
    Does: Spell check `text` and collect the issues in text order. Doubled
          words come straight from split_words(), before any dictionary
          lookup, so an ignored word repeated is still reported.
    Returns: list[SpellingIssue].
    """
    splitter = splitter or WordSplitter()
    cfg = splitter.configuration
    issues: list[SpellingIssue] = []

    for item in split_words(text, splitter=splitter, debug=debug):
        if isinstance(item, DoubledWord):
            issues.append(
                SpellingIssue(
                    MisspellingType.DOUBLED_WORD, item.span, item.word, delete_span=item.delete_span
                )
            )
            continue

        span = item
        word = actual_word(text, span)
        to_check = remove_mnemonic(word, splitter.mnemonic)

        if not splitter.is_probably_a_real_word(to_check) or _is_ignored(to_check, oracle, splitter):
            continue

        preferred = cfg.deprecated_term(to_check)
        if preferred is not None:
            issues.append(SpellingIssue(MisspellingType.DEPRECATED_TERM, span, word, (preferred,)))
            continue

        preferred = cfg.compound_term(to_check)
        if preferred is not None:
            issues.append(SpellingIssue(MisspellingType.COMPOUND_TERM, span, word, (preferred,)))
            continue

        if oracle.is_spelled_correctly(to_check):
            continue

        if _accepted_by_retries(text, span, to_check, oracle, splitter):
            continue

        issues.append(SpellingIssue(MisspellingType.MISSPELLED_WORD, span, word))

    if debug:
        log.debug("check_text: %d issue(s) in %d chars", len(issues), len(text))
    return issues
