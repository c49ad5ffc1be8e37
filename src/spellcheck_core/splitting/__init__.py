"""
splitting.
=========

Word and identifier splitting for spell checking.

Exports:
- WordSplitter / split_words: natural-language text in comments, strings, markup.
- IdentifierSplitter / split_identifier: camel/Pascal/snake-case identifiers.
- WordSpan, DoubledWord, SpanType: result values and range classification.
- is_probably_a_real_word: standalone "worth a dictionary lookup" heuristic.
"""

from __future__ import annotations

from spellcheck_core.configuration import SplitterConfiguration

from .identifier_splitter import IdentifierSplitter, split_identifier
from .types import DoubledWord, SpanType, WordSpan
from .word_splitter import WordSplitter, actual_word, remove_mnemonic, split_words

__all__ = [
    "WordSplitter",
    "IdentifierSplitter",
    "WordSpan",
    "DoubledWord",
    "SpanType",
    "split_words",
    "split_identifier",
    "actual_word",
    "remove_mnemonic",
    "is_probably_a_real_word",
]


def is_probably_a_real_word(word: str | None, config: SplitterConfiguration | None = None) -> bool:
    """Does: Shortcut for ``WordSplitter(config).is_probably_a_real_word(word)``."""
    return WordSplitter(config).is_probably_a_real_word(word)
