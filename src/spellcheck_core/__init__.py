"""
spellcheck_core
===============

Does: Root package of the spell checker core: word/identifier splitting,
      .editorconfig-style glob matching and a caller-side spelling pass.
Returns: The most used entry points re-exported from the sub-packages.
Used by: All imports starting from `spellcheck_core.*`.
"""

from .checking import DictionaryOracle, MisspellingType, SpellingIssue, WordListOracle, check_text
from .configuration import IgnoredCharacterClass, SplitterConfiguration, load_splitter_configuration
from .globbing import Glob, GlobOptions, GlobPatternError
from .splitting import (
    DoubledWord,
    IdentifierSplitter,
    SpanType,
    WordSpan,
    WordSplitter,
    is_probably_a_real_word,
    split_identifier,
    split_words,
)

__all__: list[str] = [
    "SplitterConfiguration",
    "IgnoredCharacterClass",
    "load_splitter_configuration",
    "WordSplitter",
    "IdentifierSplitter",
    "WordSpan",
    "DoubledWord",
    "SpanType",
    "split_words",
    "split_identifier",
    "is_probably_a_real_word",
    "Glob",
    "GlobOptions",
    "GlobPatternError",
    "check_text",
    "SpellingIssue",
    "MisspellingType",
    "DictionaryOracle",
    "WordListOracle",
]
__docformat__ = "google"
