# src/spellcheck_core/configuration.py

"""
configuration.py.

Does: Define the read-only flag surface consumed by the word/identifier splitters
      (SplitterConfiguration), the ignored character classes, and a loader that
      builds a configuration from a JSON settings file.
Returns: SplitterConfiguration, IgnoredCharacterClass, load_splitter_configuration().
Used by: splitting.word_splitter, splitting.identifier_splitter, checking, demo CLI.
"""

from __future__ import annotations

import dataclasses
import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any

from spellcheck_core.utils import ConfigTypeError, debug, load_config

__all__ = [
    "IgnoredCharacterClass",
    "SplitterConfiguration",
    "DEFAULT_IGNORED_ESCAPED_WORDS",
    "MNEMONIC_CHARACTERS",
    "load_splitter_configuration",
]

__docformat__ = "google"

log = logging.getLogger(__name__)

MNEMONIC_CHARACTERS = ("&", "_")

# Doxygen tags and similar escaped words skipped whole by the splitter.
DEFAULT_IGNORED_ESCAPED_WORDS: frozenset[str] = frozenset(
    {
        "\\addindex", "\\addtogroup", "\\anchor", "\\arg", "\\attention", "\\author",
        "\\authors", "\\brief", "\\bug", "\\file", "\\fn", "\\name", "\\namespace",
        "\\nosubgrouping", "\\note", "\\ref", "\\refitem", "\\related", "\\relates",
        "\\relatedalso", "\\relatesalso", "\\remark", "\\remarks", "\\result",
        "\\return", "\\returns", "\\retval", "\\rtfonly", "\\tableofcontents",
        "\\test", "\\throw", "\\throws", "\\todo", "\\tparam", "\\typedef", "\\var",
        "\\verbatim", "\\verbinclude", "\\version", "\\vhdlflow",
    }
)


class IgnoredCharacterClass(str, Enum):
    """Character class whose presence makes a word not worth spell checking."""

    NONE = "none"
    NON_LATIN = "non_latin"
    NON_ASCII = "non_ascii"

    def excludes(self, word: str) -> bool:
        """Does: Tell whether `word` contains a character outside this class."""
        if self is IgnoredCharacterClass.NON_ASCII:
            return any(ord(c) > 0x7F for c in word)
        if self is IgnoredCharacterClass.NON_LATIN:
            return any(ord(c) > 0xFF for c in word)
        return False


def _folded_terms(terms: Mapping[str, str] | None) -> dict[str, str]:
    return {k.casefold(): v for k, v in (terms or {}).items()}


def _folded_words(words: Iterable[str] | None) -> frozenset[str]:
    return frozenset(w.casefold() for w in (words or ()) if w and w.strip())


@dataclass(frozen=True)
class SplitterConfiguration:
    """
    Flags and word lists that drive word splitting.

    All options have the defaults of the spell checker's global configuration,
    so ``SplitterConfiguration()`` is what a caller gets when it has nothing
    configured. Term maps and word lists are matched case-insensitively.

    Example:
        >>> config = SplitterConfiguration(ignore_words_in_mixed_case=False)
        >>> config.is_term_exception("NHunspell")
        False
    """

    detect_doubled_words: bool = True
    ignore_words_with_digits: bool = True
    ignore_words_in_all_uppercase: bool = True
    ignore_words_in_mixed_case: bool = True
    ignore_format_specifiers: bool = True
    ignore_filenames_and_email_addresses: bool = True
    ignore_mnemonics: bool = True
    mnemonic: str = "&"
    treat_underscore_as_separator: bool = False
    ignored_character_class: IgnoredCharacterClass = IgnoredCharacterClass.NONE

    # Code analysis dictionary options
    treat_deprecated_terms_as_misspelled: bool = True
    treat_compound_terms_as_misspelled: bool = True
    deprecated_terms: Mapping[str, str] = field(default_factory=dict)
    compound_terms: Mapping[str, str] = field(default_factory=dict)

    # Code analyzer options
    ignore_identifier_if_all_uppercase: bool = False

    ignored_words: frozenset[str] = DEFAULT_IGNORED_ESCAPED_WORDS
    ignored_keywords: frozenset[str] = frozenset()

    def __post_init__(self) -> None:
        # Only '&' and '_' are accepted as mnemonics
        if self.mnemonic not in MNEMONIC_CHARACTERS:
            object.__setattr__(self, "mnemonic", "&")
        object.__setattr__(
            self, "ignored_character_class", IgnoredCharacterClass(self.ignored_character_class)
        )
        object.__setattr__(self, "deprecated_terms", _folded_terms(self.deprecated_terms))
        object.__setattr__(self, "compound_terms", _folded_terms(self.compound_terms))
        object.__setattr__(self, "ignored_words", _folded_words(self.ignored_words))
        object.__setattr__(self, "ignored_keywords", _folded_words(self.ignored_keywords))

    # ── Lookups ──────────────────────────────────────────────────────────────

    def should_ignore_word(self, word: str | None) -> bool:
        """Does: True for blank words and words in the ignored word/keyword lists."""
        if not word or word.isspace():
            return True
        key = word.casefold()
        return key in self.ignored_words or key in self.ignored_keywords

    def deprecated_term(self, word: str) -> str | None:
        """Returns: The preferred replacement when `word` is a flagged deprecated term."""
        if not self.treat_deprecated_terms_as_misspelled:
            return None
        return self.deprecated_terms.get(word.casefold())

    def compound_term(self, word: str) -> str | None:
        """Returns: The preferred replacement when `word` is a flagged compound term."""
        if not self.treat_compound_terms_as_misspelled:
            return None
        return self.compound_terms.get(word.casefold())

    def is_term_exception(self, word: str) -> bool:
        """Does: Tell whether a camel-cased word must stay whole (deprecated/compound term)."""
        return self.deprecated_term(word) is not None or self.compound_term(word) is not None

    # ── Construction from plain data ─────────────────────────────────────────

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> SplitterConfiguration:
        """
        Does: Build a configuration from a mapping of field names to values,
              checking names and scalar types.
        Returns: SplitterConfiguration; unknown keys or bad types raise ConfigTypeError.
        """
        fields = {f.name: f for f in dataclasses.fields(cls)}
        unknown = sorted(set(data) - set(fields))
        if unknown:
            raise ConfigTypeError(f"Unknown splitter configuration keys: {', '.join(unknown)}")

        kwargs: dict[str, Any] = {}
        for name, value in data.items():
            default = fields[name].default
            if isinstance(default, bool):
                if not isinstance(value, bool):
                    raise ConfigTypeError(f"{name}: expected bool, got {type(value).__name__}")
            elif name in ("deprecated_terms", "compound_terms"):
                if not isinstance(value, Mapping) or not all(
                    isinstance(k, str) and isinstance(v, str) for k, v in value.items()
                ):
                    raise ConfigTypeError(f"{name}: expected an object of string → string")
            elif name in ("ignored_words", "ignored_keywords"):
                if not isinstance(value, (list, tuple, set, frozenset)) or not all(
                    isinstance(w, str) for w in value
                ):
                    raise ConfigTypeError(f"{name}: expected a list of strings")
                value = frozenset(value)
            elif name == "ignored_character_class":
                try:
                    value = IgnoredCharacterClass(value)
                except ValueError as e:
                    raise ConfigTypeError(f"{name}: {e}") from e
            elif name == "mnemonic" and not isinstance(value, str):
                raise ConfigTypeError(f"{name}: expected str, got {type(value).__name__}")
            kwargs[name] = value

        # Ignored words given in a file extend the escaped-word defaults
        if "ignored_words" in kwargs:
            kwargs["ignored_words"] = kwargs["ignored_words"] | DEFAULT_IGNORED_ESCAPED_WORDS
        return cls(**kwargs)


# Settings keys naming word-list files (JSON arrays of strings in the data dir)
WORD_LIST_FILE_KEYS = {
    "ignored_words_files": "ignored_words",
    "ignored_keywords_files": "ignored_keywords",
}


def _merge_word_list_files(
    data: dict[str, Any], base_dir: Path | None, allow_comments: bool
) -> dict[str, Any]:
    """
    Does: Replace each *_files key with the words of the files it names,
          added to any words listed inline.
    Returns: A new mapping ready for SplitterConfiguration.from_dict().
    """
    merged = dict(data)
    for files_key, words_key in WORD_LIST_FILE_KEYS.items():
        if files_key not in merged:
            continue
        names = merged.pop(files_key)
        if not isinstance(names, list) or not all(isinstance(n, str) for n in names):
            raise ConfigTypeError(f"{files_key}: expected a list of file names")

        inline = merged.get(words_key, [])
        if not isinstance(inline, list):
            raise ConfigTypeError(f"{words_key}: expected a list of strings")
        words = list(inline)
        for name in names:
            words.extend(
                load_config(name, mode="words", base_dir=base_dir, allow_comments=allow_comments)
            )
            debug(f"merged word list {name!r} into {words_key}", topic="config")
        merged[words_key] = words
    return merged


def load_splitter_configuration(
    name: str = "splitter",
    *,
    base_dir: Path | None = None,
    allow_comments: bool = False,
) -> SplitterConfiguration:
    """
    Does: Read <data>/<name>.json and validate it into a SplitterConfiguration.
          ``ignored_words_files`` / ``ignored_keywords_files`` name word-list
          files in the same data directory whose words are added to the
          corresponding list.
    Returns: SplitterConfiguration (raises the load_config exceptions on failure).
    """

    def validate(data: dict[str, Any]) -> SplitterConfiguration:
        return SplitterConfiguration.from_dict(
            _merge_word_list_files(data, base_dir, allow_comments)
        )

    config = load_config(
        name,
        mode="validated_dict",
        base_dir=base_dir,
        validator=validate,
        allow_comments=allow_comments,
    )
    log.debug("Loaded splitter configuration %r", name)
    return config
