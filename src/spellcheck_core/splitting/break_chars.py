# src/spellcheck_core/splitting/break_chars.py

"""
break_chars.py.

Does: Unicode character-class helpers and the word-break predicate shared by
      the scanners (whitespace, punctuation, symbols, controls, emoji ranges,
      configurable '.', '@', '_' and mnemonic handling).
Returns: is_word_break(), is_upper(), is_lower(), is_letter(), is_digit(), is_hex_digit().
Used by: splitting.word_splitter, splitting.skip_rules, splitting.case_split.
"""

from __future__ import annotations

import unicodedata

from spellcheck_core.configuration import SplitterConfiguration

__all__ = [
    "APOSTROPHES",
    "is_word_break",
    "is_upper",
    "is_lower",
    "is_letter",
    "is_digit",
    "is_hex_digit",
]

APOSTROPHES = frozenset({"'", "\u2019"})

_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")

# Stray emoji joiners, keycaps and variation selectors
_EMOJI_BREAKS = frozenset(
    {"\u200d", "\u203c", "\u20e3", "\u3030", "\u303d", "\u3297", "\u3299", "\ufe0e", "\ufe0f"}
)
_KEYCAP_MARKS = frozenset({"\u20e3", "\ufe0f"})

# Punctuation (P*), symbols (S*) and controls (Cc)
_BREAK_CATEGORIES = frozenset(
    {"Pc", "Pd", "Ps", "Pe", "Pi", "Pf", "Po", "Sm", "Sc", "Sk", "So", "Cc"}
)


# ── Character classes ────────────────────────────────────────────────────────


def is_upper(c: str) -> bool:
    return unicodedata.category(c) == "Lu"


def is_lower(c: str) -> bool:
    return unicodedata.category(c) == "Ll"


def is_letter(c: str) -> bool:
    return unicodedata.category(c).startswith("L")


def is_digit(c: str) -> bool:
    return unicodedata.category(c) == "Nd"


def is_hex_digit(c: str) -> bool:
    return c in _HEX_DIGITS


def _is_emoji(c: str) -> bool:
    cp = ord(c)
    return 0x1F000 <= cp <= 0x1FBFF or 0xE0062 <= cp <= 0xE007F


# ── Word breaks ──────────────────────────────────────────────────────────────


def is_word_break(
    text: str,
    index: int,
    config: SplitterConfiguration,
    *,
    including_mnemonic: bool,
) -> bool:
    """
    Does: Decide whether text[index] separates words.
          Apostrophes never break ("don't" stays whole); '.'/'@' break unless
          filenames/e-mail addresses are ignored; '_' breaks only when treated
          as a separator; the mnemonic breaks unless mnemonics are ignored
          (or the caller asks to include it).
    Returns: True when the character is a break.
    """
    c = text[index]

    if c == config.mnemonic:
        return not config.ignore_mnemonics or including_mnemonic

    # Keycap sequence: the digit in front of the mark is not part of a word
    if is_digit(c) and index + 1 < len(text) and text[index + 1] in _KEYCAP_MARKS:
        return True

    if _is_emoji(c) or c in _EMOJI_BREAKS:
        return True

    if c in APOSTROPHES:
        return False

    if c == "." or c == "@":
        return not config.ignore_filenames_and_email_addresses

    if c == "_":
        return config.treat_underscore_as_separator

    return (
        "\u2070" <= c <= "\u2bff"
        or c.isspace()
        or unicodedata.category(c) in _BREAK_CATEGORIES
    )
