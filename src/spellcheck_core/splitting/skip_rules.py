# src/spellcheck_core/splitting/skip_rules.py

"""
skip_rules.py.

Does: Recognize non-word runs the scanner must step over: escape sequences
      (\\n, \\x41, \\u00e9, \\U0001F600, escaped ignored words like \\brief),
      XML entities (&amp; &#169; &#xA9;), .NET format/interpolation specifiers
      ({0:MM/dd}, {Name}) and C printf specifiers (%-08.3lf).
Returns: Each skip_* function returns the index of the last character consumed
         (the trigger index itself when nothing more matched).
Used by: WordSplitter.iter_word_spans().
"""

from __future__ import annotations

from spellcheck_core.configuration import SplitterConfiguration

from .break_chars import is_digit, is_hex_digit, is_letter, is_word_break

__all__ = [
    "looks_verbatim",
    "looks_interpolated",
    "skip_escape_sequence",
    "skip_xml_entity",
    "skip_format_item",
    "skip_printf_specifier",
]

# Single character escapes: \' \" \\ \? \0 \a \e \b \f \n \r \t \v
_SIMPLE_ESCAPES = frozenset("'\"\\?0aebfnrtv")
# Escape letter → (longest distance from the backslash, required distance or None for 1+ digits)
_HEX_ESCAPES = {"x": (6, None), "u": (6, 5), "U": (10, 9)}

_PRINTF_FLAGS = frozenset("-+#0")
_PRINTF_LENGTHS = frozenset("jztL")
_PRINTF_CONVERSIONS = frozenset("diuoxXfFeEgGaAcspn")


def looks_verbatim(text: str) -> bool:
    """Does: True for @"...", R"...", $@"..." and @$"..." literals."""
    return (len(text) > 2 and text[0] in "@R" and text[1] == '"') or (
        len(text) > 3 and text[:3] in ('$@"', '@$"')
    )


def looks_interpolated(text: str) -> bool:
    """Does: True for $"...", $@"..." and @$"..." literals."""
    return (len(text) > 2 and text[:2] == '$"') or (len(text) > 3 and text[:3] in ('$@"', '@$"'))


def _hex_run_end(text: str, i: int, limit: int) -> int:
    """Returns: index of the last hex digit after text[i:i+2], stopping before text[i + limit]."""
    end = i + 2
    while end < len(text) and end - i < limit and is_hex_digit(text[end]):
        end += 1
    return end - 1


def _closing_brace(text: str, end: int) -> int:
    """Returns: index of the first '}' after `end` that is not an escaped '}}', or len(text)."""
    end += 1
    while end < len(text):
        if text[end] == "}":
            if end + 1 == len(text) or text[end + 1] != "}":
                break
            end += 1
        end += 1
    return end


def skip_escape_sequence(
    text: str,
    i: int,
    config: SplitterConfiguration,
    *,
    escapes_allowed: bool,
) -> int:
    """
    Does: Step over the escape that starts with the backslash at text[i].
          Escaped ignored words are skipped whole in any context; real escape
          sequences only when the range is C-style code that can contain them
          and is not a verbatim literal. Hex escapes take 1-4 digits (\\x),
          exactly 4 (\\u) or exactly 8 (\\U).
    Returns: Index of the last consumed character.
    """
    end = i + 1
    if end >= len(text):
        return i

    esc = text[end]

    if is_letter(esc):
        word_end = end + 1
        while word_end < len(text) and not is_word_break(
            text, word_end, config, including_mnemonic=True
        ):
            word_end += 1
        if config.should_ignore_word(text[i:word_end]):
            return word_end - 1

    if not escapes_allowed or looks_verbatim(text):
        return i

    if esc in _SIMPLE_ESCAPES:
        return i + 1

    if esc in _HEX_ESCAPES:
        limit, required = _HEX_ESCAPES[esc]
        last = _hex_run_end(text, i, limit)
        if (required is None and last - i > 1) or last - i == required:
            return last

    return i


def skip_xml_entity(text: str, i: int) -> int:
    """
    Does: Step over a numeric character reference (&#nnnn; or &#xhhhh;, at most
          four digits) starting at the '&' at text[i]. Named entities are
          handled by the scanner once the name has been read.
    Returns: Index of the closing ';' or i when no numeric reference is present.
    """
    end = i + 1
    if end >= len(text) or text[end] != "#":
        return i

    end += 1
    while end < len(text) and end - i < 6 and is_digit(text[end]):
        end += 1

    if end < len(text) and text[end] == "x":
        end += 1
        while end < len(text) and end - i < 7 and is_hex_digit(text[end]):
            end += 1

    if end < len(text) and text[end] == ";":
        return end
    return i


def skip_format_item(text: str, i: int) -> int:
    """
    Does: Step over a .NET composite format item ({0}, {1:N2}, {0:MM/dd/yyyy})
          or, inside an interpolated literal, an interpolation hole ({Name},
          {Value:F2}), honoring doubled '}}' as an escaped brace.
    Returns: Index of the closing '}' or i when the item is not terminated.
    """
    end = i + 1

    if i > 0 and looks_interpolated(text):
        end = _closing_brace(text, end)
    else:
        while end < len(text) and is_digit(text[end]):
            end += 1

    if end < len(text) and text[end] == ":":
        end = _closing_brace(text, end)

    if end < len(text) and text[end] == "}":
        return end
    return i


def skip_printf_specifier(text: str, i: int) -> int:
    """
    Does: Step over a printf conversion at the '%' at text[i]:
          flag → width/precision → length (h, hh, l, ll, j, z, t, L) → conversion.
          The space flag is not recognized ("100% sure" must keep "sure").
    Returns: Index of the conversion character, or i without a complete match.
    """
    n = len(text)
    end = i + 1
    if end >= n:
        return i

    if text[end] in _PRINTF_FLAGS:
        end += 1

    while end < n and (is_digit(text[end]) or text[end] in ".*"):
        end += 1

    if end >= n:
        return i

    if text[end] in "hl":
        end += 1
        if end < n and text[end] == text[end - 1]:
            end += 1
    elif text[end] in _PRINTF_LENGTHS:
        end += 1

    if end < n and text[end] in _PRINTF_CONVERSIONS:
        return end
    return i
