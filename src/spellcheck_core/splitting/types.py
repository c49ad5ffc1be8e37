# src/spellcheck_core/splitting/types.py
from __future__ import annotations

"""
types.py.

Does: Define the values produced by the splitters (WordSpan, DoubledWord) and the
span classification flags (SpanType) that tune escape/literal handling.
"""

from dataclasses import dataclass
from enum import IntFlag

__all__ = ["WordSpan", "DoubledWord", "SpanType"]

__docformat__ = "google"


@dataclass(frozen=True, order=True)
class WordSpan:
    """Half-open ``[start, end)`` range of one spell-check candidate.

    The span never keeps the text; slice it back with :meth:`text_of`.
    """

    start: int
    end: int

    @property
    def length(self) -> int:
        return self.end - self.start

    def text_of(self, text: str) -> str:
        return text[self.start : self.end]


@dataclass(frozen=True)
class DoubledWord:
    """A repeated word: its span, the span to delete (leading whitespace + word) and its text."""

    span: WordSpan
    delete_span: WordSpan
    word: str

    @property
    def start(self) -> int:
        return self.span.start

    @property
    def end(self) -> int:
        return self.span.end


class SpanType(IntFlag):
    """Kind of source range being split (main types first, then subtypes)."""

    NONE = 0x0000
    IDENTIFIER = 0x0001
    COMMENT = 0x0002
    STRING_LITERAL = 0x0004
    ATTRIBUTE_VALUE = 0x0008
    TYPE_PARAMETER = 0x0010
    NORMAL_STRING = 0x0020
    INTERPOLATED_STRING = 0x0040
    VERBATIM_STRING = 0x0080
    RAW_STRING = 0x0100
    DELIMITED_COMMENT = 0x0200
    SINGLE_LINE_COMMENT = 0x0400
    QUAD_SLASH_COMMENT = 0x0800
    XML_DOC_COMMENT = 0x1000

    @property
    def can_contain_escapes(self) -> bool:
        """Escape sequences are only meaningful outside identifiers, attributes and verbatim/raw strings."""
        if self == SpanType.NONE:
            return False
        return not self & (
            SpanType.IDENTIFIER
            | SpanType.ATTRIBUTE_VALUE
            | SpanType.TYPE_PARAMETER
            | SpanType.VERBATIM_STRING
            | SpanType.RAW_STRING
        )

    @property
    def is_string_literal(self) -> bool:
        return bool(self & SpanType.STRING_LITERAL)
