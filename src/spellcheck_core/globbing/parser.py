# src/spellcheck_core/globbing/parser.py

"""
parser.py.

Does: Recursive-descent parser turning a glob pattern string into a Tree.

    Tree        := (Root | Segment) ('/' Segment)*
    Root        := '/' | Letter ':'
    Segment     := '**' | SubSegment+
    SubSegment  := Identifier | '*' | '?' | '[' ['!'] chars ']'
                 | '{' Identifier (',' Identifier)* '}'

Returns: parse_pattern(pattern) -> Tree; raises GlobPatternError on bad syntax.
Used by: globbing.glob.Glob.
"""

from __future__ import annotations

import logging

from .nodes import (
    CharacterSet,
    CharacterWildcard,
    DirectorySegment,
    DirectoryWildcard,
    Identifier,
    LiteralSet,
    Root,
    Segment,
    StringWildcard,
    SubSegment,
    Tree,
)

__all__ = ["GlobPatternError", "parse_pattern"]

log = logging.getLogger(__name__)

_EOF = ""
_IDENTIFIER_STOPS = frozenset("[]{}?*/")
_ESCAPABLE = frozenset("*?{}[]() ")
_EXTENDED_GLOB_OPERATORS = frozenset("?*+@!")


class GlobPatternError(ValueError):
    """Raise when a glob pattern cannot be parsed.

    Attributes:
        pattern: The pattern being compiled.
        index: Index of the offending character in ``pattern``.
    """

    def __init__(self, message: str, pattern: str = "", index: int = -1) -> None:
        super().__init__(message)
        self.pattern = pattern
        self.index = index


class _Parser:
    def __init__(self, pattern: str) -> None:
        self.source = pattern
        self.index = 0
        self.spelling: list[str] = []

    # ── Cursor ───────────────────────────────────────────────────────────────

    @property
    def current(self) -> str:
        return self.source[self.index] if self.index < len(self.source) else _EOF

    def peek(self) -> str:
        nxt = self.index + 1
        return self.source[nxt] if nxt < len(self.source) else _EOF

    def error(self, message: str, index: int | None = None) -> GlobPatternError:
        return GlobPatternError(message, self.source, self.index if index is None else index)

    def skip(self, expected: str | None = None) -> None:
        if expected is not None and self.current != expected:
            if expected == _EOF:
                raise self.error(f"Expected end of input at index {self.index}")
            raise self.error(f"Expected {expected} at index {self.index}")
        self.index += 1

    def accept(self, expected: str | None = None) -> None:
        c = self.current
        self.skip(expected)
        self.spelling.append(c)

    def take_spelling(self) -> str:
        if not self.spelling:
            # Nothing was consumed
            raise self.error(f"Unexpected character {self.current!r} at index {self.index}")
        text = "".join(self.spelling)
        self.spelling.clear()
        return text

    # ── Grammar ──────────────────────────────────────────────────────────────

    def parse_tree(self) -> Tree:
        items: list[Segment] = []
        c = self.current

        if c == "/":
            # Leave the '/' for the segment loop
            items.append(Root())
        elif c != _EOF:
            if c.isalpha() and self.peek() == ":":
                items.append(self.parse_drive_root())
            else:
                items.append(self.parse_segment())

        while self.current == "/":
            self.skip()
            items.append(self.parse_segment())

        if self.current != _EOF:
            raise self.error(f"Expected end of input at index {self.index}")

        return Tree(tuple(items))

    def parse_drive_root(self) -> Root:
        self.accept()
        self.accept(":")
        return Root(self.take_spelling())

    def parse_segment(self) -> Segment:
        items: list[SubSegment] = []
        last_was_star = prev_was_star = False

        while self.current not in ("/", _EOF):
            sub = self.parse_sub_segment()
            is_star = isinstance(sub, StringWildcard)
            # Consecutive stars collapse
            if not (last_was_star and is_star):
                items.append(sub)
            prev_was_star, last_was_star = last_was_star, is_star

        if len(items) == 1 and last_was_star and prev_was_star:
            return DirectoryWildcard()

        return DirectorySegment(tuple(items))

    def parse_sub_segment(self) -> SubSegment:
        c = self.current
        if self.peek() == "(" and c in _EXTENDED_GLOB_OPERATORS:
            raise self.error(
                f"Extended glob pattern {c}(...) at index {self.index} is not supported"
            )

        if c == "[":
            return self.parse_character_set()
        if c == "{":
            return self.parse_literal_set()
        if c == "?":
            self.skip()
            return CharacterWildcard()
        if c == "*":
            self.skip()
            return StringWildcard()
        return self.parse_identifier(in_literal_set=False)

    def parse_character_set(self) -> CharacterSet:
        start = self.index
        self.skip()  # [

        inverted = False
        if self.current == "!":
            self.skip()
            inverted = True

        # A leading ']' is a member, not the terminator
        if self.current == "]":
            self.accept()

        while self.current not in ("]", _EOF):
            self.accept()

        if self.current == _EOF:
            raise self.error(f"Unterminated character set starting at index {start}", start)

        self.skip()  # ]
        return CharacterSet(self.take_spelling(), inverted)

    def parse_literal_set(self) -> LiteralSet:
        start = self.index
        self.skip()  # {

        if self.current == "}":
            raise self.error(f"Expected literal at index {self.index}. Literal sets cannot be empty.")

        items = [self.parse_identifier(in_literal_set=True)]
        while self.current == ",":
            self.skip()
            items.append(self.parse_identifier(in_literal_set=True))

        if self.current == _EOF:
            raise self.error(f"Unterminated literal set starting at index {start}", start)

        self.skip("}")
        return LiteralSet(tuple(items))

    def parse_identifier(self, *, in_literal_set: bool) -> Identifier:
        while True:
            c = self.current
            if c == _EOF or c in _IDENTIFIER_STOPS or (c == "," and in_literal_set):
                break
            if c == "\\":
                self.parse_escape_sequence(in_literal_set)
            else:
                self.accept()

        return Identifier(self.take_spelling())

    def parse_escape_sequence(self, in_literal_set: bool) -> None:
        self.skip()  # the backslash is not part of the text
        c = self.current
        if c != _EOF and (c in _ESCAPABLE or (c == "," and in_literal_set)):
            self.accept()
            return

        raise self.error(
            f"Expected escape sequence at index {self.index - 1} but found \\{c}", self.index - 1
        )


def parse_pattern(pattern: str | None) -> Tree:
    """
    Does: Parse `pattern` (None is treated as empty).
    Returns: Tree of segments; raises GlobPatternError with the offending index.
    """
    tree = _Parser(pattern or "").parse_tree()
    log.debug("Parsed glob %r into %d segment(s)", pattern, len(tree.segments))
    return tree
