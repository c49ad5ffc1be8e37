# src/spellcheck_core/globbing/matcher.py

"""
matcher.py.

Does: Match one path segment ("Program.cs") against a DirectorySegment
      (``*.{cs,vb}``) with backtracking over ``*`` and literal-set alternatives.
      Positions already tried are memoized so a pattern with many stars stays
      polynomial.
Returns: matches_segment(segment, path_segment, case_sensitive) -> bool.
Used by: globbing.evaluator.
"""

from __future__ import annotations

from functools import lru_cache

from .nodes import (
    CharacterSet,
    CharacterWildcard,
    DirectorySegment,
    Identifier,
    LiteralSet,
    StringWildcard,
    SubSegment,
)

__all__ = ["matches_segment"]


def _literal_at(text: str, pos: int, literal: str, case_sensitive: bool) -> bool:
    candidate = text[pos : pos + len(literal)]
    if len(candidate) != len(literal):
        return False
    if case_sensitive:
        return candidate == literal
    return candidate.casefold() == literal.casefold()


@lru_cache(maxsize=4096)
def matches_segment(segment: DirectorySegment, path_segment: str, case_sensitive: bool) -> bool:
    """
    Does: Tell whether `path_segment` matches every sub-segment of `segment`
          in order, consuming the whole text.
    Returns: True on a full match.
    """
    subs: tuple[SubSegment, ...] = segment.sub_segments
    n = len(path_segment)

    @lru_cache(maxsize=None)
    def match(idx: int, pos: int) -> bool:
        if idx == len(subs):
            return pos == n

        head = subs[idx]

        if isinstance(head, StringWildcard):
            # Zero or more characters: try every remaining split point
            return any(match(idx + 1, p) for p in range(pos, n + 1))

        if isinstance(head, CharacterWildcard):
            return pos < n and match(idx + 1, pos + 1)

        if isinstance(head, Identifier):
            return _literal_at(path_segment, pos, head.value, case_sensitive) and match(
                idx + 1, pos + len(head.value)
            )

        if isinstance(head, CharacterSet):
            return pos < n and head.matches(path_segment[pos], case_sensitive) and match(
                idx + 1, pos + 1
            )

        if isinstance(head, LiteralSet):
            return any(
                _literal_at(path_segment, pos, lit.value, case_sensitive)
                and match(idx + 1, pos + len(lit.value))
                for lit in head.literals
            )

        return False

    return match(0, 0)
