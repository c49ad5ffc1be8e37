# src/spellcheck_core/globbing/nodes.py
from __future__ import annotations

"""
nodes.py.

Does: Define the immutable glob tree produced by the parser. Path-level nodes
(Root, DirectorySegment, DirectoryWildcard) and the sub-segments that make up
a DirectorySegment (Identifier, StringWildcard, CharacterWildcard,
CharacterSet, LiteralSet).
"""

from dataclasses import dataclass, field
from typing import Union

__all__ = [
    "Root",
    "DirectorySegment",
    "DirectoryWildcard",
    "Identifier",
    "StringWildcard",
    "CharacterWildcard",
    "CharacterSet",
    "LiteralSet",
    "Segment",
    "SubSegment",
    "Tree",
]

__docformat__ = "google"


# ── Sub-segments ─────────────────────────────────────────────────────────────


@dataclass(frozen=True)
class Identifier:
    """Literal text (escapes already removed)."""

    value: str


@dataclass(frozen=True)
class StringWildcard:
    """``*``: zero or more characters inside one path segment."""


@dataclass(frozen=True)
class CharacterWildcard:
    """``?``: exactly one character."""


@dataclass(frozen=True)
class CharacterSet:
    """``[abc]``, ``[a-z]`` or ``[!...]``.

    Ranges are expanded once at construction; a leading ``-``, ``[`` or ``]``
    is literal and ``/`` is never a member.
    """

    characters: str
    inverted: bool = False
    expanded: str = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "expanded", _expand(self.characters))

    def matches(self, c: str, case_sensitive: bool) -> bool:
        if case_sensitive:
            found = c in self.expanded
        else:
            found = c.lower() in self.expanded.lower()
        return found != self.inverted


def _expand(chars: str) -> str:
    out: list[str] = []
    i = 0
    n = len(chars)

    if chars[:1] in ("-", "[", "]"):
        out.append(chars[0])
        i = 1

    while i < n:
        c = chars[i]
        if c == "-":
            if i == n - 1:
                out.append("-")
            else:
                out.extend(chr(o) for o in range(ord(chars[i - 1]) + 1, ord(chars[i + 1]) + 1))
                i += 1
        elif c != "/":
            out.append(c)
        i += 1

    return "".join(out)


@dataclass(frozen=True)
class LiteralSet:
    """``{a,b,c}``: alternation between literal identifiers."""

    literals: tuple[Identifier, ...]


SubSegment = Union[Identifier, StringWildcard, CharacterWildcard, CharacterSet, LiteralSet]


# ── Path segments ────────────────────────────────────────────────────────────


@dataclass(frozen=True)
class Root:
    """Absolute root: ``""`` for a leading ``/`` or a drive such as ``"C:"``."""

    text: str = ""


@dataclass(frozen=True)
class DirectorySegment:
    """One path segment made of sub-segments (``*.cs``, ``bin``, ``[a-c]at``)."""

    sub_segments: tuple[SubSegment, ...]


@dataclass(frozen=True)
class DirectoryWildcard:
    """``**``: zero or more whole path segments."""


Segment = Union[Root, DirectorySegment, DirectoryWildcard]


@dataclass(frozen=True)
class Tree:
    segments: tuple[Segment, ...]
