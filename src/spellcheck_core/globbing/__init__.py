"""
globbing.
========

Compile-once, match-many file path globs with .editorconfig semantics.

Exports:
- Glob, GlobOptions: compiled pattern and its matching flags.
- GlobPatternError: raised for malformed patterns (carries pattern and index).
- parse_pattern: the raw parser, for callers inspecting the tree.
"""

from .glob import Glob, GlobOptions
from .parser import GlobPatternError, parse_pattern

__all__ = ["Glob", "GlobOptions", "GlobPatternError", "parse_pattern"]
