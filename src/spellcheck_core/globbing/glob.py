# src/spellcheck_core/globbing/glob.py

"""
glob.py.

Does: Compile a glob pattern once and answer is_match(path) many times, with
      optional case-insensitivity, filename-only matching and .editorconfig
      style suffix matching ("Folder/File.ext" matches ".../Folder/File.ext").
Returns: Glob, GlobOptions.
Used by: Callers excluding files/folders from spell checking and the demo CLI.
"""

from __future__ import annotations

import logging
import threading
from enum import IntFlag

from spellcheck_core.utils import debug

from .evaluator import evaluate
from .nodes import DirectorySegment, DirectoryWildcard, Segment
from .parser import parse_pattern

__all__ = ["Glob", "GlobOptions"]

# ── Logging ──────────────────────────────────────────────────────────────────
log = logging.getLogger(__name__)


class GlobOptions(IntFlag):
    NONE = 0
    COMPILED = 1 << 1
    CASE_INSENSITIVE = 1 << 2
    MATCH_FILENAME_ONLY = 1 << 3
    EDITOR_CONFIG = 1 << 4
    EDITOR_CONFIG_MATCHING = MATCH_FILENAME_ONLY | EDITOR_CONFIG


DEFAULT_OPTIONS = GlobOptions.CASE_INSENSITIVE | GlobOptions.EDITOR_CONFIG_MATCHING


def _split_path(path: str) -> list[str]:
    return path.replace("\\", "/").split("/")


class Glob:
    """
    A compiled glob pattern.

    The tree is built lazily on first use (or immediately with
    ``GlobOptions.COMPILED``); once built it is never mutated, so one instance
    can be shared between threads.

    Example:
        >>> Glob("*.{js,ts}").is_match("src/index.ts")
        True
        >>> Glob("Folder/File.ext").is_match("Root/Sub/Folder/File.ext")
        True
    """

    def __init__(self, pattern: str, options: GlobOptions = DEFAULT_OPTIONS) -> None:
        self.pattern = pattern
        self.options = GlobOptions(options)
        self.case_sensitive = GlobOptions.CASE_INSENSITIVE not in self.options
        self.match_filename_only = GlobOptions.MATCH_FILENAME_ONLY in self.options
        self.editor_config = GlobOptions.EDITOR_CONFIG in self.options
        self._segments: tuple[Segment, ...] | None = None
        self._lock = threading.Lock()

        if GlobOptions.COMPILED in self.options:
            self._compile()

    @classmethod
    def compile(cls, pattern: str, options: GlobOptions = DEFAULT_OPTIONS) -> Glob:
        """
        Does: Build a Glob and parse its pattern right away.
        Returns: The compiled Glob; raises GlobPatternError on bad syntax.
        """
        return cls(pattern, GlobOptions(options) | GlobOptions.COMPILED)

    def __repr__(self) -> str:
        return f"Glob({self.pattern!r}, {self.options!r})"

    @property
    def segments(self) -> tuple[Segment, ...]:
        return self._compile()

    def _compile(self) -> tuple[Segment, ...]:
        segments = self._segments
        if segments is not None:
            return segments

        with self._lock:
            if self._segments is None:
                tree = parse_pattern(self.pattern)
                self._segments = tree.segments
                log.debug("Compiled glob %r (%s)", self.pattern, self.options)
                debug(f"compiled {self.pattern!r} → {self._segments}", topic="glob")
            return self._segments

    # ── Matching ─────────────────────────────────────────────────────────────

    def is_match(self, path: str) -> bool:
        """
        Does: Match `path` ('/' or '\\' separated). In .editorconfig mode a
              multi-segment pattern also matches anything beneath a matching
              directory ("**/bin/*" matches "src/bin/debug/app.dll").
        Returns: True when the path matches.
        """
        if path is None:
            raise TypeError("path must be a string, not None")

        segments = self._compile()
        parts = _split_path(path)

        if self._match_parts(segments, parts):
            return True

        if self.editor_config and len(segments) > 1:
            for count in range(len(parts) - 1, 0, -1):
                if self._match_parts(segments, parts[:count]):
                    debug(f"{self.pattern!r} matched directory of {path!r}", topic="glob")
                    return True

        return False

    def _match_parts(self, segments: tuple[Segment, ...], parts: list[str]) -> bool:
        cs = self.case_sensitive

        if self.match_filename_only and len(segments) == 1:
            if evaluate(segments, parts[-1:], 0, cs):
                return True

        # "Folder/File.ext" behaves like "**/Folder/File.ext"
        if self.editor_config and len(segments) > 1 and isinstance(segments[0], DirectorySegment):
            fixed = sum(1 for s in segments if not isinstance(s, DirectoryWildcard))
            idx = len(parts) - fixed
            if fixed == len(segments):
                return idx > -1 and evaluate(segments, parts, idx, cs)

            # "**" may match nothing, so only the fixed segments need room
            while idx >= 0:
                if evaluate(segments, parts, idx, cs):
                    return True
                idx -= 1
            return False

        return evaluate(segments, parts, 0, cs)
