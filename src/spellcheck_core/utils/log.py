"""
log.py.

Does: Trace glob compilation/matching and settings loading on stderr without
      touching the logging configuration of the host application. Topics are
      picked with SPELLCHECK_DEBUG_TOPICS, e.g. "glob,config" or "all"; with
      the variable unset nothing is printed.
Returns: debug(), enabled(), reload_topics() and the TOPICS this package emits.
"""

import os
import sys
from datetime import datetime
from typing import TextIO

__all__ = ["TOPICS", "debug", "enabled", "reload_topics"]

ENV_VAR = "SPELLCHECK_DEBUG_TOPICS"

# Topics emitted by this package: compiled glob trees and directory matches,
# word-list files merged into a splitter configuration.
TOPICS = frozenset({"glob", "config"})


def _topics_from_env() -> frozenset[str]:
    names = os.getenv(ENV_VAR, "").split(",")
    return frozenset(t.strip().lower() for t in names if t.strip())


_selected = _topics_from_env()


def reload_topics() -> None:
    """Does: Re-read SPELLCHECK_DEBUG_TOPICS (tests change it at runtime)."""
    global _selected
    _selected = _topics_from_env()


def enabled(topic: str) -> bool:
    """Does: Tell whether a trace line for `topic` would be printed."""
    return "all" in _selected or topic.lower().strip() in _selected


def debug(
    msg: str,
    topic: str,
    *,
    level: str = "DEBUG",
    stream: TextIO | None = None,
) -> None:
    """
    Does: Print `[time] [topic][LEVEL] msg` when `topic` is selected.
    Used by: globbing.glob (topic "glob"), configuration (topic "config").
    """
    if not enabled(topic):
        return
    stamp = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
    print(f"[{stamp}] [{topic.lower().strip()}][{level.upper()}] {msg}", file=stream or sys.stderr)
