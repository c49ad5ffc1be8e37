# src/spellcheck_core/globbing/evaluator.py

"""
evaluator.py.

Does: Walk compiled glob segments against the segments of a path in lock-step.
      A Root must equal the path segment at the same position, a
      DirectorySegment must match one path segment, and ``**`` consumes zero or
      more whole path segments.
Returns: evaluate(segments, path_segments, start, case_sensitive) -> bool.
Used by: globbing.glob.Glob.is_match().
"""

from __future__ import annotations

from collections.abc import Sequence
from functools import lru_cache

from .matcher import matches_segment
from .nodes import DirectorySegment, DirectoryWildcard, Root, Segment

__all__ = ["evaluate"]


def evaluate(
    segments: Sequence[Segment],
    path_segments: Sequence[str],
    start: int = 0,
    case_sensitive: bool = False,
) -> bool:
    """
    Does: Match all of `segments` against ``path_segments[start:]``; both must
          be consumed completely.
    Returns: True on a full match.
    """
    seg_count = len(segments)
    path_count = len(path_segments)

    @lru_cache(maxsize=None)
    def step(seg_idx: int, path_idx: int) -> bool:
        while True:
            if seg_idx == seg_count:
                return path_idx == path_count
            if path_idx >= path_count:
                return False

            segment = segments[seg_idx]

            if isinstance(segment, DirectoryWildcard):
                is_last_input = path_idx == path_count - 1
                is_last_segment = seg_idx == seg_count - 1
                if is_last_segment and is_last_input:
                    return True
                # Match zero segments, else swallow one and retry
                if not is_last_segment and step(seg_idx + 1, path_idx):
                    return True
                return not is_last_input and step(seg_idx, path_idx + 1)

            if isinstance(segment, Root):
                text = path_segments[path_idx]
                same = (
                    text == segment.text
                    if case_sensitive
                    else text.casefold() == segment.text.casefold()
                )
                if not same:
                    return False
            elif isinstance(segment, DirectorySegment):
                if not matches_segment(segment, path_segments[path_idx], case_sensitive):
                    return False
            else:
                return False

            seg_idx += 1
            path_idx += 1

    return step(0, start)
