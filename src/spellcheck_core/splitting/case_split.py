# src/spellcheck_core/splitting/case_split.py

"""
case_split.py.

Does: Split a mixed/camel-case word into sub-words on uppercase-run boundaries
      (MyHTTPServer → My | HTTP | Server, GetIDs → Get | IDs).
Returns: Iterator of (start, end) index pairs over the original text.
Used by: WordSplitter and IdentifierSplitter.
"""

from __future__ import annotations

from collections.abc import Iterator

from .break_chars import is_letter, is_lower, is_upper

__all__ = ["is_mixed_case", "has_lowercase", "split_case_runs"]


def is_mixed_case(word: str) -> bool:
    """Does: True if the word starts with a letter and has an uppercase letter after the first character."""
    return bool(word) and is_letter(word[0]) and any(is_upper(c) for c in word[1:])


def has_lowercase(word: str) -> bool:
    return any(is_lower(c) for c in word)


def split_case_runs(text: str, start: int, end: int) -> Iterator[tuple[int, int]]:
    """
    Does: Walk text[start:end] and yield each sub-word. A run of capitals is one
          unit (an acronym); when the run is followed by a lowercase letter its
          last capital starts the next sub-word. A run followed by a final 's'
          keeps it ("IDs"). Pieces shorter than two characters are dropped. A
          word without lowercase letters, or whose letters after the first are
          all capitals ("aBC"), is yielded whole.
    Returns: (start, end) pairs in text coordinates.
    """
    if not has_lowercase(text[start:end]) or all(is_upper(c) for c in text[start + 1 : end]):
        yield start, end
        return

    pos = start
    while pos < end:
        unit_start = pos

        if is_upper(text[pos]):
            run_end = pos
            while run_end < end and is_upper(text[run_end]):
                run_end += 1

            if run_end - pos > 1:
                nxt = run_end + 1
                if (
                    run_end < end
                    and text[run_end] == "s"
                    and (nxt == end or not is_lower(text[nxt]))
                ):
                    unit_end = nxt
                elif run_end < end and is_lower(text[run_end]):
                    unit_end = run_end - 1
                else:
                    unit_end = run_end

                if unit_end - unit_start > 1:
                    yield unit_start, unit_end
                pos = unit_end
                continue

            pos = run_end

        while pos < end and not is_upper(text[pos]):
            pos += 1

        if pos - unit_start > 1:
            yield unit_start, pos
