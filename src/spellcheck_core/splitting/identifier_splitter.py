# src/spellcheck_core/splitting/identifier_splitter.py

"""
identifier_splitter.py.

Does: Split source identifiers (camelCase, PascalCase, snake_case, with digits)
      into word spans. Only letter runs are considered; every non-letter is a
      hard break and there is no escape/entity/format handling.
Returns: IdentifierSplitter and split_identifier().
Used by: code analyzers and the demo CLI's ``identifier`` command.
"""

from __future__ import annotations

from collections.abc import Iterator

from spellcheck_core.configuration import SplitterConfiguration

from .break_chars import is_letter, is_upper
from .case_split import split_case_runs
from .types import WordSpan

__all__ = ["IdentifierSplitter", "split_identifier"]


class IdentifierSplitter:
    """Split identifiers into words using a bound configuration."""

    def __init__(self, configuration: SplitterConfiguration | None = None) -> None:
        self.configuration = configuration or SplitterConfiguration()

    def iter_word_spans(self, identifier: str | None) -> Iterator[WordSpan]:
        if not identifier or identifier.isspace():
            return

        cfg = self.configuration
        n = len(identifier)
        i = 0

        while i < n:
            if not is_letter(identifier[i]):
                i += 1
                continue

            end = i + 1
            while end < n and is_letter(identifier[end]):
                end += 1

            if end - i > 1:
                word = identifier[i:end]
                all_upper = all(is_upper(c) for c in word)

                if all_upper or not any(is_upper(c) for c in word[1:]):
                    if not (all_upper and cfg.ignore_identifier_if_all_uppercase):
                        yield WordSpan(i, end)
                elif cfg.is_term_exception(word):
                    yield WordSpan(i, end)
                else:
                    for start, stop in split_case_runs(identifier, i, end):
                        yield WordSpan(start, stop)

            i = end


def split_identifier(
    identifier: str | None, config: SplitterConfiguration | None = None
) -> Iterator[WordSpan]:
    """
    Does: Lazily split one identifier into word spans.
          "XmlHttpRequest" → Xml, Http, Request; "get_user_name" → get, user, name.
    Returns: Iterator of WordSpan over `identifier`.
    """
    return IdentifierSplitter(config).iter_word_spans(identifier)
