# tests/test_splitting_identifier.py
from __future__ import annotations

import pytest

from spellcheck_core.configuration import SplitterConfiguration
from spellcheck_core.splitting import IdentifierSplitter, WordSpan, split_identifier


def parts(identifier: str, config: SplitterConfiguration | None = None) -> list[str]:
    return [s.text_of(identifier) for s in split_identifier(identifier, config)]


@pytest.mark.parametrize(
    "identifier, expected",
    [
        ("XmlHttpRequest", ["Xml", "Http", "Request"]),
        ("get_user_name", ["get", "user", "name"]),
        ("HTTPServer", ["HTTP", "Server"]),
        ("getIDs", ["get", "IDs"]),
        ("userId2Name", ["user", "Id", "Name"]),
        ("MAX_VALUE", ["MAX", "VALUE"]),
        ("_privateField", ["private", "Field"]),
        ("lowercase", ["lowercase"]),
        ("x", []),
        ("a1b2", []),
    ],
)
def test_split_identifier(identifier, expected):
    assert parts(identifier) == expected


@pytest.mark.parametrize("identifier", [None, "", "   "])
def test_blank_identifier_yields_nothing(identifier):
    assert list(split_identifier(identifier)) == []


def test_all_uppercase_identifiers_can_be_ignored():
    config = SplitterConfiguration(ignore_identifier_if_all_uppercase=True)
    assert parts("MAX_VALUE", config) == []
    assert parts("MaxValue", config) == ["Max", "Value"]


def test_term_exception_stays_whole():
    config = SplitterConfiguration(compound_terms={"CheckBox": "check box"})
    assert parts("myCheckBox", config) == ["my", "Check", "Box"]
    assert parts("CheckBox_1", config) == ["CheckBox"]


def test_spans_index_into_identifier():
    spans = list(IdentifierSplitter().iter_word_spans("fooBar"))
    assert spans == [WordSpan(0, 3), WordSpan(3, 6)]


def test_identifier_splitting_ignores_escapes_and_entities():
    # Non-letters are hard breaks, nothing is skipped specially
    assert parts("amp&nbsp;x\\nvalue") == ["amp", "nbsp", "nvalue"]
