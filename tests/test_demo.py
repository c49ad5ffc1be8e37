# tests/test_demo.py
from __future__ import annotations

import json

import pytest

import spellcheck_core
from spellcheck_core.demo import main


def run(capsys, *argv) -> object:
    main(list(argv))
    return json.loads(capsys.readouterr().out)


def test_package_exports_entry_points():
    for name in spellcheck_core.__all__:
        assert hasattr(spellcheck_core, name), name


def test_split_command_reports_doubled_words(capsys):
    out = run(capsys, "split", "the", "the", "cat")
    assert [item["word"] for item in out] == ["the", "the", "cat"]
    assert out[1]["doubled"] is True
    assert out[1]["delete"] == [3, 7]


def test_split_command_with_mixed_case(capsys):
    out = run(capsys, "--split-mixed-case", "split", "MyHTTPServer")
    assert [item["word"] for item in out] == ["My", "HTTP", "Server"]


def test_split_command_code_mode_skips_escapes(capsys):
    out = run(capsys, "split", "--code", "Line one\\nLine two")
    assert [item["word"] for item in out] == ["Line", "one", "Line", "two"]


def test_identifier_command(capsys):
    out = run(capsys, "identifier", "XmlHttpRequest")
    assert out == [
        {"word": "Xml", "start": 0, "end": 3},
        {"word": "Http", "start": 3, "end": 7},
        {"word": "Request", "start": 7, "end": 14},
    ]


def test_glob_command(capsys):
    out = run(capsys, "glob", "*.cs", "Program.cs", "Program.csx")
    assert out == {"Program.cs": True, "Program.csx": False}


def test_glob_command_plain_mode(capsys):
    out = run(capsys, "glob", "--no-editorconfig", "Folder/File.ext", "Root/Folder/File.ext")
    assert out == {"Root/Folder/File.ext": False}


def test_glob_command_bad_pattern_exits(capsys):
    with pytest.raises(SystemExit) as info:
        main(["glob", "[abc", "x"])
    assert info.value.code == 1
    assert "Invalid glob" in capsys.readouterr().err


def test_check_command(capsys):
    out = run(capsys, "check", "Teh", "cat", "--words", "cat")
    assert out == [{"kind": "misspelled_word", "start": 0, "end": 3, "word": "Teh"}]


def test_missing_config_file_exits(capsys, tmp_path, monkeypatch):
    monkeypatch.setenv("SPELLCHECK_DATA_DIR", str(tmp_path))
    with pytest.raises(SystemExit) as info:
        main(["--config", "nope", "split", "word"])
    assert info.value.code == 1
    assert "Error" in capsys.readouterr().err
