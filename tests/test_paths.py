from __future__ import annotations

import logging
from pathlib import Path

import pytest

from prefs_json.persistence.paths import (
    coerce_json_file_name,
    resolve_prefs_path,
    validate_directory_or_file_name,
    validate_json_file_name,
)


@pytest.mark.parametrize("name", ["a/b", "Saves/Prefs", "Saves\\Prefs", "prefs dir", "Prefs.json"])
def test_valid_directory_names(name):
    assert validate_directory_or_file_name(name) is True


@pytest.mark.parametrize("name", ["", "   ", "a<b", "a>b", "a:b", 'a"b', "a|b", "a?b", "a*b"])
def test_invalid_directory_names(name):
    assert validate_directory_or_file_name(name) is False


@pytest.mark.parametrize("name", ["sub/prefs.json", "sub\\prefs.json"])
def test_file_names_reject_separators(name):
    assert validate_directory_or_file_name(name, is_file_name=True) is False
    # the same text is a fine directory path
    assert validate_directory_or_file_name(name) is True


def test_json_suffix_rules():
    assert validate_json_file_name("prefs.json") is True
    assert validate_json_file_name("a.json") is True
    assert validate_json_file_name(".json") is False
    assert validate_json_file_name("prefs") is False
    assert validate_json_file_name("prefs.JSON") is False
    assert validate_json_file_name("prefs.json.bak") is False


def test_coerce_json_file_name():
    assert coerce_json_file_name("prefs") == "prefs.json"
    assert coerce_json_file_name("prefs.json") == "prefs.json"


def test_resolve_creates_directory_and_joins(tmp_path: Path):
    directory = tmp_path / "a" / "b"
    path = resolve_prefs_path(directory, "prefs.json")
    assert path == directory / "prefs.json"
    assert directory.is_dir()


def test_resolve_relative_directory_under_base_dir(tmp_path: Path):
    path = resolve_prefs_path("a/b", "prefs.json", base_dir=tmp_path)
    assert path == tmp_path / "a" / "b" / "prefs.json"
    assert (tmp_path / "a" / "b").is_dir()


@pytest.mark.parametrize(
    "directory, file_name",
    [
        ("a<b", "prefs.json"),
        ("dir", "prefs"),
        ("dir", "sub/prefs.json"),
        ("  ", "prefs.json"),
        ("dir", " "),
    ],
)
def test_resolve_rejects_invalid_input(tmp_path: Path, caplog, directory, file_name):
    with caplog.at_level(logging.ERROR):
        assert resolve_prefs_path(directory, file_name, base_dir=tmp_path) is None
    assert caplog.records
    # nothing is created for rejected names
    assert list(tmp_path.iterdir()) == []


def test_resolve_reports_directory_creation_failure(tmp_path: Path, caplog):
    blocker = tmp_path / "taken"
    blocker.write_text("not a directory", encoding="utf-8")

    with caplog.at_level(logging.ERROR):
        assert resolve_prefs_path(blocker / "prefs", "prefs.json") is None
    assert "Could not create prefs directory" in caplog.text
