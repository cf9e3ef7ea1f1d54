# tests/test_main_cli.py
"""
Tests for the command-line entry point.
"""
import json
import runpy
import sys

import pytest

import localizedstrings.main as cli


def run_main_with_args(args):
    argv_backup = sys.argv
    sys.argv = ["localizedstrings"] + args
    try:
        cli.main()
    finally:
        sys.argv = argv_backup


@pytest.fixture
def strings_file(tmp_path, egg_props):
    path = tmp_path / "strings.json"
    path.write_text(json.dumps(egg_props, ensure_ascii=False), encoding="utf-8")
    return str(path)


def test_missing_file_is_usage_error(tmp_path):
    with pytest.raises(SystemExit) as exc:
        run_main_with_args([str(tmp_path / "nope.json"), "--lang", "en"])
    assert exc.value.code == 2


def test_invalid_json_is_usage_error(tmp_path):
    path = tmp_path / "bad.json"
    path.write_text("{not json", encoding="utf-8")
    with pytest.raises(SystemExit):
        run_main_with_args([str(path), "--lang", "en"])


def test_empty_object_is_usage_error(tmp_path):
    path = tmp_path / "empty.json"
    path.write_text("{}", encoding="utf-8")
    with pytest.raises(SystemExit):
        run_main_with_args([str(path), "--lang", "en"])


def test_key_and_format_are_exclusive(strings_file):
    with pytest.raises(SystemExit):
        run_main_with_args([strings_file, "--key", "how", "--format", "question", "a", "b"])


def test_list_languages(strings_file, capsys):
    run_main_with_args([strings_file, "--lang", "it", "--list-languages"])
    assert capsys.readouterr().out.splitlines() == ["en", "it", "en-US"]


def test_key_lookup_with_fallback(strings_file, capsys):
    run_main_with_args([strings_file, "--lang", "it_IT", "--key", "greet.evening"])
    assert capsys.readouterr().out.strip() == "Good evening"


def test_unknown_key_exits_1(strings_file):
    with pytest.raises(SystemExit) as exc:
        run_main_with_args([strings_file, "--lang", "it", "--key", "nope"])
    assert exc.value.code == 1


def test_format(strings_file, capsys):
    run_main_with_args([strings_file, "--lang", "it", "--format", "question", "bread", "butter"])
    assert capsys.readouterr().out.strip() == "I'd like some bread and butter"


def test_default_dump(strings_file, capsys):
    run_main_with_args([strings_file, "--lang", "en-US-POSIX"])
    out = capsys.readouterr().out
    header, body = out.split("\n", 1)
    assert header == "Language: en-US (interface: en-US-POSIX)"
    assert json.loads(body)["choice"] == "How to pick the egg"


def test_directory_is_usage_error(tmp_path):
    with pytest.raises(SystemExit) as exc:
        run_main_with_args([str(tmp_path), "--lang", "en"])
    assert exc.value.code == 2


def test_invalid_utf8_is_usage_error(tmp_path):
    path = tmp_path / "latin1.json"
    path.write_bytes(b'{"en": {"a": "caf\xe9"}}')
    with pytest.raises(SystemExit) as exc:
        run_main_with_args([str(path), "--lang", "en"])
    assert exc.value.code == 2


def test_unsupported_leaf_is_usage_error(tmp_path):
    path = tmp_path / "strings.json"
    path.write_text('{"en": {"a": false}}', encoding="utf-8")
    with pytest.raises(SystemExit) as exc:
        run_main_with_args([str(path), "--lang", "en"])
    assert exc.value.code == 2


def test_empty_key_is_a_lookup(strings_file, capsys):
    with pytest.raises(SystemExit) as exc:
        run_main_with_args([strings_file, "--lang", "it", "--key", ""])
    assert exc.value.code == 1
    assert "Language:" not in capsys.readouterr().out


def test_runs_as_module(strings_file, capsys):
    argv_backup = sys.argv
    sys.argv = ["localizedstrings", strings_file, "--lang", "it", "--key", "how"]
    try:
        runpy.run_module("localizedstrings", run_name="__main__")
    finally:
        sys.argv = argv_backup
    assert capsys.readouterr().out.strip() == "Come vuoi il tuo uovo oggi?"
