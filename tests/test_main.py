"""Tests for the command line entry point."""

import json
from pathlib import Path

import pytest

from vtable_config.main import main, parse_args


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch, tmp_path: Path):
    """Run each CLI test in an empty directory without VTABLE_* overrides."""
    monkeypatch.chdir(tmp_path)
    for key in (
        "VTABLE_INPUT",
        "VTABLE_OUTPUT",
        "VTABLE_LOG_DIR",
        "VTABLE_DUPLICATE_POLICY",
        "VTABLE_JSON_INDENT",
        "VTABLE_VTABLES_KEY",
        "VERBOSE",
    ):
        monkeypatch.delenv(key, raising=False)


@pytest.fixture
def document(tmp_path: Path, vtable_array) -> Path:
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"vtables": vtable_array}), encoding="utf-8")
    return path


def run_main(argv: list[str]) -> int:
    with pytest.raises(SystemExit) as excinfo:
        main(argv)
    return excinfo.value.code


@pytest.mark.unit
def test_parse_args_defaults():
    args = parse_args(["in.json"])
    assert args.input == Path("in.json")
    assert args.output is None
    assert args.indent is None
    assert not args.list
    assert not args.replace_duplicates


@pytest.mark.unit
def test_normalize_to_stdout(document: Path, capsys):
    assert run_main([str(document), "--indent", "2"]) == 0

    output = json.loads(capsys.readouterr().out)
    assert [vtable["address"] for vtable in output] == ["0x1000", "0x3000"]
    assert [item["address"] for item in output[1]["items"]] == ["0x3000", "0x3008"]


@pytest.mark.unit
def test_normalize_to_file(document: Path, tmp_path: Path):
    output_path = tmp_path / "out" / "vtables.json"
    assert run_main([str(document), "-o", str(output_path)]) == 0

    output = json.loads(output_path.read_text(encoding="utf-8"))
    assert output[0]["name"] == "A::vtable"
    assert "targetName" not in output[0]["items"][1]


@pytest.mark.unit
def test_replace_duplicates(tmp_path: Path, capsys):
    path = tmp_path / "dups.json"
    path.write_text(
        json.dumps([{"address": "0x10", "name": "A"}, {"address": "0x10", "name": "B"}]),
        encoding="utf-8",
    )

    assert run_main([str(path)]) == 0
    assert json.loads(capsys.readouterr().out) == [{"name": "A", "address": "0x10"}]

    assert run_main([str(path), "--replace-duplicates"]) == 0
    assert json.loads(capsys.readouterr().out) == [{"name": "B", "address": "0x10"}]


@pytest.mark.unit
def test_list(document: Path, capsys):
    assert run_main([str(document), "--list"]) == 0

    captured = capsys.readouterr()
    assert captured.out == ""
    assert "A::vtable" in captured.err
    assert "Total: 2 vtables, 4 items" in captured.err


@pytest.mark.unit
def test_missing_input(capsys):
    assert run_main([]) == 1
    assert "Configuration error" in capsys.readouterr().err


@pytest.mark.unit
def test_nonexistent_input(tmp_path: Path, capsys):
    assert run_main([str(tmp_path / "missing.json")]) == 1
    assert "not found" in capsys.readouterr().err


@pytest.mark.unit
def test_malformed_document(tmp_path: Path, capsys):
    path = tmp_path / "bad.json"
    path.write_text('[{"address": "0x10", "items": ["bad"]}]', encoding="utf-8")

    assert run_main([str(path)]) == 1
    assert "Malformed vtable document" in capsys.readouterr().err


@pytest.mark.unit
def test_input_from_env(document: Path, monkeypatch, capsys):
    monkeypatch.setenv("VTABLE_INPUT", str(document))
    assert run_main([]) == 0
    assert len(json.loads(capsys.readouterr().out)) == 2


@pytest.mark.unit
def test_invalid_utf8_document(tmp_path: Path, capsys):
    path = tmp_path / "latin1.json"
    path.write_bytes(b'[{"name": "\xff\xfe"}]')

    assert run_main([str(path)]) == 1
    assert "Malformed vtable document" in capsys.readouterr().err


@pytest.mark.unit
def test_output_is_directory(document: Path, tmp_path: Path, capsys):
    output_dir = tmp_path / "out"
    output_dir.mkdir()

    assert run_main([str(document), "-o", str(output_dir)]) == 1
    assert "Cannot write" in capsys.readouterr().err
