import json
import uuid

import pytest

from datacraft.cli import load_spec, main, process_spec
from datacraft.interfaces import SpecError


def test_process_spec(capsys):
    spec = {
        "id": {"type": "uuid"},
        "row": {"type": "rownum"},
        "num": {"type": "integer"},
    }
    records = process_spec(spec, 1)
    assert len(records) == 1
    record = records[0]
    assert set(record) == {"id", "row", "num"}
    assert str(uuid.UUID(record["id"])) == record["id"]
    assert record["row"] == 0
    assert -1_000_000_000 <= record["num"] <= 1_000_000_000
    out = capsys.readouterr().out
    assert "Generated value for field 'row': 0" in out
    assert "Generating value for field 'id':" in out


def test_process_spec_reuses_suppliers_across_iterations():
    records = process_spec({"row": {"type": "iteration"}}, 3)
    assert [r["row"] for r in records] == [0, 1, 2]


def test_process_spec_reports_errors_and_continues(capsys):
    spec = {"bad": {"type": "nope"}, "row": {"type": "rownum"}}
    records = process_spec(spec, 1)
    assert records == [{"row": 0}]
    out = capsys.readouterr().out
    assert "Error getting supplier for field 'bad'" in out


def test_load_spec(tmp_path):
    path = tmp_path / "spec.json"
    spec = {"id": {"type": "uuid"}, "num": {"type": "integer", "min": 1, "max": 5}}
    path.write_text(json.dumps(spec), encoding="utf-8")
    assert load_spec(path) == spec


def test_load_spec_missing_file(tmp_path):
    with pytest.raises(SpecError, match="failed to read spec file"):
        load_spec(tmp_path / "missing.json")


@pytest.mark.parametrize("content", ["{not json", "[1, 2]", '{"a": 3}'])
def test_load_spec_invalid_content(tmp_path, content):
    path = tmp_path / "spec.json"
    path.write_text(content, encoding="utf-8")
    with pytest.raises(SpecError, match="failed to parse spec file"):
        load_spec(path)


def test_main_requires_spec(capsys):
    assert main([]) == 1
    assert "Error: --spec (-s) flag is required" in capsys.readouterr().out


def test_main_rejects_non_positive_iterations(tmp_path, capsys):
    path = tmp_path / "spec.json"
    path.write_text('{"row": {"type": "rownum"}}', encoding="utf-8")
    assert main(["-s", str(path), "-i", "0"]) == 1
    assert "must be greater than 0" in capsys.readouterr().out


def test_main_reports_load_errors(tmp_path, capsys):
    assert main(["--spec", str(tmp_path / "missing.json")]) == 1
    assert "Error loading spec file" in capsys.readouterr().out


def test_main_generates_values(tmp_path, capsys):
    path = tmp_path / "spec.json"
    path.write_text('{"row": {"type": "rownum"}}', encoding="utf-8")
    assert main(["-s", str(path)]) == 0
    out = capsys.readouterr().out
    assert out.count("Generated value for field 'row'") == 1


def test_main_iterations_flag(tmp_path, capsys):
    path = tmp_path / "spec.json"
    path.write_text('{"row": {"type": "rownum"}}', encoding="utf-8")
    assert main(["--spec", str(path), "--iterations", "3"]) == 0
    out = capsys.readouterr().out
    assert "Generated value for field 'row': 2" in out
    assert out.count("Generated value for field 'row'") == 3