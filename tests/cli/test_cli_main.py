# Copyright 2026 Schemascope Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for the schemascope CLI entry point."""

import json
import sys
from pathlib import Path

import pytest

from schemascope.cli.main import main

# ###############
# Helpers
# ###############

SCHEMA = """\
todoCategory:
  id: {name: Id, table: TodoCategory}
  name: String
todo:
  id: {name: Id, table: Todo}
  title: String
  categoryId:
    name: Union
    members:
      - {name: "Null"}
      - {name: Brand, brand: TodoCategoryId, parentType: {name: String}}
  priority:
    name: Union
    members:
      - {name: Literal, expected: low}
      - {name: Literal, expected: high}
  blob:
    name: Union
    members: [{name: "Null"}, {name: Uint8Array}]
  done: SqliteBoolean
evolu_history:
  id: IdBytes
"""


def _run(monkeypatch: pytest.MonkeyPatch, tmp_path: Path, *argv: str) -> int:
    """Run the CLI from *tmp_path* and return its exit code."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr(sys, "argv", ["schemascope", *argv])
    with pytest.raises(SystemExit) as exc_info:
        main()
    return exc_info.value.code  # type: ignore[return-value]


@pytest.fixture
def schema_file(tmp_path: Path) -> Path:
    path = tmp_path / "schema.yaml"
    path.write_text(SCHEMA, encoding="utf-8")
    return path


# ###############
# Public Interface
# ###############


def test_main_no_args_prints_help_and_exits(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    assert _run(monkeypatch, tmp_path) == 0


# -------- types --------


def test_types_lists_regular_tables_before_internal(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path, schema_file: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    assert _run(monkeypatch, tmp_path, "types", str(schema_file)) == 0
    out = capsys.readouterr().out
    assert out.index("todo:") < out.index("todoCategory:") < out.index("evolu_history:")
    assert '  priority: "low" | "high"' in out
    assert "  categoryId: Null | TodoCategoryId<String>" in out


def test_types_single_table(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path, schema_file: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    assert _run(monkeypatch, tmp_path, "types", str(schema_file), "--table", "todoCategory") == 0
    out = capsys.readouterr().out
    assert out.splitlines() == ["todoCategory:", "  id: Id", "  name: String"]


def test_types_unknown_table_fails(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path, schema_file: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    assert _run(monkeypatch, tmp_path, "types", str(schema_file), "--table", "nope") == 1
    assert "unknown table 'nope'" in capsys.readouterr().err


def test_missing_schema_file_fails(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    assert _run(monkeypatch, tmp_path, "types", str(tmp_path / "absent.yaml")) == 1
    assert "Schema file not found" in capsys.readouterr().err


# -------- fields --------


def test_fields_json(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path, schema_file: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    assert _run(monkeypatch, tmp_path, "fields", str(schema_file), "todo", "--json") == 0
    fields = json.loads(capsys.readouterr().out)

    assert [field["name"] for field in fields] == ["title", "categoryId", "priority", "blob", "done"]
    assert fields[1] == {
        "name": "categoryId",
        "type": "select",
        "required": False,
        "options": [],
        "reference_table": "todoCategory",
    }
    assert fields[2]["options"] == ["low", "high"]
    assert fields[3]["type"] == "hex"
    assert fields[4]["type"] == "checkbox"


def test_fields_text_output(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path, schema_file: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    assert _run(monkeypatch, tmp_path, "fields", str(schema_file), "todo") == 0
    lines = capsys.readouterr().out.splitlines()
    assert "title  text  required" in lines
    assert "priority  select  required  options=low,high" in lines
    assert "categoryId  select  optional  references=todoCategory" in lines


def test_fields_respects_configured_identity_column(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path, schema_file: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    (tmp_path / ".schemascope.yaml").write_text("identity-column: title\n", encoding="utf-8")
    assert _run(monkeypatch, tmp_path, "fields", str(schema_file), "todo", "--json") == 0
    names = [field["name"] for field in json.loads(capsys.readouterr().out)]
    assert names == ["id", "categoryId", "priority", "blob", "done"]


def test_invalid_config_fails(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path, schema_file: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    config = tmp_path / "custom.yaml"
    config.write_text("page-size: none\n", encoding="utf-8")
    assert _run(monkeypatch, tmp_path, "--config", str(config), "fields", str(schema_file), "todo") == 1
    assert "'page-size' must be a positive integer" in capsys.readouterr().err


# -------- rows --------


def test_rows_prints_types_and_cells(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    rows_file = tmp_path / "rows.json"
    rows_file.write_text(
        json.dumps(
            [
                {"title": "a", "payload": {"0": 1, "1": 2}},
                {"title": "b", "payload": None},
            ]
        ),
        encoding="utf-8",
    )

    assert _run(monkeypatch, tmp_path, "rows", str(rows_file)) == 0
    lines = capsys.readouterr().out.splitlines()
    assert "title: string" in lines
    assert "payload: mixed(bytes|null)" in lines
    assert "a\t0x0102 (2 B)" in lines
    assert "b\tnull" in lines
    assert lines[-1] == "Page 1/1 (2 rows)"


def test_rows_search_and_paging(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    rows_file = tmp_path / "rows.yaml"
    rows_file.write_text("".join(f"- {{title: item{index}}}\n" for index in range(5)), encoding="utf-8")
    (tmp_path / ".schemascope.yaml").write_text("page-size: 2\n", encoding="utf-8")

    assert _run(monkeypatch, tmp_path, "rows", str(rows_file), "--page", "3") == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[-2:] == ["item4", "Page 3/3 (5 rows)"]

    assert _run(monkeypatch, tmp_path, "rows", str(rows_file), "--search", "ITEM1") == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[-2:] == ["item1", "Page 1/1 (1 rows)"]


def test_rows_with_schema_shows_declared_types(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path, schema_file: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    rows_file = tmp_path / "rows.json"
    rows_file.write_text(json.dumps([{"title": "x", "blob": None}]), encoding="utf-8")

    code = _run(monkeypatch, tmp_path, "rows", str(rows_file), "--schema", str(schema_file), "--table", "todo")
    assert code == 0
    lines = capsys.readouterr().out.splitlines()
    assert "blob: Null | Uint8Array / null" in lines
    assert "done: SqliteBoolean / no data" in lines


def test_rows_rejects_non_list(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    rows_file = tmp_path / "rows.json"
    rows_file.write_text('{"title": "x"}', encoding="utf-8")
    assert _run(monkeypatch, tmp_path, "rows", str(rows_file)) == 1
    assert "must contain a list of row mappings" in capsys.readouterr().err


# -------- parse --------


def test_parse_prints_typed_row(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path, schema_file: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    code = _run(
        monkeypatch, tmp_path, "parse", str(schema_file), "todo", "title=inserted-row", "priority=high", "blob=A4DE"
    )
    assert code == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines == [
        "title: inserted-row",
        "categoryId: null",
        "priority: high",
        "blob: 0xA4DE (2 B)",
        "done: 0",
    ]


def test_parse_required_field_error(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path, schema_file: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    assert _run(monkeypatch, tmp_path, "parse", str(schema_file), "todo", "priority=low") == 1
    assert "Field 'title' is required" in capsys.readouterr().err


def test_parse_hex_error(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path, schema_file: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    code = _run(monkeypatch, tmp_path, "parse", str(schema_file), "todo", "title=x", "priority=low", "blob=A4D")
    assert code == 1
    assert "odd-length hex" in capsys.readouterr().err


def test_parse_unknown_field(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path, schema_file: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    assert _run(monkeypatch, tmp_path, "parse", str(schema_file), "todo", "id=1") == 1
    assert "no insertable field(s): id" in capsys.readouterr().err


def test_parse_malformed_argument(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path, schema_file: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    assert _run(monkeypatch, tmp_path, "parse", str(schema_file), "todo", "title") == 1
    assert "expected NAME=VALUE" in capsys.readouterr().err
