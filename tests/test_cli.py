"""Tests for the canonql command line interface."""

import json

import pytest

from canonql.cli import main
from canonql.kernel.hash_utils import canonicalize_sdl


@pytest.fixture
def schema_file(tmp_path, mixed_sdl):
    path = tmp_path / "schema.graphql"
    path.write_text(mixed_sdl, encoding="utf-8")
    return path


def test_sort_prints_canonical_sdl(schema_file, mixed_sdl, capsys):
    main(["sort", str(schema_file)])
    out = capsys.readouterr().out
    assert out == canonicalize_sdl(mixed_sdl) + "\n"


def test_sort_writes_output_file(schema_file, mixed_sdl, tmp_path, capsys):
    output = tmp_path / "out" / "canonical.graphql"
    main(["sort", str(schema_file), "--output", str(output)])

    assert output.read_text(encoding="utf-8") == canonicalize_sdl(mixed_sdl) + "\n"
    assert "[OK]" in capsys.readouterr().out


def test_sort_output_quiet(schema_file, tmp_path, capsys):
    output = tmp_path / "canonical.graphql"
    main(["sort", str(schema_file), "--output", str(output), "--quiet"])
    assert output.exists()
    assert capsys.readouterr().out == ""


def test_fingerprint(schema_file, capsys):
    main(["fingerprint", str(schema_file)])
    out = capsys.readouterr().out.strip()
    assert out.startswith("sha256:")


def test_diff_equivalent_exits_cleanly(schema_file, tmp_path, capsys):
    other = tmp_path / "other.graphql"
    other.write_text(schema_file.read_text(encoding="utf-8"), encoding="utf-8")

    main(["diff", str(schema_file), str(other)])

    assert "[OK] Schemas are equivalent" in capsys.readouterr().out


def test_diff_different_exits_one(schema_file, mixed_sdl, tmp_path, capsys):
    other = tmp_path / "other.graphql"
    other.write_text(mixed_sdl.replace("GREEN", "TEAL"), encoding="utf-8")

    with pytest.raises(SystemExit) as exc_info:
        main(["diff", str(schema_file), str(other)])

    assert exc_info.value.code == 1
    out = capsys.readouterr().out
    assert "-  GREEN" in out
    assert "+  TEAL" in out


def test_summary_is_canonical_json(schema_file, capsys):
    main(["summary", str(schema_file)])
    out = capsys.readouterr().out.strip()
    data = json.loads(out)
    assert data["query_type"] == "Query"
    assert data["types"]["UNION"] == ["SearchResult"]
    assert out == json.dumps(data, sort_keys=True, separators=(",", ":"), ensure_ascii=False)


def test_missing_file(tmp_path, capsys):
    with pytest.raises(SystemExit) as exc_info:
        main(["sort", str(tmp_path / "missing.graphql")])
    assert exc_info.value.code == 1
    assert "Error:" in capsys.readouterr().err


def test_invalid_schema(tmp_path, capsys):
    path = tmp_path / "broken.graphql"
    path.write_text("type Query {", encoding="utf-8")

    with pytest.raises(SystemExit) as exc_info:
        main(["fingerprint", str(path)])

    assert exc_info.value.code == 1
    assert "invalid schema" in capsys.readouterr().err


def test_no_command_prints_help(capsys):
    with pytest.raises(SystemExit) as exc_info:
        main([])
    assert exc_info.value.code == 1
    assert "usage" in capsys.readouterr().out
