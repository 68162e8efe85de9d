"""Unit tests for elmdoc.cli.main — the click application."""
from __future__ import annotations

import json
import logging
from pathlib import Path

import pytest
from click.testing import CliRunner

from elmdoc.cli.main import cli


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _make_runner() -> CliRunner:
    return CliRunner()


@pytest.fixture()
def doc_file(tmp_path: Path) -> Path:
    path = tmp_path / "comment.txt"
    path.write_text("{-| Hello    world,\nagain.\n-}\n", encoding="utf-8")
    return path


@pytest.fixture()
def restore_logging():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture()
def module_file(tmp_path: Path) -> Path:
    path = tmp_path / "module.txt"
    path.write_text(
        "{-| Lists.\n\n@docs map, filter\n@docs foldl\n\n# More\n@docs sum\n-}\n",
        encoding="utf-8",
    )
    return path


# ---------------------------------------------------------------------------
# fmt
# ---------------------------------------------------------------------------


class TestFmtCommand:
    def test_prints_formatted_comment(self, doc_file: Path) -> None:
        result = _make_runner().invoke(cli, ["fmt", str(doc_file)])
        assert result.exit_code == 0
        assert result.output == "{-| Hello world, again.\n-}\n"

    def test_width_option(self, doc_file: Path) -> None:
        result = _make_runner().invoke(cli, ["fmt", "--width", "16", str(doc_file)])
        assert result.exit_code == 0
        assert result.output == "{-| Hello world,\nagain.\n-}\n"

    def test_width_from_environment(self, doc_file: Path) -> None:
        result = _make_runner().invoke(cli, ["fmt", str(doc_file)], env={"ELMDOC_WIDTH": "16"})
        assert result.exit_code == 0
        assert result.output == "{-| Hello world,\nagain.\n-}\n"

    def test_zero_width_is_a_usage_error(self, doc_file: Path) -> None:
        result = _make_runner().invoke(cli, ["fmt", "--width", "0", str(doc_file)])
        assert result.exit_code == 2

    def test_module_kind(self, module_file: Path) -> None:
        result = _make_runner().invoke(cli, ["fmt", "--kind", "file", str(module_file)])
        assert result.exit_code == 0
        assert result.output == (
            "{-| Lists.\n\n@docs map, filter, foldl\n\n# More\n\n@docs sum\n-}\n"
        )

    def test_check_reports_unformatted(self, doc_file: Path) -> None:
        result = _make_runner().invoke(cli, ["fmt", "--check", str(doc_file)])
        assert result.exit_code == 1
        assert "NEEDS FORMATTING" in result.output

    def test_check_accepts_formatted(self, tmp_path: Path) -> None:
        path = tmp_path / "ok.txt"
        path.write_text("{-| Already fine.\n-}\n", encoding="utf-8")
        result = _make_runner().invoke(cli, ["fmt", "--check", str(path)])
        assert result.exit_code == 0
        assert "already formatted" in result.output

    def test_in_place_rewrites_file(self, doc_file: Path) -> None:
        result = _make_runner().invoke(cli, ["fmt", "--in-place", str(doc_file)])
        assert result.exit_code == 0
        assert doc_file.read_text(encoding="utf-8") == "{-| Hello world, again.\n-}\n"

    def test_missing_file_exits_with_error(self, tmp_path: Path) -> None:
        result = _make_runner().invoke(cli, ["fmt", str(tmp_path / "missing.txt")])
        assert result.exit_code == 1


# ---------------------------------------------------------------------------
# parse
# ---------------------------------------------------------------------------


class TestParseCommand:
    def test_json_to_file(self, module_file: Path, tmp_path: Path) -> None:
        out = tmp_path / "out.json"
        result = _make_runner().invoke(
            cli, ["parse", "--kind", "file", str(module_file), "-o", str(out)]
        )
        assert result.exit_code == 0
        data = json.loads(out.read_text(encoding="utf-8"))
        assert data["kind"] == "FileComment"
        assert [p["kind"] for p in data["parts"]] == ["Markdown", "DocTags", "Markdown", "DocTags"]

    def test_yaml_to_stdout(self, doc_file: Path) -> None:
        result = _make_runner().invoke(cli, ["parse", "--format", "yaml", str(doc_file)])
        assert result.exit_code == 0
        assert "DocComment" in result.output


# ---------------------------------------------------------------------------
# tags / version
# ---------------------------------------------------------------------------


class TestTagsCommand:
    def test_lists_groups(self, module_file: Path) -> None:
        result = _make_runner().invoke(cli, ["tags", str(module_file)])
        assert result.exit_code == 0
        assert "map, filter, foldl" in result.output
        assert "2 group(s)" in result.output

    def test_no_groups(self, doc_file: Path) -> None:
        result = _make_runner().invoke(cli, ["tags", str(doc_file)])
        assert result.exit_code == 0
        assert "No @docs groups" in result.output


class TestVersionCommand:
    def test_shows_version(self) -> None:
        result = _make_runner().invoke(cli, ["version"])
        assert result.exit_code == 0
        assert "elmdoc" in result.output

    def test_verbose_flag_is_accepted(self, doc_file: Path, restore_logging: None) -> None:
        result = _make_runner().invoke(cli, ["--verbose", "fmt", str(doc_file)])
        assert result.exit_code == 0
        assert "{-| Hello world, again." in result.output
