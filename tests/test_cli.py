"""Tests for the command-line interface."""

import json
from pathlib import Path

from click.testing import CliRunner

from conftest import make_line, make_order
from mrp.cli.main import _fmt, cli
from mrp.i18n import load_locale


def _write(path: Path, data) -> Path:
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


class TestRunCommand:
    """Tests for `mrp run`."""

    def teardown_method(self):
        load_locale("en")

    def test_run_prints_plan(self, snapshot_file: Path):
        result = CliRunner().invoke(cli, ["run", str(snapshot_file)])

        assert result.exit_code == 0, result.output
        assert "Material Requirements Plan" in result.output
        assert "Shortage" in result.output

    def test_run_in_serbian(self, snapshot_file: Path):
        result = CliRunner().invoke(cli, ["--lang", "sr", "run", str(snapshot_file)])

        assert result.exit_code == 0, result.output
        assert "Aktivnih naloga" in result.output

    def test_run_writes_output(self, snapshot_file: Path, tmp_path: Path):
        output = tmp_path / "result.json"
        result = CliRunner().invoke(cli, ["run", str(snapshot_file), "--output", str(output)])

        assert result.exit_code == 0, result.output
        data = json.loads(output.read_text(encoding="utf-8"))
        assert data["summary"]["shortage_count"] == 2

    def test_fail_on_shortage(self, snapshot_file: Path):
        result = CliRunner().invoke(cli, ["run", str(snapshot_file), "--fail-on-shortage"])
        assert result.exit_code == 2

    def test_incomplete_snapshot(self, tmp_path: Path):
        path = _write(tmp_path / "partial.json", {"orders": [], "bom_lines": [], "stock": []})
        result = CliRunner().invoke(cli, ["run", str(path)])

        assert result.exit_code == 1
        assert "pending_supply" in result.output

    def test_strict_mode(self, tmp_path: Path):
        path = _write(tmp_path / "bad.json", {
            "orders": [make_order("A", ordered=-1)],
            "bom_lines": [make_line()],
            "stock": [],
            "pending_supply": [],
        })
        lenient = CliRunner().invoke(cli, ["run", str(path)])
        strict = CliRunner().invoke(cli, ["run", str(path), "--strict"])

        assert lenient.exit_code == 0
        assert strict.exit_code == 1

    def test_with_config_file(self, snapshot_file: Path, tmp_path: Path):
        config = _write(tmp_path / "config.json", {"units": {"mixed_unit_policy": "trust"}})
        result = CliRunner().invoke(cli, ["run", str(snapshot_file), "-c", str(config)])

        assert result.exit_code == 0, result.output

    def test_malformed_yaml_config(self, snapshot_file: Path, tmp_path: Path):
        config = tmp_path / "config.yaml"
        config.write_text("units: [unclosed\n", encoding="utf-8")
        result = CliRunner().invoke(cli, ["run", str(snapshot_file), "-c", str(config)])

        assert result.exit_code == 1
        assert "Invalid configuration" in result.output
        assert result.exception is None or isinstance(result.exception, SystemExit)


class TestOtherCommands:
    """Tests for `mrp validate` and `mrp init-config`."""

    def test_validate_clean(self, snapshot_file: Path):
        result = CliRunner().invoke(cli, ["validate", str(snapshot_file)])

        assert result.exit_code == 0
        assert "No data issues" in result.output

    def test_validate_reports_issues(self, tmp_path: Path):
        path = _write(tmp_path / "bad.json", {
            "orders": [make_order("A", ordered=-1)],
            "bom_lines": [],
            "stock": [],
            "pending_supply": [],
        })
        result = CliRunner().invoke(cli, ["validate", str(path)])

        assert result.exit_code == 1
        assert "orders[0]" in result.output

    def test_init_config(self, tmp_path: Path):
        path = tmp_path / "mrp.yaml"
        result = CliRunner().invoke(cli, ["init-config", str(path)])

        assert result.exit_code == 0
        assert "mixed_unit_policy" in path.read_text(encoding="utf-8")


class TestFormatting:
    """Tests for quantity formatting."""

    def test_fmt(self):
        from decimal import Decimal

        assert _fmt(Decimal("1234.5")) == "1,234.5"
        assert _fmt(Decimal("10")) == "10"
        assert _fmt(Decimal("0")) == "0"
        assert _fmt(Decimal("-7")) == "-7"
