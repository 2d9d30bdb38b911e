"""
Tests for the command-line interface.
"""

import json
import logging

import pytest

from bellowscfg.cli.main import cli, create_parser
from bellowscfg.logging_config import setup_logging


@pytest.fixture
def catalog_file(tmp_path, abc_catalog):
    path = tmp_path / "catalog.json"
    path.write_text(json.dumps([p.model_dump(mode="json") for p in abc_catalog]), encoding="utf-8")
    return path


class TestParser:
    """Tests for argument parsing."""

    def test_match_defaults(self):
        args = create_parser().parse_args(["match"])
        assert args.diameter_unit == "IN"
        assert args.pressure_unit == "PSIG"
        assert args.limit is None

    def test_no_command_prints_help(self, capsys):
        assert cli([]) == 0
        assert "usage" in capsys.readouterr().out.lower()


class TestMatchCommand:
    def test_match(self, catalog_file, capsys):
        code = cli(["match", "-d", "4", "-l", "10", "-c", str(catalog_file)])

        assert code == 0
        rows = json.loads(capsys.readouterr().out)
        assert [r["part_number"] for r in rows] == ["A", "B"]

    def test_match_metric_with_limit(self, catalog_file, capsys):
        code = cli([
            "match", "-d", "101.6", "--diameter-unit", "MM",
            "-l", "254", "--length-unit", "MM", "-n", "1", "-c", str(catalog_file),
        ])

        assert code == 0
        rows = json.loads(capsys.readouterr().out)
        assert [r["part_number"] for r in rows] == ["A"]

    def test_match_bundled_catalog(self, capsys):
        assert cli(["match"]) == 0
        assert len(json.loads(capsys.readouterr().out)) > 0


class TestIndexCommand:
    def test_index(self, catalog_file, capsys):
        assert cli(["index", "-d", "8", "-c", str(catalog_file)]) == 0

        data = json.loads(capsys.readouterr().out)
        assert data["diameters"] == ["4.00", "4.50", "8.00"]
        assert data["lengths"] == ["20.00"]
        assert data["temperatures"] == ["500"]


class TestPartCommand:
    def test_part_table(self, catalog_file, capsys):
        assert cli(["part", "B", "--cuff", "U CUFF", "-c", str(catalog_file)]) == 0

        out = capsys.readouterr().out
        assert "PART NUMBER" in out
        assert "U CUFF" in out
        assert "150 @ 500°F" in out

    def test_unknown_part(self, catalog_file, capsys):
        assert cli(["part", "NOPE", "-c", str(catalog_file)]) == 1
        assert "not found" in capsys.readouterr().err


class TestSchematicCommand:
    def test_schematic_stdout(self, catalog_file, capsys):
        assert cli(["schematic", "A", "-c", str(catalog_file)]) == 0

        data = json.loads(capsys.readouterr().out)
        assert data["part_number"] == "A"
        assert data["primitives"]

    def test_schematic_to_file(self, catalog_file, tmp_path, capsys):
        output = tmp_path / "drawing.json"
        assert cli(["schematic", "A", "--cuff", "WITHOUT CUFF", "-c", str(catalog_file), "-o", str(output)]) == 0

        data = json.loads(output.read_text(encoding="utf-8"))
        assert data["cuff_style"] == "WITHOUT CUFF"
        assert "Saved to" in capsys.readouterr().err

    def test_unknown_part(self, catalog_file):
        assert cli(["schematic", "NOPE", "-c", str(catalog_file)]) == 1


class TestLoggingSetup:
    def test_repeated_setup_keeps_one_console_handler(self):
        setup_logging("INFO")
        logger = setup_logging("debug")

        assert len(logger.handlers) == 1
        assert logger.level == logging.DEBUG

    def test_unknown_level_name_means_info(self):
        assert setup_logging("chatty").level == logging.INFO

    def test_log_file(self, tmp_path):
        path = tmp_path / "bellowscfg.log"
        logger = setup_logging(logging.INFO, str(path))
        logger.getChild("catalog").info("loaded")

        for handler in logger.handlers:
            handler.flush()
        assert "loaded" in path.read_text(encoding="utf-8")
        setup_logging(logging.WARNING)
