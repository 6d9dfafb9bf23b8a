"""Tests for the typetags CLI."""

import json
import sys

import pytest
from loguru import logger

from typetags.cli.main import create_parser, run


@pytest.fixture(autouse=True)
def cli_env(monkeypatch, test_db_path):
    """Point the CLI at a temporary database."""
    monkeypatch.setenv("TYPETAGS_DB_PATH", str(test_db_path))
    monkeypatch.delenv("TYPETAGS_CONFIG", raising=False)
    yield
    logger.remove()
    logger.add(sys.stderr)


class TestParser:
    """Tests for argument parsing."""

    def test_register_arguments(self):
        """register should take child and parent."""
        args = create_parser().parse_args(["register", "a", "b"])

        assert args.command == "register"
        assert (args.child, args.parent) == ("a", "b")

    def test_descendants_root_optional(self):
        """descendants should default to no explicit root."""
        args = create_parser().parse_args(["descendants"])

        assert args.root is None


class TestCommands:
    """Tests for command handling."""

    def test_isa(self, capsys):
        """isa should print true or false."""
        assert run(["isa", "type/Integer", "type/Number"]) == 0
        assert run(["isa", "type/Number", "type/Integer"]) == 0

        assert capsys.readouterr().out.split() == ["true", "false"]

    def test_parents(self, capsys):
        """parents should print direct parents in order."""
        assert run(["parents", "type/UNIXTimestamp"]) == 0

        assert capsys.readouterr().out.split() == ["type/DateTime", "type/Integer"]

    def test_register_then_export(self, capsys):
        """A registered type should appear in a later export."""
        assert run(["register", "type/PostgresEnum.mood", "type/PostgresEnum"]) == 0
        capsys.readouterr()

        assert run(["export"]) == 0
        exported = json.loads(capsys.readouterr().out)

        assert exported["type/PostgresEnum.mood"] == ["type/PostgresEnum"]

    def test_descendants(self, capsys):
        """descendants should list tags under the given root."""
        assert run(["descendants", "type/Coordinate"]) == 0

        assert capsys.readouterr().out.split() == ["type/Latitude", "type/Longitude"]

    def test_error_exit_code(self, capsys):
        """Errors should print to stderr and return 1."""
        assert run(["register", "type/Number", "type/Integer"]) == 1

        assert "Error:" in capsys.readouterr().err

    def test_no_command_prints_help(self, capsys):
        """No subcommand should print help and succeed."""
        assert run([]) == 0

        assert "usage:" in capsys.readouterr().out
