# -*- coding: utf-8 -*-
"""
Tests for the command line front end.
"""

import pytest

from sqlscribe import cli


@pytest.fixture(autouse=True)
def wide_console(monkeypatch):
    monkeypatch.setenv("COLUMNS", "200")
    monkeypatch.setattr(cli, "console", cli.Console(width=200))


def run_cli(capsys, *argv):
    code = cli.main(["--no-log-file", *argv])
    return code, capsys.readouterr().out


class TestCli:

    def test_validate_valid(self, capsys):
        code, out = run_cli(capsys, "validate", "select * from users")

        assert code == 0
        assert "valid" in out
        assert "Using SELECT * can impact performance" in out

    def test_validate_invalid(self, capsys):
        code, out = run_cli(capsys, "validate", "hello world")

        assert code == 1
        assert "no SQL keywords found" in out

    def test_validate_dialect(self, capsys):
        code, out = run_cli(capsys, "validate", "SELECT 1", "--dialect", "mysql")

        assert code == 0
        assert "MySQL supports LIMIT" in out

    def test_explain(self, capsys):
        code, out = run_cli(capsys, "explain", "SELECT id FROM users")

        assert code == 0
        assert "Specifies the source table: users" in out

    def test_optimize(self, capsys):
        code, out = run_cli(capsys, "optimize", "SELECT id FROM t WHERE a NOT IN (1)")

        assert code == 0
        assert "NOT EXISTS" in out

    def test_schema(self, capsys):
        code, out = run_cli(capsys, "schema", "orders")

        assert code == 0
        assert "order_date" in out

    def test_generate_blank_message(self, capsys):
        code, out = run_cli(capsys, "generate", "   ")

        assert code == 2
        assert "Input data not found" in out

    def test_unknown_dialect_rejected(self):
        with pytest.raises(SystemExit):
            cli.main(["--no-log-file", "validate", "SELECT 1", "--dialect", "db2"])
