"""Integration tests for the modparams CLI."""

import tempfile
from pathlib import Path

import pytest
from typer import Exit
from typer.testing import CliRunner

from modparams.cli.__main__ import app
from modparams.cli.demo import build_demo_registry, demo_command


class TestCLIIntegration:
    """Integration tests for CLI commands."""

    def setup_method(self):
        """Set up test runner."""
        self.runner = CliRunner()

    def test_demo_defaults(self):
        """Test the demo with no arguments prints initial values."""
        result = self.runner.invoke(app, ["demo", "--no-defaults"])
        assert result.exit_code == 0
        assert result.stdout.splitlines() == [
            "test = 0",
            "btest = Y",
            "latest = ",
            "strtest = ",
        ]

    def test_demo_parses_arguments(self):
        """Test the demo sets every parameter kind."""
        result = self.runner.invoke(
            app, ["demo", "--no-defaults", "test=5", "btest=n", "latest=1,2,3", "strtest=hi"]
        )
        assert result.exit_code == 0
        assert "test = 5" in result.stdout
        assert "btest = N" in result.stdout
        assert "latest = 1,2,3" in result.stdout
        assert "strtest = hi" in result.stdout

    def test_demo_error_exits_nonzero(self):
        """Test a bad argument prints usage and fails."""
        result = self.runner.invoke(app, ["demo", "--no-defaults", "bogus=1"])
        assert result.exit_code == 1
        assert "test = " not in result.stdout

    def test_demo_uses_pyproject_defaults(self):
        """Test configured defaults apply and the command line overrides them."""
        with tempfile.TemporaryDirectory() as tmpdir:
            root = Path(tmpdir)
            (root / "pyproject.toml").write_text(
                '[tool.modparams]\nargs = ["test=7", "strtest=cfg"]\n'
            )
            result = self.runner.invoke(
                app, ["demo", "--project-root", str(root), "strtest=cli"]
            )
        assert result.exit_code == 0
        assert "test = 7" in result.stdout
        assert "strtest = cli" in result.stdout

    def test_env_command(self, monkeypatch):
        """Test environment lookups."""
        monkeypatch.setenv("GETENV_ADD", "abc")
        monkeypatch.setenv("GETENV_NUM", "2x")
        monkeypatch.delenv("GETENV_NONE", raising=False)
        result = self.runner.invoke(app, ["env", "GETENV_ADD", "GETENV_NONE"])
        assert result.exit_code == 0
        assert "GETENV_ADD = abc" in result.stdout
        assert "GETENV_NONE not found" in result.stdout

        result = self.runner.invoke(app, ["env", "--int", "GETENV_NUM"])
        assert "GETENV_NUM = 2" in result.stdout

    def test_version(self):
        """Test version output."""
        result = self.runner.invoke(app, ["version"])
        assert result.exit_code == 0
        assert "modparams version" in result.stdout

    def test_missing_command(self):
        """Test invoking without a command fails."""
        result = self.runner.invoke(app, [])
        assert result.exit_code == 1


class TestDemoCommand:
    """Tests for calling the demo command function directly."""

    def test_direct_call(self, capsys):
        """Test the command works outside Typer."""
        demo_command(args=["test=3"], no_defaults=True)
        assert "test = 3" in capsys.readouterr().out

    def test_direct_call_error(self):
        """Test errors raise typer.Exit(1)."""
        with pytest.raises(Exit) as exc_info:
            demo_command(args=["latest"], no_defaults=True)
        assert exc_info.value.exit_code == 1

    def test_registry_layout(self):
        """Test the demo registry declarations."""
        registry, storage = build_demo_registry()
        assert registry.names() == ["test", "btest", "latest", "strtest"]
        assert registry.capacity == 10
        assert storage["strtest"].capacity == 10
