"""Tests for the smallrye-info CLI."""

from pathlib import Path
from textwrap import dedent

import pytest
from pytest import MonkeyPatch
from typer.testing import CliRunner

from smallrye_info.cli.main import app

runner = CliRunner()


@pytest.fixture
def cli_project(tmp_path: Path, monkeypatch: MonkeyPatch) -> Path:
    """Create a project configured through pyproject.toml."""
    (tmp_path / "pyproject.toml").write_text(
        dedent("""
        [project]
        name = "myapp"
        version = "2.3.1-SNAPSHOT"

        [tool.smallrye-info]
        spec-version = "1.0"
        package-name = "myapp"
        source-output = "generated"
    """)
    )
    monkeypatch.chdir(tmp_path)
    return tmp_path


def test_generate_from_config(cli_project: Path) -> None:
    """Test generating with settings from pyproject.toml."""
    result = runner.invoke(app, ["generate"])

    assert result.exit_code == 0
    assert "✓" in result.stdout
    assert "Generated myapp.SmallRyeInfo" in result.stdout

    module = cli_project / "generated" / "myapp" / "small_rye_info.py"
    content = module.read_text()
    assert "def is_impl_snapshot() -> bool:" in content
    assert "return True" in content


def test_generate_with_options(tmp_path: Path, monkeypatch: MonkeyPatch) -> None:
    """Test generating with every setting on the command line."""
    monkeypatch.chdir(tmp_path)

    result = runner.invoke(
        app,
        [
            "generate",
            "--spec-version",
            "1.2.3",
            "--impl-version",
            "1.2.3",
            "--package",
            "acme.meta",
            "--class-name",
            "AcmeInfo",
            "--output",
            str(tmp_path / "out"),
        ],
    )

    assert result.exit_code == 0
    assert (tmp_path / "out" / "acme" / "meta" / "acme_info.py").exists()
    assert "Output written to:" in result.stdout


def test_generate_options_override_config(cli_project: Path) -> None:
    """Test command-line options take precedence over the config file."""
    result = runner.invoke(app, ["generate", "--class-name", "OtherInfo"])

    assert result.exit_code == 0
    assert (cli_project / "generated" / "myapp" / "other_info.py").exists()
    assert not (cli_project / "generated" / "myapp" / "small_rye_info.py").exists()


def test_generate_malformed_spec_version(cli_project: Path) -> None:
    """Test a malformed version fails the run and writes nothing."""
    result = runner.invoke(app, ["generate", "--spec-version", "bad-version"])

    assert result.exit_code == 1
    assert 'The specification version "bad-version"' in result.stdout
    assert "does not match the pattern" in result.stdout
    assert not (cli_project / "generated").exists()


def test_generate_malformed_impl_version(cli_project: Path) -> None:
    """Test a malformed implementation version fails the run."""
    result = runner.invoke(app, ["generate", "-i", "1.0.0.Final"])

    assert result.exit_code == 1
    assert 'The implementation version "1.0.0.Final"' in result.stdout


def test_generate_invalid_package_name(cli_project: Path) -> None:
    """Test an invalid package name is reported."""
    result = runner.invoke(app, ["generate", "--package", "my-app"])

    assert result.exit_code == 1
    assert "Invalid generation request" in result.stdout
    assert "package_name" in result.stdout


def test_generate_missing_settings(tmp_path: Path, monkeypatch: MonkeyPatch) -> None:
    """Test generating without any configuration."""
    monkeypatch.chdir(tmp_path)

    result = runner.invoke(app, ["generate"])

    assert result.exit_code == 1
    assert "Invalid configuration" in result.stdout


def test_generate_write_failure(cli_project: Path) -> None:
    """Test output failures are reported separately from version errors."""
    (cli_project / "blocker").write_text("")

    result = runner.invoke(app, ["generate", "--output", str(cli_project / "blocker")])

    assert result.exit_code == 1
    assert "Failed to write generated sources" in result.stdout
    assert "does not match the pattern" not in result.stdout


def test_generate_with_explicit_config(tmp_path: Path) -> None:
    """Test generating with an explicit config file."""
    config_file = tmp_path / "custom.toml"
    config_file.write_text(
        dedent(f"""
        [smallrye-info]
        spec-version = "3"
        implementation-version = "4.1"
        package-name = "custom"
        source-output = "{(tmp_path / "src").as_posix()}"
    """)
    )

    result = runner.invoke(app, ["generate", "--config", str(config_file)])

    assert result.exit_code == 0
    assert (tmp_path / "src" / "custom" / "small_rye_info.py").exists()


def test_generate_verbose(cli_project: Path) -> None:
    """Test the verbose flag enables debug logging."""
    result = runner.invoke(app, ["--verbose", "generate"])

    assert result.exit_code == 0
    assert "Loading configuration" in result.stdout
    assert "Using project version" in result.stdout


def test_generate_quiet_by_default(cli_project: Path) -> None:
    """Test debug logging is off without the verbose flag."""
    result = runner.invoke(app, ["generate"])

    assert result.exit_code == 0
    assert "Loading configuration" not in result.stdout


def test_parse_component_too_long() -> None:
    """Test an oversized component fails cleanly instead of crashing."""
    result = runner.invoke(app, ["parse", "9" * 5000])

    assert result.exit_code == 1
    assert "does not match the pattern" in result.stdout


def test_parse_valid(tmp_path: Path, monkeypatch: MonkeyPatch) -> None:
    """Test parsing a version prints its components."""
    monkeypatch.chdir(tmp_path)

    result = runner.invoke(app, ["parse", "1.2-SNAPSHOT"])

    assert result.exit_code == 0
    assert "Version 1.2-SNAPSHOT" in result.stdout
    assert "major" in result.stdout
    assert "micro" in result.stdout
    assert "true" in result.stdout


def test_parse_invalid() -> None:
    """Test parsing a malformed version fails."""
    result = runner.invoke(app, ["parse", "1.2.3.4"])

    assert result.exit_code == 1
    assert 'Version "1.2.3.4" does not match the pattern' in result.stdout


def test_config_command(cli_project: Path) -> None:
    """Test showing the resolved settings."""
    result = runner.invoke(app, ["config"])

    assert result.exit_code == 0
    assert "Generator Settings" in result.stdout
    assert "2.3.1-SNAPSHOT" in result.stdout
    assert "SmallRyeInfo" in result.stdout


def test_config_command_invalid(tmp_path: Path) -> None:
    """Test showing settings from an invalid config file."""
    config_file = tmp_path / "pyproject.toml"
    config_file.write_text("[tool.smallrye-info\n")

    result = runner.invoke(app, ["config", "--config", str(config_file)])

    assert result.exit_code == 1
    assert "Invalid TOML" in result.stdout
