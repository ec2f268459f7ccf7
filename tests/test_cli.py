"""CLI behavior tests for cc-license."""
import json
from pathlib import Path

from click.testing import CliRunner

from cc_license import __version__
from cc_license.cli import main
from cc_license.constants import EXIT_ERROR, EXIT_PARSE_FAILURES, EXIT_SUCCESS

BY_SA_4 = "https://creativecommons.org/licenses/by-sa/4.0/"


def test_cli_help(cli_runner: CliRunner) -> None:
    """Test that --help outputs usage information."""
    result = cli_runner.invoke(main, ["--help"])

    assert result.exit_code == 0
    assert "Creative Commons License Resolver" in result.output
    assert "parse" in result.output
    assert "--version" in result.output


def test_cli_version(cli_runner: CliRunner) -> None:
    """Test that --version outputs correct version."""
    result = cli_runner.invoke(main, ["--version"])

    assert result.exit_code == 0
    assert __version__ in result.output


def test_parse_help_shows_format_option(cli_runner: CliRunner) -> None:
    """Test that parse --help shows all format options."""
    result = cli_runner.invoke(main, ["parse", "--help"])

    assert result.exit_code == 0
    assert "--format" in result.output
    assert "terminal" in result.output
    assert "json" in result.output


def test_parse_requires_url(cli_runner: CliRunner) -> None:
    """Test that parse without URLs is a usage error."""
    result = cli_runner.invoke(main, ["parse"])

    assert result.exit_code == 2
    assert "Missing argument" in result.output


def test_parse_terminal(cli_runner: CliRunner, tmp_path: Path) -> None:
    """Test that a valid URL is shown in the terminal table."""
    with cli_runner.isolated_filesystem(temp_dir=tmp_path):
        result = cli_runner.invoke(main, ["parse", BY_SA_4])

    assert result.exit_code == EXIT_SUCCESS
    assert "CC BY-SA 4.0" in result.output


def test_parse_json(cli_runner: CliRunner, tmp_path: Path) -> None:
    """Test that --format json prints parseable JSON."""
    with cli_runner.isolated_filesystem(temp_dir=tmp_path):
        result = cli_runner.invoke(main, ["parse", "--format", "json", BY_SA_4])

    assert result.exit_code == EXIT_SUCCESS
    data = json.loads(result.output)
    assert data["results"][0]["license"]["short"] == "CC BY-SA 4.0"


def test_parse_failure_exit_code(cli_runner: CliRunner, tmp_path: Path) -> None:
    """Test that any unparseable URL sets the failure exit code."""
    with cli_runner.isolated_filesystem(temp_dir=tmp_path):
        result = cli_runner.invoke(
            main,
            ["parse", "--format", "json", BY_SA_4, "https://example.com/licenses/by/4.0/"],
        )

    assert result.exit_code == EXIT_PARSE_FAILURES
    data = json.loads(result.output)
    assert data["metadata"]["failed"] == 1


def test_parse_uses_config_file(cli_runner: CliRunner, tmp_path: Path) -> None:
    """Test that --config is applied to the resolver."""
    config_file = tmp_path / "strict.yaml"
    config_file.write_text("strict_versions: true\n")

    result = cli_runner.invoke(
        main,
        [
            "parse",
            "--format",
            "json",
            "--config",
            str(config_file),
            "https://creativecommons.org/licenses/by/5.0/",
        ],
    )

    assert result.exit_code == EXIT_PARSE_FAILURES
    data = json.loads(result.output)
    assert data["results"][0]["error"]["kind"] == "invalid_version"


def test_parse_discovers_config_file(cli_runner: CliRunner, tmp_path: Path) -> None:
    """Test that a config file in the working directory is used."""
    with cli_runner.isolated_filesystem(temp_dir=tmp_path):
        Path(".cc-license.yaml").write_text("jurisdictions: [us]\n")
        result = cli_runner.invoke(
            main,
            ["parse", "--format", "json", "https://creativecommons.org/licenses/by/3.0/nl/"],
        )

    assert result.exit_code == EXIT_PARSE_FAILURES
    data = json.loads(result.output)
    assert data["results"][0]["error"]["kind"] == "unknown_jurisdiction"


def test_parse_invalid_config(cli_runner: CliRunner, tmp_path: Path) -> None:
    """Test that an invalid config file exits with the error code."""
    config_file = tmp_path / "bad.yaml"
    config_file.write_text("unknown_field: 1\n")

    result = cli_runner.invoke(main, ["parse", "--config", str(config_file), BY_SA_4])

    assert result.exit_code == EXIT_ERROR
    assert "ConfigurationError" in result.output
