"""Integration tests for the validate CLI command."""

from pathlib import Path

import pytest
from typer.testing import CliRunner

from paintquote.cli.main import app

FIXTURES_PATH = Path(__file__).parent.parent / "fixtures" / "estimates"

pytestmark = pytest.mark.integration


@pytest.fixture
def runner() -> CliRunner:
    """Create a CLI runner for testing."""
    return CliRunner()


class TestValidateCommand:
    def test_clean_estimate(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["validate", str(FIXTURES_PATH / "minimal_estimate.json")])

        assert result.exit_code == 0
        assert "Validation passed. Estimate is valid." in result.output

    def test_estimate_with_warnings(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["validate", str(FIXTURES_PATH / "full_estimate.json")])

        assert result.exit_code == 2
        assert "Warnings:" in result.output
        assert "Validation passed with 2 warning(s)" in result.output

    def test_file_not_found(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["validate", str(FIXTURES_PATH / "nonexistent.json")])

        assert result.exit_code == 1
        assert "File not found" in result.output

    def test_invalid_json(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["validate", str(FIXTURES_PATH / "invalid_json.json")])

        assert result.exit_code == 1
        assert "Invalid JSON syntax" in result.output
        assert "Validation failed." in result.output

    def test_schema_errors(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["validate", str(FIXTURES_PATH / "invalid_schema.json")])

        assert result.exit_code == 1
        assert "rooms[0].length" in result.output
        assert "colour_scheme" in result.output

    def test_advisory_errors(self, runner: CliRunner, tmp_path: Path) -> None:
        content = (FIXTURES_PATH / "minimal_estimate.json").read_text()
        path = tmp_path / "estimate.json"
        path.write_text(
            content.replace('"height": 10}', '"height": 10, "openings": [{"area": 500}]}')
        )

        result = runner.invoke(app, ["validate", str(path)])

        assert result.exit_code == 1
        assert "Validation failed: 1 error(s), 0 warning(s)" in result.output
