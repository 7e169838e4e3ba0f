"""Unit tests for the command-line interface."""

import polars as pl
import pytest
from pathlib import Path

from click.testing import CliRunner

from rolodex import __version__
from rolodex.cli.main import cli

FIXTURES = Path(__file__).parent.parent / "fixtures"
SAMPLE = str(FIXTURES / "workspaces" / "sample.yaml")


@pytest.fixture
def runner():
    return CliRunner()


class TestSearchCommand:
    """Test the search command."""

    def test_search_results(self, runner):
        """Test a query with matches prints a result table."""
        result = runner.invoke(cli, ["search", "acme", "-w", SAMPLE])

        assert result.exit_code == 0
        assert 'Results for "acme"' in result.output

    def test_search_no_results(self, runner):
        """Test a query with no matches."""
        result = runner.invoke(cli, ["search", "zzzz", "-w", SAMPLE])

        assert result.exit_code == 0
        assert 'No results found for "zzzz"' in result.output

    def test_search_short_query(self, runner):
        """Test a short query is refused before any data is read."""
        result = runner.invoke(cli, ["search", "a", "-w", "does-not-exist.yaml"])

        assert result.exit_code == 0
        assert "Type at least 2 characters to search" in result.output

    def test_search_limit(self, runner):
        """Test --limit keeps only the top-ranked results."""
        result = runner.invoke(cli, ["search", "acme", "-w", SAMPLE, "-n", "1"])

        assert result.exit_code == 0
        assert "contact" in result.output
        assert "Pipeline:" not in result.output

    @pytest.mark.parametrize("limit", ["0", "-3"])
    def test_search_limit_must_be_positive(self, runner, limit):
        """Test a zero or negative limit is rejected as a usage error."""
        result = runner.invoke(cli, ["search", "acme", "-w", SAMPLE, "--limit", limit])

        assert result.exit_code == 2
        assert "Invalid value" in result.output

    def test_search_missing_workspace(self, runner, tmp_path):
        """Test a missing manifest is reported."""
        result = runner.invoke(cli, ["search", "acme", "-w", str(tmp_path / "nope.yaml")])

        assert result.exit_code == 1
        assert "Configuration error" in result.output


class TestResolveStageCommand:
    """Test the resolve-stage command."""

    def test_stage_moves(self, runner):
        """Test a relationship stage change."""
        result = runner.invoke(
            cli, ["resolve-stage", "Initial Outreach", "Schedule coffee meetup"]
        )

        assert result.exit_code == 0
        assert "Initial Outreach -> Forming the Relationship" in result.output

    def test_cto_other_unchanged(self, runner):
        """Test the catch-all CTO action leaves the status."""
        result = runner.invoke(
            cli,
            ["resolve-stage", "--kind", "cto", "in progress", "Other (specify in notes)"],
        )

        assert result.exit_code == 0
        assert "in progress (unchanged)" in result.output

    def test_unknown_stage_warns(self, runner):
        """Test an unknown current stage is flagged."""
        result = runner.invoke(cli, ["resolve-stage", "Dormant", "Follow up call"])

        assert result.exit_code == 0
        assert "Warning" in result.output


class TestActionsCommand:
    """Test the actions command."""

    def test_lists_both_kinds(self, runner):
        result = runner.invoke(cli, ["actions"])

        assert result.exit_code == 0
        assert "relationship actions" in result.output
        assert "cto actions" in result.output

    def test_single_kind(self, runner):
        result = runner.invoke(cli, ["actions", "--kind", "cto"])

        assert result.exit_code == 0
        assert "relationship actions" not in result.output


class TestHealthCommand:
    """Test the health command."""

    def test_health_report(self, runner):
        """Test both pipelines are reported."""
        result = runner.invoke(cli, ["health", "-w", SAMPLE])

        assert result.exit_code == 0
        assert "Relationship pipeline" in result.output
        assert "CTO club pipeline" in result.output
        assert "Health score" in result.output


class TestExportCommand:
    """Test the export command."""

    def test_export_pipeline(self, runner, tmp_path):
        """Test exporting the relationship pipeline to CSV."""
        output = tmp_path / "pipeline.csv"

        result = runner.invoke(cli, ["export", "pipeline", str(output), "-w", SAMPLE])

        assert result.exit_code == 0
        df = pl.read_csv(output, infer_schema_length=0)
        assert df["Contact Name"].to_list() == ["Jane Doe", "Bob Smith", "Unknown Contact"]

    def test_export_bad_destination(self, runner, tmp_path):
        """Test an unsupported destination format."""
        result = runner.invoke(
            cli, ["export", "contacts", str(tmp_path / "contacts.xlsx"), "-w", SAMPLE]
        )

        assert result.exit_code == 1
        assert "Export failed" in result.output


class TestImportContactsCommand:
    """Test the import-contacts command."""

    def test_import_reports_errors(self, runner):
        """Test rejected rows are listed and the exit code is non-zero."""
        result = runner.invoke(
            cli, ["import-contacts", str(FIXTURES / "data" / "import_contacts.csv")]
        )

        assert result.exit_code == 1
        assert "Row 4" in result.output
        assert "Invalid email format: not-an-email" in result.output

    def test_import_writes_valid_contacts(self, runner, tmp_path):
        """Test accepted contacts are written out."""
        output = tmp_path / "imported.jsonl"

        runner.invoke(
            cli,
            [
                "import-contacts",
                str(FIXTURES / "data" / "import_contacts.csv"),
                "-o",
                str(output),
            ],
        )

        assert len(pl.read_ndjson(output)) == 3


class TestValidateCommand:
    """Test the validate command."""

    def test_validate_valid_workspace(self, runner):
        """Test a valid manifest."""
        result = runner.invoke(cli, ["validate", SAMPLE])

        assert result.exit_code == 0
        assert "✓ Workspace is valid" in result.output
        assert "Name: sample" in result.output

    def test_validate_invalid_workspace(self, runner):
        """Test an invalid manifest."""
        result = runner.invoke(
            cli, ["validate", str(FIXTURES / "workspaces" / "invalid_schema.yaml")]
        )

        assert result.exit_code == 1
        assert "✗ Validation failed" in result.output


class TestVersionCommand:
    """Test the version command."""

    def test_version(self, runner):
        result = runner.invoke(cli, ["version"])

        assert result.exit_code == 0
        assert f"Rolodex version {__version__}" in result.output
