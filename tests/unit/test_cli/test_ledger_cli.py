#!/usr/bin/env python3
"""
Unit tests for ledger CLI commands.

Runs each command against a snapshot file and checks the rendered output.
"""

import json

import pytest
from click.testing import CliRunner

from tripsplit.cli.ledger import ledger


@pytest.fixture
def runner():
    """Click test runner."""
    return CliRunner()


@pytest.mark.cli
class TestBalancesCommand:
    """Test the balances command."""

    def test_balances_table(self, runner, snapshot_file):
        """Test the per-member table."""
        result = runner.invoke(ledger, ["balances", str(snapshot_file)])

        assert result.exit_code == 0
        assert "Balances (USD):" in result.output
        assert "Net:   $45.00" in result.output
        assert "Net:   -$55.00" in result.output
        assert "Personal: $40.50" in result.output

    def test_balances_json(self, runner, snapshot_file):
        """Test JSON output."""
        result = runner.invoke(ledger, ["balances", str(snapshot_file), "--json"])

        assert result.exit_code == 0
        data = json.loads(result.output)
        assert [(row["member"]["id"], row["net"]) for row in data] == [
            ("a", "10.00"),
            ("b", "45.00"),
            ("c", "-55.00"),
        ]

    def test_missing_snapshot(self, runner, temp_dir):
        """Test a missing snapshot file fails cleanly."""
        result = runner.invoke(ledger, ["balances", str(temp_dir / "missing.json")])

        assert result.exit_code == 1
        assert "Trip snapshot not found" in result.output

    def test_unknown_payer(self, runner, temp_dir, snapshot_data):
        """Test ledger errors become CLI errors."""
        snapshot_data["expenses"][0]["paid_by"] = "zed"
        path = temp_dir / "bad.json"
        path.write_text(json.dumps(snapshot_data))

        result = runner.invoke(ledger, ["balances", str(path)])

        assert result.exit_code == 1
        assert "unknown member zed" in result.output


@pytest.mark.cli
class TestSettleCommand:
    """Test the settle command."""

    def test_settle_transfers(self, runner, snapshot_file):
        """Test the transfer list and total."""
        result = runner.invoke(ledger, ["settle", str(snapshot_file)])

        assert result.exit_code == 0
        lines = result.output.splitlines()
        assert lines.index("Carol pays Bob $45.00") < lines.index("Carol pays Alice $10.00")
        assert "Total: 2 transfers, $55.00" in result.output

    def test_settle_json(self, runner, snapshot_file):
        """Test JSON output."""
        result = runner.invoke(ledger, ["settle", str(snapshot_file), "--json"])

        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data[0] == {
            "from": {"id": "c", "name": "Carol"},
            "to": {"id": "b", "name": "Bob"},
            "amount": "45.00",
        }

    def test_everyone_settled(self, runner, temp_dir):
        """Test a trip with nothing owed."""
        path = temp_dir / "empty.json"
        path.write_text(json.dumps({"members": [{"id": "a", "name": "Alice"}], "expenses": []}))

        result = runner.invoke(ledger, ["settle", str(path)])

        assert result.exit_code == 0
        assert "Everyone is settled up." in result.output

    def test_invalid_split(self, runner, temp_dir, snapshot_data):
        """Test percentages that don't sum to 100 fail the command."""
        snapshot_data["expenses"][1]["split_details"] = {"a": 50, "b": 49}
        path = temp_dir / "bad.json"
        path.write_text(json.dumps(snapshot_data))

        result = runner.invoke(ledger, ["settle", str(path)])

        assert result.exit_code == 1
        assert "expected 100" in result.output

    def test_non_finite_percentage(self, runner, temp_dir, snapshot_data):
        """Test a NaN percentage fails the command with a message, not a traceback."""
        snapshot_data["expenses"][1]["split_details"] = {"a": "NaN", "b": 100}
        path = temp_dir / "nan.json"
        path.write_text(json.dumps(snapshot_data))

        result = runner.invoke(ledger, ["settle", str(path)])

        assert result.exit_code == 1
        assert "Invalid snapshot" in result.output
        assert "must be finite" in result.output


@pytest.mark.cli
class TestViewCommand:
    """Test the view command."""

    def test_grouped_view(self, runner, snapshot_file):
        """Test date groups, entry lines and totals."""
        result = runner.invoke(ledger, ["view", str(snapshot_file)])

        assert result.exit_code == 0
        lines = result.output.splitlines()
        assert lines.index("2024-08-15") < lines.index("2024-08-16") < lines.index("Unscheduled")
        assert "  Dinner: $90.00 (food, paid by Alice)" in lines
        assert "  Boat tour: $60.00 (other, planned, $20.00 per person)" in lines
        assert "Spent:   $230.50" in lines
        assert "Planned: $105.00" in lines
        assert "Budget used: 46%" in lines
        assert "  Bob: $100.00" in lines

    def test_budget_override(self, runner, snapshot_file):
        """Test --budget replaces the snapshot budget."""
        result = runner.invoke(ledger, ["view", str(snapshot_file), "--budget", "100"])

        assert result.exit_code == 0
        assert "Budget used: 100%" in result.output

    def test_invalid_budget(self, runner, snapshot_file):
        """Test a non-numeric budget is rejected."""
        result = runner.invoke(ledger, ["view", str(snapshot_file), "--budget", "plenty"])

        assert result.exit_code == 1
        assert "Invalid budget: plenty" in result.output

    def test_view_json(self, runner, snapshot_file):
        """Test JSON output."""
        result = runner.invoke(ledger, ["view", str(snapshot_file), "--json"])

        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["total_manual_spent"] == "230.50"
        assert data["percent_of_budget"] == 46
        assert [g["date"] for g in data["groups"]] == ["2024-08-15", "2024-08-16", None]
