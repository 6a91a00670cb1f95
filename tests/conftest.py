"""
Pytest Configuration and Shared Fixtures

Provides common test fixtures and configuration for the entire test suite.
"""

import json
import tempfile
from decimal import Decimal
from pathlib import Path
from typing import Any

import pytest

from tests.fixtures.ledger_data import make_expense
from tripsplit.ledger import CustomSplit, Expense, IndividualSplit, Member


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test files."""
    with tempfile.TemporaryDirectory() as temp_path:
        yield Path(temp_path)


@pytest.fixture
def members() -> list[Member]:
    """Three-member trip roster."""
    return [Member(id="a", name="Alice"), Member(id="b", name="Bob"), Member(id="c", name="Carol")]


@pytest.fixture
def mixed_expenses() -> list[Expense]:
    """Equal, custom and individual expenses across the three-member roster."""
    return [
        make_expense("e1", "90.00", "a", date="2024-08-15"),
        make_expense(
            "e2",
            "100.00",
            "b",
            split=CustomSplit(percentages={"a": Decimal("50"), "b": Decimal("25"), "c": Decimal("25")}),
            date="2024-08-16",
        ),
        make_expense("e3", "40.00", "c", split=IndividualSplit(), date="2024-08-16"),
    ]


@pytest.fixture
def snapshot_data() -> dict[str, Any]:
    """Raw trip snapshot as stored in a JSON file."""
    return {
        "currency": "USD",
        "budget": "500.00",
        "members": [
            {"id": "a", "name": "Alice"},
            {"user_id": "b", "profiles": {"name": "Bob"}},
            {"id": "c", "name": "Carol"},
        ],
        "expenses": [
            {
                "id": "e1",
                "title": "Dinner",
                "amount": 90,
                "paid_by": "a",
                "category": "food",
                "date": "2024-08-15T19:30:00.000Z",
                "split_type": "equal",
            },
            {
                "id": "e2",
                "title": "Museum",
                "amount": "100.00",
                "paid_by": "b",
                "category": "activities",
                "date": "2024-08-16",
                "split_type": "custom",
                "split_details": {"a": 50, "b": 25, "c": 25},
            },
            {
                "id": "e3",
                "title": "Souvenir",
                "amount": 40.5,
                "paid_by": "c",
                "category": "gifts",
                "date": None,
                "split_type": "individual",
            },
        ],
        "itinerary": [
            {"id": "i1", "title": "Boat tour", "estimated_cost": 60, "date": "2024-08-15", "day_number": 1},
            {"id": "i2", "title": "Free walk", "estimated_cost": 0, "date": "2024-08-16", "day_number": 2},
            {"id": "i3", "title": "Concert", "estimated_cost": "45.00", "date": "2024-08-17", "day_number": None},
        ],
    }


@pytest.fixture
def snapshot_file(temp_dir, snapshot_data) -> Path:
    """Trip snapshot written to a JSON file."""
    path = temp_dir / "trip.json"
    path.write_text(json.dumps(snapshot_data))
    return path


@pytest.fixture(autouse=True)
def setup_test_environment(monkeypatch, tmp_path):
    """Set up test environment variables and force a fresh config per test."""
    monkeypatch.setenv("TRIPSPLIT_ENV", "test")
    monkeypatch.setenv("TRIPSPLIT_DATA_DIR", str(tmp_path / "tripsplit_data"))
    monkeypatch.setenv("TRIPSPLIT_DEFAULT_CURRENCY", "USD")
    monkeypatch.setenv("LOG_LEVEL", "INFO")
    monkeypatch.setattr("tripsplit.core.config._config", None)


# Test markers for categorizing tests
def pytest_configure(config):
    """Configure custom pytest markers."""
    config.addinivalue_line("markers", "unit: Unit tests for individual components")
    config.addinivalue_line("markers", "integration: Integration tests for complete workflows")
    config.addinivalue_line("markers", "currency: Tests for currency handling and precision")
    config.addinivalue_line("markers", "ledger: Tests for split, balance, settlement and view logic")
    config.addinivalue_line("markers", "cli: Tests for command-line interface")
