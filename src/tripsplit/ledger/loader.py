#!/usr/bin/env python3
"""
Trip Snapshot Loader

Loads a trip's roster, logged expenses, planned costs and budget from a
JSON snapshot file into an immutable TripSnapshot.

Snapshot shape:
    {
      "currency": "USD",                    # optional
      "budget": "1500.00",                  # optional
      "members": [{"id": "...", "name": "..."}],
      "expenses": [{"id", "title", "amount", "paid_by", "date",
                    "category", "split_type", "split_details"}],
      "itinerary": [{"id", "title", "estimated_cost", "date", "day_number"}],
      "planned_expenses": [{"id", "title", "amount", "date", "category"}]
    }

Planned costs come from "planned_expenses" when present, otherwise they are
derived from "itinerary".
"""

import logging
from pathlib import Path
from typing import Any

from ..core.config import get_config
from ..core.json_utils import read_json
from ..core.money import Money
from .errors import LedgerError, SnapshotFormatError
from .models import Expense, Member, PlannedExpense, TripSnapshot
from .planned import ItineraryItem, planned_expenses_from_itinerary

logger = logging.getLogger(__name__)


def _records(data: dict[str, Any], key: str) -> list[dict[str, Any]]:
    records = data.get(key) or []
    if not isinstance(records, list):
        raise SnapshotFormatError(f"Snapshot field '{key}' must be a list")
    return records


def snapshot_from_dict(data: dict[str, Any], default_currency: str | None = None) -> TripSnapshot:
    """
    Build a TripSnapshot from parsed snapshot data.

    Args:
        data: Parsed snapshot JSON
        default_currency: Currency when the snapshot names none.
                          If None, uses config.default_currency

    Raises:
        SnapshotFormatError: If a record is missing fields or has bad values
        InvalidSplitError: If an expense names an unknown split type
    """
    if not isinstance(data, dict):
        raise SnapshotFormatError("Snapshot must be a JSON object")

    if default_currency is None:
        default_currency = get_config().default_currency
    currency = (data.get("currency") or default_currency).upper()

    try:
        members = tuple(Member.from_dict(m) for m in _records(data, "members"))
        expenses = tuple(Expense.from_dict(e, currency) for e in _records(data, "expenses"))

        if "planned_expenses" in data:
            planned = tuple(PlannedExpense.from_dict(p, currency) for p in _records(data, "planned_expenses"))
        else:
            items = [ItineraryItem.from_dict(i) for i in _records(data, "itinerary")]
            planned = tuple(planned_expenses_from_itinerary(items, currency))

        budget = Money.from_value(data["budget"]) if data.get("budget") is not None else None
    except LedgerError:
        raise
    except (KeyError, TypeError, ValueError) as e:
        raise SnapshotFormatError(f"Malformed snapshot record: {e!r}") from e

    negative = [e.id for e in expenses if e.amount.to_cents() < 0]
    if negative:
        raise SnapshotFormatError(f"Expenses with negative amounts: {negative}", expense_id=negative[0])

    logger.debug(
        "Loaded snapshot: %d members, %d expenses, %d planned", len(members), len(expenses), len(planned)
    )
    return TripSnapshot(
        members=members,
        expenses=expenses,
        planned_expenses=planned,
        budget=budget,
        currency=currency,
    )


def load_snapshot(path: str | Path, default_currency: str | None = None) -> TripSnapshot:
    """
    Load a trip snapshot from a JSON file.

    Relative paths that don't exist in the working directory are looked up
    under config.data_dir.

    Raises:
        FileNotFoundError: If the snapshot file is not found
        SnapshotFormatError: If the file content is malformed
    """
    snapshot_file = Path(path)
    if not snapshot_file.exists() and not snapshot_file.is_absolute():
        snapshot_file = get_config().data_dir / snapshot_file

    if not snapshot_file.exists():
        raise FileNotFoundError(f"Trip snapshot not found: {path}")

    try:
        data = read_json(snapshot_file)
    except ValueError as e:
        raise SnapshotFormatError(f"Snapshot is not valid JSON: {snapshot_file}") from e

    return snapshot_from_dict(data, default_currency)
