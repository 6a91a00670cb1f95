#!/usr/bin/env python3
"""
Planned expenses derived from itinerary items.

Itinerary items with a positive estimated cost become read-only planned
expenses. Items not placed on a trip day keep no date and show up as
unscheduled.
"""

from dataclasses import dataclass
from typing import Any

from ..core.dates import FinancialDate
from ..core.money import Money
from .models import DEFAULT_CATEGORY, PlannedExpense


@dataclass(frozen=True)
class ItineraryItem:
    """Itinerary entry as stored by the trip planner."""

    id: str
    title: str
    estimated_cost: Money | None = None
    currency: str | None = None
    category: str | None = None
    date: FinancialDate | None = None
    day_number: int | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ItineraryItem":
        """Create ItineraryItem from a stored itinerary record."""
        cost = data.get("estimated_cost")
        date_str = data.get("date")
        return cls(
            id=str(data["id"]),
            title=data.get("title") or "",
            estimated_cost=Money.from_value(cost) if cost is not None else None,
            currency=data.get("currency"),
            category=data.get("category"),
            date=FinancialDate.from_iso(date_str) if date_str else None,
            day_number=data.get("day_number"),
        )


def planned_expenses_from_itinerary(items: list[ItineraryItem], default_currency: str = "USD") -> list[PlannedExpense]:
    """
    Project itinerary items with a cost onto planned expenses.

    Args:
        items: Itinerary items in display order
        default_currency: Currency for items that don't name one

    Returns:
        Planned expenses in the same order as their items
    """
    planned = []
    for item in items:
        if item.estimated_cost is None or item.estimated_cost.to_cents() <= 0:
            continue
        planned.append(
            PlannedExpense(
                id=item.id,
                title=item.title,
                amount=item.estimated_cost,
                currency=(item.currency or default_currency).upper(),
                category=item.category or DEFAULT_CATEGORY,
                date=item.date if item.day_number else None,
            )
        )
    return planned
