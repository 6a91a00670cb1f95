#!/usr/bin/env python3
"""
Synthetic Ledger Test Data

Builders for members, expenses and planned expenses, plus a seeded generator
of random trips for property-style tests.

Note: Uses standard random module for test data generation (not cryptographic use).
"""

import random
from datetime import date, timedelta
from decimal import Decimal

from tripsplit.core.dates import FinancialDate
from tripsplit.core.money import Money
from tripsplit.ledger import CustomSplit, EqualSplit, Expense, IndividualSplit, Member, PlannedExpense

SYNTHETIC_NAMES = ["Alice", "Bob", "Carol", "Dave", "Erin", "Frank", "Grace", "Heidi"]

SYNTHETIC_CATEGORIES = ["accommodation", "activities", "food", "transportation", "other"]


def make_members(count: int) -> list[Member]:
    """Roster with ids m0, m1, ..."""
    return [Member(id=f"m{i}", name=SYNTHETIC_NAMES[i % len(SYNTHETIC_NAMES)]) for i in range(count)]


def make_expense(
    expense_id: str,
    amount: str,
    paid_by: str,
    split=None,
    date: str | None = None,
    category: str = "food",
    currency: str = "USD",
) -> Expense:
    """Build an Expense with sensible defaults."""
    return Expense(
        id=expense_id,
        title=f"Expense {expense_id}",
        amount=Money.from_dollars(amount),
        currency=currency,
        paid_by=paid_by,
        category=category,
        date=FinancialDate.from_iso(date) if date else None,
        split=split if split is not None else EqualSplit(),
    )


def make_planned(
    expense_id: str, amount: str, date: str | None = None, category: str = "activities", currency: str = "USD"
) -> PlannedExpense:
    """Build a PlannedExpense with sensible defaults."""
    return PlannedExpense(
        id=expense_id,
        title=f"Planned {expense_id}",
        amount=Money.from_dollars(amount),
        currency=currency,
        category=category,
        date=FinancialDate.from_iso(date) if date else None,
    )


def _random_percentages(rng: random.Random, members: list[Member]) -> dict[str, Decimal]:
    """Whole percentages over a random subset of members, summing to exactly 100."""
    chosen = rng.sample(members, rng.randint(1, len(members)))
    cuts = sorted(rng.sample(range(1, 100), len(chosen) - 1))
    bounds = [0, *cuts, 100]
    return {m.id: Decimal(bounds[i + 1] - bounds[i]) for i, m in enumerate(chosen)}


def generate_synthetic_expenses(members: list[Member], count: int, seed: int = 42) -> list[Expense]:
    """
    Generate random expenses with a mix of split strategies.

    Amounts range from $0.01 to $999.99 and dates span two weeks, with some
    expenses left unscheduled.
    """
    rng = random.Random(seed)
    start = date(2024, 8, 1)
    expenses = []

    for i in range(count):
        kind = rng.choice(["equal", "equal", "custom", "individual"])
        if kind == "equal":
            split = EqualSplit()
        elif kind == "custom":
            split = CustomSplit(percentages=_random_percentages(rng, members))
        else:
            split = IndividualSplit()

        day = start + timedelta(days=rng.randint(0, 13))
        expenses.append(
            Expense(
                id=f"e{i}",
                title=f"Synthetic expense {i}",
                amount=Money.from_cents(rng.randint(1, 99999)),
                currency="USD",
                paid_by=rng.choice(members).id,
                category=rng.choice(SYNTHETIC_CATEGORIES),
                date=FinancialDate(day) if rng.random() > 0.1 else None,
                split=split,
            )
        )

    return expenses
