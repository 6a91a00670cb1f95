#!/usr/bin/env python3
"""
Ledger View Builder

Merges logged and planned expenses into one date-grouped presentation model
with summary totals. Runs independently of balances and settlement; planned
per-person estimates here are display-only.
"""

import logging
from collections import defaultdict
from decimal import ROUND_HALF_UP, Decimal

from ..core.money import Money
from .balances import check_uniform_currency
from .errors import UnknownMemberError
from .models import (
    DEFAULT_CURRENCY,
    CategoryTotal,
    DateGroup,
    Expense,
    ExpenseSource,
    GroupedLedger,
    LedgerEntry,
    Member,
    MemberTotal,
    PlannedExpense,
)

logger = logging.getLogger(__name__)

_SOURCE_RANK = {ExpenseSource.MANUAL: 0, ExpenseSource.PLANNED: 1}


def _round_half_up(value: Decimal) -> int:
    return int(value.quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def per_person_estimate(amount: Money, member_count: int) -> Money:
    """Amount divided across the roster, rounded to the nearest cent; an empty roster counts as one."""
    return Money.from_cents(_round_half_up(Decimal(amount.to_cents()) / max(1, member_count)))


def percent_of_budget(spent: Money, budget: Money | None) -> int | None:
    """
    Whole percentage of the budget spent, capped at 100.

    Returns:
        None when no positive budget is set
    """
    if budget is None or budget.to_cents() <= 0:
        return None
    return min(100, _round_half_up(Decimal(spent.to_cents() * 100) / budget.to_cents()))


def _manual_entries(expenses: list[Expense] | tuple[Expense, ...], roster: dict[str, Member]) -> list[LedgerEntry]:
    entries = []
    for expense in expenses:
        payer = roster.get(expense.paid_by)
        if payer is None:
            raise UnknownMemberError(
                f"Expense {expense.id} is paid by unknown member {expense.paid_by}",
                expense_id=expense.id,
                member_id=expense.paid_by,
            )
        entries.append(
            LedgerEntry(
                id=expense.id,
                title=expense.title,
                amount=expense.amount,
                category=expense.category,
                date=expense.date,
                source=ExpenseSource.MANUAL,
                paid_by=payer,
            )
        )
    return entries


def _planned_entries(planned: list[PlannedExpense] | tuple[PlannedExpense, ...], member_count: int) -> list[LedgerEntry]:
    return [
        LedgerEntry(
            id=p.id,
            title=p.title,
            amount=p.amount,
            category=p.category,
            date=p.date,
            source=ExpenseSource.PLANNED,
            per_person_estimate=per_person_estimate(p.amount, member_count),
        )
        for p in planned
    ]


def group_by_date(entries: list[LedgerEntry]) -> tuple[DateGroup, ...]:
    """
    Group entries by calendar date.

    Groups run in ascending date order with the unscheduled bucket last.
    Within a group, manual entries come before planned ones and otherwise
    keep their input order.
    """
    buckets: dict = defaultdict(list)
    for entry in entries:
        buckets[entry.date].append(entry)

    dated = sorted(d for d in buckets if d is not None)
    ordered_dates = dated + ([None] if None in buckets else [])

    return tuple(
        DateGroup(date=d, entries=tuple(sorted(buckets[d], key=lambda e: _SOURCE_RANK[e.source])))
        for d in ordered_dates
    )


def paid_by_member_summary(
    expenses: list[Expense] | tuple[Expense, ...], members: list[Member] | tuple[Member, ...]
) -> tuple[MemberTotal, ...]:
    """
    Sum logged expenses per payer, largest first, omitting members who paid nothing.

    Ties are broken by member id.
    """
    totals = {m.id: 0 for m in members}
    for expense in expenses:
        if expense.paid_by in totals:
            totals[expense.paid_by] += expense.amount.to_cents()

    summary = [MemberTotal(member=m, total=Money.from_cents(totals[m.id])) for m in members if totals[m.id] != 0]
    return tuple(sorted(summary, key=lambda t: (-t.total.to_cents(), t.member.id)))


def category_breakdown(
    expenses: list[Expense] | tuple[Expense, ...], planned: list[PlannedExpense] | tuple[PlannedExpense, ...]
) -> tuple[CategoryTotal, ...]:
    """Spent and planned totals per category, largest combined total first, ties by name."""
    spent: dict[str, int] = defaultdict(int)
    estimated: dict[str, int] = defaultdict(int)
    for expense in expenses:
        spent[expense.category] += expense.amount.to_cents()
    for p in planned:
        estimated[p.category] += p.amount.to_cents()

    categories = set(spent) | set(estimated)
    rows = [
        CategoryTotal(category=c, spent=Money.from_cents(spent[c]), planned=Money.from_cents(estimated[c]))
        for c in categories
    ]
    return tuple(sorted(rows, key=lambda r: (-r.total.to_cents(), r.category)))


def build_view(
    manual_expenses: list[Expense] | tuple[Expense, ...],
    planned_expenses: list[PlannedExpense] | tuple[PlannedExpense, ...],
    members: list[Member] | tuple[Member, ...],
    budget: Money | None = None,
) -> GroupedLedger:
    """
    Build the grouped ledger view with totals.

    Args:
        manual_expenses: Logged expenses
        planned_expenses: Itinerary-derived estimates
        members: Trip roster, used for payer names and per-person estimates
        budget: Optional trip budget for the percent-of-budget figure

    Returns:
        GroupedLedger presentation model

    Raises:
        UnknownMemberError: If a logged expense's payer is not on the roster
        CurrencyMismatchError: If the expenses use different currencies
    """
    currency = check_uniform_currency([*manual_expenses, *planned_expenses]) or DEFAULT_CURRENCY
    roster = {m.id: m for m in members}

    entries = _manual_entries(manual_expenses, roster) + _planned_entries(planned_expenses, len(members))

    total_manual = Money.from_cents(sum(e.amount.to_cents() for e in manual_expenses))
    total_planned = Money.from_cents(sum(p.amount.to_cents() for p in planned_expenses))

    groups = group_by_date(entries)
    logger.debug("Built ledger view with %d entries in %d date groups", len(entries), len(groups))

    return GroupedLedger(
        groups=groups,
        total_manual_spent=total_manual,
        total_planned=total_planned,
        paid_by_member=paid_by_member_summary(manual_expenses, members),
        category_totals=category_breakdown(manual_expenses, planned_expenses),
        percent_of_budget=percent_of_budget(total_manual, budget),
        currency=currency,
    )
