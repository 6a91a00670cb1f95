#!/usr/bin/env python3
"""
Split Calculator for shared trip expenses.

Computes each member's owed share of one expense under its split strategy.
Uses integer cents throughout; shares always sum exactly to the expense
amount, with leftover cents apportioned by largest remainder.

Key Features:
- Equal: amount divided evenly across the whole roster (payer included)
- Custom: amount divided by per-member percentages
- Individual: no shared split, empty share map
"""

from decimal import Decimal

from ..core.currency import apportion_cents, validate_sum_equals_total
from ..core.money import Money
from .errors import InvalidSplitError, UnknownMemberError
from .models import CustomSplit, EqualSplit, Expense, IndividualSplit, Member

# Percentages must sum to 100 within this tolerance
PERCENT_TOLERANCE = Decimal("0.01")


def compute_shares(expense: Expense, members: list[Member] | tuple[Member, ...]) -> dict[str, Money]:
    """
    Compute each member's share of an expense.

    Args:
        expense: The expense to split
        members: Trip roster; share order follows roster order

    Returns:
        Mapping of member id to owed share. Empty for individual expenses.

    Raises:
        InvalidSplitError: Empty roster on an equal split, negative amount, or
            custom percentages that are negative, non-finite or don't sum to 100
        UnknownMemberError: Payer or custom split member not on the roster
    """
    if expense.amount.to_cents() < 0:
        raise InvalidSplitError(
            f"Expense {expense.id} has a negative amount: {expense.amount}", expense_id=expense.id
        )

    member_ids = [m.id for m in members]
    if members and expense.paid_by not in member_ids:
        raise UnknownMemberError(
            f"Expense {expense.id} is paid by unknown member {expense.paid_by}",
            expense_id=expense.id,
            member_id=expense.paid_by,
        )

    split = expense.split
    if isinstance(split, IndividualSplit):
        return {}
    if isinstance(split, EqualSplit):
        return _equal_shares(expense, member_ids)
    if isinstance(split, CustomSplit):
        return _custom_shares(expense, split, member_ids)
    raise InvalidSplitError(f"Unsupported split strategy: {split!r}", expense_id=expense.id)


def _equal_shares(expense: Expense, member_ids: list[str]) -> dict[str, Money]:
    if not member_ids:
        raise InvalidSplitError(
            f"Expense {expense.id} cannot be split equally among zero members", expense_id=expense.id
        )

    parts = apportion_cents(expense.amount.to_cents(), [Decimal(1)] * len(member_ids))
    return _verified_shares(expense, member_ids, parts)


def _custom_shares(expense: Expense, split: CustomSplit, member_ids: list[str]) -> dict[str, Money]:
    roster = set(member_ids)
    for member_id, percentage in split.percentages.items():
        if member_id not in roster:
            raise UnknownMemberError(
                f"Expense {expense.id} splits to unknown member {member_id}",
                expense_id=expense.id,
                member_id=member_id,
            )
        if not percentage.is_finite() or percentage < 0:
            raise InvalidSplitError(
                f"Expense {expense.id} has invalid percentage {percentage} for {member_id}",
                expense_id=expense.id,
                member_id=member_id,
            )

    total_percent = sum(split.percentages.values(), Decimal(0))
    if abs(total_percent - 100) > PERCENT_TOLERANCE:
        raise InvalidSplitError(
            f"Expense {expense.id} split percentages sum to {total_percent}, expected 100",
            expense_id=expense.id,
        )

    # Members absent from the mapping get a zero share
    weights = [split.percentages.get(member_id, Decimal(0)) for member_id in member_ids]
    parts = apportion_cents(expense.amount.to_cents(), weights)
    return _verified_shares(expense, member_ids, parts)


def _verified_shares(expense: Expense, member_ids: list[str], parts: list[int]) -> dict[str, Money]:
    if not validate_sum_equals_total(parts, expense.amount.to_cents()):
        raise InvalidSplitError(
            f"Expense {expense.id} shares total {sum(parts)} doesn't match amount {expense.amount.to_cents()}",
            expense_id=expense.id,
        )
    return {member_id: Money.from_cents(cents) for member_id, cents in zip(member_ids, parts)}
