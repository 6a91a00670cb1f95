#!/usr/bin/env python3
"""
Balance Aggregator

Folds logged expenses and their computed shares into one net balance per
member. Every roster member appears in the result, including members with
no activity.
"""

import logging

from ..core.currency import EPSILON_CENTS
from ..core.money import Money
from .errors import BalanceInvariantViolation, CurrencyMismatchError, UnknownMemberError
from .models import Balance, Expense, Member
from .split_calculator import compute_shares

logger = logging.getLogger(__name__)


def check_uniform_currency(expenses: list | tuple) -> str | None:
    """
    Ensure every expense uses the same currency.

    Returns:
        The shared currency code, or None when there are no expenses

    Raises:
        CurrencyMismatchError: If two expenses use different currencies
    """
    currency = None
    for expense in expenses:
        if currency is None:
            currency = expense.currency
        elif expense.currency != currency:
            raise CurrencyMismatchError(
                f"Expense {expense.id} is in {expense.currency}, expected {currency}",
                expense_id=expense.id,
            )
    return currency


def aggregate(
    expenses: list[Expense] | tuple[Expense, ...], members: list[Member] | tuple[Member, ...]
) -> dict[str, Balance]:
    """
    Compute every member's paid, owed share, and net balance.

    Shared expenses add their amount to the payer's paid total and each
    computed share to that member's owed share. Individual expenses only add
    to the payer's personal total and leave the net untouched.

    Args:
        expenses: Logged expenses (planned expenses never enter balances)
        members: Trip roster

    Returns:
        Mapping of member id to Balance, in roster order

    Raises:
        InvalidSplitError: If any expense cannot be split
        UnknownMemberError: If a payer or split member is not on the roster.
            Payers are checked before splitting, so an empty roster with any
            expense raises this rather than InvalidSplitError.
        CurrencyMismatchError: If expenses use different currencies
        BalanceInvariantViolation: If the nets don't sum to zero
    """
    check_uniform_currency(expenses)

    paid = {m.id: 0 for m in members}
    owed = {m.id: 0 for m in members}
    personal = {m.id: 0 for m in members}

    for expense in expenses:
        if expense.paid_by not in paid:
            raise UnknownMemberError(
                f"Expense {expense.id} is paid by unknown member {expense.paid_by}",
                expense_id=expense.id,
                member_id=expense.paid_by,
            )

        if not expense.is_shared:
            personal[expense.paid_by] += expense.amount.to_cents()
            continue

        paid[expense.paid_by] += expense.amount.to_cents()
        for member_id, share in compute_shares(expense, members).items():
            owed[member_id] += share.to_cents()

    balances = {
        m.id: Balance(
            member=m,
            paid=Money.from_cents(paid[m.id]),
            owed_share=Money.from_cents(owed[m.id]),
            personal=Money.from_cents(personal[m.id]),
        )
        for m in members
    }

    net_sum = sum(b.net.to_cents() for b in balances.values())
    if abs(net_sum) > EPSILON_CENTS:
        logger.error("Net balances sum to %d cents across %d members", net_sum, len(members))
        raise BalanceInvariantViolation(
            f"Net balances sum to {Money.from_cents(net_sum)}, expected zero"
        )

    logger.debug("Aggregated %d expenses across %d members", len(expenses), len(members))
    return balances
