#!/usr/bin/env python3
"""
Settlement Planner

Turns net balances into an ordered list of transfers that settle everyone up.

Uses a deterministic greedy two-pointer pass over members sorted by net
balance: the largest creditor is paid by the largest debtor until one of
them is settled, then the pointer for that side moves inward. For n members
with a nonzero balance it emits at most n - 1 transfers, which is not always
the minimum.
"""

import logging
from collections.abc import Iterable, Mapping

from ..core.currency import EPSILON_CENTS
from ..core.money import Money
from .balances import aggregate
from .errors import BalanceInvariantViolation
from .models import Balance, Expense, Member, Transfer

logger = logging.getLogger(__name__)


def _balance_list(balances: Mapping[str, Balance] | Iterable[Balance]) -> list[Balance]:
    if isinstance(balances, Mapping):
        return list(balances.values())
    return list(balances)


def plan(balances: Mapping[str, Balance] | Iterable[Balance]) -> list[Transfer]:
    """
    Compute transfers that bring every net balance to within one cent of zero.

    Args:
        balances: Balances keyed by member id (as returned by aggregate) or a
            plain iterable of Balance

    Returns:
        Transfers in emission order; identical inputs give identical output

    Raises:
        BalanceInvariantViolation: If the nets don't sum to zero within one
            cent, or the pass fails to terminate within its step bound
    """
    balance_list = _balance_list(balances)
    net_sum = sum(b.net.to_cents() for b in balance_list)
    if abs(net_sum) > EPSILON_CENTS:
        logger.error("Cannot settle: net balances sum to %d cents", net_sum)
        raise BalanceInvariantViolation(
            f"Net balances sum to {Money.from_cents(net_sum)}, expected zero; refusing to plan settlement"
        )

    # Creditors first, debtors last. Member id breaks ties, so among equal
    # debtors the lowest id sits at the end and pays first.
    ledger = sorted(
        ([b.member, b.net.to_cents()] for b in balance_list),
        key=lambda entry: (entry[1], entry[0].id),
        reverse=True,
    )

    transfers: list[Transfer] = []
    i, j = 0, len(ledger) - 1
    max_steps = 2 * len(ledger)
    steps = 0

    while i < j:
        steps += 1
        if steps > max_steps:
            logger.error("Settlement exceeded %d steps; balances are not zero-sum", max_steps)
            raise BalanceInvariantViolation("Settlement did not converge; net balances are not zero-sum")

        creditor, debtor = ledger[i], ledger[j]
        if creditor[1] <= EPSILON_CENTS:
            i += 1
        elif debtor[1] >= -EPSILON_CENTS:
            j -= 1
        else:
            amount = min(creditor[1], -debtor[1])
            transfers.append(
                Transfer(from_member=debtor[0], to_member=creditor[0], amount=Money.from_cents(amount))
            )
            creditor[1] -= amount
            debtor[1] += amount

    residual = [(member.id, cents) for member, cents in ledger if cents != 0]
    if residual:
        logger.warning("Dropping sub-cent residual balances: %s", residual)

    logger.debug("Planned %d transfers for %d members", len(transfers), len(ledger))
    return transfers


def settle(expenses: list[Expense] | tuple[Expense, ...], members: list[Member] | tuple[Member, ...]) -> list[Transfer]:
    """Aggregate balances for the expenses and plan the transfers that settle them."""
    return plan(aggregate(expenses, members))


def apply_transfers(
    balances: Mapping[str, Balance] | Iterable[Balance], transfers: list[Transfer]
) -> dict[str, Money]:
    """
    Apply transfers to the balances' nets.

    A transfer credits the payer (their debt shrinks) and debits the
    receiver (their credit shrinks).

    Returns:
        Resulting net per member id
    """
    nets = {b.member.id: b.net for b in _balance_list(balances)}
    for transfer in transfers:
        nets[transfer.from_member.id] += transfer.amount
        nets[transfer.to_member.id] -= transfer.amount
    return nets


def verify_settlement(balances: Mapping[str, Balance] | Iterable[Balance], transfers: list[Transfer]) -> bool:
    """Check that applying the transfers leaves every net within one cent of zero."""
    return all(abs(net.to_cents()) <= EPSILON_CENTS for net in apply_transfers(balances, transfers).values())
