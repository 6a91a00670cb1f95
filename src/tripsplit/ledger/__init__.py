"""
Shared Expense Ledger Package

Balances and settlement for expenses shared among trip members.

This package provides:
- Split calculation for equal, custom-percentage and individual expenses
- Per-member balance aggregation with a zero-sum check
- Greedy settlement planning into peer-to-peer transfers
- A date-grouped ledger view with spent/planned/budget totals

Key Components:
- split_calculator: compute_shares
- balances: aggregate
- settlement: plan, settle, verify_settlement
- view: build_view
- planned: itinerary items to planned expenses
- loader: JSON trip snapshots

Every computation is a pure function of an immutable snapshot; callers
re-run it after any change to expenses, roster or budget.
"""

from .balances import aggregate, check_uniform_currency
from .errors import (
    BalanceInvariantViolation,
    CurrencyMismatchError,
    InvalidSplitError,
    LedgerError,
    SnapshotFormatError,
    UnknownMemberError,
)
from .loader import load_snapshot, snapshot_from_dict
from .models import (
    Balance,
    CategoryTotal,
    CustomSplit,
    DateGroup,
    EqualSplit,
    Expense,
    ExpenseSource,
    GroupedLedger,
    IndividualSplit,
    LedgerEntry,
    Member,
    MemberTotal,
    PlannedExpense,
    SplitStrategy,
    Transfer,
    TripSnapshot,
    split_from_dict,
)
from .planned import ItineraryItem, planned_expenses_from_itinerary
from .settlement import apply_transfers, plan, settle, verify_settlement
from .split_calculator import compute_shares
from .view import build_view

__all__ = [
    # Operations
    "aggregate",
    "apply_transfers",
    "build_view",
    "check_uniform_currency",
    "compute_shares",
    "load_snapshot",
    "plan",
    "planned_expenses_from_itinerary",
    "settle",
    "snapshot_from_dict",
    "split_from_dict",
    "verify_settlement",
    # Errors
    "BalanceInvariantViolation",
    "CurrencyMismatchError",
    "InvalidSplitError",
    "LedgerError",
    "SnapshotFormatError",
    "UnknownMemberError",
    # Models
    "Balance",
    "CategoryTotal",
    "CustomSplit",
    "DateGroup",
    "EqualSplit",
    "Expense",
    "ExpenseSource",
    "GroupedLedger",
    "IndividualSplit",
    "ItineraryItem",
    "LedgerEntry",
    "Member",
    "MemberTotal",
    "PlannedExpense",
    "SplitStrategy",
    "Transfer",
    "TripSnapshot",
]
