#!/usr/bin/env python3
"""
Expense Ledger Domain Models

Type-safe models for trip members, logged and planned expenses, split
strategies, balances, settlement transfers, and the grouped ledger view.
All amounts use the Money and FinancialDate primitives.
"""

from dataclasses import dataclass, field
from decimal import Decimal, InvalidOperation
from enum import Enum
from typing import Any, ClassVar, Union

from ..core.dates import FinancialDate
from ..core.money import Money
from .errors import InvalidSplitError

DEFAULT_CATEGORY = "other"
DEFAULT_CURRENCY = "USD"


class ExpenseSource(Enum):
    """Where a ledger entry came from."""

    MANUAL = "manual"
    PLANNED = "planned"


@dataclass(frozen=True)
class Member:
    """Trip member on the roster."""

    id: str
    name: str

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Member":
        """
        Create Member from a stored roster record.

        Accepts the flat form ({"id", "name"}) and the trip-member form where
        the display name lives under "profiles".
        """
        member_id = data.get("id") or data["user_id"]
        name = data.get("name") or (data.get("profiles") or {}).get("name") or "Unknown"
        return cls(id=str(member_id), name=name)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {"id": self.id, "name": self.name}


@dataclass(frozen=True)
class EqualSplit:
    """Amount divided evenly across every member on the roster."""

    split_type: ClassVar[str] = "equal"


@dataclass(frozen=True)
class CustomSplit:
    """Amount divided by per-member percentages (0-100, summing to 100)."""

    percentages: dict[str, Decimal]

    split_type: ClassVar[str] = "custom"


@dataclass(frozen=True)
class IndividualSplit:
    """No shared split; the payer bears the whole amount privately."""

    split_type: ClassVar[str] = "individual"


SplitStrategy = Union[EqualSplit, CustomSplit, IndividualSplit]


def split_from_dict(split_type: str | None, split_details: dict[str, Any] | None = None) -> SplitStrategy:
    """
    Build a split strategy from stored split_type/split_details fields.

    A missing split_type means an equal split.

    Raises:
        InvalidSplitError: If the split type is unknown or custom details are unusable
    """
    if split_type in (None, "", EqualSplit.split_type):
        return EqualSplit()
    if split_type == IndividualSplit.split_type:
        return IndividualSplit()
    if split_type == CustomSplit.split_type:
        if not split_details:
            raise InvalidSplitError("Custom split requires split details")
        try:
            percentages = {str(k): Decimal(str(v)) for k, v in split_details.items()}
        except InvalidOperation as e:
            raise InvalidSplitError(f"Custom split percentages must be numeric: {split_details}") from e
        if not all(p.is_finite() for p in percentages.values()):
            raise InvalidSplitError(f"Custom split percentages must be finite: {split_details}")
        return CustomSplit(percentages=percentages)
    raise InvalidSplitError(f"Unknown split type: {split_type}")


def split_to_dict(split: SplitStrategy) -> dict[str, Any]:
    """Convert a split strategy to its stored split_type/split_details form."""
    details = None
    if isinstance(split, CustomSplit):
        details = {k: str(v) for k, v in split.percentages.items()}
    return {"split_type": split.split_type, "split_details": details}


def _optional_date(value: str | None) -> FinancialDate | None:
    return FinancialDate.from_iso(value) if value else None


def _date_str(value: FinancialDate | None) -> str | None:
    return value.to_iso_string() if value else None


@dataclass(frozen=True)
class Expense:
    """
    Logged expense paid by one member.

    Note: Field names follow the stored expense records (paid_by, category).
    """

    id: str
    title: str
    amount: Money
    currency: str
    paid_by: str
    category: str = DEFAULT_CATEGORY
    date: FinancialDate | None = None
    split: SplitStrategy = field(default_factory=EqualSplit)

    @property
    def is_shared(self) -> bool:
        """Whether the expense enters the shared balances."""
        return not isinstance(self.split, IndividualSplit)

    @classmethod
    def from_dict(cls, data: dict[str, Any], default_currency: str = DEFAULT_CURRENCY) -> "Expense":
        """Create Expense from a stored expense record."""
        return cls(
            id=str(data["id"]),
            title=data.get("title") or data.get("name") or "",
            amount=Money.from_value(data["amount"]),
            currency=(data.get("currency") or default_currency).upper(),
            paid_by=str(data["paid_by"]),
            category=data.get("category") or DEFAULT_CATEGORY,
            date=_optional_date(data.get("date")),
            split=split_from_dict(data.get("split_type"), data.get("split_details")),
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "id": self.id,
            "title": self.title,
            "amount": self.amount.to_str(),
            "currency": self.currency,
            "paid_by": self.paid_by,
            "category": self.category,
            "date": _date_str(self.date),
            **split_to_dict(self.split),
        }


@dataclass(frozen=True)
class PlannedExpense:
    """
    Itinerary-derived cost estimate.

    Always split equally and never paid by anyone, so it appears in totals
    and per-person estimates but never in balances or settlement.
    """

    id: str
    title: str
    amount: Money
    currency: str
    category: str = DEFAULT_CATEGORY
    date: FinancialDate | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any], default_currency: str = DEFAULT_CURRENCY) -> "PlannedExpense":
        """Create PlannedExpense from a stored planned-expense record."""
        return cls(
            id=str(data["id"]),
            title=data.get("title") or "",
            amount=Money.from_value(data["amount"]),
            currency=(data.get("currency") or default_currency).upper(),
            category=data.get("category") or DEFAULT_CATEGORY,
            date=_optional_date(data.get("date")),
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "id": self.id,
            "title": self.title,
            "amount": self.amount.to_str(),
            "currency": self.currency,
            "category": self.category,
            "date": _date_str(self.date),
        }


@dataclass(frozen=True)
class Balance:
    """
    One member's position across all shared expenses.

    paid and owed_share cover shared expenses only; personal holds the
    member's individual (unsplit) spending for display.
    """

    member: Member
    paid: Money
    owed_share: Money
    personal: Money = field(default_factory=Money.zero)

    @property
    def net(self) -> Money:
        """Positive means others owe this member."""
        return self.paid - self.owed_share

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "member": self.member.to_dict(),
            "paid": self.paid.to_str(),
            "owed_share": self.owed_share.to_str(),
            "personal": self.personal.to_str(),
            "net": self.net.to_str(),
        }


@dataclass(frozen=True)
class Transfer:
    """Payment instruction: from_member pays amount to to_member."""

    from_member: Member
    to_member: Member
    amount: Money

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "from": self.from_member.to_dict(),
            "to": self.to_member.to_dict(),
            "amount": self.amount.to_str(),
        }


@dataclass(frozen=True)
class LedgerEntry:
    """
    One row of the unified ledger.

    Manual entries carry the payer; planned entries carry the per-person
    estimate instead.
    """

    id: str
    title: str
    amount: Money
    category: str
    date: FinancialDate | None
    source: ExpenseSource
    paid_by: Member | None = None
    per_person_estimate: Money | None = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "id": self.id,
            "title": self.title,
            "amount": self.amount.to_str(),
            "category": self.category,
            "date": _date_str(self.date),
            "source": self.source.value,
            "paid_by": self.paid_by.to_dict() if self.paid_by else None,
            "per_person_estimate": self.per_person_estimate.to_str() if self.per_person_estimate else None,
        }


@dataclass(frozen=True)
class DateGroup:
    """Ledger entries sharing one calendar date (or the unscheduled bucket)."""

    date: FinancialDate | None
    entries: tuple[LedgerEntry, ...]

    @property
    def is_unscheduled(self) -> bool:
        """Whether this is the bucket for entries without a date."""
        return self.date is None

    @property
    def total(self) -> Money:
        """Sum of entry amounts in this group."""
        return sum((e.amount for e in self.entries), Money.zero())

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "date": _date_str(self.date),
            "total": self.total.to_str(),
            "entries": [e.to_dict() for e in self.entries],
        }


@dataclass(frozen=True)
class MemberTotal:
    """Amount of manual expenses a member paid for."""

    member: Member
    total: Money

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {"member": self.member.to_dict(), "total": self.total.to_str()}


@dataclass(frozen=True)
class CategoryTotal:
    """Spent and planned amounts for one expense category."""

    category: str
    spent: Money
    planned: Money

    @property
    def total(self) -> Money:
        """Spent plus planned."""
        return self.spent + self.planned

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "category": self.category,
            "spent": self.spent.to_str(),
            "planned": self.planned.to_str(),
            "total": self.total.to_str(),
        }


@dataclass(frozen=True)
class GroupedLedger:
    """Presentation model of the trip ledger with summary totals."""

    groups: tuple[DateGroup, ...]
    total_manual_spent: Money
    total_planned: Money
    paid_by_member: tuple[MemberTotal, ...]
    category_totals: tuple[CategoryTotal, ...]
    percent_of_budget: int | None = None
    currency: str = DEFAULT_CURRENCY

    @property
    def entry_count(self) -> int:
        """Total number of ledger entries across all groups."""
        return sum(len(g.entries) for g in self.groups)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "currency": self.currency,
            "total_manual_spent": self.total_manual_spent.to_str(),
            "total_planned": self.total_planned.to_str(),
            "percent_of_budget": self.percent_of_budget,
            "paid_by_member": [m.to_dict() for m in self.paid_by_member],
            "category_totals": [c.to_dict() for c in self.category_totals],
            "groups": [g.to_dict() for g in self.groups],
        }


@dataclass(frozen=True)
class TripSnapshot:
    """Immutable input snapshot for one trip's ledger computations."""

    members: tuple[Member, ...]
    expenses: tuple[Expense, ...]
    planned_expenses: tuple[PlannedExpense, ...] = ()
    budget: Money | None = None
    currency: str = DEFAULT_CURRENCY
