"""
Domain exceptions for the expense ledger.

All of these are input-validation or invariant failures; none are transient,
so callers should surface them rather than retry.
"""


class LedgerError(Exception):
    """Base exception for ledger computation errors."""

    def __init__(self, message: str, expense_id: str | None = None, member_id: str | None = None):
        super().__init__(message)
        self.expense_id = expense_id
        self.member_id = member_id


class InvalidSplitError(LedgerError):
    """Raised when an expense cannot be split (empty roster, bad percentages)."""

    pass


class UnknownMemberError(LedgerError):
    """Raised when a payer or split reference is not on the roster."""

    pass


class BalanceInvariantViolation(LedgerError):
    """Raised when aggregated net balances do not sum to zero."""

    pass


class CurrencyMismatchError(LedgerError):
    """Raised when expenses in one computation use different currencies."""

    pass


class SnapshotFormatError(LedgerError):
    """Raised when a stored trip snapshot record is malformed."""

    pass
