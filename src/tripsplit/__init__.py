"""
Trip Split - Shared Expense Ledger for Group Trips

Tracks what each trip member paid, what they owe, and who should pay whom
to settle up.

Key Features:
- Equal, custom-percentage and individual expense splits
- Per-member balances that always sum to zero
- Greedy settlement into peer-to-peer transfers
- Date-grouped ledger combining logged and itinerary-planned costs

Domain Packages:
- core: Money, dates, currency handling, configuration
- ledger: Split calculation, balances, settlement, ledger view
- cli: Command-line interface

Example Usage:
    from tripsplit.ledger import aggregate, plan, build_view
    from tripsplit.core import Money
"""

__version__ = "0.1.0"
__author__ = "Trip Split Contributors"

from .core.config import Environment, get_config
from .core.money import Money
from .ledger import aggregate, build_view, compute_shares, plan

__all__ = [
    # Ledger operations
    "aggregate",
    "build_view",
    "compute_shares",
    "plan",
    # Core
    "Money",
    # Configuration
    "Environment",
    "get_config",
]
