"""
Core Utilities Package

Shared primitives used by the ledger and the command-line interface.

This package provides:
- Currency handling with integer arithmetic for precision
- Money and FinancialDate value types
- Configuration management for environment-specific settings
- JSON helpers with consistent formatting
"""

from .config import (
    Config,
    Environment,
    get_config,
    get_data_dir,
    is_development,
    is_production,
    is_test,
    reload_config,
)
from .currency import (
    EPSILON_CENTS,
    apportion_cents,
    cents_to_dollars_str,
    format_cents,
    parse_dollars_to_cents,
    to_cents,
    validate_sum_equals_total,
)
from .dates import FinancialDate
from .money import Money

__all__ = [
    # Configuration
    "Config",
    "Environment",
    "get_config",
    "get_data_dir",
    "is_development",
    "is_production",
    "is_test",
    "reload_config",
    # Currency utilities
    "EPSILON_CENTS",
    "apportion_cents",
    "cents_to_dollars_str",
    "format_cents",
    "parse_dollars_to_cents",
    "to_cents",
    "validate_sum_equals_total",
    # Value types
    "FinancialDate",
    "Money",
]
