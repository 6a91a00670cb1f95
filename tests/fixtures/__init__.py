"""
Test Fixtures and Utilities

Shared test data for ledger testing.

This module provides:
- Builders for members, expenses and planned expenses
- Seeded generation of random trips for property-style checks
"""
