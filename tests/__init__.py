"""
Test Suite for Trip Split

Test Structure:
- fixtures/: Shared test data and builders
- unit/: Unit tests mirroring src/ package structure
- integration/: Snapshot, CLI and configuration workflow tests

Test Categories:
- Core utilities (money, currency, dates, config)
- Split calculation, balances and settlement
- Grouped ledger view and snapshot loading
- Command-line interface

Test Data:
All trips, members and expenses are synthetic.
"""
