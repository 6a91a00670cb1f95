"""
Command Line Interface Package

Command Structure:
- tripsplit: Main entry point with utility commands (version, config)
- tripsplit ledger: Balances, settlement and grouped ledger for a trip snapshot
"""
