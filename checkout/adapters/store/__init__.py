"""Order repository adapters for persistence.

Implementations support:
- SQLite (zero-config, single-file)
"""
