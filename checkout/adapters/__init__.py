"""External adapters for the checkout system.

This package contains all external dependencies (payment APIs, SQLite,
email channels, etc.) and provides implementations of the core port
interfaces.

Adapter Organization:

- payment/: Adapters for charging customers (HTTP payment provider)
- store/: Adapters for order persistence (SQLite)
- notification/: Adapters for confirmation emails (stdout, markdown outbox)
"""
