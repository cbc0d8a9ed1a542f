"""Notification adapters for confirmation emails.

Implementations support:
- Stdout (terminal pretty-print)
- Markdown outbox file (append per day)
"""
