"""Stdout notification adapter.

Implements NotifierPort by printing emails to the terminal instead of
delivering them. Useful for local development and demos.
"""

import asyncio
import logging

from checkout.core.ports import NotifierPort

logger = logging.getLogger(__name__)


class StdoutNotifierAdapter(NotifierPort):
    """Prints emails to stdout with human-readable formatting."""

    def __init__(self, verbose: bool = False):
        """Initialize stdout notifier.

        Args:
            verbose: If True, also log each email at INFO level.
        """
        self.verbose = verbose

    async def send_email(self, to_address: str, subject: str, body: str) -> bool:
        """Print the email and report it as delivered."""
        await asyncio.to_thread(print, self._format_email(to_address, subject, body))
        if self.verbose:
            logger.info(f"Email sent to {to_address}: {subject}")
        return True

    @staticmethod
    def _format_email(to_address: str, subject: str, body: str) -> str:
        """Format an email block."""
        lines = [
            "=" * 80,
            f"To: {to_address}",
            f"Subject: {subject}",
            "-" * 80,
            body,
            "=" * 80,
        ]
        return "\n".join(lines)
