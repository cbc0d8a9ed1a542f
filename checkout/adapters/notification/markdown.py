"""Markdown outbox notification adapter.

Implements NotifierPort by appending emails to markdown outbox files
organized in date-based directories (YYYY-MM-DD). Useful for keeping an
audit trail of what customers were told.
"""

import asyncio
import logging
from datetime import UTC, datetime
from pathlib import Path

from checkout.core.ports import NotifierPort

logger = logging.getLogger(__name__)

OUTBOX_FILENAME = "outbox.md"


class MarkdownNotifierAdapter(NotifierPort):
    """Appends emails to a markdown outbox file per day."""

    def __init__(self, outbox_dir: str):
        """Initialize markdown notifier.

        Args:
            outbox_dir: Base directory where date-based subdirectories are created.

        Raises:
            ValueError: If outbox_dir is a filesystem root.
            OSError: If the base directory cannot be created.
        """
        self.base_dir = Path(outbox_dir).resolve()

        if self.base_dir.parent == self.base_dir:
            raise ValueError(f"outbox_dir cannot be a filesystem root: {outbox_dir}")

        try:
            self.base_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise OSError(f"Failed to create outbox directory {outbox_dir}: {e}") from e
        self._lock = asyncio.Lock()

    def outbox_path(self, when: datetime) -> Path:
        """Return the outbox file for the given day (not yet created)."""
        return self.base_dir / when.strftime("%Y-%m-%d") / OUTBOX_FILENAME

    async def send_email(self, to_address: str, subject: str, body: str) -> bool:
        """Append the email to today's outbox file."""
        now = datetime.now(UTC)
        entry = self._format_entry(to_address, subject, body, now)
        outbox_file = self.outbox_path(now)

        async with self._lock:
            try:
                await asyncio.to_thread(
                    outbox_file.parent.mkdir, parents=True, exist_ok=True
                )
                await asyncio.to_thread(self._append, outbox_file, entry)
                logger.info(
                    f"Wrote email to {outbox_file}",
                    extra={"to_address": to_address},
                )
            except OSError as e:
                logger.error(
                    f"Failed to write markdown outbox: {e}",
                    extra={"path": str(outbox_file)},
                    exc_info=True,
                )
                raise
        return True

    @staticmethod
    def _append(path: Path, entry: str) -> None:
        with path.open("a", encoding="utf-8") as f:
            f.write(entry)

    @staticmethod
    def _format_entry(to_address: str, subject: str, body: str, sent_at: datetime) -> str:
        """Format a markdown section for one email."""
        lines = [
            f"## {subject}",
            "",
            f"- **To:** {to_address}",
            f"- **Sent:** {sent_at.isoformat()}",
            "",
            body,
            "",
            "---",
            "",
        ]
        return "\n".join(lines)
