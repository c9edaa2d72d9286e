"""
Lead Log — Append-only JSON-lines file of lead submissions.

Each line is a serialized LeadEntry: when the lead arrived (ISO 8601,
UTC), who sent it and how the sales inbox was notified. Leads whose
notification failed can be recovered from here.
"""

from __future__ import annotations

import logging
from collections import deque
from pathlib import Path

from pydantic import ValidationError

from riskcheck.config import settings
from riskcheck.models.lead_models import LeadEntry

logger = logging.getLogger("riskcheck.audit")


class LeadLog:
    def __init__(self, log_path: str | Path | None = None) -> None:
        self.log_path = Path(log_path or settings.lead_log_path)

    def append(self, entry: LeadEntry) -> bool:
        """Write one entry. Returns False when the file could not be written."""
        line = entry.model_dump_json()
        try:
            with self.log_path.open("a", encoding="utf-8") as f:
                f.write(line + "\n")
        except OSError as e:
            logger.error(f"Lead not persisted to {self.log_path}: {e}")
            return False
        return True

    def read_recent(self, count: int = 50) -> list[LeadEntry]:
        """Entries from the last `count` lines, oldest first. Malformed lines are skipped."""
        try:
            with self.log_path.open(encoding="utf-8") as f:
                lines = deque((line for line in f if line.strip()), maxlen=count)
        except FileNotFoundError:
            return []
        except OSError as e:
            logger.error(f"Lead log unreadable: {e}")
            return []

        entries: list[LeadEntry] = []
        for line in lines:
            try:
                entries.append(LeadEntry.model_validate_json(line))
            except ValidationError:
                logger.warning("Skipping malformed lead log line")
        return entries
