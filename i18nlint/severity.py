"""Severity definitions for lint findings."""

from __future__ import annotations

from enum import Enum


class Severity(str, Enum):
    """Enumerate the severity levels a rule can be configured with."""

    ERROR = "ERROR"
    WARNING = "WARNING"

    @property
    def exit_priority(self) -> int:
        """Return an integer ranking to drive exit code decisions."""

        ordering = {
            Severity.ERROR: 1,
            Severity.WARNING: 0,
        }
        return ordering[self]
