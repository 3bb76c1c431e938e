"""
In-memory audit log.

Every successful endpoint call appends one AuditEntry here. The log is
advisory: nothing reads it back to make decisions, and it is lost when the
process exits.

Design decisions:
- Append-only and unbounded (no rotation)
- record() validates the payload; a payload that is not one of the known
  models raises pydantic.ValidationError and nothing is stored
- Thread-safe; the timestamp is taken while holding the lock so entries
  are stored in non-decreasing timestamp order
"""

import logging
import threading
from datetime import datetime, timezone

from shared.models import AuditEntry, AuditEvent, AuditPayload

logger = logging.getLogger("audit")


class AuditLog:
    """
    Append-only list of audit entries guarded by its own lock.

    Example usage:
        audit = AuditLog()
        audit.record(AuditEvent.SUBSCRIBE, SubscribeRequest(email="a@b.co"))
        audit.entries()[-1].event  # "subscribe"
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._entries: list[AuditEntry] = []

    def record(self, event: AuditEvent, payload: AuditPayload) -> AuditEntry:
        """
        Append an entry for an event.

        Args:
            event: Which endpoint produced the event
            payload: The typed payload describing it

        Returns:
            The stored entry
        """
        with self._lock:
            entry = AuditEntry(
                event=event,
                timestamp=datetime.now(timezone.utc),
                payload=payload,
            )
            self._entries.append(entry)
        logger.debug(f"Recorded audit event '{entry.event}'")
        return entry

    def entries(self) -> list[AuditEntry]:
        """Snapshot of all entries in insertion order."""
        with self._lock:
            return list(self._entries)

    def entries_for(self, event: AuditEvent) -> list[AuditEntry]:
        """Snapshot of entries for a single event type."""
        return [e for e in self.entries() if e.event == event]

    def clear(self) -> None:
        """Drop all entries (for testing)."""
        with self._lock:
            self._entries.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)
