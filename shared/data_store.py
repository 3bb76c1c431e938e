"""
In-memory data store for the VendoAI marketing backend.

This module provides the data access layer used by the HTTP handlers. All
state lives in process memory and is lost on restart.

Design decisions:
- One repository per collection, each with its own lock
- Critical sections cover a single insert/append or a snapshot copy
- No transactions across collections - a store write and its audit entry
  are two independent operations
- The vendor catalog is read-only, loaded from a JSON fixture at startup
- Handlers receive a DataStore instance, so a persistent implementation can
  be swapped in behind the same methods
"""

import json
import logging
import threading
from pathlib import Path
from typing import Generic, Optional, TypeVar

from shared.audit import AuditLog
from shared.models import (
    ContactRequest,
    DemoRequest,
    SubscribeRequest,
    Subscriber,
    Vendor,
)

logger = logging.getLogger("data_store")

T = TypeVar("T")


# =============================================================================
# Repositories
# =============================================================================

class SubscriberRepository:
    """
    Subscribers keyed by lower-cased email.

    Subscribing an address that is already present overwrites the stored
    record (last write wins).
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._subscribers: dict[str, Subscriber] = {}

    def add(self, request: SubscribeRequest) -> Subscriber:
        subscriber = Subscriber.from_request(request)
        with self._lock:
            self._subscribers[subscriber.email] = subscriber
        logger.debug(f"Stored subscriber {subscriber.email}")
        return subscriber

    def get(self, email: str) -> Optional[Subscriber]:
        with self._lock:
            return self._subscribers.get(email.lower())

    def items(self) -> list[Subscriber]:
        with self._lock:
            return list(self._subscribers.values())

    def __len__(self) -> int:
        with self._lock:
            return len(self._subscribers)


class AppendOnlyRepository(Generic[T]):
    """
    Append-only list of submissions with no identity or deduplication.

    Used for contact messages and demo requests.
    """

    def __init__(self, name: str):
        self.name = name
        self._lock = threading.Lock()
        self._items: list[T] = []

    def add(self, item: T) -> T:
        with self._lock:
            self._items.append(item)
        logger.debug(f"Appended to {self.name}")
        return item

    def items(self) -> list[T]:
        with self._lock:
            return list(self._items)

    def __len__(self) -> int:
        with self._lock:
            return len(self._items)


# =============================================================================
# Data Store
# =============================================================================

class DataStore:
    """
    Owns every collection the backend keeps.

    - subscribers: newsletter signups keyed by email
    - contacts: contact form messages
    - demo_requests: demo requests from the lead form
    - audit: the advisory audit log
    - vendors: static catalog used by vendor search
    """

    def __init__(self, data_dir: Optional[Path] = None):
        """
        Initialize the data store.

        Args:
            data_dir: Path to the directory containing vendors.json.
                     Defaults to the data directory shipped inside
                     this package.
        """
        if data_dir is None:
            data_dir = Path(__file__).parent / "data"

        self.data_dir = Path(data_dir)

        self.subscribers = SubscriberRepository()
        self.contacts: AppendOnlyRepository[ContactRequest] = AppendOnlyRepository("contacts")
        self.demo_requests: AppendOnlyRepository[DemoRequest] = AppendOnlyRepository("demo_requests")
        self.audit = AuditLog()

        self._vendors: tuple[Vendor, ...] = tuple(
            Vendor(**v) for v in self._load_json("vendors.json")
        )
        logger.info(f"Loaded {len(self._vendors)} vendors from {self.data_dir}")

    def _load_json(self, filename: str) -> list[dict]:
        """Load a JSON fixture file."""
        filepath = self.data_dir / filename
        if not filepath.exists():
            logger.warning(f"Fixture not found: {filepath}")
            return []
        with open(filepath, "r") as f:
            return json.load(f)

    # =========================================================================
    # Intake Operations
    # =========================================================================

    def add_subscriber(self, request: SubscribeRequest) -> Subscriber:
        return self.subscribers.add(request)

    def add_contact(self, request: ContactRequest) -> ContactRequest:
        return self.contacts.add(request)

    def add_demo_request(self, request: DemoRequest) -> DemoRequest:
        return self.demo_requests.add(request)

    # =========================================================================
    # Vendor Operations
    # =========================================================================

    def get_vendors(self) -> list[Vendor]:
        """All vendors in seed order."""
        return list(self._vendors)

    def search_vendors(self, query: str = "") -> list[Vendor]:
        """
        Find vendors whose name, domain or summary contains the query.

        Matching is case-insensitive. An empty (or whitespace-only) query
        returns the whole catalog. Results keep seed order; there is no
        ranking and no limit.
        """
        needle = query.strip().lower()
        if not needle:
            return self.get_vendors()
        return [v for v in self._vendors if v.matches(needle)]

    # =========================================================================
    # Utility Methods
    # =========================================================================

    def stats(self) -> dict[str, int]:
        """Collection sizes, used by the health endpoint."""
        return {
            "subscribers": len(self.subscribers),
            "contacts": len(self.contacts),
            "demo_requests": len(self.demo_requests),
            "audit_entries": len(self.audit),
        }
