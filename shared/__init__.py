"""
Core domain code for the VendoAI marketing backend.

This package contains everything the HTTP layer builds on:
- Request and record models (SubscribeRequest, Vendor, AuditEntry, etc.)
- The in-memory data store and its repositories
- The audit log
- The RFP draft template
"""

from shared.models import (
    SubscribeRequest,
    ContactRequest,
    DemoRequest,
    RfpRequest,
    Subscriber,
    Vendor,
    AuditEvent,
    AuditEntry,
)
from shared.audit import AuditLog
from shared.data_store import DataStore
from shared.templates import build_rfp_draft

__all__ = [
    "SubscribeRequest",
    "ContactRequest",
    "DemoRequest",
    "RfpRequest",
    "Subscriber",
    "Vendor",
    "AuditEvent",
    "AuditEntry",
    "AuditLog",
    "DataStore",
    "build_rfp_draft",
]
