"""
Domain models for the VendoAI marketing backend.

These models describe the request bodies accepted by the intake endpoints,
the static vendor catalog entries, and the audit log records.

Design decisions:
- Using Pydantic for validation and serialization
- Required string fields must be present and non-empty
- Email addresses get a basic syntax check, nothing more
- Vendors are frozen - the catalog is seeded once and never mutated
"""

import re
from datetime import datetime, timezone
from enum import Enum
from typing import Annotated, Union
from uuid import uuid4

from pydantic import AfterValidator, BaseModel, ConfigDict, Field


EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def validate_email(value: str) -> str:
    """Reject values that do not look like local@domain.tld."""
    if not EMAIL_PATTERN.match(value):
        raise ValueError("value is not a valid email address")
    return value


EmailAddress = Annotated[str, Field(min_length=1), AfterValidator(validate_email)]


# =============================================================================
# Intake Requests
# =============================================================================

class SubscribeRequest(BaseModel):
    """Newsletter signup from the landing page footer."""
    email: EmailAddress = Field(..., description="Subscriber email address")


class ContactRequest(BaseModel):
    """Free-form message from the contact form."""
    name: str = Field(..., min_length=1, description="Sender name")
    email: EmailAddress = Field(..., description="Reply-to email address")
    message: str = Field(..., min_length=1, description="Message body")


class DemoRequest(BaseModel):
    """
    Request for a product demo.

    Size and message are optional; the sales team fills in the gaps on the
    follow-up call.
    """
    name: str = Field(..., min_length=1, description="Contact name")
    email: EmailAddress = Field(..., description="Work email address")
    company: str = Field(..., min_length=1, description="Company name")
    size: str = Field(default="", description="Team size, free text")
    message: str = Field(default="", description="Goals or notes")


class RfpRequest(BaseModel):
    """Inputs for the RFP draft generator."""
    goal: str = Field(..., min_length=1, description="What the buyer wants to achieve")
    scope: str = Field(default="", description="Key features or deliverables")
    budget: str = Field(default="", description="Estimated budget, free text")


# =============================================================================
# Stored Records
# =============================================================================

class Subscriber(BaseModel):
    """
    A stored newsletter subscriber.

    The email is kept in its lower-cased form, which is also the store key.
    """
    email: str
    subscribed_at: datetime = Field(default_factory=_utcnow)

    @classmethod
    def from_request(cls, request: SubscribeRequest) -> "Subscriber":
        return cls(email=request.email.lower())


class Vendor(BaseModel):
    """An entry in the static vendor catalog."""
    id: str = Field(..., description="Stable vendor identifier")
    name: str = Field(..., description="Vendor display name")
    domain: str = Field(..., description="Service domain, e.g. Payments")
    summary: str = Field(..., description="One-line description")

    model_config = ConfigDict(frozen=True)

    def matches(self, needle: str) -> bool:
        """
        Case-insensitive substring match against name, domain and summary.

        The needle is expected to be lower-cased already.
        """
        return (
            needle in self.name.lower()
            or needle in self.domain.lower()
            or needle in self.summary.lower()
        )


# =============================================================================
# Audit Log
# =============================================================================

class AuditEvent(str, Enum):
    """Events written to the audit log, one per successful endpoint call."""
    SUBSCRIBE = "subscribe"
    CONTACT = "contact"
    DEMO_REQUEST = "demo_request"
    RFP_GENERATED = "rfp_generated"


class RfpGenerated(BaseModel):
    """Audit payload for a generated RFP draft."""
    id: str = Field(default_factory=lambda: str(uuid4()))
    goal: str


AuditPayload = Union[SubscribeRequest, ContactRequest, DemoRequest, RfpGenerated]


class AuditEntry(BaseModel):
    """
    Advisory record of something that happened.

    Nothing downstream reads these; they live only as long as the process.
    """
    event: AuditEvent
    timestamp: datetime = Field(default_factory=_utcnow)
    payload: AuditPayload

    model_config = ConfigDict(use_enum_values=True)
