"""
HTTP handlers for the VendoAI marketing site.

Each intake handler validates the body (FastAPI does this from the Pydantic
model), writes to the store, records one audit entry and returns a fixed
acknowledgment. Validation failures never reach the handler body, so nothing
is stored for a rejected request.
"""

import logging

from fastapi import APIRouter, Depends, Request

from shared.data_store import DataStore
from shared.models import (
    AuditEvent,
    ContactRequest,
    DemoRequest,
    RfpGenerated,
    RfpRequest,
    SubscribeRequest,
    Vendor,
)
from shared.templates import build_rfp_draft

logger = logging.getLogger("routes")

router = APIRouter(prefix="/api")


def get_store(request: Request) -> DataStore:
    """Dependency returning the store owned by the running application."""
    return request.app.state.store


# =============================================================================
# Health Check
# =============================================================================

@router.get("/health", tags=["Health"])
def health_check(request: Request, store: DataStore = Depends(get_store)):
    """Health check endpoint with collection counts."""
    return {
        "status": "healthy",
        "service": "vendoai-backend",
        "mode": request.app.state.settings.mode,
        **store.stats(),
    }


# =============================================================================
# Intake
# =============================================================================

@router.post("/subscribe", tags=["Intake"])
def subscribe(request: SubscribeRequest, store: DataStore = Depends(get_store)):
    """
    Subscribe an email address to the newsletter.

    Subscribing the same address twice (in any casing) keeps one record.
    """
    subscriber = store.add_subscriber(request)
    store.audit.record(AuditEvent.SUBSCRIBE, request)
    logger.info(f"New subscriber: {subscriber.email}")
    return {"status": "subscribed"}


@router.post("/contact", tags=["Intake"])
def contact(request: ContactRequest, store: DataStore = Depends(get_store)):
    """Store a contact form message."""
    store.add_contact(request)
    store.audit.record(AuditEvent.CONTACT, request)
    logger.info(f"Contact message from {request.email}")
    return {"status": "received"}


@router.post("/demo", tags=["Intake"])
def demo(request: DemoRequest, store: DataStore = Depends(get_store)):
    """Queue a demo request for the sales team."""
    store.add_demo_request(request)
    store.audit.record(AuditEvent.DEMO_REQUEST, request)
    logger.info(f"Demo requested by {request.email} ({request.company})")
    return {"status": "queued"}


# =============================================================================
# Vendors
# =============================================================================

@router.get("/vendors/search", response_model=list[Vendor], tags=["Vendors"])
def search_vendors(q: str = "", store: DataStore = Depends(get_store)):
    """
    Search the vendor catalog.

    Empty query returns every vendor. Otherwise returns vendors whose name,
    domain or summary contains the query, ignoring case, in catalog order.
    """
    return store.search_vendors(q)


# =============================================================================
# RFP Drafts
# =============================================================================

@router.post("/rfps/generate", tags=["RFP"])
def generate_rfp(request: RfpRequest, store: DataStore = Depends(get_store)):
    """Render a deterministic RFP draft from a goal, scope and budget."""
    draft = build_rfp_draft(request)
    entry = store.audit.record(AuditEvent.RFP_GENERATED, RfpGenerated(goal=request.goal))
    logger.info(f"Generated RFP draft {entry.payload.id}")
    return {"draft": draft}
