"""
HTTP layer for the VendoAI marketing backend.

This package provides the FastAPI application that exposes:
- Lead intake endpoints (subscribe, contact, demo)
- Vendor search
- RFP draft generation
- The static frontend bundle with SPA fallback

The application itself lives in api.main; importing this package does not
build it.
"""
