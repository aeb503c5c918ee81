"""
Top-level router for version 1 of the API.

This router aggregates the domain routers.  When a new domain is
introduced, include its router here.
"""

from fastapi import APIRouter

from .endpoints import customers

router = APIRouter()

router.include_router(customers.router, prefix="/customers", tags=["customers"])
# Earlier clients call the same endpoints under ``/api/customers``.  The
# router is included a second time so both prefixes keep working.
router.include_router(customers.router, prefix="/api/customers", tags=["customers"])
