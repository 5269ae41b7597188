from fastapi import APIRouter
from party_membership.api.v1.routes import (
    health,
    registration,
    members,
    display,
)

v1_router = APIRouter(prefix="/v1")

v1_router.include_router(health.router, tags=["Health"])
v1_router.include_router(registration.router, prefix="/membership", tags=["Membership"])
v1_router.include_router(members.router, prefix="/admin", tags=["Admin"])
v1_router.include_router(display.router, prefix="/display", tags=["Display"])
