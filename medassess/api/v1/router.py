"""API v1 router aggregating all endpoints."""

from fastapi import APIRouter

from medassess.api.v1 import assessments, health, notifications, protocols, references

api_router = APIRouter()

api_router.include_router(
    health.router,
    prefix="/health",
    tags=["health"],
)

api_router.include_router(
    assessments.router,
    prefix="/assessments",
    tags=["assessments"],
)

api_router.include_router(
    protocols.router,
    prefix="/protocols",
    tags=["protocols"],
)

api_router.include_router(
    references.router,
    prefix="/references",
    tags=["references"],
)

api_router.include_router(
    notifications.router,
    prefix="/notifications",
    tags=["notifications"],
)
