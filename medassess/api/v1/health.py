"""Health check endpoints."""

from fastapi import APIRouter, HTTPException, status
from pydantic import BaseModel

from medassess.api.deps import RecordStore
from medassess.store.base import RecordServiceError

router = APIRouter()


class HealthResponse(BaseModel):
    """Health check response."""

    status: str


@router.get(
    "",
    response_model=HealthResponse,
    status_code=status.HTTP_200_OK,
    summary="Health check",
    description="Returns service health status",
)
async def health_check() -> HealthResponse:
    """Check if the service is healthy."""
    return HealthResponse(status="ok")


@router.get(
    "/ready",
    response_model=HealthResponse,
    status_code=status.HTTP_200_OK,
    summary="Readiness check",
    description="Returns service readiness status, including record store reachability",
)
async def readiness_check(records: RecordStore) -> HealthResponse:
    """Check that the record store answers a read.

    Raises:
        HTTPException: 503 if the record store is unreachable
    """
    try:
        await records.fetch_records("protocol")
    except RecordServiceError:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Record store unavailable",
        ) from None
    return HealthResponse(status="ok")
