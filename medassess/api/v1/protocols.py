"""Protocol library endpoints (read-only)."""

from fastapi import APIRouter, Query

from medassess.api.deps import Protocols
from medassess.schemas.library import Protocol
from medassess.schemas.listing import FilteredList
from medassess.services.filtering import ALL, PROTOCOL_FILTER

router = APIRouter()


@router.get("", response_model=FilteredList[Protocol])
async def list_protocols(
    service: Protocols,
    q: str = Query("", description="Matches title or content"),
    category: str = Query(ALL),
) -> FilteredList[Protocol]:
    """List protocols by title, filtered by query and category."""
    protocols = await service.list_protocols()
    return FilteredList[Protocol](
        items=PROTOCOL_FILTER.apply(protocols, q, category),
        total=len(protocols),
        options=PROTOCOL_FILTER.options(protocols),
        counts=PROTOCOL_FILTER.counts(protocols),
    )


@router.get("/{protocol_id}", response_model=Protocol)
async def get_protocol(protocol_id: int, service: Protocols) -> Protocol:
    return await service.get_protocol(protocol_id)
