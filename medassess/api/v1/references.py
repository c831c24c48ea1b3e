"""Reference tool endpoints (read-only)."""

from fastapi import APIRouter, Query

from medassess.api.deps import References
from medassess.schemas.library import Reference
from medassess.schemas.listing import FilteredList
from medassess.services.filtering import ALL, REFERENCE_FILTER

router = APIRouter()


@router.get("", response_model=FilteredList[Reference])
async def list_references(
    service: References,
    q: str = Query("", description="Matches title or description"),
    reference_type: str = Query(ALL, alias="type"),
) -> FilteredList[Reference]:
    """List reference tools by title, filtered by query and type."""
    references = await service.list_references()
    return FilteredList[Reference](
        items=REFERENCE_FILTER.apply(references, q, reference_type),
        total=len(references),
        options=REFERENCE_FILTER.options(references),
        counts=REFERENCE_FILTER.counts(references),
    )


@router.get("/{reference_id}", response_model=Reference)
async def get_reference(reference_id: int, service: References) -> Reference:
    return await service.get_reference(reference_id)
