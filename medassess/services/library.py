"""Read-only record clients for protocols and references."""

from typing import Any

from medassess.schemas.library import Protocol, Reference
from medassess.services.base import RecordClient
from medassess.services.filtering import filter_items, sort_by
from medassess.services.normalize import normalize_protocol, normalize_reference


class ProtocolService(RecordClient[Protocol]):
    """Clinical protocols, sorted by title."""

    table = "protocol"
    entity = "protocol"

    def normalize(self, raw: dict[str, Any]) -> Protocol:
        return normalize_protocol(raw)

    async def list_protocols(self) -> list[Protocol]:
        protocols = await self._fetch_all("list", "Failed to load protocols")
        return sort_by(protocols, "title")

    async def get_protocol(self, protocol_id: int) -> Protocol:
        """Fetch one protocol.

        Raises:
            NotFoundError: No protocol has this id
            ServiceError: The fetch failed
        """
        return await self._fetch_one(protocol_id, "get", "Failed to load protocol")

    async def list_by_category(self, category: str) -> list[Protocol]:
        protocols = await self.list_protocols()
        return filter_items(protocols, category_field="category", category_value=category)


class ReferenceService(RecordClient[Reference]):
    """Medical reference tools, sorted by title."""

    table = "reference"
    entity = "reference"

    def normalize(self, raw: dict[str, Any]) -> Reference:
        return normalize_reference(raw)

    async def list_references(self) -> list[Reference]:
        references = await self._fetch_all("list", "Failed to load references")
        return sort_by(references, "title")

    async def get_reference(self, reference_id: int) -> Reference:
        """Fetch one reference tool.

        Raises:
            NotFoundError: No reference has this id
            ServiceError: The fetch failed
        """
        return await self._fetch_one(reference_id, "get", "Failed to load reference")

    async def list_by_type(self, reference_type: str) -> list[Reference]:
        references = await self.list_references()
        return filter_items(references, category_field="type", category_value=reference_type)
