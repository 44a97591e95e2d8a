"""Ticket request/response models."""

from dataclasses import dataclass, field
from typing import Any, Dict, List

from pydantic import BaseModel, ConfigDict, Field, field_validator

from utils.validators import ensure_event_ids, ensure_present


@dataclass
class TicketDocument:
    """A stored ticket: the store-assigned id plus the record fields."""

    id: str
    data: Dict[str, Any] = field(default_factory=dict)

    def as_record(self) -> Dict[str, Any]:
        """Record fields with the id folded in, as returned by the listings."""
        return {**self.data, "id": self.id}


class _CallableRequest(BaseModel):
    """Shared config: camelCase wire names, unknown fields ignored."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class FindTicketRequest(_CallableRequest):
    """Payload for findTicketByBarcode."""

    barcode: str
    event_ids: Any = Field(alias="eventIds")

    @field_validator("barcode")
    @classmethod
    def validate_barcode(cls, value: str) -> str:
        ensure_present(value, "barcode")
        return value

    @field_validator("event_ids")
    @classmethod
    def validate_event_ids(cls, value: Any) -> List[str]:
        return ensure_event_ids(value, allow_blank=False)


class SearchTicketsRequest(_CallableRequest):
    """Payload for searchTicketsByBarcode."""

    search_input: str = Field(alias="searchInput")
    event_ids: Any = Field(alias="eventIds")

    @field_validator("search_input")
    @classmethod
    def validate_search_input(cls, value: str) -> str:
        """Normalise to the lower-cased, trimmed search term."""
        cleaned = (value or "").lower().strip()
        ensure_present(cleaned, "searchInput")
        return cleaned

    @field_validator("event_ids")
    @classmethod
    def validate_event_ids(cls, value: Any) -> List[Any]:
        return ensure_event_ids(value)


class ListTicketsRequest(_CallableRequest):
    """Payload for fetchInitialTickets and fetchAllTickets."""

    event_ids: Any = Field(alias="eventIds")

    @field_validator("event_ids")
    @classmethod
    def validate_event_ids(cls, value: Any) -> List[Any]:
        return ensure_event_ids(value)


class PaginatedTicketsRequest(ListTicketsRequest):
    """Payload for loadPaginatedTickets; the limit policy lives in the service."""

    limit: Any = None


class TicketMatch(BaseModel):
    """Response for an exact barcode match."""

    ticket: Dict[str, Any]
    id: str


class TicketList(BaseModel):
    """Response for search and listing operations."""

    tickets: List[Dict[str, Any]] = Field(default_factory=list)
