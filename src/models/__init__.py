"""Pydantic models for callable payloads."""

from models.response import CallableResult  # noqa: F401
from models.ticket import (  # noqa: F401
    FindTicketRequest,
    ListTicketsRequest,
    PaginatedTicketsRequest,
    SearchTicketsRequest,
    TicketDocument,
    TicketList,
    TicketMatch,
)
