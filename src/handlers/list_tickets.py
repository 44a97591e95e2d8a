"""
Handlers for the ticket listing callables.

loadPaginatedTickets, fetchInitialTickets and fetchAllTickets share one
contract and differ only in the per-event page size.
"""

from __future__ import annotations

import uuid
from typing import Callable, Dict, Optional, Type

from pydantic import ValidationError

from models.ticket import ListTicketsRequest, PaginatedTicketsRequest, TicketList
from utils.callable_protocol import parse_request, success_response
from utils.error_handling import (
    AppError,
    InvalidArgumentError,
    internal_error_response,
    to_response,
)
from utils.logging_config import get_logger

logger = get_logger(__name__)

_ticket_service: Optional["TicketService"] = None


def _get_ticket_service():
    """Lazy-load TicketService."""
    global _ticket_service
    if _ticket_service is None:
        from services.ticket_service import TicketService
        _ticket_service = TicketService()
    return _ticket_service


def _handle(
    event,
    operation: str,
    request_model: Type[ListTicketsRequest],
    run: Callable[[ListTicketsRequest], TicketList],
) -> Dict:
    correlation_id = str(uuid.uuid4())
    try:
        try:
            request = request_model.model_validate(parse_request(event))
        except ValidationError:
            raise InvalidArgumentError("eventIds must be a non-empty array.")

        tickets = run(request)

        logger.info(
            "Tickets listed",
            extra={
                "correlation_id": correlation_id,
                "operation": operation,
                "tickets": len(tickets.tickets),
            },
        )
        return success_response(tickets)

    except AppError as exc:
        logger.info(
            "Ticket listing rejected",
            extra={"correlation_id": correlation_id, "operation": operation, "code": exc.code},
        )
        return to_response(exc)
    except Exception:
        logger.exception(
            "Ticket listing failed",
            extra={"correlation_id": correlation_id, "operation": operation},
        )
        return internal_error_response()


def paginated_handler(event, context) -> Dict:
    """Handle loadPaginatedTickets: up to ``limit`` tickets per event."""
    return _handle(
        event,
        "loadPaginatedTickets",
        PaginatedTicketsRequest,
        lambda req: _get_ticket_service().load_paginated(req.event_ids, req.limit),
    )


def initial_handler(event, context) -> Dict:
    """Handle fetchInitialTickets: a fixed first page per event."""
    return _handle(
        event,
        "fetchInitialTickets",
        ListTicketsRequest,
        lambda req: _get_ticket_service().fetch_initial(req.event_ids),
    )


def all_handler(event, context) -> Dict:
    """Handle fetchAllTickets: every ticket of every event."""
    return _handle(
        event,
        "fetchAllTickets",
        ListTicketsRequest,
        lambda req: _get_ticket_service().fetch_all(req.event_ids),
    )

