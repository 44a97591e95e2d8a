"""Handler for the searchTicketsByBarcode callable."""

from __future__ import annotations

import uuid
from typing import Dict, Optional

from pydantic import ValidationError

from models.ticket import SearchTicketsRequest
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


def lambda_handler(event, context) -> Dict:
    """
    Partial, case-insensitive search on barcodes and attendee names.

    No matches is an empty list, not an error.
    """
    correlation_id = str(uuid.uuid4())
    try:
        try:
            request = SearchTicketsRequest.model_validate(parse_request(event))
        except ValidationError:
            raise InvalidArgumentError("Search input and eventIds are required.")

        results = _get_ticket_service().search(request.search_input, request.event_ids)

        logger.info(
            "Ticket search served",
            extra={"correlation_id": correlation_id, "matches": len(results.tickets)},
        )
        return success_response(results)

    except AppError as exc:
        logger.info(
            "Ticket search rejected",
            extra={"correlation_id": correlation_id, "code": exc.code},
        )
        return to_response(exc)
    except Exception:
        logger.exception("Ticket search failed", extra={"correlation_id": correlation_id})
        return internal_error_response()
