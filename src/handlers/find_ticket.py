"""Handler for the findTicketByBarcode callable."""

from __future__ import annotations

import uuid
from typing import Dict, Optional

from pydantic import ValidationError

from models.ticket import FindTicketRequest
from utils.callable_protocol import parse_request, success_response
from utils.error_handling import (
    AppError,
    InvalidArgumentError,
    internal_error_response,
    to_response,
)
from utils.logging_config import get_logger

logger = get_logger(__name__)

# Lazy-loaded service to avoid import-time DynamoDB resources
_ticket_service: Optional["TicketService"] = None


def _get_ticket_service():
    """Lazy-load TicketService."""
    global _ticket_service
    if _ticket_service is None:
        from services.ticket_service import TicketService
        _ticket_service = TicketService()
    return _ticket_service


def lambda_handler(event, context) -> Dict:
    """Return the first ticket whose barcode or wristband barcode matches exactly."""
    correlation_id = str(uuid.uuid4())
    try:
        try:
            request = FindTicketRequest.model_validate(parse_request(event))
        except ValidationError:
            raise InvalidArgumentError("Barcode and eventIds are required.")

        match = _get_ticket_service().find_by_barcode(request.barcode, request.event_ids)

        logger.info(
            "Ticket found by barcode",
            extra={"correlation_id": correlation_id, "ticket_id": match.id},
        )
        return success_response(match)

    except AppError as exc:
        logger.info(
            "Barcode lookup rejected",
            extra={"correlation_id": correlation_id, "code": exc.code},
        )
        return to_response(exc)
    except Exception:
        logger.exception("Barcode lookup failed", extra={"correlation_id": correlation_id})
        return internal_error_response()
