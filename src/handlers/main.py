"""
Single entrypoint Lambda that routes callable requests to thin handler modules.

Each callable function is reached as ``POST /<functionName>``; the handler
modules do their own validation and error mapping.
"""

from typing import Callable, Dict, Tuple
import json

from . import find_ticket, health_check, list_tickets, search_tickets


def _response(status: int, body: Dict) -> Dict:
    """Format a JSON API Gateway HTTP API response."""
    return {
        "statusCode": status,
        "headers": {"Content-Type": "application/json"},
        "body": json.dumps(body),
    }


def _route_table() -> Tuple[Tuple[str, Callable], ...]:
    # Looked up per call, not cached at import.
    return (
        ("GET /health", health_check.lambda_handler),
        ("POST /findTicketByBarcode", find_ticket.lambda_handler),
        ("POST /searchTicketsByBarcode", search_tickets.lambda_handler),
        ("POST /loadPaginatedTickets", list_tickets.paginated_handler),
        ("POST /fetchInitialTickets", list_tickets.initial_handler),
        ("POST /fetchAllTickets", list_tickets.all_handler),
    )


def lambda_handler(event, context):
    """
    Entry point invoked by API Gateway HTTP API.

    Routes on exact method and path, ignoring a trailing slash.
    """
    method = event.get("requestContext", {}).get("http", {}).get("method", "")
    path = event.get("requestContext", {}).get("http", {}).get("path", "")
    route_key = f"{method.upper()} {path.rstrip('/') or '/'}"

    for key, handler in _route_table():
        if route_key == key:
            return handler(event, context)

    return _response(
        404, {"error": {"status": "NOT_FOUND", "message": f"Route not found: {route_key}"}}
    )
