"""Request/response envelope for HTTPS callable functions."""

import json
from typing import Any, Dict

from pydantic import BaseModel

from models.response import CallableResult
from utils.error_handling import InvalidArgumentError


def parse_request(event: Dict[str, Any]) -> Dict[str, Any]:
    """
    Extract the request fields from a Lambda event.

    HTTP invocations carry ``{"data": {...}}`` as a JSON body; direct
    invocations pass the fields (or the same envelope) as the event itself.
    """
    body = event.get("body")
    if body:
        try:
            payload = json.loads(body)
        except (TypeError, ValueError):
            raise InvalidArgumentError("Request body must be valid JSON.")
    else:
        payload = event

    if not isinstance(payload, dict):
        raise InvalidArgumentError("Request body must be a JSON object.")
    data = payload.get("data", payload)
    if not isinstance(data, dict):
        raise InvalidArgumentError("Request data must be a JSON object.")
    return data


def success_response(result: BaseModel) -> Dict[str, Any]:
    """Wrap a result model in the callable success envelope."""
    return {
        "statusCode": 200,
        "headers": {"Content-Type": "application/json"},
        "body": CallableResult(result=result.model_dump()).model_dump_json(),
    }
