"""Lightweight health check handler."""

import json
from datetime import datetime, timezone

from config.settings import get_settings


def lambda_handler(event, context):
    """Return a simple 200 response without touching the store."""
    settings = get_settings()
    return {
        "statusCode": 200,
        "headers": {"Content-Type": "application/json"},
        "body": json.dumps(
            {
                "status": "ok",
                "environment": settings.environment,
                "tickets_table": settings.tickets_table,
                "timestamp": datetime.now(timezone.utc).isoformat(),
            }
        ),
    }
