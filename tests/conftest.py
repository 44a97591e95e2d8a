"""
Pytest configuration to ensure paths are set up correctly for tests.

This allows imports like `from handlers import find_ticket` to work
when running tests, simulating the Lambda environment where code
is deployed from the src/ directory.
"""

import os
import sys
from pathlib import Path
from typing import Dict, Iterable, List, Optional

import boto3
import pytest


def _ensure_paths_on_sys_path() -> None:
    """Add src/ to sys.path if missing.

    Lambda's Code.from_asset("src") makes src/ the root of the package,
    so modules import each other as `from models.ticket import ...`.
    """
    src_root = Path(__file__).resolve().parents[1] / "src"
    src_str = str(src_root)
    if src_str not in sys.path:
        sys.path.insert(0, src_str)


_ensure_paths_on_sys_path()

# Ensure boto3 has offline-friendly defaults so tests do not require AWS access.
os.environ.setdefault("AWS_REGION", "eu-west-2")
os.environ.setdefault("AWS_DEFAULT_REGION", "eu-west-2")
os.environ.setdefault("AWS_ACCESS_KEY_ID", "test")
os.environ.setdefault("AWS_SECRET_ACCESS_KEY", "test")
os.environ.setdefault("AWS_SESSION_TOKEN", "test")
os.environ.setdefault("ENVIRONMENT", "dev")

# Lambda environment variables used by handlers
os.environ.setdefault("TICKETS_TABLE", "test-tickets-table")
os.environ.setdefault("LOG_LEVEL", "INFO")

# Create a default boto3 session so resources/clients do not error during import.
boto3.setup_default_session(region_name="eu-west-2")

from botocore.exceptions import ClientError  # noqa: E402

from config.settings import Settings  # noqa: E402
from models.ticket import TicketDocument  # noqa: E402


def _throttled(operation: str = "Query") -> ClientError:
    """A realistic store failure."""
    return ClientError(
        {
            "Error": {
                "Code": "ProvisionedThroughputExceededException",
                "Message": "Rate of requests exceeds the allowed throughput.",
            }
        },
        operation,
    )


class FakeTicketRepository:
    """In-memory stand-in for TicketRepository with the same query semantics."""

    def __init__(self, events: Optional[Dict[str, Iterable[Dict]]] = None):
        self.events: Dict[str, List[TicketDocument]] = {}
        self.failing_events = set()
        self.calls: List[tuple] = []
        for event_id, tickets in (events or {}).items():
            for ticket in tickets:
                self.add(event_id, ticket)

    def add(self, event_id: str, ticket: Dict) -> None:
        data = dict(ticket)
        ticket_id = data.pop("id")
        self.events.setdefault(event_id, []).append(TicketDocument(id=ticket_id, data=data))

    def _docs(self, event_id: str) -> List[TicketDocument]:
        if event_id in self.failing_events:
            raise _throttled()
        return self.events.get(event_id, [])

    def find_first(self, event_id, field, value):
        self.calls.append(("find_first", event_id, field))
        for doc in self._docs(event_id):
            if doc.data.get(field) == value:
                return doc
        return None

    def list_event(self, event_id):
        self.calls.append(("list_event", event_id))
        return sorted(self._docs(event_id), key=lambda d: d.id)

    def list_by_created_at(self, event_id, limit=None):
        self.calls.append(("list_by_created_at", event_id, limit))
        docs = [d for d in self._docs(event_id) if "created_at" in d.data]
        docs.sort(key=lambda d: d.data["created_at"])
        return docs[:limit] if limit is not None else docs


@pytest.fixture
def settings() -> Settings:
    return Settings(tickets_table="test-tickets-table", max_page_size=50)


@pytest.fixture
def fake_repo() -> FakeTicketRepository:
    return FakeTicketRepository()


@pytest.fixture
def ticket_service(fake_repo, settings):
    from services.ticket_service import TicketService

    return TicketService(repository=fake_repo, settings=settings)


@pytest.fixture
def store_error():
    """Factory for the ClientError a throttled DynamoDB query raises."""
    return _throttled
