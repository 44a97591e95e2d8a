"""
Ticket lookup service.

Finds, searches and lists ticket documents across a caller-supplied list of
events. Events are processed strictly in list order, one query at a time.
"""

from __future__ import annotations

import time
from typing import Any, Dict, Iterable, List, Optional

from config.settings import Settings, get_settings
from models.ticket import TicketDocument, TicketList, TicketMatch
from repositories.dynamodb_repo import TicketRepository
from utils.error_handling import InvalidArgumentError, NotFoundError
from utils.logging_config import get_logger
from utils.validators import searchable

logger = get_logger(__name__)

# Exact-match fields, in priority order within an event.
BARCODE_FIELDS = ("barcode", "wristband_barcode")


def _search_haystack(data: Dict[str, Any]) -> tuple:
    """Derived strings a search term is matched against."""
    first_name = searchable(data.get("attendeeFirstName"))
    last_name = searchable(data.get("attendeeSurname"))
    return (
        searchable(data.get("barcode")),
        searchable(data.get("wristband_barcode")),
        first_name,
        last_name,
        f"{first_name} {last_name}".strip(),
    )


class TicketService:
    """Encapsulates ticket lookup logic over a TicketRepository."""

    def __init__(
        self,
        repository: Optional[TicketRepository] = None,
        settings: Optional[Settings] = None,
    ):
        self.settings = settings or get_settings()
        self.repository = repository or TicketRepository(
            self.settings.tickets_table,
            barcode_index=self.settings.barcode_index,
            wristband_index=self.settings.wristband_index,
            created_at_index=self.settings.created_at_index,
            region_name=self.settings.aws_region,
        )

    def find_by_barcode(self, barcode: str, event_ids: List[str]) -> TicketMatch:
        """
        Return the first ticket whose barcode or wristband barcode equals ``barcode``.

        Earlier events win; within an event a ``barcode`` hit wins over a
        ``wristband_barcode`` hit. Store errors are not caught here.
        """
        for event_id in event_ids:
            for field in BARCODE_FIELDS:
                start = time.perf_counter()
                doc = self.repository.find_first(event_id, field, barcode)
                logger.info(
                    "Barcode query completed",
                    extra={
                        "event_id": event_id,
                        "field": field,
                        "docs_found": int(doc is not None),
                        "duration_ms": int((time.perf_counter() - start) * 1000),
                    },
                )
                if doc is not None:
                    return TicketMatch(ticket=doc.data, id=doc.id)

        raise NotFoundError("No matching ticket found for the provided barcode.")

    def search(self, search_input: str, event_ids: Iterable[Any]) -> TicketList:
        """
        Case-insensitive substring search over barcodes and attendee names.

        ``search_input`` is expected lower-cased and trimmed. Every document of
        every listed event is read, since the store cannot match substrings.
        """
        results: Dict[str, Dict[str, Any]] = {}
        scanned = 0
        for event_id in event_ids:
            if not event_id:
                continue
            scanned += 1
            for doc in self.repository.list_event(event_id):
                if doc.id in results:
                    continue
                if any(search_input in text for text in _search_haystack(doc.data)):
                    results[doc.id] = doc.as_record()

        logger.info(
            "Ticket search completed",
            extra={"events_scanned": scanned, "matches": len(results)},
        )
        return TicketList(tickets=list(results.values()))

    def load_paginated(self, event_ids: Iterable[Any], limit: Any = None) -> TicketList:
        """Up to ``limit`` tickets per event, oldest first."""
        return self._list(event_ids, self.resolve_limit(limit))

    def fetch_initial(self, event_ids: Iterable[Any]) -> TicketList:
        """Fixed first page of tickets per event, oldest first."""
        return self._list(event_ids, self.settings.initial_page_size)

    def fetch_all(self, event_ids: Iterable[Any]) -> TicketList:
        """Every ticket of every event, oldest first within each event."""
        return self._list(event_ids, None)

    def resolve_limit(self, limit: Any) -> int:
        """Apply the page size policy to a caller-supplied limit."""
        if limit is None:
            return self.settings.default_page_size
        if isinstance(limit, bool) or not isinstance(limit, int) or limit < 1:
            raise InvalidArgumentError("limit must be a positive integer.")
        if limit > self.settings.max_page_size:
            logger.info(
                "Clamping page limit",
                extra={"requested": limit, "max_page_size": self.settings.max_page_size},
            )
            return self.settings.max_page_size
        return limit

    def _list(self, event_ids: Iterable[Any], limit: Optional[int]) -> TicketList:
        """
        Concatenate per-event pages in event order, dropping repeated ids.

        A failed fetch for one event is logged and contributes nothing; the
        remaining events are still listed.
        """
        seen = set()
        tickets: List[Dict[str, Any]] = []
        for event_id in event_ids:
            if not event_id:
                continue
            try:
                docs: List[TicketDocument] = self.repository.list_by_created_at(
                    event_id, limit=limit
                )
            except Exception as exc:
                logger.warning(
                    "Failed to fetch tickets for event",
                    extra={"event_id": event_id, "error": str(exc)},
                    exc_info=True,
                )
                continue

            for doc in docs:
                if doc.id not in seen:
                    seen.add(doc.id)
                    tickets.append(doc.as_record())

        logger.info("Tickets listed", extra={"limit": limit, "tickets": len(tickets)})
        return TicketList(tickets=tickets)
