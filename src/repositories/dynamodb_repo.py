"""DynamoDB repository for per-event ticket documents."""

from decimal import Decimal
from typing import Any, Dict, List, Optional

import boto3
from boto3.dynamodb.conditions import Key

from models.ticket import TicketDocument

PARTITION_KEY = "event_id"
SORT_KEY = "ticket_id"


def _to_plain(value: Any) -> Any:
    """Convert DynamoDB types (Decimal, sets) into JSON-friendly values."""
    if isinstance(value, Decimal):
        return int(value) if value == value.to_integral_value() else float(value)
    if isinstance(value, dict):
        return {k: _to_plain(v) for k, v in value.items()}
    if isinstance(value, list):
        return [_to_plain(v) for v in value]
    if isinstance(value, (set, frozenset)):
        return sorted(_to_plain(v) for v in value)
    return value


def _to_document(item: Dict[str, Any]) -> TicketDocument:
    data = {
        k: _to_plain(v) for k, v in item.items() if k not in (PARTITION_KEY, SORT_KEY)
    }
    return TicketDocument(id=str(item[SORT_KEY]), data=data)


class TicketRepository:
    """
    Query helpers over the tickets table.

    Each event is one partition (``event_id``); the ticket id is the sort key.
    Exact-match and ordered lookups go through local secondary indexes that
    share the event partition.
    """

    def __init__(
        self,
        table_name: str,
        barcode_index: str = "barcode-index",
        wristband_index: str = "wristband_barcode-index",
        created_at_index: str = "created_at-index",
        region_name: Optional[str] = None,
        table=None,
    ):
        if table is None:
            table = boto3.resource("dynamodb", region_name=region_name).Table(table_name)
        self.table = table
        self.indexes = {
            "barcode": barcode_index,
            "wristband_barcode": wristband_index,
            "created_at": created_at_index,
        }

    def find_first(self, event_id: str, field: str, value: Any) -> Optional[TicketDocument]:
        """Return the first document in the event whose ``field`` equals ``value``."""
        resp = self.table.query(
            IndexName=self.indexes[field],
            KeyConditionExpression=Key(PARTITION_KEY).eq(event_id) & Key(field).eq(value),
            Limit=1,
        )
        items = resp.get("Items", [])
        return _to_document(items[0]) if items else None

    def list_event(self, event_id: str) -> List[TicketDocument]:
        """Return every document in the event, in sort key order."""
        return self._query(
            {"KeyConditionExpression": Key(PARTITION_KEY).eq(event_id)}
        )

    def list_by_created_at(
        self, event_id: str, limit: Optional[int] = None
    ) -> List[TicketDocument]:
        """Return documents ordered by ``created_at`` ascending, at most ``limit``."""
        params: Dict[str, Any] = {
            "IndexName": self.indexes["created_at"],
            "KeyConditionExpression": Key(PARTITION_KEY).eq(event_id),
            "ScanIndexForward": True,
        }
        return self._query(params, limit=limit)

    def _query(
        self, params: Dict[str, Any], limit: Optional[int] = None
    ) -> List[TicketDocument]:
        """Run a query, following LastEvaluatedKey until done or ``limit`` is met."""
        out: List[TicketDocument] = []
        while True:
            if limit is not None:
                params["Limit"] = limit - len(out)
            resp = self.table.query(**params)
            out.extend(_to_document(item) for item in resp.get("Items", []))
            lek = resp.get("LastEvaluatedKey")
            if not lek or (limit is not None and len(out) >= limit):
                break
            params["ExclusiveStartKey"] = lek
        return out[:limit] if limit is not None else out
