"""
TicketRepository tests with a mocked DynamoDB table.

Run with: pytest tests/unit/test_dynamodb_repo.py -v
"""

from decimal import Decimal
from unittest.mock import MagicMock, patch

import pytest
from boto3.dynamodb.conditions import Key

from repositories.dynamodb_repo import TicketRepository


@pytest.fixture
def table():
    mock_table = MagicMock()
    mock_table.query.return_value = {"Items": []}
    return mock_table


@pytest.fixture
def repo(table):
    return TicketRepository("tickets", table=table)


def _item(ticket_id, **fields):
    return {"event_id": "e1", "ticket_id": ticket_id, **fields}


class TestFindFirst:
    def test_queries_index_with_limit_one(self, repo, table):
        table.query.return_value = {"Items": [_item("t1", barcode="ABC")]}

        doc = repo.find_first("e1", "barcode", "ABC")

        assert doc.id == "t1"
        assert doc.data == {"barcode": "ABC"}
        kwargs = table.query.call_args.kwargs
        assert kwargs["IndexName"] == "barcode-index"
        assert kwargs["Limit"] == 1
        assert kwargs["KeyConditionExpression"] == (
            Key("event_id").eq("e1") & Key("barcode").eq("ABC")
        )

    def test_wristband_uses_its_own_index(self, table):
        repo = TicketRepository("tickets", wristband_index="wb-idx", table=table)

        repo.find_first("e1", "wristband_barcode", "W1")

        assert table.query.call_args.kwargs["IndexName"] == "wb-idx"

    def test_no_items_returns_none(self, repo):
        assert repo.find_first("e1", "barcode", "nope") is None


class TestListing:
    def test_list_event_follows_pagination(self, repo, table):
        table.query.side_effect = [
            {"Items": [_item("t1")], "LastEvaluatedKey": {"ticket_id": "t1"}},
            {"Items": [_item("t2")]},
        ]

        docs = repo.list_event("e1")

        assert [d.id for d in docs] == ["t1", "t2"]
        second = table.query.call_args_list[1].kwargs
        assert second["ExclusiveStartKey"] == {"ticket_id": "t1"}
        assert "IndexName" not in second
        assert "Limit" not in second

    def test_list_by_created_at_orders_ascending(self, repo, table):
        repo.list_by_created_at("e1")

        kwargs = table.query.call_args.kwargs
        assert kwargs["IndexName"] == "created_at-index"
        assert kwargs["ScanIndexForward"] is True
        assert "Limit" not in kwargs

    def test_limit_spans_short_pages(self, repo, table):
        # DynamoDB may return fewer items than Limit when a page hits 1 MB.
        table.query.side_effect = [
            {"Items": [_item("t1"), _item("t2")], "LastEvaluatedKey": {"ticket_id": "t2"}},
            {"Items": [_item("t3")], "LastEvaluatedKey": {"ticket_id": "t3"}},
        ]

        docs = repo.list_by_created_at("e1", limit=3)

        assert [d.id for d in docs] == ["t1", "t2", "t3"]
        limits = [c.kwargs["Limit"] for c in table.query.call_args_list]
        assert limits == [3, 1]

    def test_limit_stops_when_partition_exhausted(self, repo, table):
        table.query.return_value = {"Items": [_item("t1")]}

        docs = repo.list_by_created_at("e1", limit=10)

        assert [d.id for d in docs] == ["t1"]
        assert table.query.call_count == 1


class TestItemConversion:
    def test_decimals_and_sets_become_json_friendly(self, repo, table):
        table.query.return_value = {
            "Items": [
                _item(
                    "t1",
                    price=Decimal("12.50"),
                    seats=Decimal("2"),
                    tags={"vip", "early"},
                    extra={"scans": [Decimal("1"), Decimal("3")]},
                )
            ]
        }

        doc = repo.list_event("e1")[0]

        assert doc.data == {
            "price": 12.5,
            "seats": 2,
            "tags": ["early", "vip"],
            "extra": {"scans": [1, 3]},
        }
        assert isinstance(doc.data["seats"], int)

    def test_key_attributes_are_stripped(self, repo, table):
        table.query.return_value = {"Items": [_item("t1", barcode="B")]}

        doc = repo.list_event("e1")[0]

        assert "event_id" not in doc.data
        assert "ticket_id" not in doc.data
        assert doc.as_record() == {"barcode": "B", "id": "t1"}


@patch("repositories.dynamodb_repo.boto3")
def test_default_table_comes_from_boto3(mock_boto3):
    TicketRepository("tickets-prod")

    mock_boto3.resource.assert_called_once_with("dynamodb", region_name=None)
    mock_boto3.resource.return_value.Table.assert_called_once_with("tickets-prod")


@patch("repositories.dynamodb_repo.boto3")
def test_service_builds_repository_in_configured_region(mock_boto3):
    from config.settings import Settings
    from services.ticket_service import TicketService

    TicketService(settings=Settings(tickets_table="tickets-eu", aws_region="eu-central-1"))

    mock_boto3.resource.assert_called_once_with("dynamodb", region_name="eu-central-1")
    mock_boto3.resource.return_value.Table.assert_called_once_with("tickets-eu")
