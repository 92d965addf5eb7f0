"""Tests for JSON loading and saving of timeline items."""

import json
from datetime import datetime

import pytest

from conftest import event

from duckline.parser.loader import (
    TimelineFormatError,
    dump_bulk,
    dump_items,
    item_from_dict,
    load_items,
    loads_items,
)
from duckline.parser.model import Event, Note, Period, rename_item


def test_load_storage_format(duck_day_file):
    items = load_items(duck_day_file)
    assert len(items) == 9
    assert [item.kind for item in items[:4]] == ["event", "period", "event", "note"]
    assert items[0] == Event(
        id="1", label="Alarm quacks", instant=datetime(2025, 6, 7, 6, 0)
    )
    assert items[1].start == datetime(2025, 6, 7, 6, 30)
    assert items[1].end == datetime(2025, 6, 7, 7, 15)


def test_load_bulk_format():
    text = json.dumps(
        {
            "Hatched": {"type": "event", "date": "2019-04-12"},
            "Flight school": {
                "type": "period",
                "startDate": "2019-06-01",
                "endDate": "2019-08-15",
            },
        }
    )
    items = loads_items(text)
    assert [item.label for item in items] == ["Hatched", "Flight school"]
    assert isinstance(items[1], Period)
    assert all(len(item.id) == 9 for item in items)


def test_bulk_ids_are_fresh_each_load():
    text = '{"A": {"type": "note", "date": "2020-01-01"}}'
    assert loads_items(text)[0].id != loads_items(text)[0].id


def test_unknown_type_becomes_event():
    item = item_from_dict(
        {"id": "x", "label": "?", "type": "milestone", "date": "2020-01-01"}
    )
    assert isinstance(item, Event)


def test_alternative_date_keys():
    item = item_from_dict(
        {"type": "period", "start": "2020-01-01", "end_date": "2020-02-01"}
    )
    assert item.start == datetime(2020, 1, 1)
    assert item.end == datetime(2020, 2, 1)


def test_note_kind():
    assert isinstance(item_from_dict({"type": "note", "date": "2020-01-01"}), Note)


@pytest.mark.parametrize(
    "text",
    ["not json", "42", '"a string"', "[1, 2]"],
)
def test_malformed_documents_raise(text):
    with pytest.raises(TimelineFormatError):
        loads_items(text)


def test_format_error_is_value_error():
    assert issubclass(TimelineFormatError, ValueError)


def test_dump_items_round_trips(duck_day):
    reloaded = loads_items(dump_items(duck_day))
    assert reloaded == duck_day


def test_dump_bulk_collapses_duplicate_labels():
    items = [
        event("a", datetime(2020, 1, 1), label="Same"),
        event("b", datetime(2021, 1, 1), label="Same"),
    ]
    data = json.loads(dump_bulk(items))
    assert data == {"Same": {"type": "event", "date": "2021-01-01T00:00"}}


class TestRename:
    def test_rename_strips_whitespace(self, duck_day):
        assert rename_item(duck_day, "1", "  Wake up  ")
        assert duck_day[0].label == "Wake up"

    def test_blank_label_ignored(self, duck_day):
        assert not rename_item(duck_day, "1", "   ")
        assert duck_day[0].label == "Alarm quacks"

    def test_unknown_id(self, duck_day):
        assert not rename_item(duck_day, "missing", "Anything")
