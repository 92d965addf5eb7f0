"""Timeline item model, date parsing and JSON loading.

Public API:
- Event, Period, Note: timeline item dataclasses
- parse_date / range_of: free-form date parsing and padded domains
- load_items / loads_items: read item lists from JSON
"""

from duckline.parser.dates import parse_date, range_of
from duckline.parser.loader import TimelineFormatError, load_items, loads_items
from duckline.parser.model import Event, Note, Period, TimelineItem, rename_item

__all__ = [
    "Event",
    "Note",
    "Period",
    "TimelineFormatError",
    "TimelineItem",
    "load_items",
    "loads_items",
    "parse_date",
    "range_of",
    "rename_item",
]
