"""
Gantt view: one row per event category, bars positioned in percent of the
padded time range.
"""
import math
import zlib
from dataclasses import dataclass, field

from .dates import parse_date_to_timestamp
from .spacing import sort_chronologically

UNCATEGORIZED = 'Uncategorized'
RANGE_PADDING = 0.05
MIN_BAR_WIDTH = 2.0

ROW_PALETTE = [
    '#6366f1', '#ef4444', '#059669', '#f59e0b',
    '#0ea5e9', '#a855f7', '#ec4899', '#64748b',
]


@dataclass(frozen=True)
class TimeRange:
    min: float
    max: float
    span: float


@dataclass
class GanttRow:
    category: str
    color: str
    events: list = field(default_factory=list)


def _get(event, attr, key):
    if isinstance(event, dict):
        return event.get(key, event.get(attr))
    return getattr(event, attr, None)


def row_color(category):
    return ROW_PALETTE[zlib.crc32(category.encode('utf-8')) % len(ROW_PALETTE)]


def time_range(events):
    """Overall range covered by start and end dates, padded 5% each side."""
    if not events:
        return TimeRange(0.0, 100.0, 100.0)

    low, high = math.inf, -math.inf
    for event in events:
        start = parse_date_to_timestamp(_get(event, 'start_date', 'startDate'))
        low, high = min(low, start), max(high, start)
        end_text = _get(event, 'end_date', 'endDate')
        if end_text:
            high = max(high, parse_date_to_timestamp(end_text))

    span = high - low
    if span == 0:
        return TimeRange(low - 50, high + 50, 100.0)
    padding = span * RANGE_PADDING
    return TimeRange(low - padding, high + padding, span + padding * 2)


def bar_position(event, bounds):
    """(left, width) in percent of the range."""
    start = parse_date_to_timestamp(_get(event, 'start_date', 'startDate'))
    left = (start - bounds.min) / bounds.span * 100

    width = MIN_BAR_WIDTH
    end_text = _get(event, 'end_date', 'endDate')
    if end_text:
        end = parse_date_to_timestamp(end_text)
        width = max((end - start) / bounds.span * 100, MIN_BAR_WIDTH)

    if not math.isfinite(left):
        left = 0.0
    if not math.isfinite(width):
        width = MIN_BAR_WIDTH
    return left, width


def gantt_rows(events):
    rows = {}
    for event in sort_chronologically(events):
        category = _get(event, 'category', 'category') or UNCATEGORIZED
        if category not in rows:
            color = _get(event, 'color', 'color') or row_color(category)
            rows[category] = GanttRow(category=category, color=color)
        rows[category].events.append(event)
    return list(rows.values())
