"""
Vertical gaps for the list view.

In 'timescale' mode the gap before each event grows with the time elapsed
since the previous one, squeezed into [MIN_SPACING, MAX_SPACING] pixels.
'compact' mode ignores time and spaces every entry evenly.
"""
from dataclasses import dataclass

from .dates import event_sort_key, start_text_for, timestamp_for
from .normalize import finite_timestamp

MIN_SPACING = 16
MAX_SPACING = 200
COMPACT_SPACING = 24

COMPACT = 'compact'
TIMESCALE = 'timescale'
LIST_VIEW_MODES = (COMPACT, TIMESCALE)

EVENT_ICONS = {
    'historical': 'clock',
    'battle': 'sparkles',
    'conflict': 'sparkles',
    'location': 'location-marker',
    'journey': 'location-marker',
}
DEFAULT_EVENT_ICON = 'calendar'


def proportional_spacing(timestamps):
    """Pixel spacing before each timestamp of an already-sorted sequence."""
    values = [finite_timestamp(t) for t in timestamps]
    if not values:
        return []

    gaps = [current - previous for previous, current in zip(values, values[1:])]
    if not gaps:
        return [0]

    low, high = min(gaps), max(gaps)
    if high == low:
        return [0] + [MIN_SPACING] * len(gaps)

    scale = (MAX_SPACING - MIN_SPACING) / (high - low)
    return [0] + [MIN_SPACING + (gap - low) * scale for gap in gaps]


def compact_spacing(count):
    if count <= 0:
        return []
    return [0] + [COMPACT_SPACING] * (count - 1)


def spacing_for_mode(timestamps, mode):
    timestamps = list(timestamps)
    if mode == TIMESCALE:
        return proportional_spacing(timestamps)
    return compact_spacing(len(timestamps))


def event_icon(event_type):
    return EVENT_ICONS.get((event_type or '').lower(), DEFAULT_EVENT_ICON)


@dataclass(frozen=True)
class ListEntry:
    event: object
    timestamp: float
    spacing: float
    icon: str


def sort_chronologically(events):
    """Returns events ordered by parsed start date (ties: date text, then input order)."""
    keyed = [
        (event_sort_key(timestamp_for(event), start_text_for(event), index), event)
        for index, event in enumerate(events)
    ]
    keyed.sort(key=lambda pair: pair[0])
    return [event for _, event in keyed]


def list_view_entries(events, mode=COMPACT):
    ordered = sort_chronologically(events)
    timestamps = [timestamp_for(event) for event in ordered]
    spacings = spacing_for_mode(timestamps, mode)

    entries = []
    for event, timestamp, spacing in zip(ordered, timestamps, spacings):
        if isinstance(event, dict):
            event_type = event.get('eventType')
        else:
            event_type = getattr(event, 'event_type', '')
        entries.append(ListEntry(event, timestamp, spacing, event_icon(event_type)))
    return entries
