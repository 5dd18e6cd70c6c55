"""
Rescales event timestamps onto [0, 1] relative to the current event set.
"""
import math

from .dates import FALLBACK_TIMESTAMP


def finite_timestamp(value):
    try:
        value = float(value)
    except (TypeError, ValueError):
        return FALLBACK_TIMESTAMP
    return value if math.isfinite(value) else FALLBACK_TIMESTAMP


def time_bounds(timestamps):
    """
    Returns (min, max, range) for the given timestamps.
    The range is never zero: an empty or flat set reports a range of 1.
    """
    values = [finite_timestamp(t) for t in timestamps]
    if not values:
        return FALLBACK_TIMESTAMP, FALLBACK_TIMESTAMP, 1.0
    low, high = min(values), max(values)
    return low, high, (high - low) or 1.0


def normalize_positions(items):
    """
    Maps each (event_id, timestamp) pair to its relative position in [0, 1].

    A single event sits at 0.0, and so does every event when all timestamps
    are equal.
    """
    pairs = [(event_id, finite_timestamp(timestamp)) for event_id, timestamp in items]
    if not pairs:
        return {}
    if len(pairs) == 1:
        return {pairs[0][0]: 0.0}

    low, _high, span = time_bounds(timestamp for _, timestamp in pairs)
    return {event_id: (timestamp - low) / span for event_id, timestamp in pairs}
