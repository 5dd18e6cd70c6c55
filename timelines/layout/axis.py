"""
Places timeline events along a horizontal axis for the canvas view.

Events are ranked chronologically and alternate above and below the axis line
by rank, so neighbours in time never share a side. Nodes that would land on
exactly the same spot (identical timestamps on the same side) are stacked
further away from the axis.
"""
from collections import namedtuple
from dataclasses import dataclass

from .normalize import finite_timestamp, normalize_positions

ABOVE = 'above'
BELOW = 'below'

RankedEvent = namedtuple('RankedEvent', ['event_id', 'timestamp', 'date_text', 'index'])


@dataclass(frozen=True)
class AxisGeometry:
    """Pixel geometry of the canvas axis."""

    axis_length: float = 1000.0
    margin: float = 100.0
    axis_y: float = 400.0
    offset: float = 180.0
    stack_step: float = 60.0

    @property
    def start_x(self):
        return self.margin

    @property
    def end_x(self):
        return self.margin + self.axis_length


@dataclass(frozen=True)
class AxisNode:
    event_id: object
    rank: int
    position: float
    x: float
    y: float
    side: str
    lane: int = 0
    date_text: str = ''

    @property
    def is_above(self):
        return self.side == ABOVE


def rank_events(items):
    """
    Sorts (event_id, timestamp[, date_text]) tuples into chronological rank order.
    Ties fall back to the date text and then to the original position.
    """
    entries = []
    for index, item in enumerate(items):
        event_id, timestamp = item[0], item[1]
        date_text = item[2] if len(item) > 2 else ''
        entries.append(RankedEvent(event_id, finite_timestamp(timestamp), date_text or '', index))
    return sorted(entries, key=lambda entry: (entry.timestamp, entry.date_text, entry.index))


def layout_axis(items, geometry=None):
    """
    Computes an AxisNode per event, in rank order.

    x = margin + normalized position * axis length; y alternates around
    geometry.axis_y by rank parity.
    """
    geometry = geometry or AxisGeometry()
    ranked = rank_events(items)
    if not ranked:
        return []

    # Keyed by original index so duplicate ids can't clobber each other.
    positions = normalize_positions((entry.index, entry.timestamp) for entry in ranked)

    nodes = []
    lanes = {}
    for rank, entry in enumerate(ranked):
        position = positions[entry.index]
        x = geometry.margin + position * geometry.axis_length
        side = ABOVE if rank % 2 == 0 else BELOW

        lane = lanes.get((x, side), 0)
        lanes[(x, side)] = lane + 1

        distance = geometry.offset + lane * geometry.stack_step
        y = geometry.axis_y - distance if side == ABOVE else geometry.axis_y + distance

        nodes.append(AxisNode(
            event_id=entry.event_id,
            rank=rank,
            position=position,
            x=x,
            y=y,
            side=side,
            lane=lane,
            date_text=entry.date_text,
        ))
    return nodes


def axis_markers(nodes, geometry=None):
    """
    Builds the decoration drawn behind the nodes: the axis line, one tick and
    connector per event, and the Past/Future end labels.
    """
    geometry = geometry or AxisGeometry()
    axis_y = geometry.axis_y

    ticks = []
    for node in nodes:
        ticks.append({
            'eventId': node.event_id,
            'x': node.x,
            'y': axis_y,
            'connectorFromY': axis_y - 10 if node.is_above else axis_y + 10,
            'connectorToY': node.y,
            'label': node.date_text,
            'labelY': axis_y + 30 if node.is_above else axis_y - 20,
        })

    return {
        'line': {'x1': geometry.start_x, 'y1': axis_y, 'x2': geometry.end_x, 'y2': axis_y},
        'ticks': ticks,
        'labels': [
            {'text': 'Past', 'x': geometry.start_x - 40, 'y': axis_y + 5, 'anchor': 'end'},
            {'text': 'Future', 'x': geometry.end_x + 50, 'y': axis_y + 5, 'anchor': 'start'},
        ],
    }
