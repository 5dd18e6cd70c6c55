"""
Decides where every node on the canvas goes.

Each event carries a placement tagged either 'auto' (position derived from its
date whenever layout runs) or 'manual' (position is wherever the user last
dropped it). `reduce_layout` is a pure reducer over (state, action): it returns
the next state plus the position writes the caller should persist.

Rules:
- a drag pins the node ('manual') and switches automatic re-layout off;
- only the explicit Auto Layout action turns pinned nodes back to 'auto';
- a refresh re-runs the axis layout for 'auto' nodes only when the event
  count has grown and automatic layout is still on. Otherwise it just places
  new nodes that have no coordinates yet.
"""
import math
from dataclasses import dataclass, field, replace

from .axis import layout_axis
from .dates import start_text_for, timestamp_for

AUTO = 'auto'
MANUAL = 'manual'
LAYOUT_MODES = (AUTO, MANUAL)


@dataclass(frozen=True)
class NodePlacement:
    event_id: object
    mode: str = AUTO
    x: float = None
    y: float = None

    @property
    def has_position(self):
        return self.x is not None and self.y is not None


@dataclass(frozen=True)
class LayoutInput:
    """What the reducer needs to know about one event."""

    event_id: object
    timestamp: float = 0.0
    date_text: str = ''
    mode: str = AUTO
    x: float = None
    y: float = None


@dataclass(frozen=True)
class LayoutState:
    placements: tuple = ()
    last_observed_count: int = 0
    auto_layout_enabled: bool = True

    def placement_for(self, event_id):
        for placement in self.placements:
            if placement.event_id == event_id:
                return placement
        return None


@dataclass(frozen=True)
class PositionWrite:
    event_id: object
    x: float
    y: float
    mode: str


@dataclass(frozen=True)
class LayoutResult:
    state: LayoutState
    writes: tuple = ()
    relaid_out: bool = False


# ============== Actions ==============

@dataclass(frozen=True)
class EventsRefreshed:
    events: tuple = field(default_factory=tuple)


@dataclass(frozen=True)
class NodeDragged:
    event_id: object
    x: float
    y: float


@dataclass(frozen=True)
class AutoLayoutRequested:
    events: tuple = field(default_factory=tuple)


# ============== Helpers ==============

def should_auto_layout(current_count, last_observed_count, auto_layout_enabled):
    """The only condition under which a refresh re-runs the global layout."""
    return current_count > last_observed_count and auto_layout_enabled


def _value(event, attr, key, default=None):
    if isinstance(event, dict):
        return event.get(key, event.get(attr, default))
    return getattr(event, attr, default)


def layout_input_for(event):
    """Builds a LayoutInput from a TimelineEvent instance or its API dict."""
    x = _value(event, 'position_x', 'positionX')
    y = _value(event, 'position_y', 'positionY')
    mode = _value(event, 'layout_mode', 'layoutMode')
    if mode not in LAYOUT_MODES:
        # Legacy rows without a mode: a stored coordinate means it was placed by hand.
        mode = MANUAL if x is not None and y is not None else AUTO
    return LayoutInput(
        event_id=_value(event, 'pk', 'id'),
        timestamp=timestamp_for(event),
        date_text=start_text_for(event),
        mode=mode,
        x=x,
        y=y,
    )


def placement_from_input(item):
    mode = item.mode if item.mode in LAYOUT_MODES else AUTO
    return _renderable(NodePlacement(item.event_id, mode, item.x, item.y))


def _renderable(placement):
    if placement.mode == MANUAL and not placement.has_position:
        # Nothing to pin to yet.
        return replace(placement, mode=AUTO)
    return placement


def _axis_items(events):
    return [(item.event_id, item.timestamp, item.date_text) for item in events]


# ============== Reducer ==============

def _refresh(state, action, geometry):
    events = list(action.events)
    if not events:
        return LayoutResult(replace(state, placements=(), last_observed_count=0))

    known = {placement.event_id: placement for placement in state.placements}
    placements = [
        _renderable(known[item.event_id]) if item.event_id in known else placement_from_input(item)
        for item in events
    ]

    relayout = should_auto_layout(len(events), state.last_observed_count, state.auto_layout_enabled)
    needs_layout = relayout or any(
        p.mode == AUTO and not p.has_position for p in placements
    )
    computed = {}
    if needs_layout:
        computed = {node.event_id: node for node in layout_axis(_axis_items(events), geometry)}

    writes = []
    settled = []
    for placement in placements:
        if placement.mode == AUTO and (relayout or not placement.has_position):
            node = computed[placement.event_id]
            if (placement.x, placement.y) != (node.x, node.y):
                writes.append(PositionWrite(placement.event_id, node.x, node.y, AUTO))
            placement = replace(placement, x=node.x, y=node.y)
        settled.append(placement)

    new_state = replace(state, placements=tuple(settled), last_observed_count=len(events))
    return LayoutResult(new_state, tuple(writes), relayout)


def _drag(state, action, geometry):
    placement = state.placement_for(action.event_id)
    try:
        x, y = float(action.x), float(action.y)
    except (TypeError, ValueError):
        return LayoutResult(state)
    if placement is None or not (math.isfinite(x) and math.isfinite(y)):
        return LayoutResult(state)

    pinned = replace(placement, mode=MANUAL, x=x, y=y)
    placements = tuple(
        pinned if p.event_id == action.event_id else p for p in state.placements
    )
    new_state = replace(state, placements=placements, auto_layout_enabled=False)
    return LayoutResult(new_state, (PositionWrite(action.event_id, x, y, MANUAL),))


def _auto_layout(state, action, geometry):
    events = list(action.events)
    nodes = layout_axis(_axis_items(events), geometry)
    by_id = {node.event_id: node for node in nodes}

    placements = []
    writes = []
    for item in events:
        node = by_id[item.event_id]
        placements.append(NodePlacement(item.event_id, AUTO, node.x, node.y))
        writes.append(PositionWrite(item.event_id, node.x, node.y, AUTO))

    new_state = LayoutState(
        placements=tuple(placements),
        last_observed_count=len(events),
        auto_layout_enabled=True,
    )
    return LayoutResult(new_state, tuple(writes), bool(events))


_HANDLERS = {
    EventsRefreshed: _refresh,
    NodeDragged: _drag,
    AutoLayoutRequested: _auto_layout,
}


def reduce_layout(state, action, geometry=None):
    """Applies one action to the layout state. Pure: no I/O, no shared state."""
    handler = _HANDLERS.get(type(action))
    if handler is None:
        raise TypeError(f'Unknown layout action: {action!r}')
    return handler(state or LayoutState(), action, geometry)
