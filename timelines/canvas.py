import logging

from django.conf import settings
from django.db import DatabaseError, transaction

from .layout.axis import AxisGeometry, axis_markers, layout_axis
from .layout.reconcile import (
    AutoLayoutRequested,
    EventsRefreshed,
    LayoutState,
    NodeDragged,
    layout_input_for,
    placement_from_input,
    reduce_layout,
)
from .layout.relationships import build_edge, style_table
from .serializers import serialize_event, serialize_relationship, serialize_timeline

logger = logging.getLogger(__name__)

EVENT_LAYOUT_FIELDS = ['position_x', 'position_y', 'layout_mode', 'updated_at']
TIMELINE_LAYOUT_FIELDS = ['layout_event_count', 'auto_layout_enabled', 'updated_at']


def geometry_from_settings():
    """Canvas axis geometry, configurable per deployment."""
    return AxisGeometry(
        axis_length=float(getattr(settings, 'TIMELINE_AXIS_LENGTH', 1000)),
        margin=float(getattr(settings, 'TIMELINE_MARGIN', 100)),
        axis_y=float(getattr(settings, 'TIMELINE_AXIS_Y', 400)),
        offset=float(getattr(settings, 'TIMELINE_NODE_OFFSET', 180)),
    )


class TimelineCanvas:
    """
    Runs the layout reducer for one timeline.

    Layout state is rebuilt from the database on every request (each event's
    layout_mode/position plus the timeline's layout counters), the reducer
    decides what moves, and the resulting position writes are saved back one
    event at a time.
    """

    def __init__(self, timeline, geometry=None):
        self.timeline = timeline
        self.geometry = geometry or geometry_from_settings()
        self.events = list(timeline.events.all())
        self.failed_writes = []

    def current_state(self):
        placements = tuple(placement_from_input(item) for item in self.layout_inputs())
        return LayoutState(
            placements=placements,
            last_observed_count=self.timeline.layout_event_count,
            auto_layout_enabled=self.timeline.auto_layout_enabled,
        )

    def layout_inputs(self):
        return tuple(layout_input_for(event) for event in self.events)

    def refresh(self):
        """A data refresh: places new events, re-lays out only on net growth."""
        result = reduce_layout(self.current_state(), EventsRefreshed(self.layout_inputs()), self.geometry)
        if result.relaid_out:
            logger.info(
                "Auto layout for timeline %s (%s -> %s events)",
                self.timeline.pk, self.timeline.layout_event_count, len(self.events)
            )
        else:
            logger.debug("Layout skipped for timeline %s", self.timeline.pk)
        self._commit(result)
        return result

    def drag(self, event_id, x, y):
        """Drag end: pins the event where it was dropped."""
        result = reduce_layout(self.current_state(), NodeDragged(event_id, x, y), self.geometry)
        self._commit(result)
        return result

    def auto_layout(self):
        """The explicit 'Auto Layout' action: every event back to automatic."""
        result = reduce_layout(self.current_state(), AutoLayoutRequested(self.layout_inputs()), self.geometry)
        logger.info("Manual auto layout requested for timeline %s (%s events)", self.timeline.pk, len(self.events))
        self._commit(result)
        return result

    def _commit(self, result):
        events_by_id = {event.pk: event for event in self.events}
        for write in result.writes:
            event = events_by_id.get(write.event_id)
            if event is None:
                continue
            event.position_x = write.x
            event.position_y = write.y
            event.layout_mode = write.mode
            try:
                with transaction.atomic():
                    event.save(update_fields=EVENT_LAYOUT_FIELDS)
            except DatabaseError:
                # Remaining writes still go through
                logger.exception("Failed to save position for event %s", write.event_id)
                self.failed_writes.append(write.event_id)

        state = result.state
        timeline = self.timeline
        if (timeline.layout_event_count, timeline.auto_layout_enabled) != (
            state.last_observed_count, state.auto_layout_enabled
        ):
            timeline.layout_event_count = state.last_observed_count
            timeline.auto_layout_enabled = state.auto_layout_enabled
            timeline.save(update_fields=TIMELINE_LAYOUT_FIELDS)

    def build_nodes(self, state):
        placements = {placement.event_id: placement for placement in state.placements}
        nodes = []
        for event in self.events:
            placement = placements.get(event.pk)
            if placement is None:
                continue
            nodes.append({
                'id': event.pk,
                'type': 'timelineEvent',
                'position': {'x': placement.x, 'y': placement.y},
                'layoutMode': placement.mode,
                'data': serialize_event(event),
            })
        return nodes

    def build_edges(self):
        relationships = self.timeline.relationships.all()
        return [build_edge(serialize_relationship(rel)) for rel in relationships]

    def render(self):
        """
        Canvas payload: positioned nodes, styled edges and the axis decoration.
        """
        result = self.refresh()
        axis_nodes = layout_axis(
            [(event.pk, event.timestamp, event.start_date) for event in self.events],
            self.geometry,
        )
        return {
            'timeline': serialize_timeline(self.timeline),
            'nodes': self.build_nodes(result.state),
            'edges': self.build_edges(),
            'axis': axis_markers(axis_nodes, self.geometry),
            'edgeStyles': style_table(),
            'autoLayoutEnabled': result.state.auto_layout_enabled,
            'relaidOut': result.relaid_out,
            'failedWrites': list(self.failed_writes),
        }
