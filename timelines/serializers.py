"""
JSON shapes exchanged with the timeline front end.
"""


def serialize_timeline(timeline):
    return {
        'id': timeline.pk,
        'notebookId': timeline.notebook_id,
        'name': timeline.name,
        'description': timeline.description,
        'timelineType': timeline.timeline_type,
        'timeScale': timeline.time_scale,
        'defaultView': timeline.default_view,
        'listViewMode': timeline.list_view_mode,
    }


def serialize_event(event):
    return {
        'id': event.pk,
        'timelineId': event.timeline_id,
        'title': event.title,
        'description': event.description,
        'startDate': event.start_date,
        'endDate': event.end_date or None,
        'positionX': event.position_x,
        'positionY': event.position_y,
        'layoutMode': event.layout_mode,
        'eventType': event.event_type or None,
        'importance': event.importance,
        'category': event.category or None,
        'color': event.color or None,
        'linkedContentType': event.linked_content_type or None,
        'linkedContentId': event.linked_content_id or None,
    }


def serialize_relationship(relationship):
    return {
        'id': relationship.pk,
        'timelineId': relationship.timeline_id,
        'fromEventId': relationship.from_event_id,
        'toEventId': relationship.to_event_id,
        'relationshipType': relationship.relationship_type,
        'description': relationship.description,
    }
