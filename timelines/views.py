"""
Views for the Timelines app (JSON API).
"""
import json
import logging

from django.contrib.auth.decorators import login_required
from django.forms.models import model_to_dict
from django.http import HttpResponse, JsonResponse
from django.shortcuts import get_object_or_404
from django.views.decorators.http import require_GET, require_POST, require_http_methods

from .canvas import TimelineCanvas
from .forms import (
    EventPositionForm, ListViewModeForm, TimelineEventForm,
    TimelineForm, TimelineRelationshipForm
)
from .layout.gantt import bar_position, gantt_rows, time_range
from .layout.spacing import LIST_VIEW_MODES, list_view_entries
from .models import Timeline, TimelineEvent, TimelineRelationship
from .presets import TIMELINE_TEMPLATES, apply_template
from .serializers import serialize_event, serialize_relationship, serialize_timeline

logger = logging.getLogger(__name__)

# API key -> form field
TIMELINE_FIELDS = {
    'notebookId': 'notebook',
    'timelineType': 'timeline_type',
    'timeScale': 'time_scale',
    'defaultView': 'default_view',
    'listViewMode': 'list_view_mode',
}
EVENT_FIELDS = {
    'startDate': 'start_date',
    'endDate': 'end_date',
    'eventType': 'event_type',
    'linkedContentType': 'linked_content_type',
    'linkedContentId': 'linked_content_id',
}
RELATIONSHIP_FIELDS = {
    'fromEventId': 'from_event',
    'toEventId': 'to_event',
    'relationshipType': 'relationship_type',
}


# ============== Helpers ==============

def _load_json(request):
    """Parse the request body as a JSON object."""
    try:
        data = json.loads(request.body or b'{}')
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise ValueError(f'Invalid JSON: {e}')
    if not isinstance(data, dict):
        raise ValueError('Expected a JSON object')
    return data


def _form_data(payload, field_map, instance=None, fields=None):
    """Translate API keys to form fields, on top of the instance's current values for PATCH."""
    data = model_to_dict(instance, fields=fields) if instance is not None else {}
    for key, value in payload.items():
        data[field_map.get(key, key)] = value
    return data


def _error(message, status=400, errors=None):
    body = {'status': 'error', 'message': message}
    if errors:
        body['errors'] = errors
    return JsonResponse(body, status=status)


def _form_error(form):
    logger.debug("Rejected payload: %s", form.errors.as_json())
    return _error('Invalid request data', errors=form.errors.get_json_data())


# ============== Timeline API ==============

@login_required
@require_http_methods(['GET', 'POST'])
def api_timelines(request):
    """List the user's timelines (optionally per notebook) or create one."""
    if request.method == 'GET':
        timelines = Timeline.objects.filter(user=request.user)
        notebook_id = request.GET.get('notebookId')
        if notebook_id:
            if not notebook_id.isdigit():
                return _error('notebookId must be numeric')
            timelines = timelines.filter(notebook_id=int(notebook_id))
        return JsonResponse({'timelines': [serialize_timeline(t) for t in timelines]})

    try:
        payload = _load_json(request)
    except ValueError as e:
        return _error(str(e))

    form = TimelineForm(_form_data(payload, TIMELINE_FIELDS), user=request.user)
    if not form.is_valid():
        return _form_error(form)

    timeline = form.save(commit=False)
    timeline.user = request.user
    template_id = payload.get('templateId')
    if template_id:
        try:
            apply_template(timeline, template_id)
        except ValueError as e:
            return _error(str(e))
    timeline.save()
    return JsonResponse(serialize_timeline(timeline), status=201)


@login_required
@require_http_methods(['GET', 'PATCH', 'DELETE'])
def api_timeline_detail(request, pk):
    """Get, update or delete a timeline."""
    timeline = get_object_or_404(Timeline, pk=pk, user=request.user)

    if request.method == 'GET':
        return JsonResponse(serialize_timeline(timeline))

    if request.method == 'DELETE':
        timeline.delete()
        return HttpResponse(status=204)

    try:
        payload = _load_json(request)
    except ValueError as e:
        return _error(str(e))

    data = _form_data(payload, TIMELINE_FIELDS, instance=timeline, fields=TimelineForm._meta.fields)
    form = TimelineForm(data, instance=timeline, user=request.user)
    if not form.is_valid():
        return _form_error(form)
    timeline = form.save()
    return JsonResponse(serialize_timeline(timeline))


@login_required
@require_POST
def api_set_list_view_mode(request, pk):
    """Switch the list view between compact and timescale spacing."""
    timeline = get_object_or_404(Timeline, pk=pk, user=request.user)
    try:
        payload = _load_json(request)
    except ValueError as e:
        return _error(str(e))

    form = ListViewModeForm(_form_data(payload, TIMELINE_FIELDS))
    if not form.is_valid():
        return _form_error(form)

    timeline.list_view_mode = form.cleaned_data['list_view_mode']
    timeline.save(update_fields=['list_view_mode', 'updated_at'])
    return JsonResponse({'status': 'success', 'listViewMode': timeline.list_view_mode})


@require_GET
@login_required
def api_timeline_templates(request):
    return JsonResponse({'templates': TIMELINE_TEMPLATES})


# ============== Event API ==============

@login_required
@require_http_methods(['GET', 'POST'])
def api_timeline_events(request, pk):
    """List a timeline's events in chronological order, or add one."""
    timeline = get_object_or_404(Timeline, pk=pk, user=request.user)

    if request.method == 'GET':
        return JsonResponse({'events': [serialize_event(e) for e in timeline.sorted_events()]})

    try:
        payload = _load_json(request)
    except ValueError as e:
        return _error(str(e))

    form = TimelineEventForm(_form_data(payload, EVENT_FIELDS))
    if not form.is_valid():
        return _form_error(form)

    event = form.save(commit=False)
    event.timeline = timeline
    event.save()
    return JsonResponse(serialize_event(event), status=201)


@login_required
@require_http_methods(['GET', 'PATCH', 'DELETE'])
def api_event_detail(request, pk):
    """Get, edit or delete a single event."""
    event = get_object_or_404(TimelineEvent, pk=pk, timeline__user=request.user)

    if request.method == 'GET':
        return JsonResponse(serialize_event(event))

    if request.method == 'DELETE':
        event.delete()
        return HttpResponse(status=204)

    try:
        payload = _load_json(request)
    except ValueError as e:
        return _error(str(e))

    data = _form_data(payload, EVENT_FIELDS, instance=event, fields=TimelineEventForm._meta.fields)
    form = TimelineEventForm(data, instance=event)
    if not form.is_valid():
        return _form_error(form)
    event = form.save()
    return JsonResponse(serialize_event(event))


@login_required
@require_POST
def api_event_position(request, pk):
    """
    Drag end on the canvas: store the dropped coordinate and pin the event
    so later layout passes leave it where it is.
    """
    event = get_object_or_404(TimelineEvent, pk=pk, timeline__user=request.user)
    try:
        payload = _load_json(request)
    except ValueError as e:
        return _error(str(e))

    form = EventPositionForm({
        'x': payload.get('x', payload.get('positionX')),
        'y': payload.get('y', payload.get('positionY')),
    })
    if not form.is_valid():
        return _form_error(form)

    canvas = TimelineCanvas(event.timeline)
    canvas.drag(event.pk, form.cleaned_data['x'], form.cleaned_data['y'])
    if event.pk in canvas.failed_writes:
        logger.warning("Position for event %s was not saved", event.pk)
        return _error('Failed to save event position', status=500)

    moved = next(e for e in canvas.events if e.pk == event.pk)
    return JsonResponse(serialize_event(moved))


# ============== Relationship API ==============

@login_required
@require_http_methods(['GET', 'POST'])
def api_timeline_relationships(request, pk):
    """List a timeline's relationships or connect two of its events."""
    timeline = get_object_or_404(Timeline, pk=pk, user=request.user)

    if request.method == 'GET':
        relationships = timeline.relationships.all()
        return JsonResponse({'relationships': [serialize_relationship(r) for r in relationships]})

    try:
        payload = _load_json(request)
    except ValueError as e:
        return _error(str(e))

    form = TimelineRelationshipForm(_form_data(payload, RELATIONSHIP_FIELDS), timeline=timeline)
    if not form.is_valid():
        return _form_error(form)

    relationship = form.save(commit=False)
    relationship.timeline = timeline
    relationship.save()
    return JsonResponse(serialize_relationship(relationship), status=201)


@login_required
@require_http_methods(['PATCH', 'DELETE'])
def api_relationship_detail(request, pk):
    """Change a relationship's type/description, or remove it."""
    relationship = get_object_or_404(TimelineRelationship, pk=pk, timeline__user=request.user)

    if request.method == 'DELETE':
        relationship.delete()
        return HttpResponse(status=204)

    try:
        payload = _load_json(request)
    except ValueError as e:
        return _error(str(e))

    data = _form_data(
        payload, RELATIONSHIP_FIELDS,
        instance=relationship, fields=TimelineRelationshipForm._meta.fields
    )
    form = TimelineRelationshipForm(data, instance=relationship, timeline=relationship.timeline)
    if not form.is_valid():
        return _form_error(form)
    relationship = form.save()
    return JsonResponse(serialize_relationship(relationship))


# ============== Views of a timeline ==============

@require_GET
@login_required
def api_timeline_canvas(request, pk):
    """Canvas view: positioned nodes, relationship edges and the axis."""
    timeline = get_object_or_404(Timeline, pk=pk, user=request.user)
    return JsonResponse(TimelineCanvas(timeline).render())


@login_required
@require_POST
def api_timeline_auto_layout(request, pk):
    """The 'Auto Layout' button: discard manual placements and lay everything out again."""
    timeline = get_object_or_404(Timeline, pk=pk, user=request.user)
    canvas = TimelineCanvas(timeline)
    canvas.auto_layout()
    payload = canvas.render()
    if canvas.failed_writes:
        payload['status'] = 'partial'
    return JsonResponse(payload)


@require_GET
@login_required
def api_timeline_list(request, pk):
    """List view entries with the spacing for the timeline's list view mode."""
    timeline = get_object_or_404(Timeline, pk=pk, user=request.user)
    mode = request.GET.get('mode') or timeline.list_view_mode
    if mode not in LIST_VIEW_MODES:
        return _error(f'Unknown list view mode: {mode}')

    entries = list_view_entries(timeline.events.all(), mode)
    return JsonResponse({
        'listViewMode': mode,
        'entries': [
            {
                'event': serialize_event(entry.event),
                'displayDate': entry.event.get_display_date(),
                'spacing': entry.spacing,
                'icon': entry.icon,
            }
            for entry in entries
        ],
    })


@require_GET
@login_required
def api_timeline_gantt(request, pk):
    """Gantt view: one row per category with bar offsets in percent."""
    timeline = get_object_or_404(Timeline, pk=pk, user=request.user)
    events = list(timeline.events.all())
    bounds = time_range(events)

    rows = []
    for row in gantt_rows(events):
        bars = []
        for event in row.events:
            left, width = bar_position(event, bounds)
            bars.append({'event': serialize_event(event), 'left': left, 'width': width})
        rows.append({'category': row.category, 'color': row.color, 'bars': bars})

    return JsonResponse({
        'range': {'min': bounds.min, 'max': bounds.max, 'span': bounds.span},
        'rows': rows,
    })
