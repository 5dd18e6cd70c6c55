"""
Models for the Storyworld Timelines application.
These models represent the core entities: Notebooks, Timelines, Timeline Events,
the Relationships between events, and the Activity Log.
"""

from django.db import models
from django.contrib.auth.models import User

from .layout.dates import parse_date_to_timestamp
from .layout.reconcile import AUTO, MANUAL
from .layout.relationships import CAUSES, CONCURRENT, PRECEDES, RELATED
from .layout.spacing import COMPACT, TIMESCALE, sort_chronologically


class Notebook(models.Model):
    """
    A writer's worldbuilding notebook.
    Timelines (and every other worldbuilding entity) live inside a notebook.
    """
    user = models.ForeignKey(User, on_delete=models.CASCADE, related_name='notebooks')
    name = models.CharField(max_length=200)
    description = models.TextField(blank=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ['name']

    def __str__(self):
        return self.name


class Timeline(models.Model):
    """
    A timeline of in-world events.
    Owns its events and the relationships drawn between them.
    """
    DEFAULT_VIEW_CHOICES = [
        ('list', 'List'),
        ('canvas', 'Canvas'),
        ('gantt', 'Gantt'),
    ]

    LIST_VIEW_MODE_CHOICES = [
        (COMPACT, 'Compact'),
        (TIMESCALE, 'Timescale'),
    ]

    user = models.ForeignKey(User, on_delete=models.CASCADE, related_name='timelines')
    notebook = models.ForeignKey(
        Notebook,
        on_delete=models.CASCADE,
        related_name='timelines',
        null=True,
        blank=True
    )
    name = models.CharField(max_length=200)
    description = models.TextField(blank=True)
    timeline_type = models.CharField(
        max_length=50,
        blank=True,
        help_text="e.g. 'World', 'Campaign', 'Character', 'Plot'"
    )
    time_scale = models.CharField(
        max_length=50,
        blank=True,
        help_text="e.g. 'Centuries', 'Years', 'Days', 'Chapters'"
    )
    default_view = models.CharField(max_length=10, choices=DEFAULT_VIEW_CHOICES, default='canvas')
    list_view_mode = models.CharField(
        max_length=10,
        choices=LIST_VIEW_MODE_CHOICES,
        default=COMPACT,
        help_text="Compact spaces list entries evenly; timescale spaces them by elapsed time"
    )

    # Canvas layout bookkeeping
    layout_event_count = models.PositiveIntegerField(
        default=0,
        help_text="Number of events seen by the last canvas layout pass"
    )
    auto_layout_enabled = models.BooleanField(
        default=True,
        help_text="Re-run the automatic layout when new events are added"
    )

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ['-created_at']

    def __str__(self):
        return self.name

    def sorted_events(self):
        """Events in chronological order of their (parsed) start dates."""
        return sort_chronologically(self.events.all())


class TimelineEvent(models.Model):
    """
    A narrative occurrence placed on a timeline.
    Dates are free text ("Year 1, Day 5", "500 BCE", "2024-03-15").
    """
    IMPORTANCE_CHOICES = [
        ('major', 'Major'),
        ('moderate', 'Moderate'),
        ('minor', 'Minor'),
    ]

    EVENT_TYPE_CHOICES = [
        ('battle', 'Battle'),
        ('discovery', 'Discovery'),
        ('birth', 'Birth'),
        ('death', 'Death'),
        ('meeting', 'Meeting'),
        ('political', 'Political'),
        ('cultural', 'Cultural'),
        ('location', 'Location'),
        ('journey', 'Journey'),
        ('historical', 'Historical'),
        ('other', 'Other'),
    ]

    LAYOUT_MODE_CHOICES = [
        (AUTO, 'Automatic'),
        (MANUAL, 'Manually placed'),
    ]

    timeline = models.ForeignKey(Timeline, on_delete=models.CASCADE, related_name='events')
    title = models.CharField(max_length=200)
    description = models.TextField(blank=True)

    # In-world dates
    start_date = models.CharField(
        max_length=100,
        help_text="Date within your story world (e.g., 'Year 1, Day 5' or '500 BCE')"
    )
    end_date = models.CharField(max_length=100, blank=True)

    # Event characteristics
    event_type = models.CharField(max_length=20, choices=EVENT_TYPE_CHOICES, blank=True)
    importance = models.CharField(max_length=10, choices=IMPORTANCE_CHOICES, default='moderate')
    category = models.CharField(max_length=100, blank=True)
    color = models.CharField(max_length=7, blank=True, help_text="Hex color code (e.g., #3498db)")

    # Link to another content entity (character, location, ...)
    linked_content_type = models.CharField(max_length=50, blank=True)
    linked_content_id = models.CharField(max_length=64, blank=True)

    # Canvas positioning (null = not placed yet)
    position_x = models.FloatField(null=True, blank=True)
    position_y = models.FloatField(null=True, blank=True)
    layout_mode = models.CharField(max_length=10, choices=LAYOUT_MODE_CHOICES, default=AUTO)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ['created_at', 'id']

    def __str__(self):
        return f"{self.title} ({self.start_date})"

    @property
    def timestamp(self):
        return parse_date_to_timestamp(self.start_date)

    @property
    def end_timestamp(self):
        if not self.end_date:
            return None
        return parse_date_to_timestamp(self.end_date)

    @property
    def has_position(self):
        return self.position_x is not None and self.position_y is not None

    def get_display_date(self):
        """Returns human-readable date range"""
        if self.end_date:
            return f"{self.start_date} - {self.end_date}"
        return self.start_date


class TimelineRelationship(models.Model):
    """
    A typed, directed link between two events of the same timeline.
    Parallel links and cycles are allowed.
    """
    RELATIONSHIP_TYPES = [
        (CAUSES, 'Causes'),
        (PRECEDES, 'Precedes'),
        (CONCURRENT, 'Concurrent'),
        (RELATED, 'Related'),
    ]

    timeline = models.ForeignKey(Timeline, on_delete=models.CASCADE, related_name='relationships')
    from_event = models.ForeignKey(
        TimelineEvent,
        on_delete=models.CASCADE,
        related_name='outgoing_relationships'
    )
    to_event = models.ForeignKey(
        TimelineEvent,
        on_delete=models.CASCADE,
        related_name='incoming_relationships'
    )
    relationship_type = models.CharField(max_length=20, choices=RELATIONSHIP_TYPES, default=RELATED)
    description = models.TextField(blank=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ['created_at', 'id']

    def __str__(self):
        return f"{self.from_event.title} → {self.to_event.title} ({self.get_relationship_type_display()})"


class ActivityLog(models.Model):
    """
    Tracks recent activity (creations, edits, deletions) across timelines.
    """
    ACTION_CHOICES = [
        ('create', 'Created'),
        ('update', 'Updated'),
        ('delete', 'Deleted'),
    ]

    user = models.ForeignKey(User, on_delete=models.CASCADE, related_name='activity_logs')
    action = models.CharField(max_length=10, choices=ACTION_CHOICES)
    model_name = models.CharField(max_length=50)  # e.g., 'Timeline', 'TimelineEvent'
    object_name = models.CharField(max_length=200)  # e.g., 'Fall of the Old Kingdom'
    timestamp = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ['-timestamp']

    def __str__(self):
        return f"{self.action.capitalize()} {self.model_name}: {self.object_name}"
