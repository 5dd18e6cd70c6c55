"""
Admin configuration for the Timelines app.
"""

from django.contrib import admin
from .models import Notebook, Timeline, TimelineEvent, TimelineRelationship, ActivityLog


@admin.register(Notebook)
class NotebookAdmin(admin.ModelAdmin):
    list_display = ['name', 'user', 'updated_at']
    list_filter = ['user']
    search_fields = ['name', 'description']
    ordering = ['name']


class TimelineEventInline(admin.TabularInline):
    model = TimelineEvent
    fields = ['title', 'start_date', 'end_date', 'importance', 'layout_mode']
    extra = 0


@admin.register(Timeline)
class TimelineAdmin(admin.ModelAdmin):
    list_display = ['name', 'notebook', 'timeline_type', 'time_scale', 'default_view', 'auto_layout_enabled']
    list_filter = ['default_view', 'list_view_mode', 'user']
    search_fields = ['name', 'description']
    readonly_fields = ['layout_event_count']
    inlines = [TimelineEventInline]


@admin.register(TimelineEvent)
class TimelineEventAdmin(admin.ModelAdmin):
    list_display = ['title', 'timeline', 'start_date', 'event_type', 'importance', 'layout_mode', 'position_x', 'position_y']
    list_filter = ['timeline', 'event_type', 'importance', 'layout_mode']
    search_fields = ['title', 'description', 'start_date', 'category']


@admin.register(TimelineRelationship)
class TimelineRelationshipAdmin(admin.ModelAdmin):
    list_display = ['from_event', 'to_event', 'relationship_type', 'timeline']
    list_filter = ['relationship_type']
    search_fields = ['from_event__title', 'to_event__title', 'description']


@admin.register(ActivityLog)
class ActivityLogAdmin(admin.ModelAdmin):
    list_display = ['timestamp', 'user', 'action', 'model_name', 'object_name']
    list_filter = ['action', 'model_name']
    ordering = ['-timestamp']
