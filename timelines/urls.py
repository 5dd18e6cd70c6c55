"""
URL patterns for the timelines app.
"""
from django.urls import path
from . import views

urlpatterns = [
    # Timelines
    path('api/timelines/', views.api_timelines, name='api_timelines'),
    path('api/timelines/<int:pk>/', views.api_timeline_detail, name='api_timeline_detail'),
    path('api/timelines/<int:pk>/list-view-mode/', views.api_set_list_view_mode, name='api_set_list_view_mode'),
    path('api/timeline-templates/', views.api_timeline_templates, name='api_timeline_templates'),

    # Events
    path('api/timelines/<int:pk>/events/', views.api_timeline_events, name='api_timeline_events'),
    path('api/events/<int:pk>/', views.api_event_detail, name='api_event_detail'),
    path('api/events/<int:pk>/position/', views.api_event_position, name='api_event_position'),

    # Relationships
    path('api/timelines/<int:pk>/relationships/', views.api_timeline_relationships, name='api_timeline_relationships'),
    path('api/relationships/<int:pk>/', views.api_relationship_detail, name='api_relationship_detail'),

    # Canvas, list and gantt views
    path('api/timelines/<int:pk>/canvas/', views.api_timeline_canvas, name='api_timeline_canvas'),
    path('api/timelines/<int:pk>/auto-layout/', views.api_timeline_auto_layout, name='api_timeline_auto_layout'),
    path('api/timelines/<int:pk>/list/', views.api_timeline_list, name='api_timeline_list'),
    path('api/timelines/<int:pk>/gantt/', views.api_timeline_gantt, name='api_timeline_gantt'),
]
