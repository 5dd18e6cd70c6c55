"""
Forms for the Timelines app.
The JSON API feeds request bodies through these to validate them.
"""
from django import forms

from .layout.relationships import resolve_relationship_type
from .layout.spacing import LIST_VIEW_MODES
from .models import Notebook, Timeline, TimelineEvent, TimelineRelationship


class TimelineForm(forms.ModelForm):
    """Form for creating/editing timelines."""

    class Meta:
        model = Timeline
        fields = [
            "notebook",
            "name",
            "description",
            "timeline_type",
            "time_scale",
            "default_view",
            "list_view_mode",
        ]
        widgets = {
            "notebook": forms.Select(attrs={"class": "form-control"}),
            "name": forms.TextInput(attrs={"class": "form-control"}),
            "description": forms.Textarea(attrs={"rows": 3, "class": "form-control"}),
            "timeline_type": forms.TextInput(attrs={"class": "form-control"}),
            "time_scale": forms.TextInput(attrs={"class": "form-control"}),
            "default_view": forms.Select(attrs={"class": "form-control"}),
            "list_view_mode": forms.Select(attrs={"class": "form-control"}),
        }

    def __init__(self, *args, **kwargs):
        user = kwargs.pop("user", None)
        super().__init__(*args, **kwargs)
        self.fields["notebook"].required = False
        self.fields["default_view"].required = False
        self.fields["list_view_mode"].required = False
        if user:
            self.fields["notebook"].queryset = Notebook.objects.filter(user=user)

    def clean_default_view(self):
        return self.cleaned_data.get("default_view") or "canvas"

    def clean_list_view_mode(self):
        return self.cleaned_data.get("list_view_mode") or "compact"


class TimelineEventForm(forms.ModelForm):
    """Form for creating/editing timeline events."""

    class Meta:
        model = TimelineEvent
        fields = [
            "title",
            "description",
            "start_date",
            "end_date",
            "event_type",
            "importance",
            "category",
            "color",
            "linked_content_type",
            "linked_content_id",
        ]
        widgets = {
            "title": forms.TextInput(attrs={"class": "form-control"}),
            "description": forms.Textarea(attrs={"rows": 3, "class": "form-control"}),
            "start_date": forms.TextInput(attrs={"class": "form-control", "placeholder": "e.g. Year 1, Day 5"}),
            "end_date": forms.TextInput(attrs={"class": "form-control"}),
            "event_type": forms.Select(attrs={"class": "form-control"}),
            "importance": forms.Select(attrs={"class": "form-control"}),
            "category": forms.TextInput(attrs={"class": "form-control"}),
            "color": forms.TextInput(attrs={"class": "form-control", "type": "color"}),
            "linked_content_type": forms.HiddenInput(),
            "linked_content_id": forms.HiddenInput(),
        }

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.fields["importance"].required = False

    def clean_start_date(self):
        start_date = (self.cleaned_data.get("start_date") or "").strip()
        if not start_date:
            raise forms.ValidationError("A start date is required.")
        return start_date

    def clean_importance(self):
        return self.cleaned_data.get("importance") or "moderate"


class TimelineRelationshipForm(forms.ModelForm):
    """Form for connecting two events of the same timeline."""

    relationship_type = forms.CharField(required=False)

    class Meta:
        model = TimelineRelationship
        fields = ["from_event", "to_event", "relationship_type", "description"]
        widgets = {
            "from_event": forms.Select(attrs={"class": "form-control"}),
            "to_event": forms.Select(attrs={"class": "form-control"}),
            "description": forms.Textarea(attrs={"rows": 2, "class": "form-control"}),
        }

    def __init__(self, *args, **kwargs):
        timeline = kwargs.pop("timeline", None)
        super().__init__(*args, **kwargs)
        if timeline:
            # Both ends must belong to this timeline
            self.fields["from_event"].queryset = TimelineEvent.objects.filter(timeline=timeline)
            self.fields["to_event"].queryset = TimelineEvent.objects.filter(timeline=timeline)

    def clean_relationship_type(self):
        try:
            return resolve_relationship_type(self.cleaned_data.get("relationship_type"))
        except ValueError as e:
            raise forms.ValidationError(str(e))


class EventPositionForm(forms.Form):
    """Coordinates reported when a node is dropped on the canvas."""
    x = forms.FloatField()
    y = forms.FloatField()


class ListViewModeForm(forms.Form):
    list_view_mode = forms.ChoiceField(choices=[(mode, mode.title()) for mode in LIST_VIEW_MODES])
