from datetime import datetime, timezone as dt_timezone
from typing import Optional

from django import forms
from django.utils import timezone

from .domain import Task, blank_to_none

# Value format of <input type="datetime-local" step="1">
DATETIME_LOCAL_FORMAT = "%Y-%m-%dT%H:%M:%S"
DATETIME_LOCAL_INPUT_FORMATS = [
    DATETIME_LOCAL_FORMAT,
    "%Y-%m-%dT%H:%M:%S.%f",
    "%Y-%m-%dT%H:%M",
]


def format_target_end(value: Optional[datetime]) -> Optional[str]:
    """UTC wall-clock text for a datetime-local input, whole seconds only."""
    if value is None:
        return None
    if timezone.is_aware(value):
        value = value.astimezone(dt_timezone.utc).replace(tzinfo=None)
    return value.replace(microsecond=0).strftime(DATETIME_LOCAL_FORMAT)


class TaskForm(forms.Form):
    """
    HTML form for creating/updating a Task.

    Field names are the ones posted by the templates (`targetEnd`,
    `extraInformation`). Every field is optional on the wire; name and
    description must not be blank but are kept exactly as entered. `targetEnd` carries no zone and
    is read as UTC, truncated to whole seconds.
    """
    id = forms.IntegerField(required=False, widget=forms.HiddenInput)
    name = forms.CharField(
        max_length=255, required=False, strip=False,
        widget=forms.TextInput(attrs={"placeholder": "e.g. tidy up room", "class": "form-control"}),
    )
    description = forms.CharField(
        max_length=1000, required=False, strip=False,
        widget=forms.TextInput(attrs={"placeholder": "What needs to be done", "class": "form-control"}),
    )
    targetEnd = forms.DateTimeField(
        required=False,
        input_formats=DATETIME_LOCAL_INPUT_FORMATS,
        widget=forms.DateTimeInput(
            format=DATETIME_LOCAL_FORMAT,
            attrs={"type": "datetime-local", "step": "1", "class": "form-control"},
        ),
        help_text="UTC",
    )
    extraInformation = forms.CharField(
        required=False, strip=False,
        widget=forms.Textarea(attrs={"rows": 3, "class": "form-control"}),
    )
    closed = forms.BooleanField(required=False)

    def clean_name(self):
        name = self.cleaned_data.get("name") or ""
        if not name.strip():
            raise forms.ValidationError("Please enter a name.")
        return name

    def clean_description(self):
        description = self.cleaned_data.get("description") or ""
        if not description.strip():
            raise forms.ValidationError("Please enter a description.")
        return description

    def clean_targetEnd(self):
        value = self.cleaned_data.get("targetEnd")
        if value is None:
            return None
        # Django attached the current time zone; keep the wall-clock and pin it to UTC
        if timezone.is_aware(value):
            value = timezone.make_naive(value)
        return value.replace(microsecond=0, tzinfo=dt_timezone.utc)

    def to_model(self) -> Task:
        """Only valid after is_valid() returned True."""
        data = self.cleaned_data
        return Task(
            id=data.get("id"),
            name=data["name"],
            description=data["description"],
            target_end=data.get("targetEnd"),
            extra_information=blank_to_none(data.get("extraInformation")),
            closed=bool(data.get("closed")),
        )

    @staticmethod
    def data_from_model(task: Task) -> dict:
        """The form (wire) shape of a task, as the templates post it back."""
        return {
            "id": task.id,
            "name": task.name,
            "description": task.description,
            "targetEnd": format_target_end(task.target_end),
            "extraInformation": task.extra_information,
            "closed": task.closed,
        }

    @classmethod
    def from_model(cls, task: Task) -> "TaskForm":
        """An unbound form pre-filled with `task`."""
        return cls(initial=cls.data_from_model(task))
