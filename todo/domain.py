"""
Immutable domain values for the todo tracker.

These are what services return and accept. They never touch the database;
the mapping to and from stored rows lives on the models in `todo.models`.

Conventions:
- `id` is None for a value that has not been stored yet.
- Optional fields are None when absent (never "").
- Timestamps are timezone-aware UTC datetimes.
"""

from dataclasses import dataclass, replace
from datetime import datetime
from typing import Optional, Tuple

MAX_ADDRESS_LINES = 4


@dataclass(frozen=True)
class Task:
    name: str
    description: str
    target_end: Optional[datetime] = None
    extra_information: Optional[str] = None
    closed: bool = False
    id: Optional[int] = None

    @classmethod
    def new_task(
        cls,
        name: str,
        description: str,
        target_end: Optional[datetime] = None,
        extra_information: Optional[str] = None,
        closed: bool = False,
    ) -> "Task":
        """A task that has not been stored yet (no identity)."""
        return cls(
            name=name,
            description=description,
            target_end=target_end,
            extra_information=extra_information,
            closed=closed,
        )

    def without_id(self) -> "Task":
        return replace(self, id=None)


@dataclass(frozen=True)
class Address:
    """
    A postal address. Only non-blank address lines are kept, in order;
    `address_name` is the optional key appointments use to refer to it.
    """
    address_lines: Tuple[str, ...]
    zip_code: str
    city: str
    country_code: str
    address_name: Optional[str] = None
    id: Optional[int] = None

    def __post_init__(self):
        # frozen: normalise through object.__setattr__
        lines = tuple(line for line in (self.address_lines or ()) if blank_to_none(line) is not None)
        object.__setattr__(self, "address_lines", lines)

    def without_id(self) -> "Address":
        return replace(self, id=None)


@dataclass(frozen=True)
class Appointment:
    """
    A stored appointment. `address` is only filled in by reads that fetch
    the association; otherwise it is None even if the row references one.
    End-after-start is not checked.
    """
    name: str
    start: datetime
    end: datetime
    address: Optional[Address] = None
    extra_information: Optional[str] = None
    id: Optional[int] = None


@dataclass(frozen=True)
class NewAppointment:
    """Creation-only shape: refers to its address by name."""
    name: str
    start: datetime
    end: datetime
    address_name: Optional[str] = None
    extra_information: Optional[str] = None


def blank_to_none(value: Optional[str]) -> Optional[str]:
    """Treat blank free text as absent."""
    if value is None or not value.strip():
        return None
    return value
