"""
Stored rows for the todo tracker.

Notes:
- Rows are mutable Django models; the rest of the app only sees the frozen
  values from `todo.domain`. Each model converts itself with `to_domain()`
  and builds a new, unsaved row with `from_domain()`.
- Appointment -> Address is a plain nullable FK. Whether the address is
  part of the converted value is decided by the caller (`with_address`),
  and callers that pass True must have used select_related("address").
"""

from django.db import models
from django.db.models import Index

from .domain import MAX_ADDRESS_LINES, Address, Appointment, Task, blank_to_none
from .exceptions import check_argument


def _blank(value) -> bool:
    return blank_to_none(value) is None


class TaskRecord(models.Model):
    """
    A task row. `name` is fixed once stored; updates only touch the other
    columns (see TaskService.update_task).
    """
    name = models.CharField(max_length=255)
    description = models.CharField(max_length=1000)
    target_end = models.DateTimeField(
        null=True, blank=True,
        help_text="Optional deadline (UTC).",
    )
    extra_information = models.TextField(null=True, blank=True)
    closed = models.BooleanField(default=False)

    class Meta:
        db_table = "task"
        ordering = ["id"]
        indexes = [
            Index(fields=["closed"], name="task_closed_idx"),
            Index(fields=["target_end"], name="task_target_end_idx"),
        ]

    def __str__(self) -> str:
        state = "closed" if self.closed else "open"
        return f"{self.name} ({state})"

    def to_domain(self) -> Task:
        return Task(
            id=self.pk,
            name=self.name,
            description=self.description,
            target_end=self.target_end,
            extra_information=self.extra_information,
            closed=self.closed,
        )

    @classmethod
    def from_domain(cls, task: Task) -> "TaskRecord":
        check_argument(task.id is None, "A new task must not have an id")
        check_argument(not _blank(task.name), "A task needs a name")
        check_argument(not _blank(task.description), "A task needs a description")
        return cls(
            name=task.name,
            description=task.description,
            target_end=task.target_end,
            extra_information=blank_to_none(task.extra_information),
            closed=task.closed,
        )

    def apply_update(self, task: Task) -> None:
        """Copy the mutable fields of `task` onto this row (not saved)."""
        check_argument(not _blank(task.description), "A task needs a description")
        self.description = task.description
        self.target_end = task.target_end
        self.extra_information = blank_to_none(task.extra_information)
        self.closed = task.closed


class AddressRecord(models.Model):
    """
    A postal address with up to four lines. The first line is mandatory,
    lines 2-4 are stored as NULL when absent.
    """
    address_name = models.CharField(
        max_length=255, null=True, blank=True,
        help_text="Lookup key used when creating appointments, e.g. 'home'.",
    )
    address_line1 = models.CharField(max_length=255)
    address_line2 = models.CharField(max_length=255, null=True, blank=True)
    address_line3 = models.CharField(max_length=255, null=True, blank=True)
    address_line4 = models.CharField(max_length=255, null=True, blank=True)
    zip_code = models.CharField(max_length=20)
    city = models.CharField(max_length=255)
    country_code = models.CharField(max_length=3)

    class Meta:
        db_table = "address"
        ordering = ["id"]
        indexes = [
            Index(fields=["address_name"], name="address_name_idx"),
        ]

    def __str__(self) -> str:
        label = self.address_name or self.address_line1
        return f"{label}, {self.zip_code} {self.city} ({self.country_code})"

    @property
    def address_lines(self) -> tuple:
        lines = (self.address_line1, self.address_line2, self.address_line3, self.address_line4)
        return tuple(line for line in lines if line is not None)

    def to_domain(self) -> Address:
        return Address(
            id=self.pk,
            address_name=self.address_name,
            address_lines=self.address_lines,
            zip_code=self.zip_code,
            city=self.city,
            country_code=self.country_code,
        )

    @classmethod
    def from_domain(cls, address: Address) -> "AddressRecord":
        check_argument(address.id is None, "A new address must not have an id")
        lines = list(address.address_lines)
        check_argument(
            1 <= len(lines) <= MAX_ADDRESS_LINES,
            f"An address needs between 1 and {MAX_ADDRESS_LINES} address lines",
        )
        for value, label in ((address.zip_code, "zip code"), (address.city, "city"), (address.country_code, "country code")):
            check_argument(not _blank(value), f"An address needs a {label}")
        lines += [None] * (MAX_ADDRESS_LINES - len(lines))
        return cls(
            address_name=blank_to_none(address.address_name),
            address_line1=lines[0],
            address_line2=lines[1],
            address_line3=lines[2],
            address_line4=lines[3],
            zip_code=address.zip_code,
            city=address.city,
            country_code=address.country_code,
        )


class AppointmentRecord(models.Model):
    """An appointment, optionally taking place at a stored address."""
    name = models.CharField(max_length=255)
    start = models.DateTimeField()
    end = models.DateTimeField(db_column="end_date_time")
    address = models.ForeignKey(
        AddressRecord,
        null=True, blank=True,
        on_delete=models.PROTECT,
        related_name="appointments",
    )
    extra_information = models.TextField(null=True, blank=True)

    class Meta:
        db_table = "appointment"
        ordering = ["id"]
        indexes = [
            Index(fields=["start"], name="appointment_start_idx"),
            Index(fields=["end"], name="appointment_end_idx"),
        ]

    def __str__(self) -> str:
        return f"{self.name} ({self.start:%Y-%m-%d %H:%M} - {self.end:%Y-%m-%d %H:%M})"

    def to_domain(self, with_address: bool = False) -> Appointment:
        """
        Convert to a domain value. Only pass with_address=True when the
        address was fetched together with this row (select_related), so the
        conversion does not trigger a query per appointment.
        """
        address = None
        if with_address and self.address_id is not None:
            address = self.address.to_domain()
        return Appointment(
            id=self.pk,
            name=self.name,
            start=self.start,
            end=self.end,
            address=address,
            extra_information=self.extra_information,
        )
