"""
Appointment queries and commands.

Reads fetch the address together with each appointment by default
(`with_address=True`, one joined query). Pass `with_address=False` to skip
the join; the returned appointments then have `address=None`.
"""

import logging
from datetime import datetime
from typing import List

from django.db import DEFAULT_DB_ALIAS, transaction

from ..domain import Appointment, NewAppointment, blank_to_none
from ..exceptions import TodoError, check_argument
from ..models import AppointmentRecord
from .addresses import AddressService

logger = logging.getLogger(__name__)


class AppointmentService:
    def __init__(self, using: str = DEFAULT_DB_ALIAS):
        self.using = using
        self.addresses = AddressService(using)

    def _appointments(self, with_address: bool):
        qs = AppointmentRecord.objects.using(self.using)
        if with_address:
            qs = qs.select_related("address")
        return qs

    def _find(self, with_address: bool, **filters) -> List[Appointment]:
        qs = self._appointments(with_address).filter(**filters)
        return [a.to_domain(with_address=with_address) for a in qs]

    # ---- queries -------------------------------------------------------------

    def find_all_appointments(self, with_address: bool = True) -> List[Appointment]:
        return self._find(with_address)

    def find_appointments_between(
        self, start: datetime, end: datetime, with_address: bool = True
    ) -> List[Appointment]:
        """Appointments lying entirely within [start, end] (both bounds inclusive)."""
        return self._find(with_address, start__gte=start, end__lte=end)

    def find_appointments_ending_after(self, end: datetime, with_address: bool = True) -> List[Appointment]:
        return self._find(with_address, end__gt=end)

    def find_appointments_ending_before(self, end: datetime, with_address: bool = True) -> List[Appointment]:
        return self._find(with_address, end__lt=end)

    # ---- commands ------------------------------------------------------------

    def add_appointment(self, appointment: NewAppointment) -> Appointment:
        """
        Insert an appointment. A given address name must match exactly one
        stored address (NotFoundError otherwise); that address is attached
        and included in the returned value.
        """
        check_argument(blank_to_none(appointment.name) is not None, "An appointment needs a name")
        address_name = blank_to_none(appointment.address_name)

        with transaction.atomic(using=self.using):
            address = None
            if address_name is not None:
                address = self.addresses.get_record_by_name(address_name)

            record = AppointmentRecord(
                name=appointment.name,
                start=appointment.start,
                end=appointment.end,
                address=address,
                extra_information=blank_to_none(appointment.extra_information),
            )
            record.save(using=self.using, force_insert=True)
            result = record.to_domain(with_address=True)
            if result.id is None:
                raise TodoError("Inserted appointment did not get an id")

        logger.info("Added appointment %s (%r, address=%s)", result.id, result.name, address_name)
        return result

    def delete_all_appointments(self) -> None:
        with transaction.atomic(using=self.using):
            deleted, _ = self._appointments(False).all().delete()
        logger.info("Deleted all appointments (%d row(s))", deleted)
