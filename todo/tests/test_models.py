from dataclasses import replace
from datetime import datetime, timezone as dt_timezone

from django.test import TestCase

from todo.domain import Address, Task
from todo.exceptions import PreconditionError
from todo.models import AddressRecord, AppointmentRecord, TaskRecord

D0 = datetime(2025, 9, 30, tzinfo=dt_timezone.utc)


class TaskRecordMappingTests(TestCase):
    def test_new_row_from_task_without_id(self):
        task = Task.new_task("opruimen kamer", "opruimen kamer", D0, "   ")
        record = TaskRecord.from_domain(task)
        record.save()

        stored = TaskRecord.objects.get(pk=record.pk).to_domain()
        self.assertEqual(stored.id, record.pk)
        self.assertEqual(stored.name, "opruimen kamer")
        self.assertEqual(stored.target_end, D0)
        # blank free text is stored as NULL
        self.assertIsNone(stored.extra_information)
        self.assertFalse(stored.closed)

    def test_task_with_id_is_rejected(self):
        with self.assertRaises(PreconditionError):
            TaskRecord.from_domain(Task(id=7, name="a", description="b"))

    def test_missing_target_end_maps_to_none(self):
        record = TaskRecord.objects.create(name="a", description="b")
        self.assertIsNone(record.to_domain().target_end)


class AddressRecordMappingTests(TestCase):
    def test_only_present_lines_are_kept_in_order(self):
        address = Address(
            address_lines=("Dental Practice", "Canal Road 12"),
            zip_code="5678 CD",
            city="Utrecht",
            country_code="NL",
        )
        record = AddressRecord.from_domain(address)
        record.save()

        record.refresh_from_db()
        self.assertIsNone(record.address_line3)
        self.assertIsNone(record.address_line4)
        self.assertEqual(record.to_domain(), replace(address, id=record.pk))

    def test_domain_value_drops_missing_lines(self):
        address = Address(address_lines=("a", None, "b"), zip_code="1", city="c", country_code="NL")
        self.assertEqual(address.address_lines, ("a", "b"))

    def test_domain_value_drops_blank_lines(self):
        address = Address(address_lines=("", "a", "  ", "b"), zip_code="1", city="c", country_code="NL")
        self.assertEqual(address.address_lines, ("a", "b"))

    def test_more_than_four_lines_rejected(self):
        address = Address(address_lines=("1", "2", "3", "4", "5"), zip_code="1", city="c", country_code="NL")
        with self.assertRaises(PreconditionError):
            AddressRecord.from_domain(address)

    def test_at_least_one_line_required(self):
        address = Address(address_lines=(), zip_code="1", city="c", country_code="NL")
        with self.assertRaises(PreconditionError):
            AddressRecord.from_domain(address)


class AppointmentRecordMappingTests(TestCase):
    def setUp(self):
        self.address = AddressRecord.objects.create(
            address_name="home", address_line1="Main Street 1",
            zip_code="1234 AB", city="Amsterdam", country_code="NL",
        )
        self.appointment = AppointmentRecord.objects.create(
            name="plumber", start=D0, end=D0, address=self.address,
        )

    def test_address_left_out_unless_requested(self):
        record = AppointmentRecord.objects.get(pk=self.appointment.pk)
        self.assertIsNone(record.to_domain().address)

    def test_address_included_when_fetched(self):
        record = AppointmentRecord.objects.select_related("address").get(pk=self.appointment.pk)
        with self.assertNumQueries(0):
            appointment = record.to_domain(with_address=True)
        self.assertEqual(appointment.address, self.address.to_domain())
        self.assertIsNone(appointment.extra_information)
