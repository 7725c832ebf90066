from datetime import timedelta

from django.core.management.base import BaseCommand
from django.utils import timezone

from todo.domain import Address, NewAppointment, Task
from todo.services import address_service, appointment_service, task_service


class Command(BaseCommand):
    help = "Seeds the database with a few sample tasks, addresses and appointments"

    def add_arguments(self, parser):
        parser.add_argument(
            "--reset",
            action="store_true",
            help="Delete all appointments, addresses and tasks first",
        )

    def handle(self, *args, **options):
        tasks = task_service()
        addresses = address_service()
        appointments = appointment_service()

        if options["reset"]:
            # appointments first: they reference addresses
            appointments.delete_all_appointments()
            addresses.delete_all_addresses()
            tasks.delete_all_tasks()
            self.stdout.write(self.style.WARNING("Cleared existing data"))

        now = timezone.now().replace(microsecond=0)

        for task in [
            Task.new_task("tidy up room (1)", "tidy up room (1)", now - timedelta(days=100), closed=True),
            Task.new_task("tidy up room (2)", "tidy up room (2)", now + timedelta(days=1)),
            Task.new_task("vacuum room (1)", "vacuum room (1)", now + timedelta(days=2)),
            Task.new_task("cancel newspaper", "cancel newspaper subscription", None, "call before the 1st"),
        ]:
            stored = tasks.add_task(task)
            self.stdout.write(self.style.SUCCESS(f"Created task: {stored.name} (id {stored.id})"))

        home = addresses.add_address(
            Address(
                address_name="home",
                address_lines=("Main Street 1",),
                zip_code="1234 AB",
                city="Amsterdam",
                country_code="NL",
            )
        )
        self.stdout.write(self.style.SUCCESS(f"Created address: {home.address_name} (id {home.id})"))

        dentist = addresses.add_address(
            Address(
                address_name="dentist",
                address_lines=("Dental Practice", "Canal Road 12"),
                zip_code="5678 CD",
                city="Utrecht",
                country_code="NL",
            )
        )
        self.stdout.write(self.style.SUCCESS(f"Created address: {dentist.address_name} (id {dentist.id})"))

        for appointment in [
            NewAppointment("check-up", now + timedelta(days=3), now + timedelta(days=3, hours=1), "dentist"),
            NewAppointment("plumber", now + timedelta(days=5), now + timedelta(days=5, hours=2), "home"),
            NewAppointment("phone call", now + timedelta(days=1), now + timedelta(days=1, minutes=30)),
        ]:
            stored = appointments.add_appointment(appointment)
            self.stdout.write(self.style.SUCCESS(f"Created appointment: {stored.name} (id {stored.id})"))
