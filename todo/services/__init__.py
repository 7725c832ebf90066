"""
Service layer. Views get their services from the factories below so that
the database alias is chosen in one place (and tests can patch them).
"""

from django.db import DEFAULT_DB_ALIAS

from .addresses import AddressService
from .appointments import AppointmentService
from .tasks import TaskService

__all__ = [
    "AddressService",
    "AppointmentService",
    "TaskService",
    "address_service",
    "appointment_service",
    "task_service",
]


def task_service(using: str = DEFAULT_DB_ALIAS) -> TaskService:
    return TaskService(using)


def address_service(using: str = DEFAULT_DB_ALIAS) -> AddressService:
    return AddressService(using)


def appointment_service(using: str = DEFAULT_DB_ALIAS) -> AppointmentService:
    return AppointmentService(using)
