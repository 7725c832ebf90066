"""
JSON endpoints (/tasks.json, /addresses.json, /appointments.json).

PreconditionError -> 400 and NotFoundError -> 404 are handled by
todo.exceptions.api_exception_handler; serializer errors are DRF's usual 400.
"""

from rest_framework.decorators import api_view
from rest_framework.response import Response

from .exceptions import check_argument
from .params import parse_bool_param, parse_instant_param
from .serializers import (
    AddressSerializer,
    AppointmentSerializer,
    NewAppointmentSerializer,
    TaskSerializer,
)
from .services import address_service, appointment_service, task_service


@api_view(["GET", "POST"])
def tasks_json(request):
    """
    GET: all tasks, or ?closed=true|false.
    POST: add a task (no idOption); returns the stored task.
    """
    service = task_service()

    if request.method == "POST":
        serializer = TaskSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        task = service.add_task(serializer.to_model())
        return Response(TaskSerializer(task).data)

    closed = parse_bool_param("closed", request.query_params.get("closed"))
    if closed is None:
        items = service.find_all_tasks()
    else:
        items = service.filter_tasks(closed)
    return Response(TaskSerializer(items, many=True).data)


@api_view(["GET", "POST"])
def addresses_json(request):
    service = address_service()

    if request.method == "POST":
        serializer = AddressSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        address = service.add_address(serializer.to_model())
        return Response(AddressSerializer(address).data)

    return Response(AddressSerializer(service.find_all_addresses(), many=True).data)


@api_view(["GET", "POST"])
def appointments_json(request):
    """
    GET: all appointments, or those within ?start=...&end=... (both
    required together, ISO-8601 instants, bounds inclusive).
    POST: add an appointment; `addressNameOption` must name exactly one
    stored address.
    """
    service = appointment_service()

    if request.method == "POST":
        serializer = NewAppointmentSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        appointment = service.add_appointment(serializer.to_model())
        return Response(AppointmentSerializer(appointment).data)

    start = parse_instant_param("start", request.query_params.get("start"))
    end = parse_instant_param("end", request.query_params.get("end"))
    check_argument(
        (start is None) == (end is None),
        "Query parameters 'start' and 'end' must be given together",
    )
    if start is None:
        items = service.find_all_appointments()
    else:
        items = service.find_appointments_between(start, end)
    return Response(AppointmentSerializer(items, many=True).data)
