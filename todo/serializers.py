"""
JSON shapes of the domain values.

The wire names (`idOption`, `targetEndOption`, ...) are fixed; existing
clients read and post exactly these keys. Absent optional values are
written as null, timestamps as UTC instants ("2025-09-30T00:00:00Z").

Serializers read straight from the frozen dataclasses; `to_model()` builds
the domain value from validated input.
"""

from rest_framework import serializers

from .domain import MAX_ADDRESS_LINES, Address, NewAppointment, Task, blank_to_none


class TaskSerializer(serializers.Serializer):
    idOption = serializers.IntegerField(source="id", allow_null=True, default=None)
    name = serializers.CharField(max_length=255, trim_whitespace=False)
    description = serializers.CharField(max_length=1000, trim_whitespace=False)
    targetEndOption = serializers.DateTimeField(source="target_end", allow_null=True, default=None)
    extraInformationOption = serializers.CharField(
        source="extra_information", allow_null=True, allow_blank=True, default=None, trim_whitespace=False,
    )
    closed = serializers.BooleanField(default=False)

    def to_model(self) -> Task:
        data = dict(self.validated_data)
        data["extra_information"] = blank_to_none(data.get("extra_information"))
        return Task(**data)


class AddressSerializer(serializers.Serializer):
    idOption = serializers.IntegerField(source="id", allow_null=True, default=None)
    addressNameOption = serializers.CharField(
        source="address_name", max_length=255, allow_null=True, allow_blank=True, default=None,
    )
    addressLines = serializers.ListField(
        source="address_lines",
        child=serializers.CharField(max_length=255),
        min_length=1,
        max_length=MAX_ADDRESS_LINES,
    )
    zipCode = serializers.CharField(source="zip_code", max_length=20)
    city = serializers.CharField(max_length=255)
    countryCode = serializers.CharField(source="country_code", max_length=3)

    def to_model(self) -> Address:
        data = dict(self.validated_data)
        data["address_lines"] = tuple(data["address_lines"])
        data["address_name"] = blank_to_none(data.get("address_name"))
        return Address(**data)


class AppointmentSerializer(serializers.Serializer):
    """Output only: appointments are created through NewAppointmentSerializer."""
    idOption = serializers.IntegerField(source="id", allow_null=True, read_only=True)
    name = serializers.CharField(read_only=True)
    start = serializers.DateTimeField(read_only=True)
    end = serializers.DateTimeField(read_only=True)
    addressOption = AddressSerializer(source="address", allow_null=True, read_only=True)
    extraInformationOption = serializers.CharField(source="extra_information", allow_null=True, read_only=True)


class NewAppointmentSerializer(serializers.Serializer):
    name = serializers.CharField(max_length=255)
    start = serializers.DateTimeField()
    end = serializers.DateTimeField()
    addressNameOption = serializers.CharField(
        source="address_name", max_length=255, allow_null=True, allow_blank=True, default=None,
    )
    extraInformationOption = serializers.CharField(
        source="extra_information", allow_null=True, allow_blank=True, default=None, trim_whitespace=False,
    )

    def to_model(self) -> NewAppointment:
        data = dict(self.validated_data)
        data["address_name"] = blank_to_none(data.get("address_name"))
        data["extra_information"] = blank_to_none(data.get("extra_information"))
        return NewAppointment(**data)
