"""Address queries and commands."""

import logging
from typing import List

from django.db import DEFAULT_DB_ALIAS, transaction

from ..domain import Address
from ..exceptions import NotFoundError, TodoError, check_argument
from ..models import AddressRecord

logger = logging.getLogger(__name__)


class AddressService:
    def __init__(self, using: str = DEFAULT_DB_ALIAS):
        self.using = using

    def _addresses(self):
        return AddressRecord.objects.using(self.using)

    def find_all_addresses(self) -> List[Address]:
        return [a.to_domain() for a in self._addresses().all()]

    def find_address_by_name(self, address_name: str) -> Address:
        """
        The single address carrying `address_name`.
        Raises NotFoundError when there is none, or more than one.
        """
        return self.get_record_by_name(address_name).to_domain()

    def get_record_by_name(self, address_name: str) -> AddressRecord:
        try:
            return self._addresses().get(address_name=address_name)
        except AddressRecord.DoesNotExist:
            logger.warning("No address named %r", address_name)
            raise NotFoundError(f"No address named {address_name!r}") from None
        except AddressRecord.MultipleObjectsReturned:
            logger.warning("Address name %r is ambiguous", address_name)
            raise NotFoundError(f"More than one address named {address_name!r}") from None

    def add_address(self, address: Address) -> Address:
        check_argument(address.id is None, "A new address must not have an id")

        with transaction.atomic(using=self.using):
            record = AddressRecord.from_domain(address)
            record.save(using=self.using, force_insert=True)
            result = record.to_domain()
            if result.id is None:
                raise TodoError("Inserted address did not get an id")

        logger.info("Added address %s (%s)", result.id, result.address_name or result.city)
        return result

    def delete_all_addresses(self) -> None:
        """
        Delete every address. Fails with ProtectedError while appointments
        still refer to one of them.
        """
        with transaction.atomic(using=self.using):
            deleted, _ = self._addresses().all().delete()
        logger.info("Deleted all addresses (%d row(s))", deleted)
