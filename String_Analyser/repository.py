import logging

from django.db import IntegrityError, transaction
from django.utils import timezone

from .exceptions import InvalidQuery, StringConflict, StringNotFound
from .filters import StringRecordFilter
from .models import StringProperties, StringRecord

logger = logging.getLogger(__name__)


class StringRepository:
    """
    Storage used by the service. Records come back with ``record.properties`` loaded.
    """

    def create_record_with_properties(self, value, properties):
        """Store ``value`` with its computed properties, raising StringConflict for a duplicate."""
        raise NotImplementedError

    def find_by_value(self, value):
        """Return the record holding ``value`` or None."""
        raise NotImplementedError

    def find_many(self, predicates):
        """Return the records matching a PredicateSet, newest first."""
        raise NotImplementedError

    def delete_by_value(self, value):
        """Delete the record and its properties, raising StringNotFound when absent."""
        raise NotImplementedError


class DjangoStringRepository(StringRepository):

    def create_record_with_properties(self, value, properties):
        if StringRecord.objects.filter(value=value).exists():
            raise StringConflict()

        # a concurrent insert of the same value still trips the unique constraint
        try:
            with transaction.atomic():
                record = StringRecord.objects.create(id=properties['sha256_hash'], value=value)
                StringProperties.objects.create(record=record, **properties)
        except IntegrityError:
            logger.info("Concurrent insert detected for %s", properties['sha256_hash'])
            raise StringConflict()
        return record

    def find_by_value(self, value):
        return StringRecord.objects.select_related('properties').filter(value=value).first()

    def find_many(self, predicates):
        queryset = StringRecord.objects.select_related('properties').order_by('-created_at')
        filterset = StringRecordFilter.from_predicates(predicates, queryset=queryset)
        if not filterset.is_valid():
            raise InvalidQuery()
        return list(filterset.qs)

    def delete_by_value(self, value):
        deleted, _ = StringRecord.objects.filter(value=value).delete()
        if not deleted:
            raise StringNotFound()


class InMemoryStringRepository(StringRepository):
    """
    Dict backed repository, handy for exercising the service without a database.

    Records are unsaved model instances; insertion order is creation order.
    """

    def __init__(self):
        self._entries = {}

    def create_record_with_properties(self, value, properties):
        if value in self._entries:
            raise StringConflict()

        record = StringRecord(id=properties['sha256_hash'], value=value, created_at=timezone.now())
        # assigning the forward side caches record.properties
        StringProperties(record=record, **properties)
        self._entries[value] = (record, dict(properties))
        return record

    def find_by_value(self, value):
        entry = self._entries.get(value)
        return entry[0] if entry else None

    def find_many(self, predicates):
        return [
            record
            for record, properties in reversed(list(self._entries.values()))
            if predicates.matches(record.value, properties)
        ]

    def delete_by_value(self, value):
        if self._entries.pop(value, None) is None:
            raise StringNotFound()

    def __len__(self):
        return len(self._entries)
