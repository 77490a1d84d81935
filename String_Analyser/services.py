import logging

from django.apps import apps
from django.utils.module_loading import import_string

from . import natural_language
from .exceptions import StringNotFound
from .predicates import PredicateSet
from .utils import analyze_string

logger = logging.getLogger(__name__)


class StringAnalyserService:
    """
    Create, look up, filter and delete analysed strings.

    Storage is whatever StringRepository the service is given; the service
    itself keeps no state between calls.
    """

    def __init__(self, repository):
        self.repository = repository

    def create(self, value: str):
        properties = analyze_string(value)
        record = self.repository.create_record_with_properties(value, properties)
        logger.info("Stored string %s (length=%s)", record.id, properties['length'])
        return record

    def get(self, value: str):
        record = self.repository.find_by_value(value)
        if record is None:
            raise StringNotFound()
        return record

    def list(self, predicates: PredicateSet = None):
        if predicates is None:
            predicates = PredicateSet()
        return self.repository.find_many(predicates)

    def filter_by_natural_language(self, phrase: str):
        """Return ``(records, interpreted_query)`` for a free text phrase."""
        interpreted = natural_language.interpret(phrase)
        logger.debug("Interpreted %r as %s", phrase, interpreted.parsed_filters.as_dict())
        return self.repository.find_many(interpreted.parsed_filters), interpreted

    def delete(self, value: str):
        self.repository.delete_by_value(value)
        logger.info("Deleted string %r", value[:50])


def get_string_service(analyser_settings=None):
    """Build a service with the repository named in the app settings."""
    if analyser_settings is None:
        analyser_settings = apps.get_app_config('String_Analyser').analyser_settings
    repository_class = import_string(analyser_settings.repository_class)
    return StringAnalyserService(repository_class())
