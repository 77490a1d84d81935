from unittest import mock

from django.test import TestCase

from String_Analyser.exceptions import StringConflict, StringNotFound
from String_Analyser.models import StringProperties, StringRecord
from String_Analyser.predicates import PredicateSet
from String_Analyser.repository import DjangoStringRepository
from String_Analyser.utils import analyze_string


class DjangoStringRepositoryTests(TestCase):
    def setUp(self):
        self.repository = DjangoStringRepository()

    def store(self, value):
        return self.repository.create_record_with_properties(value, analyze_string(value))

    def values(self, records):
        return [record.value for record in records]

    def test_create_persists_record_and_properties(self):
        record = self.store("Hello")

        stored = StringRecord.objects.get(value="Hello")
        self.assertEqual(stored.id, record.id)
        self.assertEqual(stored.properties.character_frequency_map, {"h": 1, "e": 1, "l": 2, "o": 1})
        self.assertEqual(stored.properties.unique_characters, 4)

    def test_duplicate_value_conflicts(self):
        self.store("hello")
        with self.assertRaises(StringConflict):
            self.store("hello")
        self.assertEqual(StringRecord.objects.count(), 1)
        self.assertEqual(StringProperties.objects.count(), 1)

    def test_unique_constraint_is_reported_as_conflict(self):
        self.store("hello")
        lookup = mock.Mock()
        lookup.return_value.exists.return_value = False

        with mock.patch.object(StringRecord.objects, 'filter', lookup):
            with self.assertRaises(StringConflict):
                self.store("hello")

        self.assertEqual(StringRecord.objects.count(), 1)

    def test_create_is_all_or_nothing(self):
        with mock.patch.object(StringProperties.objects, 'create', side_effect=RuntimeError("boom")):
            with self.assertRaises(RuntimeError):
                self.store("hello")

        self.assertFalse(StringRecord.objects.filter(value="hello").exists())

    def test_find_by_value(self):
        self.store("hello")
        self.assertEqual(self.repository.find_by_value("hello").properties.length, 5)
        self.assertIsNone(self.repository.find_by_value("HELLO"))

    def test_find_many(self):
        for value in ["racecar", "level up", "hello world", "Zoo"]:
            self.store(value)

        self.assertEqual(
            self.values(self.repository.find_many(PredicateSet(is_palindrome=True))), ["racecar"])
        self.assertEqual(
            sorted(self.values(self.repository.find_many(PredicateSet(word_count=2)))),
            ["hello world", "level up"])
        self.assertEqual(
            self.values(self.repository.find_many(PredicateSet(min_length=7, max_length=7))), ["racecar"])
        self.assertEqual(
            self.values(self.repository.find_many(PredicateSet(contains_character="z"))), ["Zoo"])
        self.assertEqual(
            sorted(self.values(self.repository.find_many(PredicateSet(is_palindrome=False, contains_character="L")))),
            ["hello world", "level up"])
        self.assertEqual(self.repository.find_many(PredicateSet(min_length=10, max_length=3)), [])

    def test_find_many_is_newest_first(self):
        self.store("first")
        self.store("second")
        self.assertEqual(self.values(self.repository.find_many(PredicateSet())), ["second", "first"])

    def test_contains_space(self):
        self.store("hello world")
        self.store("hello")
        self.assertEqual(
            self.values(self.repository.find_many(PredicateSet(contains_character=" "))), ["hello world"])

    def test_delete_cascades(self):
        self.store("hello")
        self.repository.delete_by_value("hello")

        self.assertEqual(StringRecord.objects.count(), 0)
        self.assertEqual(StringProperties.objects.count(), 0)
        with self.assertRaises(StringNotFound):
            self.repository.delete_by_value("hello")
