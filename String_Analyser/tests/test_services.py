from django.test import SimpleTestCase, override_settings

from String_Analyser.conf import AnalyserSettings
from String_Analyser.exceptions import ConflictingFilters, StringConflict, StringNotFound, UnparsableQuery
from String_Analyser.predicates import PredicateSet
from String_Analyser.repository import InMemoryStringRepository
from String_Analyser.services import StringAnalyserService, get_string_service


class StringAnalyserServiceTests(SimpleTestCase):
    def setUp(self):
        self.repository = InMemoryStringRepository()
        self.service = StringAnalyserService(self.repository)

    def values(self, records):
        return [record.value for record in records]

    def test_create_attaches_properties(self):
        record = self.service.create("Race Car")

        self.assertEqual(record.id, record.properties.sha256_hash)
        self.assertTrue(record.properties.is_palindrome)
        self.assertEqual(record.properties.word_count, 2)
        self.assertIsNotNone(record.created_at)

    def test_duplicate_create_conflicts(self):
        first = self.service.create("hello")
        with self.assertRaises(StringConflict):
            self.service.create("hello")

        self.assertEqual(len(self.repository), 1)
        self.assertIs(self.service.get("hello"), first)

    def test_get_missing(self):
        with self.assertRaises(StringNotFound):
            self.service.get("nope")

    def test_delete(self):
        self.service.create("hello")
        self.service.delete("hello")

        with self.assertRaises(StringNotFound):
            self.service.get("hello")
        with self.assertRaises(StringNotFound):
            self.service.delete("hello")

    def test_list_is_newest_first(self):
        for value in ["one", "two", "three"]:
            self.service.create(value)

        self.assertEqual(self.values(self.service.list()), ["three", "two", "one"])

    def test_list_combines_predicates(self):
        for value in ["racecar", "level", "hello world", "a", "Zz"]:
            self.service.create(value)

        palindromes = self.service.list(PredicateSet(is_palindrome=True, min_length=2))
        self.assertEqual(self.values(palindromes), ["Zz", "level", "racecar"])

        not_palindromes = self.service.list(PredicateSet(is_palindrome=False))
        self.assertEqual(self.values(not_palindromes), ["hello world"])

        self.assertEqual(self.values(self.service.list(PredicateSet(word_count=2))), ["hello world"])
        self.assertEqual(self.values(self.service.list(PredicateSet(max_length=1))), ["a"])

    def test_contains_character_is_case_insensitive(self):
        self.service.create("Zebra")
        self.service.create("apple")

        self.assertEqual(self.values(self.service.list(PredicateSet(contains_character="z"))), ["Zebra"])
        self.assertEqual(self.values(self.service.list(PredicateSet(contains_character="A"))), ["apple", "Zebra"])

    def test_contradictory_range_matches_nothing(self):
        self.service.create("hello")
        self.assertEqual(self.service.list(PredicateSet(min_length=10, max_length=2)), [])

    def test_filter_by_natural_language(self):
        for value in ["racecar", "noon", "was it a car", "banana"]:
            self.service.create(value)

        records, interpreted = self.service.filter_by_natural_language("all single word palindromic strings")

        self.assertEqual(self.values(records), ["noon", "racecar"])
        self.assertEqual(interpreted.as_dict(), {
            'original': "all single word palindromic strings",
            'parsed_filters': {'is_palindrome': True, 'word_count': 1},
        })

    def test_filter_by_natural_language_errors(self):
        with self.assertRaises(UnparsableQuery):
            self.service.filter_by_natural_language("banana")
        with self.assertRaises(ConflictingFilters):
            self.service.filter_by_natural_language("palindromic or non-palindromic")


class ServiceFactoryTests(SimpleTestCase):
    @override_settings(STRING_ANALYSER={
        'REPOSITORY': 'String_Analyser.repository.InMemoryStringRepository',
        'SWAGGER': False,
    })
    def test_settings_pick_the_repository(self):
        analyser_settings = AnalyserSettings.from_django_settings()

        self.assertEqual(analyser_settings, AnalyserSettings(
            repository_class='String_Analyser.repository.InMemoryStringRepository',
            swagger=False,
        ))
        service = get_string_service(analyser_settings)
        self.assertIsInstance(service.repository, InMemoryStringRepository)

    @override_settings(STRING_ANALYSER=None)
    def test_defaults(self):
        self.assertEqual(AnalyserSettings.from_django_settings(), AnalyserSettings())
