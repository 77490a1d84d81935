"""Translate free text into a PredicateSet.

This is not parsing: a fixed, ordered list of phrase rules is run over the
lowercased, trimmed phrase. Every rule that applies contributes its field
updates, and later rules overwrite fields set by earlier ones.
"""
import re
from collections import namedtuple
from dataclasses import dataclass

from .exceptions import ConflictingFilters, UnparsableQuery
from .predicates import PredicateSet

PhraseRule = namedtuple('PhraseRule', ['name', 'matcher'])


def when_contains(*phrases, **updates):
    """Rule matcher firing when any of ``phrases`` occurs in the text."""
    def matcher(text):
        if any(phrase in text for phrase in phrases):
            return dict(updates)
        return None
    return matcher


def when_matches(*patterns, build):
    """Rule matcher trying ``patterns`` in order; the first match is passed to ``build``."""
    compiled = [re.compile(pattern) for pattern in patterns]

    def matcher(text):
        for regex in compiled:
            match = regex.search(text)
            if match:
                return build(match)
        return None
    return matcher


PHRASE_RULES = (
    PhraseRule('palindrome', when_contains('palindromic', 'palindrome', is_palindrome=True)),
    PhraseRule('single_word', when_contains('single word', word_count=1)),
    PhraseRule('two_words', when_contains('two words', word_count=2)),
    PhraseRule('three_words', when_contains('three words', word_count=3)),
    PhraseRule('longer_than', when_matches(
        r'longer than (\d+) characters?',
        build=lambda m: {'min_length': int(m.group(1)) + 1},
    )),
    PhraseRule('shorter_than', when_matches(
        r'shorter than (\d+) characters?',
        build=lambda m: {'max_length': int(m.group(1)) - 1},
    )),
    PhraseRule('letter', when_matches(
        r'containing the letter (\w)',
        r'letter ([a-z])',
        build=lambda m: {'contains_character': m.group(1)},
    )),
    # not a real vowel search, always "a"
    PhraseRule('first_vowel', when_contains('first vowel', contains_character='a')),
    PhraseRule('contains_z', when_contains('contains z', contains_character='z')),
    PhraseRule('vowel_palindrome', when_contains(
        'vowel palindrome', is_palindrome=True, contains_character='a',
    )),
)

# Phrases whose terms all appearing together are rejected as contradictory.
# "non-palindromic" is never modelled as a predicate; this only guards the phrase.
CONFLICT_TRAPS = (
    ('palindromic', 'non-palindromic'),
)


@dataclass
class InterpretedQuery:
    original: str
    parsed_filters: PredicateSet

    def as_dict(self):
        return {
            'original': self.original,
            'parsed_filters': self.parsed_filters.as_dict(),
        }


def apply_rules(text, rules=PHRASE_RULES):
    """Run ``rules`` over already normalized text, returning the merged field updates."""
    parsed = {}
    for rule in rules:
        updates = rule.matcher(text)
        if updates:
            parsed.update(updates)
    return parsed


def interpret(phrase: str) -> InterpretedQuery:
    """
    Resolve a natural language phrase into an InterpretedQuery.

    Raises UnparsableQuery when no rule applies and ConflictingFilters when
    the phrase hits a conflict trap. Both carry the interpretation echo.
    """
    text = phrase.lower().strip()
    parsed = apply_rules(text)
    interpreted = InterpretedQuery(original=phrase, parsed_filters=PredicateSet.from_dict(parsed))

    if not parsed:
        raise UnparsableQuery(interpreted_query=interpreted.as_dict())

    for terms in CONFLICT_TRAPS:
        if all(term in text for term in terms):
            raise ConflictingFilters(interpreted_query=interpreted.as_dict())

    return interpreted
