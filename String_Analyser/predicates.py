from dataclasses import asdict, dataclass, fields
from typing import Optional


@dataclass
class PredicateSet:
    """
    Resolved filter conditions, from query parameters or a natural language phrase.

    ``None`` means the dimension is not filtered. The conditions are ANDed
    together; ``contains_character`` is a case-insensitive substring test on
    the raw value, the rest apply to the stored properties. A ``min_length``
    above ``max_length`` is not an error, it just matches nothing.
    """
    is_palindrome: Optional[bool] = None
    word_count: Optional[int] = None
    min_length: Optional[int] = None
    max_length: Optional[int] = None
    contains_character: Optional[str] = None

    @classmethod
    def from_dict(cls, data):
        names = {f.name for f in fields(cls)}
        return cls(**{key: value for key, value in data.items() if key in names})

    def as_dict(self):
        return {key: value for key, value in asdict(self).items() if value is not None}

    def is_empty(self):
        return not self.as_dict()

    def matches(self, value, properties):
        """Evaluate the predicates against a value and its computed properties."""
        if self.is_palindrome is not None and properties['is_palindrome'] != self.is_palindrome:
            return False
        if self.word_count is not None and properties['word_count'] != self.word_count:
            return False
        if self.min_length is not None and properties['length'] < self.min_length:
            return False
        if self.max_length is not None and properties['length'] > self.max_length:
            return False
        if self.contains_character is not None and self.contains_character.lower() not in value.lower():
            return False
        return True
