import hashlib
import re
from collections import Counter

WHITESPACE_RE = re.compile(r"\s+")


def compute_sha256(value: str) -> str:
    """Compute SHA-256 hash for the string."""
    return hashlib.sha256(value.encode('utf-8')).hexdigest()


def is_palindrome(value: str) -> bool:
    """Check if string reads the same forward and backward.

    Case and whitespace are ignored, punctuation is not.
    """
    normalized = WHITESPACE_RE.sub('', value.lower())
    return normalized == normalized[::-1]


def count_words(value: str) -> int:
    # str.split() trims, so whitespace-only input gives 0
    return len(value.split())


def character_frequency(value: str) -> dict:
    return dict(Counter(value.lower()))


def analyze_string(value: str) -> dict:
    """Compute all required string properties."""
    return {
        "length": len(value),
        "is_palindrome": is_palindrome(value),
        # case-sensitive, unlike the frequency map
        "unique_characters": len(set(value)),
        "word_count": count_words(value),
        "sha256_hash": compute_sha256(value),
        "character_frequency_map": character_frequency(value),
    }
