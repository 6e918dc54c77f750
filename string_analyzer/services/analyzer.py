import hashlib
import re
from collections import Counter
from typing import Dict

# The whitespace set JavaScript uses for trim() and \s; str.split() also breaks on
# separators like \x1c-\x1f, so word boundaries are matched explicitly.
WHITESPACE = re.compile(r"[\t\n\v\f\r \u00a0\u1680\u2000-\u200a\u2028\u2029\u202f\u205f\u3000\ufeff]+")


def compute_sha256(text: str) -> str:
    """Compute SHA-256 hash of a string"""
    return hashlib.sha256(text.encode("utf-8")).hexdigest()


def utf16_length(text: str) -> int:
    """Length in UTF-16 code units, so characters outside the BMP count twice"""
    return len(text.encode("utf-16-le", "surrogatepass")) // 2


def is_palindrome(text: str) -> bool:
    """Case-insensitive palindrome check on the raw string (spaces count)"""
    return text.lower() == text[::-1].lower()


def count_unique_characters(text: str) -> int:
    """Count distinct characters in string"""
    return len(set(text))


def count_words(text: str) -> int:
    """Count runs of non-whitespace"""
    return len([word for word in WHITESPACE.split(text) if word])


def get_character_frequency(text: str) -> Dict[str, int]:
    """Get frequency map of each character"""
    return dict(Counter(text))


def analyze_string(value: str) -> Dict:
    """
    Analyze a string and return all computed properties.

    Nothing is trimmed or normalized: the hash, and therefore the record id,
    always identifies exactly the submitted value.
    """
    return {
        "length": utf16_length(value),
        "is_palindrome": is_palindrome(value),
        "unique_characters": count_unique_characters(value),
        "word_count": count_words(value),
        "sha256_hash": compute_sha256(value),
        "character_frequency_map": get_character_frequency(value),
    }
