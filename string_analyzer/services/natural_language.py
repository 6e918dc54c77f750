import re
from typing import Any, Callable, Dict, Optional, Tuple

from string_analyzer.exceptions import FilterConflictError, ValidationError

FilterEffect = Optional[Tuple[str, Any]]

LONGER_THAN = re.compile(r"longer than (\d+)")
CONTAINING_LETTER = re.compile(r"containing the letter\s+(\S)")


def _palindromic(query: str) -> FilterEffect:
    if "palindromic" in query:
        return "is_palindrome", True
    return None


def _single_word(query: str) -> FilterEffect:
    if "single word" in query:
        return "word_count", 1
    return None


def _longer_than(query: str) -> FilterEffect:
    match = LONGER_THAN.search(query)
    if match:
        # "longer than N" is strictly greater
        return "min_length", int(match.group(1)) + 1
    return None


def _first_vowel(query: str) -> FilterEffect:
    if "first vowel" in query:
        return "contains_character", "a"
    return None


def _containing_letter(query: str) -> FilterEffect:
    match = CONTAINING_LETTER.search(query)
    if match:
        return "contains_character", match.group(1)
    return None


# Applied in this order; each rule sets at most one filter.
RULES: Tuple[Callable[[str], FilterEffect], ...] = (
    _palindromic,
    _single_word,
    _longer_than,
    _first_vowel,
    _containing_letter,
)


def parse_natural_language_query(query: str) -> Dict[str, Any]:
    """
    Translate a natural language query into structured filters.

    Examples:
    - "all single word palindromic strings" -> {word_count: 1, is_palindrome: true}
    - "strings longer than 10 characters" -> {min_length: 11}
    - "strings containing the letter z" -> {contains_character: "z"}
    - "strings containing the first vowel" -> {contains_character: "a"}

    Raises FilterConflictError when two triggers disagree about a filter and
    ValidationError when nothing in the query is recognized.
    """
    lowered = query.lower()
    filters: Dict[str, Any] = {}

    for rule in RULES:
        effect = rule(lowered)
        if effect is None:
            continue
        key, value = effect
        if key in filters and filters[key] != value:
            raise FilterConflictError("Query parsed but resulted in conflicting filters")
        filters[key] = value

    if not filters:
        raise ValidationError("Unable to parse natural language query")

    return filters
