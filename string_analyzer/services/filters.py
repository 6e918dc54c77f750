import re
from typing import Any, Dict, Mapping, Optional

from string_analyzer.exceptions import ValidationError


def parse_bool(name: str, raw: str) -> bool:
    if raw == "true":
        return True
    if raw == "false":
        return False
    raise ValidationError(f"Invalid value for {name}; must be 'true' or 'false'")


def parse_non_negative_int(name: str, raw: str) -> int:
    # plain ASCII digits only: no sign, spaces, underscores or other scripts
    if not re.fullmatch(r"[0-9]+", raw):
        raise ValidationError(f"Invalid value for {name}; must be a non-negative integer")
    return int(raw)


def parse_character(name: str, raw: str) -> str:
    if len(raw) != 1:
        raise ValidationError(f"Invalid value for {name}; must be a single character")
    return raw


def parse_filters(params: Mapping[str, Optional[str]]) -> Dict[str, Any]:
    """
    Validate raw query parameters and coerce them into typed filters.

    Parameters that are absent (or None) are skipped, unknown keys are ignored.
    The result is what gets echoed back as ``filters_applied``.
    """
    filters: Dict[str, Any] = {}

    if params.get("is_palindrome") is not None:
        filters["is_palindrome"] = parse_bool("is_palindrome", params["is_palindrome"])

    for key in ("min_length", "max_length", "word_count"):
        if params.get(key) is not None:
            filters[key] = parse_non_negative_int(key, params[key])

    if params.get("contains_character") is not None:
        filters["contains_character"] = parse_character("contains_character", params["contains_character"])

    if "min_length" in filters and "max_length" in filters:
        if filters["min_length"] > filters["max_length"]:
            raise ValidationError("min_length cannot be greater than max_length")

    return filters
