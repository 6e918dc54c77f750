"""Create, look up, filter and delete analyzed strings held in a StringStore."""
from typing import Any, Dict, Mapping, Optional
import logging

from sqlalchemy.exc import IntegrityError

from string_analyzer.crud import string_record as crud
from string_analyzer.database import StringStore
from string_analyzer.exceptions import ConflictError, InvalidTypeError, NotFoundError, ValidationError
from string_analyzer.models.string_record import StringRecord
from string_analyzer.schemas.string_record import (
    InterpretedQuery,
    NaturalLanguageResponse,
    StringListResponse,
    StringProperties,
    StringResponse,
)
from string_analyzer.services.analyzer import analyze_string, compute_sha256
from string_analyzer.services.filters import parse_filters
from string_analyzer.services.natural_language import parse_natural_language_query

logger = logging.getLogger(__name__)


def to_response(record: StringRecord) -> StringResponse:
    return StringResponse(
        id=record.id,
        value=record.value,
        properties=StringProperties(
            length=record.length,
            is_palindrome=record.is_palindrome,
            unique_characters=record.unique_characters,
            word_count=record.word_count,
            sha256_hash=record.sha256_hash,
            character_frequency_map=record.character_frequency_map
        ),
        created_at=record.created_at
    )


def create_string(store: StringStore, payload: Optional[Mapping[str, Any]]) -> StringResponse:
    """
    Analyze and store the ``value`` of a request body.

    Raises ValidationError when value is missing, InvalidTypeError when it is
    not a string and ConflictError when the same string is already stored.
    """
    if payload is None or "value" not in payload:
        raise ValidationError("Invalid request body or missing 'value' field")

    value = payload["value"]
    if not isinstance(value, str):
        raise InvalidTypeError("Invalid data type for 'value' (must be string)")

    properties = analyze_string(value)
    string_id = properties["sha256_hash"]

    with store.session() as db:
        if crud.get_string_by_id(db, string_id) is not None:
            raise ConflictError("String already exists in the system")
        try:
            record = crud.create_string_record(db, value, properties)
        except IntegrityError:
            raise ConflictError("String already exists in the system")
        logger.info(f"Stored string {string_id}")
        return to_response(record)


def get_string(store: StringStore, value: str) -> StringResponse:
    """Look up a stored string by hashing the exact value given"""
    string_id = compute_sha256(value)
    with store.session() as db:
        record = crud.get_string_by_id(db, string_id)
        if record is None:
            raise NotFoundError("String does not exist in the system")
        return to_response(record)


def delete_string(store: StringStore, value: str) -> None:
    string_id = compute_sha256(value)
    with store.session() as db:
        if not crud.delete_string_by_id(db, string_id):
            raise NotFoundError("String does not exist in the system")
    logger.info(f"Deleted string {string_id}")


def _query(store: StringStore, filters: Dict[str, Any]):
    with store.session() as db:
        return [to_response(record) for record in crud.get_all_strings(db, **filters)]


def list_strings(store: StringStore, params: Mapping[str, Optional[str]]) -> StringListResponse:
    """Filter stored strings by validated query parameters (logical AND)"""
    filters = parse_filters(params)
    data = _query(store, filters)
    logger.debug(f"Listed {len(data)} strings with filters {filters}")
    return StringListResponse(data=data, count=len(data), filters_applied=filters)


def filter_by_natural_language(store: StringStore, query: Optional[str]) -> NaturalLanguageResponse:
    if not query:
        raise ValidationError("query parameter is required")

    filters = parse_natural_language_query(query)
    data = _query(store, filters)
    logger.debug(f"Natural language query {query!r} -> {filters}, {len(data)} matches")
    return NaturalLanguageResponse(
        data=data,
        count=len(data),
        interpreted_query=InterpretedQuery(original=query, parsed_filters=filters)
    )
