from fastapi import APIRouter, Body, Depends, Query, Response, status
from typing import Any, Dict, Optional

from string_analyzer.database import StringStore, get_store
from string_analyzer.schemas.string_record import (
    ErrorResponse,
    NaturalLanguageResponse,
    StringListResponse,
    StringResponse,
)
from string_analyzer.services import strings as service

router = APIRouter()


@router.post(
    "/strings",
    response_model=StringResponse,
    status_code=status.HTTP_201_CREATED,
    responses={
        400: {"model": ErrorResponse},
        409: {"model": ErrorResponse},
        422: {"model": ErrorResponse},
    },
)
def create_string(
    payload: Optional[Dict[str, Any]] = Body(None),
    store: StringStore = Depends(get_store)
):
    """
    Analyze and store a string.
    Returns 400 if 'value' is missing, 422 if it is not a string
    and 409 if the string already exists.
    """
    return service.create_string(store, payload)


@router.get("/strings", response_model=StringListResponse, responses={400: {"model": ErrorResponse}})
def get_all_strings(
    is_palindrome: Optional[str] = Query(None, description="'true' or 'false'"),
    min_length: Optional[str] = Query(None, description="Minimum length (inclusive)"),
    max_length: Optional[str] = Query(None, description="Maximum length (inclusive)"),
    word_count: Optional[str] = Query(None, description="Exact word count"),
    contains_character: Optional[str] = Query(None, description="Single character to look for"),
    store: StringStore = Depends(get_store)
):
    """
    Get all strings with optional filtering.
    Filter values are validated here rather than by FastAPI so that every bad value is a 400.
    """
    params = {
        "is_palindrome": is_palindrome,
        "min_length": min_length,
        "max_length": max_length,
        "word_count": word_count,
        "contains_character": contains_character,
    }
    return service.list_strings(store, params)


@router.get(
    "/strings/filter-by-natural-language",
    response_model=NaturalLanguageResponse,
    responses={400: {"model": ErrorResponse}, 422: {"model": ErrorResponse}},
)
def filter_by_natural_language(
    query: Optional[str] = Query(None, description="Natural language query"),
    store: StringStore = Depends(get_store)
):
    """
    Filter strings using natural language queries.
    Example: "all single word palindromic strings"
    """
    return service.filter_by_natural_language(store, query)


@router.get("/strings/{string_value:path}", response_model=StringResponse, responses={404: {"model": ErrorResponse}})
def get_string(string_value: str, store: StringStore = Depends(get_store)):
    """
    Get analysis for a specific string.
    Returns 404 if string doesn't exist.
    """
    return service.get_string(store, string_value)


@router.delete(
    "/strings/{string_value:path}",
    status_code=status.HTTP_204_NO_CONTENT,
    responses={404: {"model": ErrorResponse}},
)
def delete_string(string_value: str, store: StringStore = Depends(get_store)):
    """
    Delete a string from the system.
    Returns 404 if string doesn't exist.
    """
    service.delete_string(store, string_value)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
