from pydantic import BaseModel, field_validator
from typing import Any, Dict, List, Optional
from datetime import datetime, timezone


class StringProperties(BaseModel):
    length: int
    is_palindrome: bool
    unique_characters: int
    word_count: int
    sha256_hash: str
    character_frequency_map: Dict[str, int]


class StringResponse(BaseModel):
    id: str
    value: str
    properties: StringProperties
    created_at: datetime

    class Config:
        from_attributes = True

    @field_validator('created_at')
    @classmethod
    def ensure_utc(cls, v: datetime) -> datetime:
        """SQLite drops tzinfo on read; stored timestamps are always UTC"""
        if v.tzinfo is None:
            return v.replace(tzinfo=timezone.utc)
        return v


class StringListResponse(BaseModel):
    data: List[StringResponse]
    count: int
    filters_applied: Dict[str, Any] = {}


class InterpretedQuery(BaseModel):
    original: str
    parsed_filters: Dict[str, Any]


class NaturalLanguageResponse(BaseModel):
    data: List[StringResponse]
    count: int
    interpreted_query: InterpretedQuery


class ErrorResponse(BaseModel):
    error: str
    details: Optional[Dict[str, Any]] = None
