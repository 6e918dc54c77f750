from sqlalchemy.orm import Session
from sqlalchemy import and_, func
from string_analyzer.models.string_record import StringRecord
from typing import Any, Dict, List, Optional


def create_string_record(db: Session, value: str, properties: Dict[str, Any]) -> StringRecord:
    """Insert a new analyzed string; the id is its SHA-256 hash"""
    db_string = StringRecord(
        id=properties["sha256_hash"],
        value=value,
        length=properties["length"],
        is_palindrome=properties["is_palindrome"],
        unique_characters=properties["unique_characters"],
        word_count=properties["word_count"],
        sha256_hash=properties["sha256_hash"],
        character_frequency_map=properties["character_frequency_map"]
    )

    db.add(db_string)
    db.commit()
    db.refresh(db_string)
    return db_string


def get_string_by_id(db: Session, string_id: str) -> Optional[StringRecord]:
    """Get string record by ID (hash)"""
    return db.get(StringRecord, string_id)


def get_all_strings(
    db: Session,
    is_palindrome: Optional[bool] = None,
    min_length: Optional[int] = None,
    max_length: Optional[int] = None,
    word_count: Optional[int] = None,
    contains_character: Optional[str] = None
) -> List[StringRecord]:
    """Get all strings matching every supplied filter"""
    query = db.query(StringRecord)

    filters = []

    if is_palindrome is not None:
        filters.append(StringRecord.is_palindrome == is_palindrome)

    if min_length is not None:
        filters.append(StringRecord.length >= min_length)

    if max_length is not None:
        filters.append(StringRecord.length <= max_length)

    if word_count is not None:
        filters.append(StringRecord.word_count == word_count)

    if contains_character is not None:
        # instr is case-sensitive and has no wildcards, unlike LIKE
        filters.append(func.instr(StringRecord.value, contains_character) > 0)

    if filters:
        query = query.filter(and_(*filters))

    return query.order_by(StringRecord.created_at).all()


def delete_string_by_id(db: Session, string_id: str) -> bool:
    """Delete string record by ID, returns False when nothing was there"""
    db_string = get_string_by_id(db, string_id)
    if db_string:
        db.delete(db_string)
        db.commit()
        return True
    return False
