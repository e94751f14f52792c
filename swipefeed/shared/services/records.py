"""
Store-boundary validation.

Rows read from the store are converted to pydantic records before any
service hands them out. A malformed row in a list is dropped and logged; a
malformed single row is a read error.
"""

from typing import Any, Iterable, Type, TypeVar

from pydantic import BaseModel, ValidationError as SchemaValidationError

from swipefeed.shared.core.exceptions import StoreReadError
from swipefeed.shared.core.logging import logger


RecordType = TypeVar("RecordType", bound=BaseModel)


def _row_id(row: Any) -> str:
    return str(getattr(row, "id", None))


def to_record(record_type: Type[RecordType], row: Any) -> RecordType:
    """
    Validate one row.

    Raises:
        StoreReadError: If the row does not satisfy the record schema
    """
    try:
        return record_type.model_validate(row)
    except SchemaValidationError as e:
        logger.error(
            "Malformed row read from store",
            record_type=record_type.__name__,
            row_id=_row_id(row),
            errors=e.error_count(),
        )
        raise StoreReadError(
            f"Stored {record_type.__name__} is malformed",
            details={"id": _row_id(row)},
        ) from e


def to_records(record_type: Type[RecordType], rows: Iterable[Any]) -> list[RecordType]:
    """Validate rows, skipping the ones that do not satisfy the record schema."""
    records: list[RecordType] = []
    for row in rows:
        try:
            records.append(record_type.model_validate(row))
        except SchemaValidationError as e:
            logger.warning(
                "Skipping malformed row",
                record_type=record_type.__name__,
                row_id=_row_id(row),
                errors=e.error_count(),
            )
    return records
