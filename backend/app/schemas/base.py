from datetime import date

from pydantic import BaseModel
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base for payloads exchanged with the frontend and written to JSON files.

    Fields are declared in snake_case and serialised as camelCase
    (``client_id`` <-> ``clientId``); both spellings are accepted on input.
    """

    class Config:
        alias_generator = to_camel
        populate_by_name = True
        from_attributes = True


def validate_date_string(value: str) -> str:
    """Validate a calendar date in YYYY-MM-DD format."""
    parts = value.split("-")
    if len(parts) != 3 or [len(p) for p in parts] != [4, 2, 2]:
        raise ValueError(f"Invalid date format: {value}. Must be YYYY-MM-DD")
    try:
        year, month, day = (int(p) for p in parts)
        date(year, month, day)
    except ValueError as e:
        raise ValueError(f"Invalid date: {value}") from e
    return value


def validate_time_string(value: str) -> str:
    """Validate time is in HH:MM format."""
    try:
        parts = value.split(":")
        if len(parts) != 2:
            raise ValueError("Time must be in HH:MM format")
        hour = int(parts[0])
        minute = int(parts[1])
        if not (0 <= hour <= 23 and 0 <= minute <= 59):
            raise ValueError("Invalid time values")
        return value
    except (ValueError, AttributeError) as e:
        raise ValueError(f"Invalid time format: {value}. Must be HH:MM") from e


class Envelope(CamelModel):
    success: bool = True
