"""
Helpers shared by the MCP tool modules.
"""

from dataclasses import fields, is_dataclass
from datetime import date, datetime
from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel

from ..analytics.dates import parse_date


def resolve_now(as_of: Optional[str] = None) -> datetime:
    """
    Reference time for a tool call.

    Tools are the only place the wall clock is read. An explicit `as_of`
    date pins the reference to midnight of that day.

    Raises:
        ValueError: If `as_of` is given but is not a date
    """
    if not as_of:
        return datetime.now()
    day = parse_date(as_of)
    if day is None:
        raise ValueError(f"Invalid date: {as_of}. Use YYYY-MM-DD")
    return datetime(day.year, day.month, day.day)


def require_date(value: str, name: str) -> date:
    """Parse a required YYYY-MM-DD argument."""
    day = parse_date(value)
    if day is None:
        raise ValueError(f"Invalid {name}: {value}. Use YYYY-MM-DD")
    return day


def to_jsonable(value: Any) -> Any:
    """Convert analytics results into JSON-friendly structures."""
    if isinstance(value, BaseModel):
        return value.model_dump(mode='json')
    if is_dataclass(value) and not isinstance(value, type):
        return {f.name: to_jsonable(getattr(value, f.name)) for f in fields(value)}
    if isinstance(value, dict):
        return {key: to_jsonable(v) for key, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [to_jsonable(v) for v in value]
    if isinstance(value, (date, datetime)):
        return value.isoformat()
    if isinstance(value, Enum):
        return value.value
    return value
