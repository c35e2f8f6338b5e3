"""
Shared Pydantic types and coercion rules for boundary input.

Query strings and loosely-typed payloads arrive as strings or mixed
string/array shapes. Each rule below pattern-matches on the runtime shape,
normalizes, and hands the result to the strict pydantic check:

- Numbers:   "15" -> 15, "2.5" -> 2.5, "abc" -> type_mismatch
- Booleans:  True/False, "true"/"false" only (anything else fails)
- Dates:     datetime, date, or any dateutil-parseable string; always UTC-aware
- Lists:     ["a", "b"] or "a, b,,c" -> ["a", "b", "c"]; "" -> []
- Enums:     "admin" -> UserRole.ADMIN (upper-cased before membership check)
"""

import logging
import string
from datetime import date, datetime, timezone
from enum import Enum
from typing import Annotated, Any, List, Mapping, Type

from dateutil import parser as date_parser
from pydantic import BeforeValidator, Field, Strict
from pydantic_core import PydanticCustomError

from .config import Config
from .errors import ViolationKind, unparseable_error


logger = logging.getLogger('servemate_contracts.types')


def _type_mismatch(message: str, value: Any) -> PydanticCustomError:
    return PydanticCustomError(
        ViolationKind.TYPE_MISMATCH.value,
        message,
        {'value': repr(value)},
    )


# =============================================================================
# SCALARS
# =============================================================================

def coerce_int(v: Any) -> Any:
    """
    Coerce a numeric string to int.

    Examples:
        "15" -> 15
        " 7 " -> 7
        "3.0" -> 3
        "3.5" -> 3.5 (rejected later as a non-integer)
        "" -> None
        "abc" -> "abc" (rejected later as a type mismatch)
    """
    if isinstance(v, bool):
        raise _type_mismatch("Expected a number, got boolean {value}", v)
    if isinstance(v, str):
        s = v.strip()
        if s == '':
            return None
        try:
            return int(s)
        except ValueError:
            pass
        try:
            f = float(s)
        except ValueError:
            # Let Pydantic validation handle the error
            return v
        return int(f) if f.is_integer() else f
    return v


def coerce_number(v: Any) -> Any:
    """Coerce a numeric string to float. Same rules as coerce_int."""
    if isinstance(v, bool):
        raise _type_mismatch("Expected a number, got boolean {value}", v)
    if isinstance(v, str):
        s = v.strip()
        if s == '':
            return None
        try:
            return float(s)
        except ValueError:
            return v
    return v


def coerce_bool(v: Any) -> Any:
    """
    Coerce the literal strings "true"/"false" (case-sensitive) to bool.

    Any other string is a validation failure, never a silent default.
    """
    if isinstance(v, bool):
        return v
    if isinstance(v, str):
        if v == 'true':
            return True
        if v == 'false':
            return False
        raise _type_mismatch("Expected 'true' or 'false', got {value}", v)
    return v


def _as_utc(dt: datetime) -> datetime:
    """Naive values are read as UTC; aware values are converted to UTC."""
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)


def coerce_datetime(v: Any) -> Any:
    """
    Coerce a date-parseable string to an aware UTC datetime.

    Handles:
    - datetime: naive read as UTC, aware converted to UTC
    - date: promoted to midnight
    - ISO 8601 strings ("2024-01-15", "2024-01-15T10:30:00Z")
    - other dateutil formats ("Jan 15 2024 7pm")

    Every result is UTC-aware so ranges mixing "Z" and plain dates compare.
    Unparseable strings raise unparseable_composite, never a silent null.
    """
    if v is None:
        return v
    if isinstance(v, datetime):
        return _as_utc(v)
    if isinstance(v, date):
        return datetime(v.year, v.month, v.day, tzinfo=timezone.utc)
    if isinstance(v, str):
        s = v.strip()
        try:
            return _as_utc(date_parser.isoparse(s))
        except (ValueError, OverflowError):
            pass
        try:
            return _as_utc(date_parser.parse(s, default=datetime(1970, 1, 1)))
        except (ValueError, OverflowError):
            raise unparseable_error("Invalid date string: {value}", value=v)
    raise _type_mismatch("Expected a date or date string, got {value}", v)


# =============================================================================
# LISTS
# =============================================================================

def parse_query_array(v: Any) -> List[Any]:
    """
    Parse a native list or a delimited string into a list.

    Examples:
        None -> []
        "" -> []
        "a,b,c" -> ["a", "b", "c"]
        "a,,b,c," -> ["a", "b", "c"]
        [" a ", "b"] -> ["a", "b"]
    """
    if v is None:
        return []
    if isinstance(v, str):
        items = [item.strip() for item in v.split(Config.LIST_SEPARATOR) if item.strip()]
        logger.debug(f"list_normalization: {v!r} -> {items}")
        return items
    if isinstance(v, (list, tuple)):
        result = []
        for item in v:
            if isinstance(item, str):
                item = item.strip()
                if not item:
                    continue
            result.append(item)
        return result
    return v


def _upper_items(v: Any) -> Any:
    items = parse_query_array(v)
    if not isinstance(items, list):
        return items
    upper = [item.upper() if isinstance(item, str) else item for item in items]
    if not all(isinstance(item, str) for item in upper):
        return upper
    # Set semantics: first occurrence wins, order kept
    return list(dict.fromkeys(upper))


def _title_items(v: Any) -> Any:
    items = parse_query_array(v)
    if not isinstance(items, list):
        return items
    return [string.capwords(item) if isinstance(item, str) else item for item in items]


def _unwrap_ids(v: Any) -> Any:
    """[{"id": 1}, "2", 3] or "1,2,3" -> [1, "2", 3] (items coerced per element)."""
    items = parse_query_array(v)
    if not isinstance(items, list):
        return items
    return [item['id'] if isinstance(item, Mapping) and 'id' in item else item for item in items]


def _upper(v: Any) -> Any:
    if isinstance(v, str):
        return v.strip().upper()
    return v


# =============================================================================
# ANNOTATED TYPES
# =============================================================================

PositiveInt = Annotated[int, BeforeValidator(coerce_int), Field(gt=0)]
NonNegativeInt = Annotated[int, BeforeValidator(coerce_int), Field(ge=0)]
NonNegativeNumber = Annotated[float, BeforeValidator(coerce_number), Field(ge=0, allow_inf_nan=False)]
PositiveNumber = Annotated[float, BeforeValidator(coerce_number), Field(gt=0, allow_inf_nan=False)]
Percentage = Annotated[float, BeforeValidator(coerce_number), Field(ge=0, le=100, allow_inf_nan=False)]
QueryBool = Annotated[bool, Strict(), BeforeValidator(coerce_bool)]
CoercedDateTime = Annotated[datetime, BeforeValidator(coerce_datetime)]

ArrayQueryParam = Annotated[List[str], BeforeValidator(parse_query_array)]
IngredientList = Annotated[List[str], BeforeValidator(_title_items)]
IdList = Annotated[List[PositiveInt], BeforeValidator(_unwrap_ids)]


def upper_enum(enum_cls: Type[Enum]) -> Any:
    """Enum field accepting any casing: "admin" -> UserRole.ADMIN."""
    return Annotated[enum_cls, BeforeValidator(_upper)]


def enum_list(enum_cls: Type[Enum]) -> Any:
    """List of enum members from a list or delimited string, upper-cased."""
    return Annotated[List[enum_cls], BeforeValidator(_upper_items)]
