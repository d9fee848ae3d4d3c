"""Field-level rules shared by the validator and the updater.

Field names, error messages and the comparison helpers that decide
whether a value is numeric, a tag sequence, or unchanged.
"""

import json
import math
from decimal import ROUND_HALF_UP, Context, Decimal
from typing import Any

ID_FIELD = "id"
NAME_FIELD = "name"
PRICE_FIELD = "price"
TAGS_FIELD = "tags"
CREATED_AT_FIELD = "createdAt"
UPDATED_AT_FIELD = "updatedAt"

NOT_A_RECORD = "Record must be an object."
INVALID_ID = "ID is required and must be a string."
INVALID_NAME = "Name is required and must be a non-empty string."
INVALID_PRICE = "Price is required and must be a number."
INVALID_TAGS = "Tags are required and must be an array."
INVALID_TAG_VALUES = "All tags must be alphanumeric strings."

# Values at or above this magnitude have no fixed-point form and are kept as-is
FIXED_POINT_LIMIT = 1e21

_DECIMAL_CONTEXT = Context(prec=64)


def is_number(value: Any) -> bool:
    """True for int and float values; bool is excluded."""
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def is_tag_sequence(value: Any) -> bool:
    return isinstance(value, (list, tuple))


def is_blank(value: str) -> bool:
    return not value.strip()


def round_price(value: int | float, decimals: int = 2) -> float:
    """Round to a fixed number of decimals, half away from zero.

    Works on the exact binary value of the float, the same as formatting it
    to a fixed-point string and parsing it back.
    """
    if not math.isfinite(value) or abs(value) >= FIXED_POINT_LIMIT:
        return float(value)
    quantum = Decimal(1).scaleb(-decimals)
    rounded = Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP, context=_DECIMAL_CONTEXT)
    return float(rounded)


def canonical_tags(tags: list[Any] | tuple[Any, ...]) -> str:
    """Serialized form of a tag sequence that ignores element order."""
    return json.dumps(sorted(tags, key=str), default=str)


def strictly_equal(new: Any, old: Any) -> bool:
    """Equality used to skip no-op writes.

    Text, numbers, booleans and None compare by value, with bool kept apart
    from numbers. Everything else compares by identity.
    """
    if is_number(new) and is_number(old):
        return new == old
    if isinstance(new, (str, bool)) or new is None:
        return type(new) is type(old) and new == old
    return new is old
