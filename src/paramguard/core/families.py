"""Runtime type families accepted at the API boundary.

Each family pairs one explicit predicate with the phrase used in error
messages. Predicates never coerce: a value either already belongs to the
family or it does not.
"""

from __future__ import annotations

import math
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from datetime import date
from types import MappingProxyType
from typing import Any

import pandas as pd


@dataclass(frozen=True)
class TypeFamily:
    """A runtime type family.

    Attributes:
        name: Registry key (e.g. "uint8array").
        description: Type name as printed in messages (e.g. "Uint8Array").
        expected: Description with its article (e.g. "a Uint8Array").
        predicate: Returns True if a non-null value belongs to the family.
    """

    name: str
    description: str
    expected: str
    predicate: Callable[[Any], bool]

    def matches(self, value: Any) -> bool:
        """Check a value against the family predicate."""
        return self.predicate(value)


def is_string(value: Any) -> bool:
    return isinstance(value, str)


def is_number(value: Any) -> bool:
    """int or float, never bool, never NaN."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return not (isinstance(value, float) and math.isnan(value))


def is_boolean(value: Any) -> bool:
    return isinstance(value, bool)


def is_bigint(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def is_uint8array(value: Any) -> bool:
    return isinstance(value, (bytes, bytearray))


def is_array(value: Any) -> bool:
    return isinstance(value, (list, tuple))


def is_set(value: Any) -> bool:
    return isinstance(value, (set, frozenset))


def is_map(value: Any) -> bool:
    return isinstance(value, dict)


def is_valid_date(value: Any) -> bool:
    """A date or datetime whose instant is defined.

    ``pd.NaT`` subclasses ``datetime`` but represents an invalid instant, so
    it is rejected like NaN is for numbers.
    """
    if not isinstance(value, date):
        return False
    return not pd.isna(value)


STRING = TypeFamily("string", "string", "a string", is_string)
NUMBER = TypeFamily("number", "number", "a number", is_number)
BOOLEAN = TypeFamily("boolean", "boolean", "a boolean", is_boolean)
BIGINT = TypeFamily("bigint", "bigint", "a bigint", is_bigint)
UINT8ARRAY = TypeFamily("uint8array", "Uint8Array", "a Uint8Array", is_uint8array)
ARRAY = TypeFamily("array", "Array", "an Array", is_array)
SET = TypeFamily("set", "Set", "a Set", is_set)
MAP = TypeFamily("map", "Map", "a Map", is_map)
DATE = TypeFamily("date", "Date", "a valid Date", is_valid_date)

FAMILIES: Mapping[str, TypeFamily] = MappingProxyType(
    {
        family.name: family
        for family in (STRING, NUMBER, BOOLEAN, BIGINT, UINT8ARRAY, ARRAY, SET, MAP, DATE)
    }
)


def get_family(name: str) -> TypeFamily:
    """Look up a type family by name.

    Args:
        name: Family name (e.g. "string", "date").

    Returns:
        The matching TypeFamily.

    Raises:
        ValueError: If the name is not a known family.
    """
    try:
        return FAMILIES[name]
    except KeyError:
        available = ", ".join(sorted(FAMILIES))
        raise ValueError(
            f"Unknown type family: {name}. Available families: {available}"
        ) from None
