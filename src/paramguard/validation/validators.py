"""Nullable and non-nullable validators for each type family.

Every function here takes ``(value, param_name)``, returns the value itself
when it satisfies the contract and raises InvalidArgumentError otherwise.
Check order is fixed:

- non-nullable: undefined, then null, then the family predicate
- nullable: undefined, then None short-circuits, then the family predicate
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from datetime import date
from types import MappingProxyType
from typing import Any

from paramguard.core.errors import InvalidArgumentError
from paramguard.core.families import (
    ARRAY,
    BIGINT,
    BOOLEAN,
    DATE,
    MAP,
    NUMBER,
    SET,
    STRING,
    UINT8ARRAY,
    TypeFamily,
    get_family,
)
from paramguard.validation.base import require_defined, require_non_null

Validator = Callable[[Any, str], Any]


def require_family(
    family: TypeFamily, value: Any, param_name: str, nullable: bool = False
) -> Any:
    """Validate a value against a type family and nullability.

    Args:
        family: The type family the value must belong to.
        value: The value to check.
        param_name: The parameter name for error messages.
        nullable: If True, None is accepted and returned as-is.

    Returns:
        The value unchanged (or None for a nullable parameter).

    Raises:
        InvalidArgumentError: If the value is UNDEFINED, is None for a
            non-nullable parameter, or does not belong to the family.
    """
    if nullable:
        require_defined(value, param_name)
        if value is None:
            return None
    else:
        require_non_null(value, param_name)
    if not family.matches(value):
        raise InvalidArgumentError.wrong_type(param_name, family.expected, nullable)
    return value


# -----------------------------------------------------------------------------
# string
# -----------------------------------------------------------------------------


def require_non_null_string(value: Any, param_name: str) -> str:
    """Validate that a value is a str."""
    return require_family(STRING, value, param_name)


def require_nullable_string(value: Any, param_name: str) -> str | None:
    """Validate that a value is a str or None (but not UNDEFINED)."""
    return require_family(STRING, value, param_name, nullable=True)


# -----------------------------------------------------------------------------
# number
# -----------------------------------------------------------------------------


def require_non_null_number(value: Any, param_name: str) -> int | float:
    """Validate that a value is an int or float.

    NaN is rejected with the same message as any non-number.
    """
    return require_family(NUMBER, value, param_name)


def require_nullable_number(value: Any, param_name: str) -> int | float | None:
    """Validate that a value is an int, a float or None.

    NaN is rejected; it is not treated as null.
    """
    return require_family(NUMBER, value, param_name, nullable=True)


# -----------------------------------------------------------------------------
# boolean
# -----------------------------------------------------------------------------


def require_non_null_boolean(value: Any, param_name: str) -> bool:
    return require_family(BOOLEAN, value, param_name)


def require_nullable_boolean(value: Any, param_name: str) -> bool | None:
    return require_family(BOOLEAN, value, param_name, nullable=True)


# -----------------------------------------------------------------------------
# bigint
# -----------------------------------------------------------------------------


def require_non_null_bigint(value: Any, param_name: str) -> int:
    """Validate that a value is an arbitrary-precision int (bool excluded)."""
    return require_family(BIGINT, value, param_name)


def require_nullable_bigint(value: Any, param_name: str) -> int | None:
    """Validate that a value is an int (bool excluded) or None."""
    return require_family(BIGINT, value, param_name, nullable=True)


# -----------------------------------------------------------------------------
# Uint8Array
# -----------------------------------------------------------------------------


def require_non_null_uint8array(value: Any, param_name: str) -> bytes | bytearray:
    """Validate that a value is bytes or a bytearray."""
    return require_family(UINT8ARRAY, value, param_name)


def require_nullable_uint8array(value: Any, param_name: str) -> bytes | bytearray | None:
    """Validate that a value is bytes, a bytearray or None."""
    return require_family(UINT8ARRAY, value, param_name, nullable=True)


# -----------------------------------------------------------------------------
# Array
# -----------------------------------------------------------------------------


def require_non_null_array(value: Any, param_name: str) -> list[Any] | tuple[Any, ...]:
    """Validate that a value is a list or tuple.

    Strings, bytes and other iterables are not arrays.
    """
    return require_family(ARRAY, value, param_name)


def require_nullable_array(
    value: Any, param_name: str
) -> list[Any] | tuple[Any, ...] | None:
    return require_family(ARRAY, value, param_name, nullable=True)


# -----------------------------------------------------------------------------
# Set
# -----------------------------------------------------------------------------


def require_non_null_set(value: Any, param_name: str) -> set[Any] | frozenset[Any]:
    return require_family(SET, value, param_name)


def require_nullable_set(
    value: Any, param_name: str
) -> set[Any] | frozenset[Any] | None:
    return require_family(SET, value, param_name, nullable=True)


# -----------------------------------------------------------------------------
# Map
# -----------------------------------------------------------------------------


def require_non_null_map(value: Any, param_name: str) -> dict[Any, Any]:
    """Validate that a value is a dict (subclasses included)."""
    return require_family(MAP, value, param_name)


def require_nullable_map(value: Any, param_name: str) -> dict[Any, Any] | None:
    """Validate that a value is a dict or None."""
    return require_family(MAP, value, param_name, nullable=True)


# -----------------------------------------------------------------------------
# Date
# -----------------------------------------------------------------------------


def require_non_null_date(value: Any, param_name: str) -> date:
    """Validate that a value is a date or datetime with a defined instant.

    ``pd.NaT`` is an invalid date and is rejected like any non-date.
    """
    return require_family(DATE, value, param_name)


def require_nullable_date(value: Any, param_name: str) -> date | None:
    """Validate that a value is a valid date, a valid datetime or None."""
    return require_family(DATE, value, param_name, nullable=True)


# -----------------------------------------------------------------------------
# Lookup by (family, nullability)
# -----------------------------------------------------------------------------

VALIDATORS: Mapping[tuple[str, bool], Validator] = MappingProxyType(
    {
        ("string", False): require_non_null_string,
        ("string", True): require_nullable_string,
        ("number", False): require_non_null_number,
        ("number", True): require_nullable_number,
        ("boolean", False): require_non_null_boolean,
        ("boolean", True): require_nullable_boolean,
        ("bigint", False): require_non_null_bigint,
        ("bigint", True): require_nullable_bigint,
        ("uint8array", False): require_non_null_uint8array,
        ("uint8array", True): require_nullable_uint8array,
        ("array", False): require_non_null_array,
        ("array", True): require_nullable_array,
        ("set", False): require_non_null_set,
        ("set", True): require_nullable_set,
        ("map", False): require_non_null_map,
        ("map", True): require_nullable_map,
        ("date", False): require_non_null_date,
        ("date", True): require_nullable_date,
    }
)


def get_validator(family: str, nullable: bool = False) -> Validator:
    """Get the named validator for a type family and nullability.

    Args:
        family: Family name (e.g. "string", "uint8array").
        nullable: If True, return the nullable variant.

    Returns:
        One of the family validators defined in this module.

    Raises:
        ValueError: If the family name is unknown.
    """
    get_family(family)
    return VALIDATORS[(family, nullable)]
