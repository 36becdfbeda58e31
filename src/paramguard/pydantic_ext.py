"""Pydantic field types enforcing the nullability contract.

Usage:
    >>> from pydantic import BaseModel
    >>> from paramguard.pydantic_ext import NonNullNumber, NullableString
    >>> class Transfer(BaseModel):
    ...     amount: NonNullNumber
    ...     memo: NullableString
    >>> Transfer(amount=5, memo=None).memo is None
    True

The field name is used as the parameter name, so a failing field produces
the same message as the plain validator (``"amount must be a number"``).
Values are never coerced. A field left out entirely is reported by pydantic's
own ``missing`` error before any validator runs.
"""

from __future__ import annotations

from typing import Annotated, Any

from pydantic import PlainValidator, ValidationInfo

from paramguard.core.errors import InvalidArgumentError
from paramguard.validation.validators import get_validator


def guarded(family: str, nullable: bool = False) -> Any:
    """Build an annotated field type for a type family.

    Args:
        family: Family name (e.g. "string", "date").
        nullable: If True, None is accepted.

    Returns:
        ``Annotated[Any, PlainValidator(...)]`` usable as a field annotation.

    Raises:
        ValueError: If the family name is unknown.
    """
    validator = get_validator(family, nullable=nullable)

    def _check(value: Any, info: ValidationInfo) -> Any:
        try:
            return validator(value, info.field_name or "value")
        except InvalidArgumentError as e:
            raise e.to_pydantic_error() from e

    return Annotated[Any, PlainValidator(_check)]


NonNullString = guarded("string")
NullableString = guarded("string", nullable=True)
NonNullNumber = guarded("number")
NullableNumber = guarded("number", nullable=True)
NonNullBoolean = guarded("boolean")
NullableBoolean = guarded("boolean", nullable=True)
NonNullBigInt = guarded("bigint")
NullableBigInt = guarded("bigint", nullable=True)
NonNullUint8Array = guarded("uint8array")
NullableUint8Array = guarded("uint8array", nullable=True)
NonNullArray = guarded("array")
NullableArray = guarded("array", nullable=True)
NonNullSet = guarded("set")
NullableSet = guarded("set", nullable=True)
NonNullMap = guarded("map")
NullableMap = guarded("map", nullable=True)
NonNullDate = guarded("date")
NullableDate = guarded("date", nullable=True)

__all__ = [
    "guarded",
    "NonNullString",
    "NullableString",
    "NonNullNumber",
    "NullableNumber",
    "NonNullBoolean",
    "NullableBoolean",
    "NonNullBigInt",
    "NullableBigInt",
    "NonNullUint8Array",
    "NullableUint8Array",
    "NonNullArray",
    "NullableArray",
    "NonNullSet",
    "NullableSet",
    "NonNullMap",
    "NullableMap",
    "NonNullDate",
    "NullableDate",
]
