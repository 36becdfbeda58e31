"""Base nullability checks.

Every validator in the package starts with one of these two functions.
"""

from __future__ import annotations

from typing import Any, TypeVar

from paramguard.core.errors import InvalidArgumentError
from paramguard.core.sentinels import UNDEFINED

T = TypeVar("T")


def require_defined(value: T, param_name: str) -> T:
    """Validate that a value was supplied.

    Applies to every public parameter, nullable ones included, since omitting
    an argument is never acceptable.

    Args:
        value: The value to check.
        param_name: The parameter name for error messages.

    Returns:
        The value unchanged, None included.

    Raises:
        InvalidArgumentError: If value is UNDEFINED.
    """
    if value is UNDEFINED:
        raise InvalidArgumentError.undefined(param_name)
    return value


def require_non_null(value: Any, param_name: str) -> Any:
    """Validate that a value was supplied and is not None.

    Args:
        value: The value to check.
        param_name: The parameter name for error messages.

    Returns:
        The value unchanged.

    Raises:
        InvalidArgumentError: If value is UNDEFINED or None.
    """
    require_defined(value, param_name)
    if value is None:
        raise InvalidArgumentError.null(param_name)
    return value
