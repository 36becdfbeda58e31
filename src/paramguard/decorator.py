"""Decorator guarding a function's parameters at call time.

Usage:
    >>> from paramguard import UNDEFINED, validate_params
    >>> from paramguard import require_non_null_string, require_nullable_number
    >>> @validate_params(name=require_non_null_string, balance=require_nullable_number)
    ... def create_account(name=UNDEFINED, balance=UNDEFINED):
    ...     return name, balance
    >>> create_account("alice", None)
    ('alice', None)
"""

from __future__ import annotations

import functools
import inspect
import logging
import os
from collections.abc import Callable
from typing import Any, TypeVar, cast

from paramguard.core.errors import InvalidArgumentError
from paramguard.core.sentinels import UNDEFINED
from paramguard.protocols import ArgumentValidatorProtocol

logger = logging.getLogger(__name__)

F = TypeVar("F", bound=Callable[..., Any])

_LOG_REJECTIONS_ENV = "PARAMGUARD_LOG_REJECTIONS"


def _log_rejections_enabled() -> bool:
    """Read the rejection logging flag (on unless set to 0/false/no)."""
    flag = os.getenv(_LOG_REJECTIONS_ENV, "1").lower()
    return flag not in {"0", "false", "no"}


def validate_params(**validators: ArgumentValidatorProtocol) -> Callable[[F], F]:
    """Guard the named parameters of a function with argument validators.

    Parameters that are omitted at the call site take their declared default,
    so generated functions should default every guarded parameter to
    UNDEFINED. Validators run in the function's parameter order and the first
    failure propagates unchanged.

    Args:
        **validators: Parameter name to validator (any ``require_*``
            function or a ParameterContract).

    Returns:
        Decorator producing the guarded function.

    Raises:
        ValueError: If a validator names a parameter the function lacks.
    """

    def decorator(func: F) -> F:
        signature = inspect.signature(func)
        unknown = sorted(set(validators) - set(signature.parameters))
        if unknown:
            available = ", ".join(signature.parameters)
            raise ValueError(
                f"Unknown parameters for {func.__qualname__}: {', '.join(unknown)}. "
                f"Available parameters: {available}"
            )

        # Fixed at decoration time, in declaration order
        guarded = [(name, validators[name]) for name in signature.parameters if name in validators]

        @functools.wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            bound = signature.bind(*args, **kwargs)
            bound.apply_defaults()
            for name, validator in guarded:
                value = bound.arguments.get(name, UNDEFINED)
                try:
                    bound.arguments[name] = validator(value, name)
                except InvalidArgumentError as e:
                    if _log_rejections_enabled():
                        logger.debug(
                            "Rejected argument %s for %s: %s", name, func.__qualname__, e
                        )
                    raise
            return func(*bound.args, **bound.kwargs)

        return cast(F, wrapper)

    return decorator
