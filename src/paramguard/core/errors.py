"""Error class raised by every validator in the package.

InvalidArgumentError is a TypeError so that generated call sites surface
contract violations as Python's standard "bad type" signal, while still
carrying package identification the way pydantic custom errors do.
"""

from __future__ import annotations

from typing import Any

from pydantic_core import PydanticCustomError

# Package identifier for error context
PACKAGE_NAME = "paramguard"

ARGUMENT_UNDEFINED = "argument_undefined"
ARGUMENT_NULL = "argument_null"
ARGUMENT_TYPE = "argument_type"


class InvalidArgumentError(TypeError):
    """Raised when an argument violates its nullability or type contract.

    ``str(error)`` is exactly the rendered message, e.g.
    ``"name must not be null"``.

    Args:
        param_name: Name of the offending parameter.
        message: Fully rendered error message.
        error_type: Category of the failure (undefined, null or type).
        context: Additional context merged into the error context.
    """

    def __init__(
        self,
        param_name: str,
        message: str,
        error_type: str = ARGUMENT_TYPE,
        context: dict[str, Any] | None = None,
    ) -> None:
        self.param_name = param_name
        self.message = message
        self.error_type = error_type
        self.context = {"package": PACKAGE_NAME, "param": param_name, **(context or {})}
        super().__init__(message)

    @classmethod
    def undefined(cls, param_name: str) -> InvalidArgumentError:
        """Build the error for an argument that was not supplied at all."""
        return cls(param_name, f"{param_name} must not be undefined", ARGUMENT_UNDEFINED)

    @classmethod
    def null(cls, param_name: str) -> InvalidArgumentError:
        """Build the error for an explicit None given to a non-nullable parameter."""
        return cls(param_name, f"{param_name} must not be null", ARGUMENT_NULL)

    @classmethod
    def wrong_type(
        cls, param_name: str, expected: str, nullable: bool = False
    ) -> InvalidArgumentError:
        """Build the error for a value outside the expected type family.

        Args:
            param_name: Name of the offending parameter.
            expected: Expected type phrase including its article ("an Array").
            nullable: If True, the message admits null as an alternative.
        """
        suffix = " or null" if nullable else ""
        return cls(
            param_name,
            f"{param_name} must be {expected}{suffix}",
            ARGUMENT_TYPE,
            {"expected": expected, "nullable": nullable},
        )

    def to_pydantic_error(self) -> PydanticCustomError:
        """Convert to a PydanticCustomError with the same type, message and context."""
        return PydanticCustomError(self.error_type, self.message, self.context)

    def __repr__(self) -> str:
        return f"InvalidArgumentError({self.message!r}, context={self.context})"
