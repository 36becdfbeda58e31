from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class ArgumentValidatorProtocol(Protocol):
    """Protocol for argument validators.

    Implementations take the value and the parameter name used in error
    messages, return the value when it satisfies the contract, and raise
    InvalidArgumentError otherwise. Every ``require_*`` function and every
    ParameterContract satisfies it.
    """

    def __call__(self, value: Any, param_name: str) -> Any:
        """Validate a value.

        Args:
            value: The value to check.
            param_name: The parameter name for error messages.

        Returns:
            The validated value.
        """
        ...
