"""Declarative parameter contracts and a collecting validator pipeline.

A ParameterContract names one parameter together with its type family and
nullability. Contracts can guard a single value directly, or be assembled into
a pipeline that checks a whole mapping of arguments and reports every
violation in a ValidationResult instead of stopping at the first one.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from abstract_validation_base import (
    BaseValidator,
    CompositeValidator,
    ValidationResult,
    ValidatorPipelineBuilder,
)
from pydantic import BaseModel, ConfigDict, field_validator

from paramguard.core.errors import InvalidArgumentError
from paramguard.core.families import TypeFamily, get_family
from paramguard.core.sentinels import UNDEFINED
from paramguard.validation.validators import Validator, get_validator

Arguments = Mapping[str, Any]


class ParameterContract(BaseModel):
    """Nullability and type contract of one public parameter.

    Example:
        >>> contract = ParameterContract(name="memo", family="string", nullable=True)
        >>> contract.check(None) is None
        True
        >>> contract.check(42)
        Traceback (most recent call last):
        ...
        paramguard.core.errors.InvalidArgumentError: memo must be a string or null
    """

    model_config = ConfigDict(frozen=True)

    name: str
    family: str
    nullable: bool = False

    @field_validator("family")
    @classmethod
    def validate_family(cls, value: str) -> str:
        get_family(value)
        return value

    @property
    def type_family(self) -> TypeFamily:
        """The TypeFamily this contract checks against."""
        return get_family(self.family)

    @property
    def validator(self) -> Validator:
        """The named validator function enforcing this contract."""
        return get_validator(self.family, nullable=self.nullable)

    def check(self, value: Any) -> Any:
        """Validate a value using the contract's parameter name.

        Raises:
            InvalidArgumentError: If the value violates the contract.
        """
        return self.validator(value, self.name)

    def __call__(self, value: Any, param_name: str) -> Any:
        return self.validator(value, param_name)


class ParameterValidator(BaseValidator[Arguments]):
    """Validates one named argument inside a mapping of arguments.

    A key missing from the mapping counts as UNDEFINED.
    """

    def __init__(self, contract: ParameterContract) -> None:
        """Initialize the parameter validator.

        Args:
            contract: Contract of the parameter to check.
        """
        self._contract = contract

    @property
    def name(self) -> str:
        """Name of this validator."""
        return f"param:{self._contract.name}"

    @property
    def contract(self) -> ParameterContract:
        return self._contract

    def validate(self, arguments: Arguments) -> ValidationResult:
        """Validate the contract's argument.

        Args:
            arguments: Mapping of parameter names to supplied values.

        Returns:
            ValidationResult with at most one error for this parameter.
        """
        result = ValidationResult(is_valid=True)
        value = arguments.get(self._contract.name, UNDEFINED)
        try:
            self._contract.check(value)
        except InvalidArgumentError as e:
            result.add_error(
                field=self._contract.name,
                message=str(e),
                value=None if value is UNDEFINED else value,
            )
        return result


def create_parameter_validators(
    contracts: Iterable[ParameterContract],
    name: str = "parameter_validation",
) -> CompositeValidator[Arguments]:
    """Create a validation pipeline over a set of parameter contracts.

    Args:
        contracts: Contracts in parameter declaration order.
        name: Name of the resulting pipeline.

    Returns:
        CompositeValidator running one ParameterValidator per contract.

    Raises:
        ValueError: If two contracts name the same parameter.
    """
    builder: ValidatorPipelineBuilder[Arguments] = ValidatorPipelineBuilder(name)

    seen: set[str] = set()
    for contract in contracts:
        if contract.name in seen:
            raise ValueError(f"Duplicate parameter contract: {contract.name}")
        seen.add(contract.name)
        builder.add(ParameterValidator(contract))

    return builder.build()
