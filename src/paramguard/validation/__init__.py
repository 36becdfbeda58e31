"""Argument validators.

This package provides the base nullability checks, the nullable and
non-nullable validator for each type family, and parameter contracts that
combine them into validation pipelines.
"""

from paramguard.validation.base import require_defined, require_non_null
from paramguard.validation.parameters import (
    ParameterContract,
    ParameterValidator,
    create_parameter_validators,
)
from paramguard.validation.validators import (
    VALIDATORS,
    Validator,
    get_validator,
    require_family,
    require_non_null_array,
    require_non_null_bigint,
    require_non_null_boolean,
    require_non_null_date,
    require_non_null_map,
    require_non_null_number,
    require_non_null_set,
    require_non_null_string,
    require_non_null_uint8array,
    require_nullable_array,
    require_nullable_bigint,
    require_nullable_boolean,
    require_nullable_date,
    require_nullable_map,
    require_nullable_number,
    require_nullable_set,
    require_nullable_string,
    require_nullable_uint8array,
)

__all__ = [
    # Base checks
    "require_defined",
    "require_non_null",
    # Family validators
    "require_family",
    "require_non_null_string",
    "require_nullable_string",
    "require_non_null_number",
    "require_nullable_number",
    "require_non_null_boolean",
    "require_nullable_boolean",
    "require_non_null_bigint",
    "require_nullable_bigint",
    "require_non_null_uint8array",
    "require_nullable_uint8array",
    "require_non_null_array",
    "require_nullable_array",
    "require_non_null_set",
    "require_nullable_set",
    "require_non_null_map",
    "require_nullable_map",
    "require_non_null_date",
    "require_nullable_date",
    # Lookup
    "VALIDATORS",
    "Validator",
    "get_validator",
    # Contracts
    "ParameterContract",
    "ParameterValidator",
    "create_parameter_validators",
]
