"""paramguard: runtime nullability and type contracts for generated APIs.

Every public parameter of a generated API is either non-nullable (it must be
supplied and be of the right type) or nullable (it may also be None). No
parameter may be left out: omission is represented by UNDEFINED and always
rejected.

Quick Start:
    >>> from paramguard import UNDEFINED, require_non_null_string, require_nullable_string
    >>> require_non_null_string("hi", "name")
    'hi'
    >>> require_nullable_string(None, "name") is None
    True
    >>> require_nullable_string(UNDEFINED, "name")
    Traceback (most recent call last):
    ...
    paramguard.core.errors.InvalidArgumentError: name must not be undefined

    # Guard a generated function
    >>> from paramguard import validate_params, require_non_null_number
    >>> @validate_params(amount=require_non_null_number)
    ... def transfer(amount=UNDEFINED):
    ...     return amount
    >>> transfer(10)
    10

    # Collect every violation instead of raising
    >>> from paramguard import ParameterContract, create_parameter_validators
    >>> pipeline = create_parameter_validators(
    ...     [ParameterContract(name="amount", family="number")]
    ... )
    >>> pipeline.validate({"amount": "10"}).is_valid
    False
"""

from __future__ import annotations

from paramguard.core import (
    FAMILIES,
    PACKAGE_NAME,
    UNDEFINED,
    InvalidArgumentError,
    TypeFamily,
    get_family,
    is_undefined,
)
from paramguard.decorator import validate_params
from paramguard.protocols import ArgumentValidatorProtocol
from paramguard.validation import (
    ParameterContract,
    ParameterValidator,
    create_parameter_validators,
    get_validator,
    require_defined,
    require_non_null,
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

__version__ = "0.1.0"
__package_name__ = "paramguard"

__all__ = [
    # Version
    "__version__",
    # Sentinels
    "UNDEFINED",
    "is_undefined",
    # Errors
    "InvalidArgumentError",
    "PACKAGE_NAME",
    # Base checks
    "require_defined",
    "require_non_null",
    # Family validators
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
    # Type families
    "TypeFamily",
    "FAMILIES",
    "get_family",
    "get_validator",
    # Contracts
    "ParameterContract",
    "ParameterValidator",
    "create_parameter_validators",
    # Call boundary
    "validate_params",
    # Protocols
    "ArgumentValidatorProtocol",
]
