"""paramguard core - sentinels, type families and errors.

Usage:
    from paramguard.core import (
        # Sentinels
        UNDEFINED,
        is_undefined,
        # Type families
        TypeFamily,
        FAMILIES,
        get_family,
        # Errors
        InvalidArgumentError,
        PACKAGE_NAME,
    )
"""

from __future__ import annotations

from paramguard.core.errors import (
    ARGUMENT_NULL,
    ARGUMENT_TYPE,
    ARGUMENT_UNDEFINED,
    PACKAGE_NAME,
    InvalidArgumentError,
)
from paramguard.core.families import (
    ARRAY,
    BIGINT,
    BOOLEAN,
    DATE,
    FAMILIES,
    MAP,
    NUMBER,
    SET,
    STRING,
    UINT8ARRAY,
    TypeFamily,
    get_family,
)
from paramguard.core.sentinels import UNDEFINED, is_undefined

__all__ = [
    # Sentinels
    "UNDEFINED",
    "is_undefined",
    # Type families
    "TypeFamily",
    "FAMILIES",
    "get_family",
    "STRING",
    "NUMBER",
    "BOOLEAN",
    "BIGINT",
    "UINT8ARRAY",
    "ARRAY",
    "SET",
    "MAP",
    "DATE",
    # Errors
    "InvalidArgumentError",
    "PACKAGE_NAME",
    "ARGUMENT_UNDEFINED",
    "ARGUMENT_NULL",
    "ARGUMENT_TYPE",
]
