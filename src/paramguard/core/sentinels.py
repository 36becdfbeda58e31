"""The "not supplied" marker used at generated call boundaries.

Python has a single native "no value" (``None``), which this package treats as
the explicit-null value. Omission is modelled with a separate singleton so that
generated signatures can tell the two apart::

    def create_account(key=UNDEFINED, memo=UNDEFINED): ...

``UNDEFINED`` is pydantic's own ``PydanticUndefined`` marker rather than a new
object, so it already means "no value was provided" throughout the stack.
"""

from __future__ import annotations

from typing import Any

from pydantic_core import PydanticUndefined

UNDEFINED: Any = PydanticUndefined


def is_undefined(value: Any) -> bool:
    """Check whether a value is the "not supplied" marker."""
    return value is UNDEFINED
