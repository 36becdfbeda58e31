from __future__ import annotations

from datetime import datetime

import pandas as pd
import pytest
from pydantic import BaseModel, ValidationError

from paramguard.pydantic_ext import (
    NonNullArray,
    NonNullBigInt,
    NonNullDate,
    NonNullNumber,
    NullableMap,
    NullableString,
    guarded,
)


class Transfer(BaseModel):
    amount: NonNullNumber
    memo: NullableString
    serial: NonNullBigInt
    recipients: NonNullArray
    valid_start: NonNullDate
    metadata: NullableMap = None


def _transfer(**overrides: object) -> Transfer:
    fields: dict[str, object] = {
        "amount": 10,
        "memo": None,
        "serial": 2**70,
        "recipients": ["0.0.1001"],
        "valid_start": datetime(2025, 6, 1, 12, 0),
    }
    fields.update(overrides)
    return Transfer(**fields)


class TestGuardedFields:
    def test_valid_model(self) -> None:
        recipients = ["0.0.1001", "0.0.1002"]
        transfer = _transfer(recipients=recipients)
        assert transfer.amount == 10
        assert transfer.memo is None
        assert transfer.recipients is recipients

    def test_no_coercion(self) -> None:
        with pytest.raises(ValidationError) as exc:
            _transfer(amount="10")
        errors = exc.value.errors()
        assert len(errors) == 1
        assert errors[0]["type"] == "argument_type"
        assert errors[0]["msg"] == "amount must be a number"
        assert errors[0]["loc"] == ("amount",)

    def test_null_for_non_nullable_field(self) -> None:
        with pytest.raises(ValidationError) as exc:
            _transfer(recipients=None)
        error = exc.value.errors()[0]
        assert error["type"] == "argument_null"
        assert error["msg"] == "recipients must not be null"

    def test_nan_and_nat_rejected(self) -> None:
        with pytest.raises(ValidationError) as exc:
            _transfer(amount=float("nan"), valid_start=pd.NaT)
        messages = sorted(e["msg"] for e in exc.value.errors())
        assert messages == ["amount must be a number", "valid_start must be a valid Date"]

    def test_nullable_message(self) -> None:
        with pytest.raises(ValidationError) as exc:
            _transfer(memo=b"memo")
        assert exc.value.errors()[0]["msg"] == "memo must be a string or null"

    def test_missing_field_reported_by_pydantic(self) -> None:
        with pytest.raises(ValidationError) as exc:
            Transfer(amount=1, serial=1, recipients=[], valid_start=datetime(2025, 1, 1))
        assert exc.value.errors()[0]["type"] == "missing"
        assert exc.value.errors()[0]["loc"] == ("memo",)

    def test_error_context(self) -> None:
        with pytest.raises(ValidationError) as exc:
            _transfer(serial=True)
        ctx = exc.value.errors()[0]["ctx"]
        assert ctx["package"] == "paramguard"
        assert ctx["param"] == "serial"
        assert ctx["expected"] == "a bigint"


def test_guarded_unknown_family() -> None:
    with pytest.raises(ValueError, match="Unknown type family"):
        guarded("tuple")
