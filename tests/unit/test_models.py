"""Unit tests for the result envelope and request payload models."""

from __future__ import annotations

from datetime import date

import pytest
from pydantic import ValidationError

from hrsync.models.envelope import ResultEnvelope
from hrsync.models.payloads import ClockAction, ClockRequest, EmployeeCreate, GoalCreate


class TestResultEnvelope:
    def test_success(self) -> None:
        envelope = ResultEnvelope.success({"id": 1}, 200)

        assert envelope.ok
        assert envelope.data == {"id": 1}
        assert envelope.error is None
        assert envelope.status == 200

    def test_failure(self) -> None:
        envelope = ResultEnvelope.failure("not found", 404)

        assert not envelope.ok
        assert envelope.data is None
        assert envelope.error == "not found"

    def test_failure_with_empty_message_gets_generic_text(self) -> None:
        assert ResultEnvelope.failure("", 0).error == "Unknown error"
        assert ResultEnvelope.failure(None, 0).error == "Unknown error"

    def test_both_data_and_error_rejected(self) -> None:
        with pytest.raises(ValidationError):
            ResultEnvelope(data={"id": 1}, error="boom", status=200)

    def test_empty_error_string_rejected(self) -> None:
        with pytest.raises(ValidationError):
            ResultEnvelope(error="", status=500)

    def test_negative_status_rejected(self) -> None:
        with pytest.raises(ValidationError):
            ResultEnvelope(status=-1)

    def test_is_frozen(self) -> None:
        envelope = ResultEnvelope.success({"id": 1})
        with pytest.raises(ValidationError):
            envelope.status = 500  # type: ignore[misc]

    def test_parametrized_envelope_validates_data(self) -> None:
        envelope = ResultEnvelope[int](data="7", status=200)
        assert envelope.data == 7


class TestPayloads:
    def test_clock_request_dumps_enum_value(self) -> None:
        payload = ClockRequest(action=ClockAction("in"))
        assert payload.model_dump(mode="json", exclude_none=True) == {"action": "in"}

    def test_clock_action_rejects_unknown(self) -> None:
        with pytest.raises(ValueError):
            ClockAction("sideways")

    def test_employee_create_requires_names(self) -> None:
        with pytest.raises(ValidationError):
            EmployeeCreate(employee_id="E1", first_name="", last_name="X", email="x@y.z")

    def test_employee_create_serializes_dates(self) -> None:
        employee = EmployeeCreate(
            employee_id="E1",
            first_name="Ada",
            last_name="Lovelace",
            email="ada@example.com",
            hire_date=date(2024, 3, 1),
        )
        dumped = employee.model_dump(mode="json", exclude_none=True)
        assert dumped["hire_date"] == "2024-03-01"
        assert "manager_id" not in dumped

    def test_goal_weight_bounds(self) -> None:
        with pytest.raises(ValidationError):
            GoalCreate(title="Ship it", weight=120)
