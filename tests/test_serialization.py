"""Tests for shared serialization utilities."""

from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal
from enum import Enum

from bank_loan.models import Loan, LoanStatus
from bank_loan.sinks.serialization import loan_to_dict, serialize_value, to_dict


class _SampleEnum(str, Enum):
    VALUE_A = "VALUE_A"


@dataclass
class _SampleData:
    name: str
    amount: Decimal
    created_at: datetime


class TestToDict:
    """Tests for to_dict function."""

    def test_dataclass(self) -> None:
        obj = _SampleData(name="test", amount=Decimal("100.50"), created_at=datetime(2024, 1, 1))
        result = to_dict(obj)
        assert result["name"] == "test"
        assert result["amount"] == "100.50"
        assert result["created_at"] == "2024-01-01T00:00:00"

    def test_dict_passthrough(self) -> None:
        d = {"key": "value"}
        assert to_dict(d) == d

    def test_other_type(self) -> None:
        assert to_dict(42) == {"value": "42"}

    def test_loan_dispatches_to_snapshot(self, loan: Loan) -> None:
        assert to_dict(loan) == loan_to_dict(loan)


class TestSerializeValue:
    """Tests for serialize_value function."""

    def test_decimal(self) -> None:
        assert serialize_value(Decimal("99.99")) == "99.99"

    def test_enum(self) -> None:
        assert serialize_value(_SampleEnum.VALUE_A) == "VALUE_A"

    def test_date(self) -> None:
        assert serialize_value(date(2024, 6, 15)) == "2024-06-15"

    def test_nested(self) -> None:
        value = {"items": [Decimal("1.5"), LoanStatus.ACTIVE]}
        assert serialize_value(value) == {"items": ["1.5", "ACTIVE"]}


class TestLoanToDict:
    """Tests for loan snapshots."""

    def test_requested_loan(self, loan: Loan) -> None:
        data = loan_to_dict(loan)

        assert data["loan_id"] == "loan-test-001"
        assert data["customer_id"] == "cust-test-001"
        assert data["destination_account_id"] == "acct-test-001"
        assert data["status"] == "REQUESTED"
        assert data["contract_date"] == "2024-01-15"
        assert data["term_months"] == 3
        assert Decimal(data["installment_amount"]) == Decimal("353.736")
        assert Decimal(data["total_interest"]) == Decimal("61.208")
        assert data["installments"] == []

    def test_active_loan_schedule(self, active_loan: Loan) -> None:
        data = loan_to_dict(active_loan)

        assert data["status"] == "ACTIVE"
        assert [i["number"] for i in data["installments"]] == [1, 2, 3]
        assert data["installments"][0]["due_date"] == "2024-02-15"
        assert data["installments"][0]["paid"] is False
