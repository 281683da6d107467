"""Shared serialization utilities for sinks."""

from dataclasses import fields, is_dataclass
from datetime import date, datetime
from decimal import Decimal
from enum import Enum
from typing import Any

from bank_loan.models import Loan


def to_dict(obj: Any) -> dict:
    """Convert object to dictionary."""
    if isinstance(obj, Loan):
        return loan_to_dict(obj)
    elif is_dataclass(obj):
        return {f.name: serialize_value(getattr(obj, f.name)) for f in fields(obj)}
    elif isinstance(obj, dict):
        return obj
    else:
        return {"value": str(obj)}


def loan_to_dict(loan: Loan) -> dict:
    """Flatten a loan into a JSON-ready snapshot.

    Collaborators are reduced to their ids and the payoff figures are
    included alongside the schedule.
    """
    return {
        "loan_id": loan.loan_id,
        "customer_id": loan.customer.customer_id,
        "destination_account_id": loan.destination_account.account_id,
        "principal": serialize_value(loan.principal),
        "monthly_rate": serialize_value(loan.monthly_rate),
        "term_months": loan.term_months,
        "contract_date": serialize_value(loan.contract_date),
        "installment_amount": serialize_value(loan.installment_amount),
        "status": serialize_value(loan.status),
        "total_payable": serialize_value(loan.total_payable()),
        "total_interest": serialize_value(loan.total_interest()),
        "installments": [to_dict(i) for i in loan.installments],
    }


def serialize_value(value: Any) -> Any:
    """Serialize a value for JSON output."""
    if isinstance(value, Decimal):
        return str(value)
    elif isinstance(value, Enum):
        return value.value
    elif isinstance(value, datetime):
        return value.isoformat()
    elif isinstance(value, date):
        return value.isoformat()
    elif isinstance(value, dict):
        return {k: serialize_value(v) for k, v in value.items()}
    elif isinstance(value, list):
        return [serialize_value(v) for v in value]
    return value
