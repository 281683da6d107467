"""Pytest configuration and fixtures."""

from datetime import date
from decimal import Decimal

import pytest

from bank_loan.models import Account, Customer, Loan


@pytest.fixture
def seed() -> int:
    """Fixed seed for reproducible tests."""
    return 42


@pytest.fixture
def contract_date() -> date:
    """Fixed contract date so schedules are deterministic."""
    return date(2024, 1, 15)


@pytest.fixture
def customer() -> Customer:
    """Sample borrower."""
    return Customer(
        customer_id="cust-test-001",
        cpf="123.456.789-00",
        name="Maria Souza",
        email="maria@test.com",
    )


@pytest.fixture
def destination_account(customer: Customer) -> Account:
    """Empty account receiving the principal."""
    return Account(account_id="acct-test-001", customer_id=customer.customer_id)


@pytest.fixture
def payer_account(customer: Customer) -> Account:
    """Account funded well beyond any test installment."""
    return Account(
        account_id="acct-test-002",
        customer_id=customer.customer_id,
        balance=Decimal("100000.00"),
    )


@pytest.fixture
def loan(customer: Customer, destination_account: Account, contract_date: date) -> Loan:
    """REQUESTED loan: 1000 at 2% a month over 3 months."""
    return Loan(
        customer=customer,
        destination_account=destination_account,
        principal=Decimal("1000"),
        monthly_rate=Decimal("2"),
        term_months=3,
        contract_date=contract_date,
        loan_id="loan-test-001",
    )


@pytest.fixture
def active_loan(loan: Loan) -> Loan:
    """The sample loan after approval."""
    loan.approve()
    return loan
