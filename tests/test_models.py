"""Tests for collaborator models and enums."""

from datetime import datetime
from decimal import Decimal

from bank_loan.models import Account, Customer, LoanStatus, PaymentOutcome, TransitionOutcome


class TestCustomer:
    """Tests for Customer model."""

    def test_customer_creation(self) -> None:
        """Test creating a customer with all fields."""
        now = datetime.now()

        customer = Customer(
            customer_id="cust-001",
            cpf="123.456.789-00",
            name="João Silva",
            email="joao@test.com",
            created_at=now,
        )

        assert customer.customer_id == "cust-001"
        assert customer.cpf == "123.456.789-00"
        assert customer.name == "João Silva"
        assert customer.email == "joao@test.com"
        assert customer.created_at == now

    def test_created_at_defaults_to_now(self) -> None:
        customer = Customer(customer_id="c", cpf="x", name="n", email="e")

        assert isinstance(customer.created_at, datetime)


class TestAccount:
    """Tests for Account model."""

    def test_account_defaults(self) -> None:
        account = Account(account_id="acct-001", customer_id="cust-001")

        assert account.balance == Decimal("0")
        assert isinstance(account.created_at, datetime)

    def test_balance_coerced_to_decimal(self) -> None:
        account = Account(account_id="acct-001", customer_id="cust-001", balance=10.5)

        assert account.balance == Decimal("10.5")

    def test_deposit(self) -> None:
        account = Account(account_id="acct-001", customer_id="cust-001")

        account.deposit(Decimal("250.75"))
        account.deposit(100)

        assert account.balance == Decimal("350.75")

    def test_withdraw_success(self) -> None:
        account = Account(account_id="acct-001", customer_id="cust-001", balance=Decimal("100"))

        assert account.withdraw(Decimal("40")) is True
        assert account.balance == Decimal("60")

    def test_withdraw_entire_balance(self) -> None:
        account = Account(account_id="acct-001", customer_id="cust-001", balance=Decimal("100"))

        assert account.withdraw(Decimal("100")) is True
        assert account.balance == Decimal("0")

    def test_withdraw_insufficient_funds(self) -> None:
        account = Account(account_id="acct-001", customer_id="cust-001", balance=Decimal("100"))

        assert account.withdraw(Decimal("100.01")) is False
        assert account.balance == Decimal("100")


class TestEnums:
    """Tests for enum values."""

    def test_loan_status_values(self) -> None:
        assert [s.value for s in LoanStatus] == [
            "REQUESTED",
            "APPROVED",
            "DENIED",
            "SETTLED",
            "ACTIVE",
        ]

    def test_str_enum_comparison(self) -> None:
        assert LoanStatus.ACTIVE == "ACTIVE"
        assert TransitionOutcome.IGNORED == "IGNORED"
        assert PaymentOutcome.INSUFFICIENT_FUNDS == "INSUFFICIENT_FUNDS"
