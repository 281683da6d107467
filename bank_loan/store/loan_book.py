"""Loan book with referential integrity between customers, accounts and loans."""

from dataclasses import dataclass, field
from decimal import Decimal

from bank_loan.exceptions import ReferentialIntegrityError
from bank_loan.models import Account, Customer, Loan, LoanStatus


@dataclass
class LoanBook:
    """In-memory store for customers, accounts and loans with relationship tracking."""

    customers: dict[str, Customer] = field(default_factory=dict)
    accounts: dict[str, Account] = field(default_factory=dict)
    loans: dict[str, Loan] = field(default_factory=dict)

    # Relationship indexes
    _customer_accounts: dict[str, list[str]] = field(default_factory=dict)
    _customer_loans: dict[str, list[str]] = field(default_factory=dict)

    def add_customer(self, customer: Customer) -> None:
        """Add a customer to the store."""
        self.customers[customer.customer_id] = customer
        self._customer_accounts[customer.customer_id] = []
        self._customer_loans[customer.customer_id] = []

    def add_account(self, account: Account) -> None:
        """Add an account to the store."""
        if account.customer_id not in self.customers:
            raise ReferentialIntegrityError(f"Customer {account.customer_id} not found")

        self.accounts[account.account_id] = account
        self._customer_accounts[account.customer_id].append(account.account_id)

    def add_loan(self, loan: Loan) -> None:
        """Add a loan to the store.

        Both the borrower and the destination account must already be known.
        """
        customer_id = loan.customer.customer_id
        if customer_id not in self.customers:
            raise ReferentialIntegrityError(f"Customer {customer_id} not found")

        account_id = loan.destination_account.account_id
        if account_id not in self.accounts:
            raise ReferentialIntegrityError(f"Account {account_id} not found")

        self.loans[loan.loan_id] = loan
        self._customer_loans[customer_id].append(loan.loan_id)

    # Query methods
    def get_customer_accounts(self, customer_id: str) -> list[Account]:
        """Get all accounts for a customer."""
        account_ids = self._customer_accounts.get(customer_id, [])
        return [self.accounts[aid] for aid in account_ids]

    def get_customer_loans(self, customer_id: str) -> list[Loan]:
        """Get all loans for a customer."""
        loan_ids = self._customer_loans.get(customer_id, [])
        return [self.loans[lid] for lid in loan_ids]

    def loans_by_status(self, status: LoanStatus) -> list[Loan]:
        """Get all loans currently in ``status``."""
        return [loan for loan in self.loans.values() if loan.status == status]

    def total_outstanding(self) -> Decimal:
        """Sum of unpaid installments over every loan."""
        return sum((loan.outstanding_balance() for loan in self.loans.values()), Decimal("0"))

    def summary(self) -> dict[str, int]:
        """Return entity counts plus loan counts per status."""
        counts = {
            "customers": len(self.customers),
            "accounts": len(self.accounts),
            "loans": len(self.loans),
        }
        for status in LoanStatus:
            counts[f"loans_{status.value.lower()}"] = len(self.loans_by_status(status))
        return counts
