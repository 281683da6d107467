"""Domain models for loans and their collaborators."""

from bank_loan.models.account import Account
from bank_loan.models.customer import Customer
from bank_loan.models.enums import LoanStatus, PaymentOutcome, TransitionOutcome
from bank_loan.models.loan import Installment, Loan, due_date_for, installment_amount

__all__ = [
    "Account",
    "Customer",
    "Installment",
    "Loan",
    "LoanStatus",
    "PaymentOutcome",
    "TransitionOutcome",
    "due_date_for",
    "installment_amount",
]
