"""bank-loan: loan lifecycle and installment schedules for retail banking."""

from bank_loan.models import (
    Account,
    Customer,
    Installment,
    Loan,
    LoanStatus,
    PaymentOutcome,
    TransitionOutcome,
)

__version__ = "0.1.0"

__all__ = [
    "Account",
    "Customer",
    "Installment",
    "Loan",
    "LoanStatus",
    "PaymentOutcome",
    "TransitionOutcome",
    "__version__",
]
