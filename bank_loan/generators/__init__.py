"""Sample data generators."""

from bank_loan.generators.account import AccountGenerator
from bank_loan.generators.customer import CustomerGenerator
from bank_loan.generators.loan import LoanRequestGenerator

__all__ = [
    "AccountGenerator",
    "CustomerGenerator",
    "LoanRequestGenerator",
]
