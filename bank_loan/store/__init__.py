"""In-memory store for maintaining loan relationships."""

from bank_loan.store.loan_book import LoanBook

__all__ = ["LoanBook"]
