"""Scenarios that drive loans through their lifecycle."""

from bank_loan.scenarios.loan_portfolio import LoanPortfolioScenario

__all__ = ["LoanPortfolioScenario"]
