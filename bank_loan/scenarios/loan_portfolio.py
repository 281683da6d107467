"""Loan portfolio scenario: request, approve or deny, then repay month by month."""

from __future__ import annotations

import logging
import random
from datetime import date
from decimal import Decimal
from typing import Any, Callable

from bank_loan.config import LoanDefaults, ScenarioConfig
from bank_loan.generators import AccountGenerator, CustomerGenerator, LoanRequestGenerator
from bank_loan.models import LoanStatus, PaymentOutcome
from bank_loan.store import LoanBook

logger = logging.getLogger(__name__)


def _derive_seed(seed: int | None, offset: int) -> int | None:
    return None if seed is None else seed + offset


class LoanPortfolioScenario:
    """Simulate a portfolio of loans through approval and repayment.

    This scenario creates:
    - Customers, each with one account and one loan request
    - Approvals or denials according to ``approval_rate``
    - A monthly repayment loop where each active borrower receives an
      income deposit and, with probability ``payment_success_rate``,
      pays the next open installment from that account
    """

    def __init__(
        self,
        num_customers: int = 100,
        approval_rate: float = 0.75,
        payment_success_rate: float = 0.90,
        months_to_simulate: int | None = None,
        seed: int | None = None,
        *,
        config: ScenarioConfig | None = None,
        loan_defaults: LoanDefaults | None = None,
        locale: str = "pt_BR",
        clock: Callable[[], date] = date.today,
    ) -> None:
        """Initialize loan portfolio scenario.

        Parameters
        ----------
        num_customers : int
            Number of borrowers to generate.
        approval_rate : float
            Probability that a request is approved (0.0 to 1.0).
        payment_success_rate : float
            Probability that a borrower attempts the monthly payment.
        months_to_simulate : int | None
            Length of the repayment loop; None runs until the longest term ends.
        seed : int | None
            Random seed for reproducibility.
        config : ScenarioConfig | None
            Optional scenario configuration. If provided, overrides the
            keyword values above and names the run.
        loan_defaults : LoanDefaults | None
            Terms used by the loan request generator.
        locale : str
            Faker locale for generated customers and accounts.
        clock : Callable[[], date]
            Date source for contract dates.
        """
        if config is not None:
            num_customers = config.num_customers
            approval_rate = config.approval_rate
            payment_success_rate = config.payment_success_rate
            months_to_simulate = config.months_to_simulate

        self.config = config
        self.name = config.name if config is not None else "loan_portfolio"
        self.labels = dict(config.labels) if config is not None else {}
        self.num_customers = num_customers
        self.approval_rate = approval_rate
        self.payment_success_rate = payment_success_rate
        self.months_to_simulate = months_to_simulate
        self.seed = seed
        self.locale = locale

        # Each generator gets its own seed so Faker ids never repeat across entities
        self._random = random.Random(_derive_seed(seed, 0))
        self.store = LoanBook()
        self._customer_gen = CustomerGenerator(seed=_derive_seed(seed, 1), locale=locale)
        self._account_gen = AccountGenerator(seed=_derive_seed(seed, 2), locale=locale)
        self._loan_gen = LoanRequestGenerator(
            seed=_derive_seed(seed, 3), locale=locale, defaults=loan_defaults, clock=clock
        )
        self._payment_counts: dict[PaymentOutcome, int] = {outcome: 0 for outcome in PaymentOutcome}

    def generate(self) -> LoanBook:
        """Generate and simulate the portfolio.

        Returns
        -------
        LoanBook
            Store containing customers, accounts and loans in their final state.
        """
        logger.info(
            "Starting scenario %s: %d customers, %.0f%% approval rate",
            self.name,
            self.num_customers,
            self.approval_rate * 100,
        )

        for customer in self._customer_gen.generate_batch(self.num_customers):
            self.store.add_customer(customer)
            account = self._account_gen.generate(customer.customer_id)
            self.store.add_account(account)
            self.store.add_loan(self._loan_gen.generate(customer, account))

        for loan in self.store.loans.values():
            if self._random.random() < self.approval_rate:
                loan.approve()
            else:
                loan.deny()

        logger.info(
            "Requested %d loans: %d approved, %d denied",
            len(self.store.loans),
            len(self.store.loans_by_status(LoanStatus.ACTIVE)),
            len(self.store.loans_by_status(LoanStatus.DENIED)),
        )

        months = self.months_to_simulate
        if months is None:
            months = max((loan.term_months for loan in self.store.loans.values()), default=0)

        for month in range(1, months + 1):
            self._simulate_month(month)

        logger.info(
            "Simulated %d months: %d loans settled, %d still active",
            months,
            len(self.store.loans_by_status(LoanStatus.SETTLED)),
            len(self.store.loans_by_status(LoanStatus.ACTIVE)),
        )
        return self.store

    def _simulate_month(self, month: int) -> None:
        """Run one repayment cycle over every active loan."""
        for loan in self.store.loans_by_status(LoanStatus.ACTIVE):
            account = loan.destination_account

            # Income covers between half and one and a half installments
            income = loan.installment_amount * Decimal(str(round(self._random.uniform(0.5, 1.5), 2)))
            account.deposit(income.quantize(Decimal("0.01")))

            if self._random.random() >= self.payment_success_rate:
                continue

            installment = loan.next_due_installment()
            if installment is None:
                continue

            outcome = loan.attempt_payment(installment.number, account)
            self._payment_counts[outcome] += 1
            if outcome is not PaymentOutcome.PAID:
                logger.debug(
                    "Month %d: installment %d of loan %s not paid (%s)",
                    month,
                    installment.number,
                    loan.loan_id,
                    outcome.value,
                )

    def get_portfolio_summary(self) -> dict[str, Any]:
        """Get summary statistics for the loan portfolio.

        Returns
        -------
        dict[str, Any]
            Portfolio summary statistics.
        """
        loans = list(self.store.loans.values())
        if not loans:
            return {}

        granted = [loan for loan in loans if loan.status != LoanStatus.DENIED]
        status_counts: dict[str, int] = {}
        for loan in loans:
            status_counts[loan.status.value] = status_counts.get(loan.status.value, 0) + 1

        return {
            "scenario": self.name,
            "labels": self.labels,
            "total_loans": len(loans),
            "loan_status_distribution": status_counts,
            "total_principal_granted": float(sum((l.principal for l in granted), Decimal("0"))),
            "total_interest_expected": float(
                sum((l.total_interest() for l in granted), Decimal("0"))
            ),
            "outstanding_balance": float(self.store.total_outstanding()),
            "payment_outcomes": {o.value: count for o, count in self._payment_counts.items()},
        }

    def export(self, sinks: list[Any]) -> None:
        """Export generated data to sinks.

        Parameters
        ----------
        sinks : list[Any]
            List of sink instances.
        """
        for sink in sinks:
            sink.write_batch("customers", list(self.store.customers.values()))
            sink.write_batch("accounts", list(self.store.accounts.values()))
            sink.write_batch("loans", list(self.store.loans.values()))

        logger.info("Exported loan portfolio to %d sinks", len(sinks))
