"""Loan request generator."""

from __future__ import annotations

from datetime import date
from decimal import Decimal
from typing import Callable

from bank_loan.config import LoanDefaults
from bank_loan.generators.base import BaseGenerator
from bank_loan.models import Account, Customer, Loan


class LoanRequestGenerator(BaseGenerator):
    """Generate REQUESTED loans with randomized terms.

    Principal is drawn from the configured range and rounded to hundreds;
    the rate varies up to one point around the default monthly rate. Terms
    are the default term plus the standard terms between half and double it.
    """

    TERMS = [3, 6, 12, 18, 24, 36, 48]

    def __init__(
        self,
        seed: int | None = None,
        locale: str = "pt_BR",
        defaults: LoanDefaults | None = None,
        clock: Callable[[], date] = date.today,
    ) -> None:
        super().__init__(seed, locale)
        self.defaults = defaults or LoanDefaults()
        self.clock = clock
        self.term_choices = self._term_choices(self.defaults.term_months)

    def generate(self, customer: Customer, account: Account) -> Loan:
        """Generate a loan request crediting ``account``.

        Parameters
        ----------
        customer : Customer
            Borrower.
        account : Account
            Destination account for the principal.

        Returns
        -------
        Loan
            Loan in REQUESTED status.
        """
        low = int(self.defaults.min_principal)
        high = int(self.defaults.max_principal)
        principal = Decimal(min(high, max(low, round(self.random.randint(low, high), -2))))

        spread = Decimal(str(round(self.random.uniform(-1.0, 1.0), 2)))
        rate = max(Decimal("0"), self.defaults.monthly_rate + spread)

        return Loan(
            customer=customer,
            destination_account=account,
            principal=principal,
            monthly_rate=rate,
            term_months=self.random.choice(self.term_choices),
            contract_date=self.clock(),
            loan_id=self.fake.uuid4(),
        )

    @classmethod
    def _term_choices(cls, default_term: int) -> list[int]:
        """Standard terms within half and double of ``default_term``, plus the default."""
        nearby = {t for t in cls.TERMS if default_term / 2 <= t <= default_term * 2}
        return sorted(nearby | {default_term})
