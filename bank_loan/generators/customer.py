"""Customer generator."""

from __future__ import annotations

from datetime import datetime, timedelta
from typing import Iterator

from bank_loan.generators.base import BaseGenerator
from bank_loan.models import Customer


class CustomerGenerator(BaseGenerator):
    """Generate synthetic customers."""

    def generate(self) -> Customer:
        """Generate a single customer.

        Returns
        -------
        Customer
            Generated customer.
        """
        days_ago = self.random.randint(0, 5 * 365)
        return Customer(
            customer_id=self.fake.uuid4(),
            cpf=self._national_id(),
            name=self.fake.name(),
            email=self.fake.email(),
            created_at=datetime.now() - timedelta(days=days_ago),
        )

    def generate_batch(self, count: int) -> Iterator[Customer]:
        """Generate multiple customers.

        Parameters
        ----------
        count : int
            Number of customers to generate.

        Yields
        ------
        Customer
            Generated customers.
        """
        for _ in range(count):
            yield self.generate()

    def _national_id(self) -> str:
        """CPF for pt_BR, the locale's SSN otherwise."""
        try:
            return self.fake.cpf()
        except AttributeError:
            return self.fake.ssn()
