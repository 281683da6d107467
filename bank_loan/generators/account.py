"""Account generator."""

from decimal import Decimal

from bank_loan.generators.base import BaseGenerator
from bank_loan.models import Account


class AccountGenerator(BaseGenerator):
    """Generate synthetic bank accounts with an opening balance."""

    def __init__(
        self,
        seed: int | None = None,
        locale: str = "pt_BR",
        max_opening_balance: int = 5000,
    ) -> None:
        super().__init__(seed, locale)
        self.max_opening_balance = max_opening_balance

    def generate(self, customer_id: str) -> Account:
        """Generate an account for a customer.

        Parameters
        ----------
        customer_id : str
            Customer ID to associate with the account.

        Returns
        -------
        Account
            Generated account.
        """
        balance = Decimal(str(round(self.random.uniform(0, self.max_opening_balance), 2)))
        return Account(
            account_id=self.fake.uuid4(),
            customer_id=customer_id,
            balance=balance.quantize(Decimal("0.01")),
        )
