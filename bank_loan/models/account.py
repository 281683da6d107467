"""Account model."""

import logging
from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal

logger = logging.getLogger(__name__)


def _to_decimal(amount: Decimal | int | float | str) -> Decimal:
    if isinstance(amount, Decimal):
        return amount
    return Decimal(str(amount))


@dataclass
class Account:
    """Bank account that loans credit on approval and debit on payment."""

    account_id: str
    customer_id: str
    balance: Decimal = Decimal("0")
    created_at: datetime = field(default_factory=datetime.now)

    def __post_init__(self) -> None:
        self.balance = _to_decimal(self.balance)

    def deposit(self, amount: Decimal | int | float | str) -> None:
        """Credit ``amount`` to the account. Always succeeds."""
        self.balance += _to_decimal(amount)

    def withdraw(self, amount: Decimal | int | float | str) -> bool:
        """Debit ``amount`` if the balance covers it.

        Returns
        -------
        bool
            False when funds are insufficient; the balance is then unchanged.
        """
        value = _to_decimal(amount)
        if value > self.balance:
            logger.debug(
                "Withdrawal of %s refused on account %s (balance %s)",
                value,
                self.account_id,
                self.balance,
                extra={"account_id": self.account_id},
            )
            return False
        self.balance -= value
        return True
