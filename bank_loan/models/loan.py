"""Loan and installment models."""

from __future__ import annotations

import logging
import uuid
from dataclasses import dataclass, field, replace
from datetime import date
from decimal import Decimal

from dateutil.relativedelta import relativedelta

from bank_loan.exceptions import InvalidLoanParametersError
from bank_loan.models.account import Account
from bank_loan.models.customer import Customer
from bank_loan.models.enums import LoanStatus, PaymentOutcome, TransitionOutcome

logger = logging.getLogger(__name__)


def installment_amount(principal: Decimal, monthly_rate: Decimal, term_months: int) -> Decimal:
    """Compute the fixed installment value.

    The whole principal is compounded over the term and split evenly across
    the installments (``P * (1 + R/100)**N / N``). This is not the Price
    annuity formula and is not meant to be.

    Parameters
    ----------
    principal : Decimal
        Amount borrowed.
    monthly_rate : Decimal
        Monthly rate in percent (``2.5`` means 2.5% a month).
    term_months : int
        Number of monthly installments.

    Returns
    -------
    Decimal
        Unrounded installment value.
    """
    monthly_factor = 1 + monthly_rate / 100
    return principal * monthly_factor**term_months / term_months


def due_date_for(contract_date: date, number: int) -> date:
    """Due date of installment ``number``: the contract date plus ``number`` months.

    Days past the end of a shorter month are clamped to its last day
    (Jan 31 + 1 month is Feb 28/29).
    """
    return contract_date + relativedelta(months=number)


@dataclass(frozen=True)
class Installment:
    """Loan installment (parcela)."""

    number: int  # 1, 2, 3, ...
    amount: Decimal
    due_date: date
    paid: bool = False


@dataclass
class Loan:
    """Loan contract with its installment schedule.

    Lifecycle::

        REQUESTED --approve()--> (APPROVED) --> ACTIVE --last payment--> SETTLED
        REQUESTED --deny()-----> DENIED

    ``approve`` and ``deny`` only act on a REQUESTED loan; on any other state
    they return ``TransitionOutcome.IGNORED`` and change nothing.
    """

    customer: Customer
    destination_account: Account
    principal: Decimal
    monthly_rate: Decimal  # Percent per month (2.5 = 2.5%)
    term_months: int
    contract_date: date = field(default_factory=date.today)
    loan_id: str = field(default_factory=lambda: uuid.uuid4().hex)
    installment_amount: Decimal = field(init=False)
    status: LoanStatus = field(init=False, default=LoanStatus.REQUESTED)
    _installments: list[Installment] = field(init=False, default_factory=list, repr=False)

    def __post_init__(self) -> None:
        self.principal = Decimal(str(self.principal))
        self.monthly_rate = Decimal(str(self.monthly_rate))

        if self.principal <= 0:
            raise InvalidLoanParametersError(f"Principal must be positive, got {self.principal}")
        if self.monthly_rate < 0:
            raise InvalidLoanParametersError(
                f"Monthly rate must not be negative, got {self.monthly_rate}"
            )
        if isinstance(self.term_months, bool) or not isinstance(self.term_months, int):
            raise InvalidLoanParametersError(
                f"Term must be a whole number of months, got {self.term_months!r}"
            )
        if self.term_months < 1:
            raise InvalidLoanParametersError(f"Term must be at least 1 month, got {self.term_months}")

        self.installment_amount = installment_amount(
            self.principal, self.monthly_rate, self.term_months
        )

    @property
    def _log_context(self) -> dict[str, str]:
        return {"loan_id": self.loan_id}

    @property
    def installments(self) -> tuple[Installment, ...]:
        """Installment schedule, empty until the loan is approved."""
        return tuple(self._installments)

    # Lifecycle

    def approve(self) -> TransitionOutcome:
        """Approve the loan, credit the principal and generate the schedule."""
        if self.status != LoanStatus.REQUESTED:
            logger.debug(
                "Ignoring approve() on loan %s in status %s",
                self.loan_id,
                self.status.value,
                extra=self._log_context,
            )
            return TransitionOutcome.IGNORED

        self.status = LoanStatus.APPROVED
        self.destination_account.deposit(self.principal)
        self._generate_installments()
        self.status = LoanStatus.ACTIVE

        logger.info(
            "Loan %s approved: %s credited to account %s, %d installments of %s",
            self.loan_id,
            self.principal,
            self.destination_account.account_id,
            self.term_months,
            round(self.installment_amount, 2),
            extra=self._log_context,
        )
        return TransitionOutcome.APPLIED

    def deny(self) -> TransitionOutcome:
        """Deny the loan. No account is touched."""
        if self.status != LoanStatus.REQUESTED:
            logger.debug(
                "Ignoring deny() on loan %s in status %s",
                self.loan_id,
                self.status.value,
                extra=self._log_context,
            )
            return TransitionOutcome.IGNORED

        self.status = LoanStatus.DENIED
        logger.info("Loan %s denied", self.loan_id, extra=self._log_context)
        return TransitionOutcome.APPLIED

    def _generate_installments(self) -> None:
        self._installments = [
            Installment(
                number=number,
                amount=self.installment_amount,
                due_date=due_date_for(self.contract_date, number),
            )
            for number in range(1, self.term_months + 1)
        ]

    # Payments

    def attempt_payment(self, number: int, source_account: Account) -> PaymentOutcome:
        """Pay installment ``number`` from ``source_account``.

        The account is debited before the installment is marked paid, so a
        refused withdrawal leaves the schedule untouched. Paying the last
        open installment settles the loan.

        Parameters
        ----------
        number : int
            1-based installment number.
        source_account : Account
            Account to debit.

        Returns
        -------
        PaymentOutcome
            ``PAID`` on success, otherwise the reason nothing happened.
        """
        if number < 1 or number > len(self._installments):
            logger.debug(
                "Loan %s has no installment %d", self.loan_id, number, extra=self._log_context
            )
            return PaymentOutcome.INVALID_NUMBER

        installment = self._installments[number - 1]
        if installment.paid:
            logger.debug(
                "Installment %d of loan %s already paid",
                number,
                self.loan_id,
                extra=self._log_context,
            )
            return PaymentOutcome.ALREADY_PAID

        if not source_account.withdraw(installment.amount):
            logger.debug(
                "Insufficient funds in account %s for installment %d of loan %s",
                source_account.account_id,
                number,
                self.loan_id,
                extra=self._log_context,
            )
            return PaymentOutcome.INSUFFICIENT_FUNDS

        self._installments[number - 1] = replace(installment, paid=True)

        if all(i.paid for i in self._installments):
            self.status = LoanStatus.SETTLED
            logger.info("Loan %s settled", self.loan_id, extra=self._log_context)

        return PaymentOutcome.PAID

    def pay_installment(self, number: int, source_account: Account) -> bool:
        """Pay installment ``number``; True only if it was paid by this call."""
        return self.attempt_payment(number, source_account) is PaymentOutcome.PAID

    # Queries

    def get_installment(self, number: int) -> Installment | None:
        """Return installment ``number`` or None if it does not exist."""
        if 1 <= number <= len(self._installments):
            return self._installments[number - 1]
        return None

    def paid_count(self) -> int:
        """Number of paid installments."""
        return sum(1 for i in self._installments if i.paid)

    def next_due_installment(self) -> Installment | None:
        """Lowest-numbered unpaid installment."""
        return next((i for i in self._installments if not i.paid), None)

    def outstanding_balance(self) -> Decimal:
        """Sum of unpaid installments (zero before approval)."""
        return sum((i.amount for i in self._installments if not i.paid), Decimal("0"))

    def total_payable(self) -> Decimal:
        """Installment value times term."""
        return self.installment_amount * self.term_months

    def total_interest(self) -> Decimal:
        """Total payable minus principal."""
        return self.total_payable() - self.principal
