"""Enumeration types for loan entities."""

from enum import Enum


class LoanStatus(str, Enum):
    REQUESTED = "REQUESTED"
    APPROVED = "APPROVED"  # Only held while approve() runs
    DENIED = "DENIED"
    SETTLED = "SETTLED"
    ACTIVE = "ACTIVE"


class TransitionOutcome(str, Enum):
    """Result of approve() / deny()."""

    APPLIED = "APPLIED"
    IGNORED = "IGNORED"  # Loan was not REQUESTED; nothing changed


class PaymentOutcome(str, Enum):
    """Result of an installment payment attempt."""

    PAID = "PAID"
    INVALID_NUMBER = "INVALID_NUMBER"
    ALREADY_PAID = "ALREADY_PAID"
    INSUFFICIENT_FUNDS = "INSUFFICIENT_FUNDS"
