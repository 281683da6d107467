"""Custom exception hierarchy for bank-loan."""


class BankLoanError(Exception):
    """Base exception for all bank-loan errors."""


class InvalidLoanParametersError(BankLoanError, ValueError):
    """Raised when a loan is built with a non-positive principal or term, or a negative rate."""


class EntityNotFoundError(BankLoanError):
    """Raised when a referenced entity does not exist."""


class ReferentialIntegrityError(EntityNotFoundError):
    """Raised when a foreign key reference is violated."""


class ConfigurationError(BankLoanError):
    """Raised when configuration is invalid or missing."""
