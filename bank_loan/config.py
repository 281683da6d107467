"""Configuration management for bank-loan."""

from dataclasses import dataclass, field
from decimal import Decimal, InvalidOperation
from typing import Any

from bank_loan.exceptions import ConfigurationError


@dataclass
class LoggingConfig:
    """Logging configuration."""

    level: str = "INFO"
    format_type: str = "standard"


@dataclass
class LoanDefaults:
    """Default terms used when requesting loans without explicit values."""

    monthly_rate: Decimal = Decimal("2.0")  # Percent per month
    term_months: int = 12
    min_principal: Decimal = Decimal("1000")
    max_principal: Decimal = Decimal("50000")

    def __post_init__(self) -> None:
        if self.term_months < 1:
            raise ConfigurationError(f"term_months must be >= 1, got {self.term_months}")
        if self.monthly_rate < 0:
            raise ConfigurationError(f"monthly_rate must be >= 0, got {self.monthly_rate}")
        if not Decimal("0") < self.min_principal <= self.max_principal:
            raise ConfigurationError(
                f"Invalid principal range: {self.min_principal} - {self.max_principal}"
            )


@dataclass
class ScenarioConfig:
    """Configuration for portfolio simulation."""

    name: str
    num_customers: int = 100
    approval_rate: float = 0.75
    payment_success_rate: float = 0.90
    months_to_simulate: int | None = None  # None runs until every term ends
    labels: dict[str, Any] = field(default_factory=dict)


@dataclass
class BankLoanConfig:
    """Main configuration for bank-loan."""

    logging: LoggingConfig = field(default_factory=LoggingConfig)
    loan_defaults: LoanDefaults = field(default_factory=LoanDefaults)
    scenario: ScenarioConfig | None = None
    seed: int | None = None
    locale: str = "pt_BR"

    @classmethod
    def from_env(cls) -> "BankLoanConfig":
        """Create config from environment variables."""
        import os

        logging_config = LoggingConfig(
            level=os.getenv("LOG_LEVEL", "INFO"),
            format_type=os.getenv("LOG_FORMAT", "standard"),
        )

        try:
            loan_defaults = LoanDefaults(
                monthly_rate=Decimal(os.getenv("LOAN_MONTHLY_RATE", "2.0")),
                term_months=int(os.getenv("LOAN_TERM_MONTHS", "12")),
            )
            seed = int(os.getenv("SEED")) if os.getenv("SEED") else None
        except (InvalidOperation, ValueError) as exc:
            raise ConfigurationError(f"Invalid loan configuration in environment: {exc}") from exc

        return cls(
            logging=logging_config,
            loan_defaults=loan_defaults,
            seed=seed,
            locale=os.getenv("FAKER_LOCALE", "pt_BR"),
        )
