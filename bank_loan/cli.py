"""Simulate a loan portfolio and print its final state.

Customers request one loan each, requests are approved or denied, and
borrowers repay month by month until the simulation window closes.
"""

import argparse

from bank_loan.config import BankLoanConfig, ScenarioConfig
from bank_loan.logging import setup_logging
from bank_loan.scenarios import LoanPortfolioScenario
from bank_loan.sinks import ConsoleSink


def main(argv: list[str] | None = None) -> None:
    """Run the portfolio simulation."""
    config = BankLoanConfig.from_env()

    parser = argparse.ArgumentParser(description="Simulate a bank loan portfolio")
    parser.add_argument("--customers", type=int, default=50, help="Number of borrowers (default: 50)")
    parser.add_argument("--seed", type=int, default=config.seed, help="Random seed")
    parser.add_argument(
        "--locale", type=str, default=config.locale, help=f"Faker locale (default: {config.locale})"
    )
    parser.add_argument(
        "--approval-rate",
        type=float,
        default=0.75,
        help="Probability a request is approved (default: 0.75)",
    )
    parser.add_argument(
        "--payment-rate",
        type=float,
        default=0.90,
        help="Probability a borrower pays in a given month (default: 0.90)",
    )
    parser.add_argument(
        "--months",
        type=int,
        default=None,
        help="Months to simulate (default: until the longest term ends)",
    )
    parser.add_argument("--name", type=str, default="loan_portfolio", help="Scenario name")
    parser.add_argument(
        "--label",
        action="append",
        default=[],
        metavar="KEY=VALUE",
        help="Label attached to the portfolio summary (repeatable)",
    )
    parser.add_argument("--show-loans", type=int, default=0, help="Print the first N loans as JSON")
    parser.add_argument("--log-level", type=str, default=config.logging.level, help="Log level")
    parser.add_argument(
        "--log-format",
        choices=["standard", "json"],
        default=config.logging.format_type,
        help="Log output format",
    )
    args = parser.parse_args(argv)

    labels = {}
    for item in args.label:
        key, sep, value = item.partition("=")
        if not sep or not key:
            parser.error(f"--label expects KEY=VALUE, got {item!r}")
        labels[key] = value

    setup_logging(level=args.log_level, format_type=args.log_format)

    scenario = LoanPortfolioScenario(
        seed=args.seed,
        config=ScenarioConfig(
            name=args.name,
            num_customers=args.customers,
            approval_rate=args.approval_rate,
            payment_success_rate=args.payment_rate,
            months_to_simulate=args.months,
            labels=labels,
        ),
        loan_defaults=config.loan_defaults,
        locale=args.locale,
    )
    store = scenario.generate()

    sink = ConsoleSink(pretty=True, max_records=args.show_loans)
    if args.show_loans:
        sink.write_batch("loans", list(store.loans.values()))
    sink.write_summary("Store", store.summary())
    sink.write_summary("Portfolio", scenario.get_portfolio_summary())
