#setup: pip install -e .
#setup: investment-calc --initial-amount 5000 --annual-contribution 500 --expected-return 0.08 --duration 10

from __future__ import annotations

import logging

import click

from backend.config import configure_logging
from backend.core.projection import calculate_investment
from backend.core.report import print_results
from backend.schemas.investment import InvestmentInput

logger = logging.getLogger(__name__)


@click.command()
@click.option("--initial-amount", type=float, default=5000.0, show_default=True, help="Principal in $.")
@click.option(
    "--annual-contribution",
    type=float,
    default=500.0,
    show_default=True,
    help="Amount added at the end of each year. Negative values model withdrawals.",
)
@click.option(
    "--expected-return",
    type=float,
    default=0.08,
    show_default=True,
    help="Annual return as a decimal (0.08 = 8%).",
)
@click.option("--duration", type=int, default=10, show_default=True, help="Years to project.")
@click.option("--log-level", default="WARNING", show_default=True, help="Logging level.")
def main(
    initial_amount: float,
    annual_contribution: float,
    expected_return: float,
    duration: int,
    log_level: str,
) -> None:
    """Print a year-by-year investment projection."""
    configure_logging(log_level)

    data = InvestmentInput(
        initialAmount=initial_amount,
        annualContribution=annual_contribution,
        expectedReturn=expected_return,
        duration=duration,
    )
    logger.info("Projecting %s", data.model_dump())

    outcome = calculate_investment(data)
    if isinstance(outcome, str):
        # printed, not escalated: the exit status stays 0
        logger.info("Projection rejected: %s", outcome)

    print_results(outcome)


if __name__ == "__main__":
    main()
