from __future__ import annotations

from enum import Enum
from typing import List, Optional

from backend.schemas.investment import CalculationOutcome, InvestmentInput, YearResult


class ValidationFailure(str, Enum):
    NEGATIVE_INITIAL_AMOUNT = "Initial investment amount must be at least zero."
    NON_POSITIVE_DURATION = "No valid amount of years provided."
    NEGATIVE_EXPECTED_RETURN = "Expected return must be at least zero."


def validate_investment(data: InvestmentInput) -> Optional[ValidationFailure]:
    """Return the first failed check, in a fixed order, or None.

    annualContribution is deliberately unchecked: a negative value models a
    yearly withdrawal.
    """
    if data.initialAmount < 0:
        return ValidationFailure.NEGATIVE_INITIAL_AMOUNT
    if data.duration <= 0:
        return ValidationFailure.NON_POSITIVE_DURATION
    if data.expectedReturn < 0:
        return ValidationFailure.NEGATIVE_EXPECTED_RETURN
    return None


def calculate_investment(data: InvestmentInput) -> CalculationOutcome:
    """
    Build the year-by-year projection, or return the validation message.

    Order of operations (per year):
      1) Apply growth to the running balance.
      2) Interest earned = balance - contributions counted so far - principal.
         Contributions at this point only cover the previous years.
      3) Count this year's contribution.
      4) Add this year's contribution to the balance (it does not grow this year).

    Values are kept at full precision; rounding is left to the presentation layer.
    """
    failure = validate_investment(data)
    if failure is not None:
        return failure.value

    total = data.initialAmount
    total_contributions = 0.0
    rows: List[YearResult] = []

    # fractional durations round up to a whole year; NaN yields no rows
    year = 0
    while year < data.duration:
        total = total * (1 + data.expectedReturn)
        interest_earned = total - total_contributions - data.initialAmount
        total_contributions = total_contributions + data.annualContribution
        total = total + data.annualContribution

        year += 1
        rows.append(
            YearResult(
                year=year,
                totalAmount=total,
                totalContributions=total_contributions,
                totalInterestEarned=interest_earned,
            )
        )

    return rows


__all__ = [
    "ValidationFailure",
    "validate_investment",
    "calculate_investment",
]
