"""Data contracts for investment projections."""

from typing import List, Union

from pydantic import BaseModel, ConfigDict, Field, computed_field


class InvestmentInput(BaseModel):
    """Inputs for a projection.

    Values are not constrained here; range checks belong to the calculator.
    """

    initialAmount: float = 0.0
    annualContribution: float = 0.0
    expectedReturn: float = Field(
        0.0,
        description="Annual return rate expressed as a decimal (e.g. 0.08 for 8%).",
    )
    duration: float = Field(0, description="Number of years to project.")


class InvestmentRequest(InvestmentInput):
    """JSON payload accepted by the API. All four fields are required."""

    model_config = ConfigDict(extra="forbid", allow_inf_nan=False)

    initialAmount: float
    annualContribution: float
    expectedReturn: float
    duration: int


class YearResult(BaseModel):
    """Single row of a projection."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    year: int = Field(..., ge=1)
    totalAmount: float
    totalContributions: float
    totalInterestEarned: float

    @computed_field
    @property
    def label(self) -> str:
        return f"Year: {self.year}"


# Either the yearly rows or a validation message, never both.
CalculationOutcome = Union[List[YearResult], str]


class InvestmentResponse(BaseModel):
    results: List[YearResult]


class ErrorResponse(BaseModel):
    error: str


class PingResponse(BaseModel):
    message: str
