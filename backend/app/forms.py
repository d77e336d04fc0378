"""Form state for the calculator page."""

from __future__ import annotations

import math
from dataclasses import dataclass, replace
from enum import Enum
from typing import List, Mapping, Tuple

from backend.schemas.investment import InvestmentInput


class InputField(str, Enum):
    INITIAL_AMOUNT = "initialAmount"
    ANNUAL_CONTRIBUTION = "annualContribution"
    EXPECTED_RETURN = "expectedReturn"
    DURATION = "duration"

    @property
    def label(self) -> str:
        return FIELD_LABELS[self]

    @property
    def placeholder(self) -> str:
        return FIELD_PLACEHOLDERS[self]


FIELD_LABELS = {
    InputField.INITIAL_AMOUNT: "Initial amount",
    InputField.ANNUAL_CONTRIBUTION: "Annual contribution",
    InputField.EXPECTED_RETURN: "Expected return",
    InputField.DURATION: "Duration",
}

FIELD_PLACEHOLDERS = {
    InputField.INITIAL_AMOUNT: "Initial amount in $ (ex: 5000)",
    InputField.ANNUAL_CONTRIBUTION: "Annual contribution in $ (ex: 500)",
    InputField.EXPECTED_RETURN: "Expected return rate % (ex: 0.08)",
    InputField.DURATION: "Duration in years (ex: 5)",
}


class FieldParseError(ValueError):
    def __init__(self, field: InputField):
        super().__init__(f"{field.label} must be a number.")
        self.field = field


def parse_field(field: InputField, raw: str) -> float:
    """Blank means the field was left at its default of zero."""
    text = (raw or "").strip()
    if not text:
        return 0.0
    try:
        value = float(text)
    except ValueError:
        raise FieldParseError(field) from None
    if not math.isfinite(value):
        raise FieldParseError(field)
    return value


@dataclass(frozen=True)
class InvestmentForm:
    initial_amount: float = 0.0
    annual_contribution: float = 0.0
    expected_return: float = 0.0
    duration: float = 0.0

    def with_value(self, field: InputField, value: float) -> InvestmentForm:
        if field is InputField.INITIAL_AMOUNT:
            return replace(self, initial_amount=value)
        if field is InputField.ANNUAL_CONTRIBUTION:
            return replace(self, annual_contribution=value)
        if field is InputField.EXPECTED_RETURN:
            return replace(self, expected_return=value)
        return replace(self, duration=value)

    def value_of(self, field: InputField) -> float:
        if field is InputField.INITIAL_AMOUNT:
            return self.initial_amount
        if field is InputField.ANNUAL_CONTRIBUTION:
            return self.annual_contribution
        if field is InputField.EXPECTED_RETURN:
            return self.expected_return
        return self.duration

    def display_value(self, field: InputField) -> str:
        # zero renders as an empty box so the placeholder shows through
        value = self.value_of(field)
        if value == 0:
            return ""
        return str(int(value)) if value.is_integer() else str(value)

    def to_input(self) -> InvestmentInput:
        return InvestmentInput(
            initialAmount=self.initial_amount,
            annualContribution=self.annual_contribution,
            expectedReturn=self.expected_return,
            duration=self.duration,
        )


def read_form(raw: Mapping[str, str]) -> Tuple[InvestmentForm, List[str]]:
    """Parse submitted fields, collecting one error per bad field.

    Bad fields keep their previous (default) value in the returned form.
    """
    form = InvestmentForm()
    errors: List[str] = []

    for field in InputField:
        try:
            value = parse_field(field, raw.get(field.value, ""))
        except FieldParseError as exc:
            errors.append(str(exc))
            continue
        form = form.with_value(field, value)

    return form, errors
