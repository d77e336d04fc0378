"""Plain-text and display formatting for projection results."""

import math
import sys
from decimal import ROUND_HALF_UP, Decimal, localcontext
from typing import Optional, TextIO

import click

from backend.schemas.investment import CalculationOutcome

SEPARATOR = "-" * 20

# enough digits to quantize any finite double to cents
_MAX_DIGITS = 400


def _fixed(value: float, places: int) -> str:
    """Fixed-point text with ties rounded away from zero."""
    if value == 0:
        value = 0.0  # no "-0" for a negative zero
    if not math.isfinite(value):
        return str(value)
    with localcontext() as ctx:
        ctx.prec = _MAX_DIGITS
        step = Decimal(1).scaleb(-places)
        rounded = Decimal(value).quantize(step, rounding=ROUND_HALF_UP)
    return format(rounded, "f")


def format_whole(value: float) -> str:
    return _fixed(value, 0)


def format_currency(value: float) -> str:
    """Dollar prefix, two decimals. No thousands separators."""
    return f"${_fixed(value, 2)}"


def print_results(outcome: CalculationOutcome, stream: Optional[TextIO] = None) -> None:
    """Write a projection, or its validation message, one line at a time."""
    stream = stream if stream is not None else sys.stdout

    if isinstance(outcome, str):
        click.echo(outcome, file=stream)
        return

    for row in outcome:
        click.echo(row.label, file=stream)
        click.echo(f"Total: {format_whole(row.totalAmount)}", file=stream)
        click.echo(f"Interest Earned: {format_whole(row.totalInterestEarned)}", file=stream)
        click.echo(SEPARATOR, file=stream)
