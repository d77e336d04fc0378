"""Server-rendered calculator page."""

import logging
from typing import Any

from flask import Blueprint, render_template, request

from backend.app.forms import InputField, InvestmentForm, read_form
from backend.core.projection import calculate_investment
from backend.core.report import format_currency

logger = logging.getLogger(__name__)

calculator_bp = Blueprint("calculator", __name__)


@calculator_bp.app_template_filter("currency")
def _currency_filter(value: float) -> str:
    return format_currency(value)


@calculator_bp.get("/")
def calculator_page() -> Any:
    """Empty form, no results region."""
    return render_template("calculator.html", form=InvestmentForm(), fields=list(InputField), results=None)


@calculator_bp.post("/")
def calculate() -> Any:
    form, errors = read_form(request.form)

    if errors:
        logger.warning("Rejected form input: %s", errors)
        results = " ".join(errors)
    else:
        data = form.to_input()
        logger.info("Projecting %s", data.model_dump())
        results = calculate_investment(data)
        if isinstance(results, str):
            logger.warning("Projection rejected: %s", results)

    return render_template("calculator.html", form=form, fields=list(InputField), results=results)
