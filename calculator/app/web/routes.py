"""The calculator page: form, results and chart."""

import logging
from typing import Any

from flask import Blueprint, current_app, render_template, request

from calculator.core.compound import (
    CURRENCY_SYMBOLS,
    FREQUENCY_LABELS,
    calculate,
)
from calculator.schemas.compound import CalculationRequest, InputValidationError

logger = logging.getLogger(__name__)

web_bp = Blueprint("web", __name__)

FORM_FIELDS = ("principal", "rate", "time", "frequency", "currency")


@web_bp.app_template_filter("money")
def format_money(value: float) -> str:
    """Two decimals with thousands separators, e.g. ``1,102.50``."""
    return f"{value:,.2f}"


@web_bp.route("/", methods=["GET", "POST"])
def index() -> Any:
    """Render the form; on POST also validate, calculate and show the outcome."""
    values = {field: "" for field in FORM_FIELDS}
    result = None
    error = None

    if request.method == "POST":
        values.update({field: request.form.get(field, "") for field in FORM_FIELDS})
        outcome = calculate(CalculationRequest.from_form(request.form))
        if isinstance(outcome, InputValidationError):
            error = outcome.message
        else:
            result = outcome
            logger.info("calculated %s %.2f", result.currency, result.final_amount)

    return render_template(
        "index.html",
        title=current_app.config.get("APP_NAME", "Compound Interest Calculator"),
        values=values,
        result=result,
        error=error,
        frequencies=FREQUENCY_LABELS,
        currencies=CURRENCY_SYMBOLS,
    )
