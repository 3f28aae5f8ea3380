# This project was developed with assistance from AI tools.
"""Input validation for mortgage calculation requests.

Every violated field is reported, in field declaration order, with a
human-readable message. The down-payment-vs-property-value check only runs
once each field is individually valid and is reported against downPayment.
The HTTP layer formats FastAPI's request errors through the same function,
so both entry points describe a bad request identically.
"""

from collections.abc import Iterable, Mapping
from typing import Any

from pydantic import ValidationError
from pydantic.alias_generators import to_camel

from ..schemas.calculator import (
    MAX_AMOUNT,
    HeatingType,
    MortgageCalculationRequest,
    PropertyType,
)
from ..schemas.error import FieldError

REQUEST_FIELD = "request"

_MAX_AMOUNT_TEXT = f"{MAX_AMOUNT:,.0f}"

_FIELD_LABELS: dict[str, str] = {
    "propertyValue": "Property value",
    "downPayment": "Down payment",
    "interestRate": "Interest rate",
    "amortizationYears": "Amortization period",
    "propertyType": "Property type",
    "heatingType": "Heating type",
    "isFirstTimeBuyer": "First-time buyer flag",
    "grossMonthlyIncome": "Gross monthly income",
    REQUEST_FIELD: "Request body",
}

_FIELD_MESSAGES: dict[str, str] = {
    "propertyValue": "Property value must be a number greater than 0 "
    f"and at most {_MAX_AMOUNT_TEXT}",
    "downPayment": f"Down payment must be a number between 0 and {_MAX_AMOUNT_TEXT}",
    "interestRate": "Interest rate must be a number between 0.1% and 20%",
    "amortizationYears": "Amortization must be a whole number of years between 1 and 35",
    "propertyType": "Property type must be one of: "
    + ", ".join(t.value for t in PropertyType),
    "heatingType": "Heating type must be one of: " + ", ".join(t.value for t in HeatingType),
    "isFirstTimeBuyer": "First-time buyer flag must be true or false",
    "grossMonthlyIncome": "Gross monthly income must be a number greater than 0 "
    f"and at most {_MAX_AMOUNT_TEXT}",
}

# Model-level errors carry no field location; attribute them by error type.
_CROSS_FIELD_ERRORS: dict[str, str] = {
    "down_payment_exceeds_value": "downPayment",
}


class CalculationValidationError(ValueError):
    """Client-supplied calculation input violates a documented constraint."""

    def __init__(self, errors: list[FieldError]):
        self.errors = errors
        super().__init__("; ".join(e.message for e in errors))


def _field_name(error: Mapping[str, Any]) -> str:
    loc = [part for part in error.get("loc", ()) if part != "body"]
    if not loc or not isinstance(loc[0], str):
        return _CROSS_FIELD_ERRORS.get(error.get("type", ""), REQUEST_FIELD)
    return to_camel(str(loc[0]))


def _message(field: str, error: Mapping[str, Any]) -> str:
    if error.get("type") == "missing":
        return f"{_FIELD_LABELS.get(field, field)} is required"
    if error.get("type") in _CROSS_FIELD_ERRORS:
        return str(error["msg"])
    return _FIELD_MESSAGES.get(field, str(error.get("msg", "Invalid value")))


def field_errors_from_pydantic(errors: Iterable[Mapping[str, Any]]) -> list[FieldError]:
    """Collapse pydantic error dicts into one FieldError per offending field."""
    field_errors: list[FieldError] = []
    seen: set[str] = set()
    for error in errors:
        field = _field_name(error)
        if field in seen:
            continue
        seen.add(field)
        field_errors.append(FieldError(field=field, message=_message(field, error)))
    return field_errors


def validate_calculation_request(payload: Mapping[str, Any]) -> MortgageCalculationRequest:
    """Validate raw field values into a MortgageCalculationRequest.

    Raises:
        CalculationValidationError: one FieldError per violated field.
    """
    try:
        return MortgageCalculationRequest.model_validate(payload)
    except ValidationError as exc:
        raise CalculationValidationError(field_errors_from_pydantic(exc.errors())) from exc
