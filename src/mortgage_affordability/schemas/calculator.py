# This project was developed with assistance from AI tools.
"""Mortgage calculator schemas."""

import enum
from typing import Any

from pydantic import Field, field_validator, model_validator
from pydantic_core import PydanticCustomError

from . import CamelModel


class PropertyType(str, enum.Enum):
    SINGLE_FAMILY = "single-family"
    CONDO = "condo"
    TOWNHOUSE = "townhouse"
    MULTI_FAMILY = "multi-family"


class HeatingType(str, enum.Enum):
    GAS = "gas"
    ELECTRIC = "electric"
    OIL = "oil"
    GEOTHERMAL = "geothermal"


# Largest accepted currency amount; keeps derived values finite.
MAX_AMOUNT = 1e12


class AffordabilityRating(str, enum.Enum):
    EXCELLENT = "excellent"
    GOOD = "good"
    FAIR = "fair"
    POOR = "poor"


class MortgageCalculationRequest(CamelModel):
    """Input for the mortgage calculator.

    ``property_type`` and ``is_first_time_buyer`` are carried through but do
    not influence any computed value.
    """

    property_value: float = Field(gt=0, le=MAX_AMOUNT, strict=True)
    down_payment: float = Field(ge=0, le=MAX_AMOUNT, strict=True)
    interest_rate: float = Field(ge=0.1, le=20, strict=True)
    amortization_years: int = Field(ge=1, le=35)
    property_type: PropertyType
    heating_type: HeatingType
    is_first_time_buyer: bool = Field(strict=True)
    gross_monthly_income: float | None = Field(
        default=None,
        gt=0,
        le=MAX_AMOUNT,
        strict=True,
        description="Household gross monthly income. When omitted, income is "
        "back-derived from the housing cost at a 32% ratio.",
    )

    @field_validator("amortization_years", mode="before")
    @classmethod
    def _term_is_a_number(cls, value: Any) -> Any:
        # Whole-number floats such as 25.0 still coerce; strings and booleans do not.
        if isinstance(value, (str, bool)):
            raise PydanticCustomError("int_type", "Input should be a valid integer")
        return value

    @model_validator(mode="after")
    def _down_payment_within_property_value(self) -> "MortgageCalculationRequest":
        if self.down_payment > self.property_value:
            raise PydanticCustomError(
                "down_payment_exceeds_value",
                "Down payment cannot exceed property value",
            )
        return self


class MortgageResult(CamelModel):
    """Mortgage calculation results. Currency amounts are rounded to cents."""

    monthly_payment: float
    principal_amount: float
    total_loan_amount: float
    total_interest: float
    monthly_property_tax: float
    monthly_insurance: float
    monthly_utilities: float
    total_monthly_cost: float
    down_payment_percent: float
    insurance_premium: float = Field(alias="cmhcInsurance")
    affordability_rating: AffordabilityRating
    warnings: list[str] = Field(default_factory=list)
