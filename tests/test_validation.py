# This project was developed with assistance from AI tools.
"""Tests for calculation request validation."""

import pytest

from mortgage_affordability.schemas.calculator import HeatingType, PropertyType
from mortgage_affordability.services.validation import (
    CalculationValidationError,
    field_errors_from_pydantic,
    validate_calculation_request,
)


def _payload(**overrides):
    payload = {
        "propertyValue": 400000,
        "downPayment": 80000,
        "interestRate": 4.84,
        "amortizationYears": 25,
        "propertyType": "single-family",
        "heatingType": "gas",
        "isFirstTimeBuyer": False,
    }
    payload.update(overrides)
    return payload


def _fields(exc_info) -> list[str]:
    return [e.field for e in exc_info.value.errors]


class TestValidRequests:
    def test_camel_case_payload(self):
        req = validate_calculation_request(_payload())
        assert req.property_value == 400000
        assert req.amortization_years == 25
        assert req.property_type is PropertyType.SINGLE_FAMILY
        assert req.heating_type is HeatingType.GAS
        assert req.gross_monthly_income is None

    def test_snake_case_payload(self):
        req = validate_calculation_request(
            {
                "property_value": 250000,
                "down_payment": 0,
                "interest_rate": 0.1,
                "amortization_years": 1,
                "property_type": "multi-family",
                "heating_type": "geothermal",
                "is_first_time_buyer": True,
            }
        )
        assert req.down_payment == 0
        assert req.is_first_time_buyer is True

    def test_bounds_are_inclusive(self):
        req = validate_calculation_request(
            _payload(interestRate=20, amortizationYears=35, downPayment=400000)
        )
        assert req.interest_rate == 20
        assert req.down_payment == req.property_value

    def test_whole_number_float_term_accepted(self):
        req = validate_calculation_request(_payload(amortizationYears=25.0))
        assert req.amortization_years == 25

    def test_request_is_immutable(self):
        req = validate_calculation_request(_payload())
        with pytest.raises(ValueError):
            req.down_payment = 1


class TestRejections:
    def test_zero_property_value(self):
        with pytest.raises(CalculationValidationError) as exc_info:
            validate_calculation_request(_payload(propertyValue=0))
        assert _fields(exc_info) == ["propertyValue"]
        assert "Property value must be a number greater than 0" in str(exc_info.value)

    def test_negative_down_payment(self):
        with pytest.raises(CalculationValidationError) as exc_info:
            validate_calculation_request(_payload(downPayment=-1))
        assert _fields(exc_info) == ["downPayment"]

    def test_down_payment_exceeds_property_value(self):
        with pytest.raises(CalculationValidationError) as exc_info:
            validate_calculation_request(_payload(downPayment=400001))
        assert _fields(exc_info) == ["downPayment"]
        assert exc_info.value.errors[0].message == "Down payment cannot exceed property value"

    @pytest.mark.parametrize("rate", [0, 0.09, 20.01, -3])
    def test_interest_rate_out_of_range(self, rate):
        with pytest.raises(CalculationValidationError) as exc_info:
            validate_calculation_request(_payload(interestRate=rate))
        assert _fields(exc_info) == ["interestRate"]
        assert "between 0.1% and 20%" in exc_info.value.errors[0].message

    @pytest.mark.parametrize("years", [0, 36, 25.5])
    def test_amortization_out_of_range_or_fractional(self, years):
        with pytest.raises(CalculationValidationError) as exc_info:
            validate_calculation_request(_payload(amortizationYears=years))
        assert _fields(exc_info) == ["amortizationYears"]

    def test_unknown_property_type(self):
        with pytest.raises(CalculationValidationError) as exc_info:
            validate_calculation_request(_payload(propertyType="castle"))
        assert _fields(exc_info) == ["propertyType"]
        assert "single-family" in exc_info.value.errors[0].message

    def test_unknown_heating_type(self):
        with pytest.raises(CalculationValidationError) as exc_info:
            validate_calculation_request(_payload(heatingType="wood"))
        assert _fields(exc_info) == ["heatingType"]

    def test_non_positive_income(self):
        with pytest.raises(CalculationValidationError) as exc_info:
            validate_calculation_request(_payload(grossMonthlyIncome=0))
        assert _fields(exc_info) == ["grossMonthlyIncome"]

    def test_missing_field(self):
        payload = _payload()
        del payload["heatingType"]
        with pytest.raises(CalculationValidationError) as exc_info:
            validate_calculation_request(payload)
        assert exc_info.value.errors[0].field == "heatingType"
        assert exc_info.value.errors[0].message == "Heating type is required"

    def test_all_violations_reported_in_field_order(self):
        with pytest.raises(CalculationValidationError) as exc_info:
            validate_calculation_request(
                _payload(propertyValue=-5, interestRate=50, heatingType="wood")
            )
        assert _fields(exc_info) == ["propertyValue", "interestRate", "heatingType"]

    def test_cross_field_check_waits_for_valid_fields(self):
        """downPayment > propertyValue is not reported alongside field errors."""
        with pytest.raises(CalculationValidationError) as exc_info:
            validate_calculation_request(_payload(downPayment=500000, interestRate=50))
        assert _fields(exc_info) == ["interestRate"]

    def test_non_mapping_payload(self):
        with pytest.raises(CalculationValidationError) as exc_info:
            validate_calculation_request(["not", "a", "mapping"])
        assert _fields(exc_info) == ["request"]

    def test_property_value_ceiling(self):
        with pytest.raises(CalculationValidationError) as exc_info:
            validate_calculation_request(_payload(propertyValue=1.7e308, downPayment=0))
        assert _fields(exc_info) == ["propertyValue"]
        assert "at most 1,000,000,000,000" in exc_info.value.errors[0].message

    def test_down_payment_ceiling(self):
        with pytest.raises(CalculationValidationError) as exc_info:
            validate_calculation_request(_payload(downPayment=2e12))
        assert _fields(exc_info) == ["downPayment"]

    def test_income_ceiling(self):
        with pytest.raises(CalculationValidationError) as exc_info:
            validate_calculation_request(_payload(grossMonthlyIncome=1e300))
        assert _fields(exc_info) == ["grossMonthlyIncome"]

    @pytest.mark.parametrize(
        "field,value",
        [
            ("propertyValue", "400000"),
            ("downPayment", "80000"),
            ("interestRate", "4.84"),
            ("amortizationYears", "25"),
            ("amortizationYears", True),
            ("isFirstTimeBuyer", "yes"),
            ("isFirstTimeBuyer", 1),
            ("grossMonthlyIncome", "9000"),
        ],
    )
    def test_values_of_the_wrong_type_are_not_coerced(self, field, value):
        with pytest.raises(CalculationValidationError) as exc_info:
            validate_calculation_request(_payload(**{field: value}))
        assert _fields(exc_info) == [field]

    def test_is_a_value_error(self):
        with pytest.raises(ValueError):
            validate_calculation_request(_payload(propertyValue=0))


class TestFieldErrorsFromPydantic:
    def test_strips_body_prefix(self):
        errors = field_errors_from_pydantic(
            [{"loc": ("body", "interestRate"), "type": "less_than_equal", "msg": "x"}]
        )
        assert errors[0].field == "interestRate"

    def test_snake_case_location_reported_as_camel_case(self):
        errors = field_errors_from_pydantic(
            [{"loc": ("property_value",), "type": "greater_than", "msg": "x"}]
        )
        assert errors[0].field == "propertyValue"

    def test_one_error_per_field(self):
        errors = field_errors_from_pydantic(
            [
                {"loc": ("body", "downPayment"), "type": "float_parsing", "msg": "x"},
                {"loc": ("body", "downPayment"), "type": "greater_than_equal", "msg": "y"},
            ]
        )
        assert len(errors) == 1

    def test_unknown_field_falls_back_to_pydantic_message(self):
        errors = field_errors_from_pydantic(
            [{"loc": ("body", 17), "type": "json_invalid", "msg": "JSON decode error"}]
        )
        assert errors[0].field == "request"
        assert errors[0].message == "JSON decode error"
