# This project was developed with assistance from AI tools.
"""Mortgage affordability calculation logic.

Pure math, no I/O. Regional market data is passed in by the caller, so
alternate profiles can be evaluated without touching process state.
Intermediate values stay unrounded; currency amounts are rounded to cents
with Python's ``round`` (round-half-to-even) only when the result is built.
"""

import logging
from dataclasses import dataclass

from ..schemas.calculator import (
    AffordabilityRating,
    MortgageCalculationRequest,
    MortgageResult,
)
from ..schemas.market import RegionalMarketData

logger = logging.getLogger(__name__)

# (minimum down payment %, premium rate %), checked highest tier first.
# Lower bounds are inclusive.
INSURANCE_PREMIUM_TIERS: tuple[tuple[float, float], ...] = (
    (20.0, 0.0),
    (15.0, 2.8),
    (10.0, 3.1),
    (5.0, 4.0),
    (0.0, 4.5),
)

# (maximum housing-cost ratio %, rating), checked lowest ceiling first.
AFFORDABILITY_THRESHOLDS: tuple[tuple[float, AffordabilityRating], ...] = (
    (28.0, AffordabilityRating.EXCELLENT),
    (32.0, AffordabilityRating.GOOD),
    (39.0, AffordabilityRating.FAIR),
)

INSURANCE_FREE_DOWN_PAYMENT_PCT = 20.0
MIN_LENDER_DOWN_PAYMENT_PCT = 5.0
ASSUMED_HOUSING_RATIO = 0.32
ABOVE_MARKET_RATE_MARGIN = 1.0

WARNING_INSURANCE_REQUIRED = "Down payment less than 20% requires mortgage default insurance"
WARNING_LOW_DOWN_PAYMENT = "Down payment less than 5% may not be accepted by all lenders"
WARNING_ABOVE_MARKET_RATE = "Interest rate appears higher than current market rates"


@dataclass(frozen=True)
class Amortization:
    """Fixed-rate payment schedule summary."""

    monthly_payment: float
    total_interest: float
    n_payments: int


@dataclass(frozen=True)
class HousingCosts:
    """Monthly cost of carrying the property."""

    mortgage_payment: float
    property_tax: float
    insurance: float
    utilities: float

    @property
    def total(self) -> float:
        return self.mortgage_payment + self.property_tax + self.insurance + self.utilities


def insurance_premium_rate(down_payment_percent: float) -> float:
    """Mortgage default insurance premium rate (%) for a down payment percentage."""
    for min_pct, rate in INSURANCE_PREMIUM_TIERS:
        if down_payment_percent >= min_pct:
            return rate
    return INSURANCE_PREMIUM_TIERS[-1][1]


def calculate_insurance_premium(property_value: float, down_payment: float) -> float:
    """One-time default insurance premium added to the loan principal.

    Zero once the down payment reaches 20% of the property value.
    """
    down_payment_percent = down_payment / property_value * 100
    premium_rate = insurance_premium_rate(down_payment_percent)
    if premium_rate == 0:
        return 0.0
    return (property_value - down_payment) * premium_rate / 100


def amortize(
    total_loan_amount: float, interest_rate: float, amortization_years: int
) -> Amortization:
    """Apply the standard fixed-payment annuity formula.

    M = L * [r(1+r)^n] / [(1+r)^n - 1]

    A zero rate (or one too small to move (1+r)^n off 1.0) is repaid in
    equal principal-only installments.
    """
    monthly_rate = interest_rate / 100 / 12
    n_payments = amortization_years * 12

    compound = (1 + monthly_rate) ** n_payments
    if monthly_rate == 0 or compound == 1:
        return Amortization(
            monthly_payment=total_loan_amount / n_payments,
            total_interest=0.0,
            n_payments=n_payments,
        )

    monthly_payment = total_loan_amount * (monthly_rate * compound) / (compound - 1)
    total_interest = monthly_payment * n_payments - total_loan_amount
    return Amortization(
        monthly_payment=monthly_payment,
        total_interest=total_interest,
        n_payments=n_payments,
    )


def monthly_housing_costs(
    req: MortgageCalculationRequest,
    market: RegionalMarketData,
    monthly_payment: float,
) -> HousingCosts:
    """Add regional tax, insurance, and utility estimates to the mortgage payment."""
    return HousingCosts(
        mortgage_payment=monthly_payment,
        property_tax=req.property_value * market.average_property_tax_rate / 100 / 12,
        insurance=req.property_value * market.average_insurance_rate / 100 / 12,
        utilities=market.utility_estimates.for_heating(req.heating_type),
    )


def assumed_monthly_income(total_monthly_cost: float) -> float:
    """Income at which the housing cost sits exactly at a 32% ratio.

    Stands in when the borrower did not supply an income, which pins the
    rating to ``good``.
    """
    return total_monthly_cost / ASSUMED_HOUSING_RATIO


def rating_for_ratio(ratio_pct: float) -> AffordabilityRating:
    """Bucket a housing-cost-to-income ratio (%) into a rating."""
    for ceiling, rating in AFFORDABILITY_THRESHOLDS:
        if ratio_pct <= ceiling:
            return rating
    return AffordabilityRating.POOR


def classify_affordability(
    total_monthly_cost: float, monthly_income: float
) -> AffordabilityRating:
    """Rate the housing cost against a borrower-supplied income.

    The ratio is compared unrounded, so 32.004% is ``fair``.
    """
    if total_monthly_cost <= 0:
        return AffordabilityRating.EXCELLENT
    return rating_for_ratio(total_monthly_cost * 100 / monthly_income)


def classify_without_income(total_monthly_cost: float) -> AffordabilityRating:
    """Rate against the income back-derived by ``assumed_monthly_income``.

    ``cost / (cost / 0.32)`` can land a float hair above 32, so only on this
    path the ratio is snapped to two decimals before thresholding.
    """
    if total_monthly_cost <= 0:
        return AffordabilityRating.EXCELLENT
    income = assumed_monthly_income(total_monthly_cost)
    return rating_for_ratio(round(total_monthly_cost / income * 100, 2))


def build_warnings(
    down_payment_percent: float,
    interest_rate: float,
    market: RegionalMarketData,
) -> list[str]:
    warnings: list[str] = []
    if down_payment_percent < INSURANCE_FREE_DOWN_PAYMENT_PCT:
        warnings.append(WARNING_INSURANCE_REQUIRED)
    if down_payment_percent < MIN_LENDER_DOWN_PAYMENT_PCT:
        warnings.append(WARNING_LOW_DOWN_PAYMENT)
    if interest_rate > market.current_interest_rates.fixed_5_year + ABOVE_MARKET_RATE_MARGIN:
        warnings.append(WARNING_ABOVE_MARKET_RATE)
    return warnings


def calculate_mortgage(
    req: MortgageCalculationRequest, market: RegionalMarketData
) -> MortgageResult:
    """Compute payment, carrying costs, affordability, and warnings for a request."""
    principal_amount = req.property_value - req.down_payment
    down_payment_percent = req.down_payment / req.property_value * 100
    insurance_premium = calculate_insurance_premium(req.property_value, req.down_payment)
    total_loan_amount = principal_amount + insurance_premium

    amortization = amortize(total_loan_amount, req.interest_rate, req.amortization_years)
    costs = monthly_housing_costs(req, market, amortization.monthly_payment)

    if req.gross_monthly_income is not None:
        rating = classify_affordability(costs.total, req.gross_monthly_income)
    else:
        rating = classify_without_income(costs.total)

    warnings = build_warnings(down_payment_percent, req.interest_rate, market)

    logger.debug(
        "Calculated mortgage: loan=%.2f payment=%.2f total=%.2f rating=%s warnings=%d",
        total_loan_amount,
        amortization.monthly_payment,
        costs.total,
        rating.value,
        len(warnings),
    )

    return MortgageResult(
        monthly_payment=round(amortization.monthly_payment, 2),
        principal_amount=round(principal_amount, 2),
        total_loan_amount=round(total_loan_amount, 2),
        total_interest=round(amortization.total_interest, 2),
        monthly_property_tax=round(costs.property_tax, 2),
        monthly_insurance=round(costs.insurance, 2),
        monthly_utilities=round(costs.utilities, 2),
        total_monthly_cost=round(costs.total, 2),
        down_payment_percent=round(down_payment_percent, 2),
        insurance_premium=round(insurance_premium, 2),
        affordability_rating=rating,
        warnings=warnings,
    )
