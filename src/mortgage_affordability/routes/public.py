# This project was developed with assistance from AI tools.
"""Public API routes -- no authentication required."""

from typing import Any

from fastapi import APIRouter, Body, Depends

from ..schemas.calculator import MortgageCalculationRequest, MortgageResult
from ..schemas.market import RegionalMarketData
from ..services import calculator
from ..services.market_data import default_calculation_request, get_market_data
from ..services.validation import validate_calculation_request

router = APIRouter()


@router.get("/market-data", response_model=RegionalMarketData)
async def market_data(
    market: RegionalMarketData = Depends(get_market_data),
) -> RegionalMarketData:
    """Return the regional tax, insurance, rate, and utility figures."""
    return market


@router.get("/mortgage/defaults", response_model=MortgageCalculationRequest)
async def mortgage_defaults(
    market: RegionalMarketData = Depends(get_market_data),
) -> MortgageCalculationRequest:
    """Return initial calculator inputs for pre-populating a form."""
    return default_calculation_request(market)


@router.post("/mortgage/calculate", response_model=MortgageResult)
async def calculate_mortgage(
    payload: dict[str, Any] = Body(...),
    market: RegionalMarketData = Depends(get_market_data),
) -> MortgageResult:
    """Calculate monthly payment, carrying costs, and affordability.

    Payment uses the standard amortization formula on the property value less
    down payment plus any default insurance premium. The body is validated as a
    MortgageCalculationRequest; violations surface as a 422 listing each field.
    """
    req = validate_calculation_request(payload)
    return calculator.calculate_mortgage(req, market)
