# This project was developed with assistance from AI tools.
"""Health check routes."""

from fastapi import APIRouter, Depends

from .. import __version__
from ..schemas.health import HealthResponse
from ..schemas.market import RegionalMarketData
from ..services.market_data import get_market_data

router = APIRouter()


@router.get("/", response_model=list[HealthResponse])
async def health_check(
    market: RegionalMarketData = Depends(get_market_data),
) -> list[HealthResponse]:
    """Report API liveness and the active market profile."""
    return [
        HealthResponse(
            name="API",
            status="healthy",
            message="API is running",
            version=__version__,
        ),
        HealthResponse(
            name="Market data",
            status="healthy",
            message=f"Using {market.region} market profile",
        ),
    ]
