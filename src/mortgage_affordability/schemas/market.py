# This project was developed with assistance from AI tools.
"""Regional market data schemas."""

from pydantic import Field

from . import CamelModel
from .calculator import HeatingType


class InterestRateBenchmarks(CamelModel):
    """Posted mortgage rates (annual %) for the region."""

    fixed_1_year: float = Field(gt=0)
    fixed_5_year: float = Field(gt=0)
    variable: float = Field(gt=0)


class UtilityEstimates(CamelModel):
    """Average monthly utility cost by heating type."""

    gas: float = Field(ge=0)
    electric: float = Field(ge=0)
    oil: float = Field(ge=0)
    geothermal: float = Field(ge=0)

    def for_heating(self, heating_type: HeatingType) -> float:
        return getattr(self, heating_type.value)


class RegionalMarketData(CamelModel):
    """Static reference data for one region, loaded once at startup."""

    region: str = Field(min_length=1)
    average_property_tax_rate: float = Field(
        ge=0, description="Property tax as a percentage of property value per year."
    )
    average_insurance_rate: float = Field(
        ge=0, description="Home insurance as a percentage of property value per year."
    )
    current_interest_rates: InterestRateBenchmarks
    utility_estimates: UtilityEstimates
