# This project was developed with assistance from AI tools.
"""Regional market data loader.

Reads a YAML market profile, substitutes ${ENV_VAR:-default} placeholders,
and validates it into a frozen RegionalMarketData. The profile is loaded
once per process; calculations receive it as an argument.
"""

import logging
import os
import re
from functools import lru_cache
from pathlib import Path
from typing import Any

import yaml
from dotenv import load_dotenv
from pydantic import ValidationError

from ..schemas.calculator import HeatingType, MortgageCalculationRequest, PropertyType
from ..schemas.market import InterestRateBenchmarks, RegionalMarketData, UtilityEstimates

# Load .env into os.environ so YAML ${VAR} placeholders resolve correctly.
# pydantic-settings reads .env into its Settings object but doesn't set
# os.environ; the YAML loader needs actual env vars.
load_dotenv()

logger = logging.getLogger(__name__)

_ENV_VAR_PATTERN = re.compile(r"\$\{(\w+)(?::-(.*?))?\}")

DEFAULT_MARKET_DATA = RegionalMarketData(
    region="Winnipeg",
    average_property_tax_rate=2.35,
    average_insurance_rate=0.3,
    current_interest_rates=InterestRateBenchmarks(
        fixed_1_year=5.24,
        fixed_5_year=4.84,
        variable=5.95,
    ),
    utility_estimates=UtilityEstimates(
        gas=180,
        electric=120,
        oil=220,
        geothermal=80,
    ),
)


def _substitute_env_vars(value: str) -> str:
    """Replace ${VAR:-default} patterns with environment values."""

    def _replace(match: re.Match) -> str:
        var_name = match.group(1)
        default = match.group(2) or ""
        return os.environ.get(var_name, default)

    return _ENV_VAR_PATTERN.sub(_replace, value)


def _resolve_env_vars(obj: Any) -> Any:
    """Recursively resolve env var placeholders in a config tree."""
    if isinstance(obj, str):
        return _substitute_env_vars(obj)
    if isinstance(obj, dict):
        return {k: _resolve_env_vars(v) for k, v in obj.items()}
    if isinstance(obj, list):
        return [_resolve_env_vars(item) for item in obj]
    return obj


def load_market_data(path: Path) -> RegionalMarketData:
    """Load and validate a market profile YAML file from disk."""
    if not path.exists():
        raise FileNotFoundError(f"Market data file not found: {path}")

    try:
        raw = yaml.safe_load(path.read_text())
    except yaml.YAMLError as exc:
        raise ValueError(f"Market data file is not valid YAML: {path}") from exc

    if not isinstance(raw, dict):
        raise ValueError(f"{path.name} must contain a mapping at the top level")

    try:
        return RegionalMarketData.model_validate(_resolve_env_vars(raw))
    except ValidationError as exc:
        raise ValueError(f"Invalid market data in {path}: {exc}") from exc


@lru_cache
def get_market_data() -> RegionalMarketData:
    """Return the configured market profile, loading it on first use.

    Used as a FastAPI dependency; tests swap profiles via dependency_overrides.
    """
    from ..core.config import settings

    if settings.MARKET_DATA_FILE is None:
        return DEFAULT_MARKET_DATA

    logger.info("Loading market data from %s", settings.MARKET_DATA_FILE)
    return load_market_data(settings.MARKET_DATA_FILE)


def log_market_data_status(market: RegionalMarketData) -> None:
    """Log which regional profile is active. Call at startup."""
    logger.info(
        "Market data: %s (5-year fixed benchmark %.2f%%, property tax %.2f%%)",
        market.region,
        market.current_interest_rates.fixed_5_year,
        market.average_property_tax_rate,
    )


def default_calculation_request(market: RegionalMarketData) -> MortgageCalculationRequest:
    """Initial form values, priced at the region's 5-year fixed benchmark."""
    return MortgageCalculationRequest(
        property_value=400_000,
        down_payment=80_000,
        interest_rate=market.current_interest_rates.fixed_5_year,
        amortization_years=25,
        property_type=PropertyType.SINGLE_FAMILY,
        heating_type=HeatingType.GAS,
        is_first_time_buyer=False,
    )
