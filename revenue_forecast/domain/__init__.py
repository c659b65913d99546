"""Domain types for the revenue forecasting engine."""

from revenue_forecast.domain.types import AnnualForecastEntry
from revenue_forecast.domain.types import BusinessModelVariant
from revenue_forecast.domain.types import CostStructure
from revenue_forecast.domain.types import ForecastResult
from revenue_forecast.domain.types import GrowthAssumptions
from revenue_forecast.domain.types import MonthlyForecastEntry
from revenue_forecast.domain.types import RevenueStep
from revenue_forecast.domain.types import SUPPORTED_HORIZONS
from revenue_forecast.domain.types import validate_horizon

__all__ = [
    'AnnualForecastEntry',
    'BusinessModelVariant',
    'CostStructure',
    'ForecastResult',
    'GrowthAssumptions',
    'MonthlyForecastEntry',
    'RevenueStep',
    'SUPPORTED_HORIZONS',
    'validate_horizon',
]
