"""Forecast request configuration and variant registry."""

from revenue_forecast.scenarios.config import ForecastRequest
from revenue_forecast.scenarios.registry import create_model
from revenue_forecast.scenarios.registry import default_parameters
from revenue_forecast.scenarios.registry import list_variants
from revenue_forecast.scenarios.registry import resolve_parameters
from revenue_forecast.scenarios.registry import resolve_variant
from revenue_forecast.scenarios.registry import REVENUE_MODELS

__all__ = [
    'ForecastRequest',
    'REVENUE_MODELS',
    'create_model',
    'default_parameters',
    'list_variants',
    'resolve_parameters',
    'resolve_variant',
]
