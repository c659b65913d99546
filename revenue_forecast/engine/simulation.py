"""
Pure month-by-month forecast simulation.

No pandas, no I/O. Every call builds its own carried state starting at
zero, so repeated or concurrent runs never interfere.

Key functions:
  run_simulation: Main entry point, simulates a full horizon
  compute_revenue: One month of revenue for a variant (before the overlay)
  apply_growth_overlay: Global monthly compounding factor
"""

import logging
from collections.abc import Mapping
from math import floor, isfinite
from typing import Any, Optional

from revenue_forecast.domain.types import CostStructure
from revenue_forecast.domain.types import ForecastResult
from revenue_forecast.domain.types import GrowthAssumptions
from revenue_forecast.domain.types import MonthlyForecastEntry
from revenue_forecast.domain.types import RevenueStep
from revenue_forecast.domain.types import validate_horizon
from revenue_forecast.engine.aggregate import aggregate_annual
from revenue_forecast.scenarios.registry import create_model
from revenue_forecast.scenarios.registry import resolve_variant
from revenue_forecast.scenarios.registry import VariantLike

logger = logging.getLogger(__name__)


def round_half_up(value: float) -> int:
  """Round to the nearest integer, halves towards positive infinity."""
  whole = floor(value)
  return int(whole + 1 if value - whole >= 0.5 else whole)


def apply_growth_overlay(revenue: float, month: int,
                         monthly_growth_rate: float) -> float:
  """
  Apply the global growth overlay.

  Args:
    revenue: Revenue produced by the variant model
    month: Absolute simulated month, 1-based
    monthly_growth_rate: Global monthly growth, in percent

  Returns:
    revenue * (1 + rate/100)^(month - 1)
  """
  return revenue * (1 + monthly_growth_rate / 100.0)**(month - 1)


def compute_revenue(
    variant: VariantLike,
    month: int,
    cumulative_state: float,
    parameters: Mapping[str, Any],
) -> RevenueStep:
  """
  Compute one month of gross revenue for a variant.

  Args:
    variant: Variant tag (unknown tags use the Generic formula)
    month: Absolute simulated month, 1-based
    cumulative_state: Users/subscribers carried from the previous month
    parameters: Resolved parameters; missing keys read as 0

  Returns:
    RevenueStep with revenue before the growth overlay
  """
  return create_model(variant, parameters).compute(month, cumulative_state)


def run_simulation(
    variant: VariantLike,
    parameters: Mapping[str, Any],
    growth_assumptions: GrowthAssumptions,
    cost_structure: CostStructure,
    horizon_months: int,
) -> ForecastResult:
  """
  Simulate revenue, costs and profit month by month.

  The full horizon is always simulated; break-even is the first month
  whose unrounded profit is positive and is never overwritten.

  Args:
    variant: Variant tag (unknown tags fall back to Generic with a warning)
    parameters: Resolved parameters for the variant
    growth_assumptions: Global growth assumptions
    cost_structure: Monthly and annual costs
    horizon_months: One of 12, 24, 36, 48, 60

  Returns:
    ForecastResult with monthly and annual entries and break-even month

  Raises:
    ValueError: If the horizon is unsupported or a month produces a
      non-finite value
  """
  horizon_months = validate_horizon(horizon_months)
  resolved, fell_back = resolve_variant(variant)
  model = create_model(resolved, parameters)

  costs = cost_structure.monthly_total
  cumulative_state = 0.0
  break_even_month: Optional[int] = None
  monthly: list[MonthlyForecastEntry] = []

  for month in range(1, horizon_months + 1):
    try:
      step = model.compute(month, cumulative_state)
      revenue = apply_growth_overlay(step.revenue, month,
                                     growth_assumptions.monthly_growth_rate)
    except OverflowError as e:
      raise ValueError(f'Revenue overflowed at month {month}') from e

    cumulative_state = step.new_cumulative_state
    profit = revenue - costs

    if not (isfinite(revenue) and isfinite(costs) and isfinite(profit)):
      raise ValueError(f'Non-finite forecast value at month {month}: '
                       f'revenue={revenue}, costs={costs}')

    if break_even_month is None and profit > 0:
      break_even_month = month
      logger.debug('%s: break-even at month %d', resolved.value, month)

    monthly.append(
        MonthlyForecastEntry(
            month=(month - 1) % 12 + 1,
            year=(month - 1) // 12 + 1,
            revenue=round_half_up(revenue),
            costs=round_half_up(costs),
            profit=round_half_up(profit),
        ))

  return ForecastResult(
      monthly=tuple(monthly),
      annual=tuple(aggregate_annual(monthly)),
      break_even_month=break_even_month,
      diag={
          'variant': resolved.value,
          'requested_variant': str(getattr(variant, 'value', variant)),
          'variant_fallback': fell_back,
          'horizon_months': horizon_months,
          'final_cumulative_state': cumulative_state,
      },
  )
