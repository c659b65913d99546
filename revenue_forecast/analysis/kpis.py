'''
Summary KPIs for a forecast.

Margins divide profit by revenue; a zero revenue yields a margin of 0
instead of NaN so downstream tables never carry non-finite values.
'''

from dataclasses import dataclass, field
from typing import Dict, Optional

from revenue_forecast.domain.types import ForecastResult

EARLY_MONTHS = 12


def safe_margin(profit: float, revenue: float) -> float:
  '''profit / revenue, or 0 when revenue is 0.'''
  if revenue == 0:
    return 0.0
  return profit / revenue


@dataclass(frozen=True)
class ForecastKPIs:
  '''
  Headline figures for a forecast.

  Attributes:
    total_revenue: Sum of monthly revenue over the horizon
    total_costs: Sum of monthly costs over the horizon
    total_profit: Sum of monthly profit over the horizon
    profit_margin: total_profit / total_revenue (0 if no revenue)
    break_even_month: First month with positive profit, if any
    early_burn: Total losses over the first twelve months (positive number)
    peak_monthly_revenue: Largest single-month revenue
    annual_margins: Relative year -> profit margin for that year
  '''
  total_revenue: int
  total_costs: int
  total_profit: int
  profit_margin: float
  break_even_month: Optional[int]
  early_burn: int
  peak_monthly_revenue: int
  annual_margins: Dict[int, float] = field(default_factory=dict)


def compute_kpis(result: ForecastResult) -> ForecastKPIs:
  '''Compute headline KPIs from a forecast result.'''
  total_revenue = sum(e.revenue for e in result.annual)
  total_costs = sum(e.costs for e in result.annual)
  total_profit = sum(e.profit for e in result.annual)

  early_burn = sum(-e.profit
                   for e in result.monthly[:EARLY_MONTHS]
                   if e.profit < 0)
  peak = max((e.revenue for e in result.monthly), default=0)

  return ForecastKPIs(
      total_revenue=total_revenue,
      total_costs=total_costs,
      total_profit=total_profit,
      profit_margin=safe_margin(total_profit, total_revenue),
      break_even_month=result.break_even_month,
      early_burn=early_burn,
      peak_monthly_revenue=peak,
      annual_margins={
          e.year: safe_margin(e.profit, e.revenue) for e in result.annual
      },
  )
