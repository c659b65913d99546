"""Roll monthly forecast entries up into annual summaries."""

from collections.abc import Iterable

from revenue_forecast.domain.types import AnnualForecastEntry
from revenue_forecast.domain.types import MonthlyForecastEntry


def aggregate_annual(
    monthly: Iterable[MonthlyForecastEntry]) -> list[AnnualForecastEntry]:
  """
  Sum monthly entries per relative year.

  Sums are taken over the already-rounded monthly figures, so each annual
  entry equals the sum of its months exactly.

  Args:
    monthly: Monthly entries in any order

  Returns:
    One AnnualForecastEntry per year present, ascending by year
  """
  totals: dict[int, list[int]] = {}
  for entry in monthly:
    bucket = totals.setdefault(entry.year, [0, 0, 0])
    bucket[0] += entry.revenue
    bucket[1] += entry.costs
    bucket[2] += entry.profit

  return [
      AnnualForecastEntry(year=year,
                          revenue=revenue,
                          costs=costs,
                          profit=profit)
      for year, (revenue, costs, profit) in sorted(totals.items())
  ]
