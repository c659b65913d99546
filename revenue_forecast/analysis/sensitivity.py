"""
Sensitivity analysis for revenue forecasts.

This module generates 2D sensitivity tables showing how a forecast metric
varies across global monthly growth rates and monthly costs, keeping the
variant parameters, annual cost and horizon fixed.

CLI Usage:
  python -m revenue_forecast.analysis.sensitivity \\
      --variant SAAS \\
      --growth-rates 0,2.5,5,7.5 \\
      --monthly-costs 2000,4000,6000 \\
      --metric break_even_month
"""

import argparse
import dataclasses
import logging
from collections.abc import Callable
from pathlib import Path

import pandas as pd

from revenue_forecast.domain.types import ForecastResult
from revenue_forecast.run import run_forecast
from revenue_forecast.scenarios.config import ForecastRequest

logger = logging.getLogger(__name__)


def _break_even(result: ForecastResult) -> float:
  if result.break_even_month is None:
    return float('nan')
  return float(result.break_even_month)


METRICS: dict[str, Callable[[ForecastResult], float]] = {
    'profit': lambda r: float(sum(e.profit for e in r.annual)),
    'revenue': lambda r: float(sum(e.revenue for e in r.annual)),
    'break_even_month': _break_even,
}


class SensitivityTableBuilder:
  """
  Build 2D sensitivity tables for a forecast request.

  Varies the global monthly growth rate and the monthly cost while keeping
  everything else in the base request fixed.
  """

  def __init__(self, base_request: ForecastRequest):
    """
    Initialize sensitivity table builder.

    Args:
        base_request: Request whose other inputs stay fixed
    """
    self.base_request = base_request

    logger.info('Initialized SensitivityTableBuilder')
    logger.info('  Variant: %s', base_request.variant)
    logger.info('  Horizon: %d months', base_request.horizon_months)
    logger.info('  Annual cost: %.2f', base_request.cost_structure.annual_cost)

  def _request_for(self, growth_rate: float,
                   monthly_cost: float) -> ForecastRequest:
    base = self.base_request
    return dataclasses.replace(
        base,
        growth_assumptions=dataclasses.replace(base.growth_assumptions,
                                               monthly_growth_rate=growth_rate),
        cost_structure=dataclasses.replace(base.cost_structure,
                                           monthly_cost=monthly_cost),
    )

  def build(
      self,
      growth_rates: list[float],
      monthly_costs: list[float],
      metric: str = 'profit',
  ) -> pd.DataFrame:
    """
    Build 2D sensitivity table.

    Args:
        growth_rates: Global monthly growth rates in percent
                      (e.g., [0, 2.5, 5])
        monthly_costs: Monthly cost values (e.g., [2000, 4000])
        metric: 'profit' or 'revenue' (horizon totals) or
                'break_even_month' (NaN when never reached)

    Returns:
        DataFrame with growth rates as index, monthly costs as columns,
        and the metric as cell values

    Raises:
        ValueError: If either axis is empty
        KeyError: If the metric is unknown
    """
    if not growth_rates:
      raise ValueError('growth_rates cannot be empty')
    if not monthly_costs:
      raise ValueError('monthly_costs cannot be empty')
    try:
      metric_fn = METRICS[metric]
    except KeyError as e:
      raise KeyError(f"Unknown metric: '{metric}'. "
                     f'Available: {list(METRICS.keys())}') from e

    logger.info('Building sensitivity table: %d x %d (%s)', len(growth_rates),
                len(monthly_costs), metric)

    data_rows = []
    for g in growth_rates:
      row_data = []
      for cost in monthly_costs:
        result = run_forecast(self._request_for(g, cost))
        row_data.append(metric_fn(result))
      data_rows.append(row_data)

    df = pd.DataFrame(data_rows,
                      index=pd.Index(growth_rates, name='Monthly Growth (%)'),
                      columns=pd.Index(monthly_costs, name='Monthly Cost'))

    logger.info('Sensitivity table built successfully')
    return df


def _parse_float_list(s: str) -> list[float]:
  """Parse comma-separated float list."""
  return [float(x.strip()) for x in s.split(',')]


def main() -> None:
  """CLI entrypoint for sensitivity analysis."""
  parser = argparse.ArgumentParser(
      description='Revenue forecast sensitivity analysis',
      formatter_class=argparse.RawDescriptionHelpFormatter,
      epilog=__doc__)

  parser.add_argument('--config',
                      type=Path,
                      help='JSON request file (camelCase input contract)')
  parser.add_argument('--variant',
                      type=str,
                      default='SAAS',
                      help='Business model variant (default: SAAS)')
  parser.add_argument('--growth-rates',
                      type=str,
                      default='0,2.5,5,7.5,10',
                      help='Comma-separated monthly growth rates in percent')
  parser.add_argument('--monthly-costs',
                      type=str,
                      default='1000,2500,5000,10000',
                      help='Comma-separated monthly costs')
  parser.add_argument('--metric',
                      type=str,
                      default='profit',
                      choices=sorted(METRICS),
                      help='Cell metric (default: profit)')
  parser.add_argument('--output', type=Path, help='Output CSV path (optional)')
  parser.add_argument('--verbose',
                      '-v',
                      action='store_true',
                      help='Verbose output')

  args = parser.parse_args()

  logging.basicConfig(
      level=logging.DEBUG if args.verbose else logging.INFO,
      format='%(asctime)s [%(levelname)s] %(message)s',
      datefmt='%Y-%m-%d %H:%M:%S',
  )

  if args.config:
    request = ForecastRequest.from_json(args.config.read_text(encoding='utf-8'))
  else:
    request = ForecastRequest(variant=args.variant, name=args.variant)

  builder = SensitivityTableBuilder(request)
  table = builder.build(
      growth_rates=_parse_float_list(args.growth_rates),
      monthly_costs=_parse_float_list(args.monthly_costs),
      metric=args.metric,
  )

  with pd.option_context('display.max_columns', None, 'display.width', 1000):
    logger.info('\n%s', table.to_string())

  if args.output:
    args.output.parent.mkdir(parents=True, exist_ok=True)
    table.to_csv(args.output)
    logger.info('Saved to: %s', args.output)


if __name__ == '__main__':
  main()
