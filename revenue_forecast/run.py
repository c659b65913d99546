'''
Single-forecast entrypoint.

This module provides the main entry point for running forecasts. It:
1. Resolves the variant tag (unknown tags fall back to Generic)
2. Merges parameter overrides onto the variant defaults
3. Runs the month-by-month simulation
4. Returns ForecastResult with annual roll-up and diagnostics

Usage:
  from revenue_forecast.run import run_forecast
  from revenue_forecast.scenarios.config import ForecastRequest

  result = run_forecast(ForecastRequest.default())
  print(result.break_even_month)

CLI:
  python -m revenue_forecast.run --variant Marketplace --param takeRate=4 \
    --monthly-cost 1500 --horizon 24 --output forecast.csv
'''

import argparse
import dataclasses
import logging
from pathlib import Path
from typing import Dict, List, Optional

from revenue_forecast.analysis.export import export_monthly_csv
from revenue_forecast.analysis.kpis import compute_kpis
from revenue_forecast.domain.types import CostStructure
from revenue_forecast.domain.types import ForecastResult
from revenue_forecast.domain.types import GrowthAssumptions
from revenue_forecast.domain.types import SUPPORTED_HORIZONS
from revenue_forecast.engine.simulation import run_simulation
from revenue_forecast.scenarios.config import ForecastRequest
from revenue_forecast.scenarios.registry import resolve_parameters
from revenue_forecast.scenarios.registry import resolve_variant

logger = logging.getLogger(__name__)


def run_forecast(request: Optional[ForecastRequest] = None) -> ForecastResult:
  '''
  Run a forecast for a request.

  Args:
    request: ForecastRequest (default: ForecastRequest.default())

  Returns:
    ForecastResult; diag records the resolved parameters, the scenario
    name and whether the variant fell back to Generic
  '''
  if request is None:
    request = ForecastRequest.default()

  variant, fell_back = resolve_variant(request.variant)
  parameters = resolve_parameters(variant, request.parameters)

  logger.debug('Running %s forecast (%s) over %d months', variant.value,
               request.name, request.horizon_months)

  result = run_simulation(
      variant=variant,
      parameters=parameters,
      growth_assumptions=request.growth_assumptions,
      cost_structure=request.cost_structure,
      horizon_months=request.horizon_months,
  )

  diag = dict(result.diag)
  diag.update({
      'scenario': request.name,
      'requested_variant': request.variant,
      'variant_fallback': fell_back,
  })
  diag.update({f'param_{k}': v for k, v in parameters.items()})
  return dataclasses.replace(result, diag=diag)


def _parse_params(pairs: List[str]) -> Dict[str, float]:
  '''Parse KEY=VALUE pairs into a parameter map.'''
  params: Dict[str, float] = {}
  for pair in pairs:
    key, sep, value = pair.partition('=')
    if not sep or not key.strip():
      raise ValueError(f'Expected KEY=VALUE, got: {pair!r}')
    params[key.strip()] = float(value)
  return params


def _build_request(args: argparse.Namespace) -> ForecastRequest:
  if args.config:
    request = ForecastRequest.from_json(args.config.read_text(encoding='utf-8'))
  else:
    request = ForecastRequest(variant=args.variant, name=args.variant)

  overrides = {}
  if args.param:
    overrides['parameters'] = {**request.parameters,
                               **_parse_params(args.param)}
  if args.growth_rate is not None:
    overrides['growth_assumptions'] = dataclasses.replace(
        request.growth_assumptions, monthly_growth_rate=args.growth_rate)
  if args.monthly_cost is not None or args.annual_cost is not None:
    overrides['cost_structure'] = CostStructure(
        monthly_cost=(args.monthly_cost if args.monthly_cost is not None else
                      request.cost_structure.monthly_cost),
        annual_cost=(args.annual_cost if args.annual_cost is not None else
                     request.cost_structure.annual_cost),
    )
  if args.horizon is not None:
    overrides['horizon_months'] = args.horizon

  return dataclasses.replace(request, **overrides)


def main() -> None:
  '''CLI entrypoint.'''
  parser = argparse.ArgumentParser(
      description='Run a monthly revenue forecast',
      formatter_class=argparse.RawDescriptionHelpFormatter,
      epilog=__doc__,
  )
  parser.add_argument('--config',
                      type=Path,
                      help='JSON request file (camelCase input contract)')
  parser.add_argument('--variant',
                      type=str,
                      default='SAAS',
                      help='Business model variant (default: SAAS)')
  parser.add_argument('--param',
                      action='append',
                      default=[],
                      metavar='KEY=VALUE',
                      help='Parameter override, repeatable')
  parser.add_argument('--growth-rate',
                      type=float,
                      help='Global monthly growth rate in percent '
                      f'(default: {GrowthAssumptions().monthly_growth_rate})')
  parser.add_argument('--monthly-cost', type=float, help='Monthly cost')
  parser.add_argument('--annual-cost', type=float, help='Annual cost')
  parser.add_argument('--horizon',
                      type=int,
                      choices=SUPPORTED_HORIZONS,
                      help='Forecast horizon in months')
  parser.add_argument('--output', type=Path, help='Monthly CSV output path')
  parser.add_argument('-v',
                      '--verbose',
                      action='store_true',
                      help='Verbose output')
  args = parser.parse_args()

  logging.basicConfig(
      level=logging.DEBUG if args.verbose else logging.INFO,
      format='%(message)s',
  )

  request = _build_request(args)
  result = run_forecast(request)
  kpis = compute_kpis(result)

  separator = '=' * 70
  logger.info(separator)
  logger.info('Revenue Forecast - %s (%d months)', result.diag['variant'],
              request.horizon_months)
  if result.diag['variant_fallback']:
    logger.info('  (unknown variant %r, Generic model used)', request.variant)
  logger.info(separator)

  logger.info('\nAnnual Summary:')
  for entry in result.annual:
    logger.info('  Year %d: revenue %s, costs %s, profit %s', entry.year,
                f'{entry.revenue:,}', f'{entry.costs:,}', f'{entry.profit:,}')

  logger.info('\nTotals:')
  logger.info('  Revenue: %s', f'{kpis.total_revenue:,}')
  logger.info('  Profit: %s', f'{kpis.total_profit:,}')
  logger.info('  Profit Margin: %.2f%%', kpis.profit_margin * 100)
  if result.break_even_month is not None:
    logger.info('  Break-even: month %d', result.break_even_month)
  else:
    logger.info('  Break-even: not reached')

  if args.output:
    path = export_monthly_csv(result, args.output)
    logger.info('\nWrote monthly forecast: %s', path)

  logger.info(separator)


if __name__ == '__main__':
  main()
