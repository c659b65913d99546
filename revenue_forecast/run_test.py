import argparse
import logging
import sys

import pandas as pd
import pytest

from revenue_forecast.domain.types import CostStructure
from revenue_forecast.run import _build_request
from revenue_forecast.run import _parse_params
from revenue_forecast.run import main
from revenue_forecast.run import run_forecast
from revenue_forecast.scenarios.config import ForecastRequest


class TestRunForecast:
  """Tests for the run_forecast entrypoint."""

  def test_default_request(self):
    result = run_forecast()

    assert len(result.monthly) == 36
    assert result.diag['scenario'] == 'default'
    assert result.diag['variant'] == 'SAAS'
    assert result.diag['param_pricingTier'] == 29.0

  def test_saas_worked_example(self, saas_params, default_growth):
    request = ForecastRequest(variant='SAAS',
                              parameters=saas_params,
                              growth_assumptions=default_growth,
                              horizon_months=12)
    result = run_forecast(request)

    assert result.monthly[0].revenue == 834
    assert result.break_even_month == 1

  def test_overrides_merged_onto_defaults(self, no_growth):
    """Only takeRate is overridden; baseGmv keeps its 50,000 default."""
    request = ForecastRequest(variant='Marketplace',
                              parameters={'takeRate': 4},
                              growth_assumptions=no_growth,
                              horizon_months=12)
    result = run_forecast(request)

    assert result.monthly[0].revenue == 2000
    assert result.diag['param_baseGmv'] == 50000.0

  def test_no_break_even(self, flat_generic_params, no_growth):
    request = ForecastRequest(variant='Generic',
                              parameters=flat_generic_params,
                              growth_assumptions=no_growth,
                              cost_structure=CostStructure(monthly_cost=900,
                                                           annual_cost=2400),
                              horizon_months=12)
    result = run_forecast(request)

    assert result.break_even_month is None
    assert result.annual[0].profit == -1200

  def test_float_horizon_from_json(self, flat_generic_params):
    request = ForecastRequest.from_dict({
        'businessModelVariant': 'Generic',
        'parameters': flat_generic_params,
        'forecastHorizonMonths': 24.0,
    })
    result = run_forecast(request)

    assert len(result.monthly) == 24
    assert [entry.year for entry in result.annual] == [1, 2]

  def test_unknown_variant_surfaces_fallback(self, caplog):
    request = ForecastRequest.from_dict({
        'businessModelVariant': 'Franchise',
        'growthAssumptions': {
            'monthlyGrowthRate': 0
        },
        'forecastHorizonMonths': 12,
    })
    with caplog.at_level(logging.WARNING):
      result = run_forecast(request)

    assert result.diag['variant_fallback'] is True
    assert result.diag['requested_variant'] == 'Franchise'
    assert result.diag['variant'] == 'Generic'
    assert result.monthly[0].revenue == 10000
    assert caplog.text.count('Unknown business model variant') == 1

  def test_legacy_labels_and_keys(self, no_growth):
    request = ForecastRequest(variant='Hardware + SAAS',
                              parameters={'averageUnitsPerMonth': 10},
                              growth_assumptions=no_growth,
                              horizon_months=12)
    result = run_forecast(request)

    assert result.diag['variant'] == 'HardwareSAAS'
    assert result.diag['variant_fallback'] is False
    assert result.monthly[0].revenue == 4190


class TestCli:
  """Tests for the command-line entrypoint."""

  def test_parse_params(self):
    assert _parse_params(['takeRate=4', ' baseGmv = 1000']) == {
        'takeRate': 4.0,
        'baseGmv': 1000.0,
    }

  def test_parse_params_invalid(self):
    with pytest.raises(ValueError, match='KEY=VALUE'):
      _parse_params(['takeRate'])

  def test_build_request_from_flags(self):
    args = argparse.Namespace(config=None,
                              variant='Marketplace',
                              param=['takeRate=5'],
                              growth_rate=1.5,
                              monthly_cost=100.0,
                              annual_cost=None,
                              horizon=24)
    request = _build_request(args)

    assert request.variant == 'Marketplace'
    assert request.parameters == {'takeRate': 5.0}
    assert request.growth_assumptions.monthly_growth_rate == 1.5
    assert request.cost_structure.monthly_cost == 100.0
    assert request.cost_structure.annual_cost == 0.0
    assert request.horizon_months == 24

  def test_build_request_from_config(self, tmp_path):
    config_path = tmp_path / 'request.json'
    config_path.write_text(
        ForecastRequest(variant='Generic',
                        parameters={'growthRate': 1},
                        horizon_months=48).to_json(),
        encoding='utf-8',
    )
    args = argparse.Namespace(config=config_path,
                              variant='SAAS',
                              param=['monthlyRevenue=500'],
                              growth_rate=None,
                              monthly_cost=None,
                              annual_cost=None,
                              horizon=None)
    request = _build_request(args)

    assert request.variant == 'Generic'
    assert request.parameters == {'growthRate': 1, 'monthlyRevenue': 500.0}
    assert request.horizon_months == 48

  def test_main_writes_csv(self, tmp_path, monkeypatch):
    output = tmp_path / 'out' / 'forecast.csv'
    monkeypatch.setattr(sys, 'argv', [
        'run', '--variant', 'StraightSales', '--horizon', '24',
        '--monthly-cost', '5000', '--output',
        str(output)
    ])
    main()

    df = pd.read_csv(output)
    assert len(df) == 24
    assert list(df.columns) == ['Year', 'Month', 'Revenue', 'Costs', 'Profit']
