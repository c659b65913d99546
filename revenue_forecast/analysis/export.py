"""
Tabular views and CSV export of a forecast.

Usage:
  from revenue_forecast.analysis.export import export_monthly_csv

  export_monthly_csv(result, Path('out/forecast.csv'))
"""

import logging
from pathlib import Path

import pandas as pd

from revenue_forecast.domain.types import ForecastResult

logger = logging.getLogger(__name__)

MONTHLY_COLUMNS = ['month', 'year', 'revenue', 'costs', 'profit']
ANNUAL_COLUMNS = ['year', 'revenue', 'costs', 'profit']

# Column order and headers of the exported CSV.
CSV_COLUMNS = {
    'year': 'Year',
    'month': 'Month',
    'revenue': 'Revenue',
    'costs': 'Costs',
    'profit': 'Profit',
}


def monthly_frame(result: ForecastResult) -> pd.DataFrame:
  """
  Monthly entries as a DataFrame.

  Adds an 'absolute_month' column (1..horizon) alongside the relative
  month/year pair.
  """
  df = pd.DataFrame([e.to_dict() for e in result.monthly],
                    columns=MONTHLY_COLUMNS)
  df.insert(0, 'absolute_month', range(1, len(df) + 1))
  return df


def annual_frame(result: ForecastResult) -> pd.DataFrame:
  """Annual entries as a DataFrame."""
  return pd.DataFrame([e.to_dict() for e in result.annual],
                      columns=ANNUAL_COLUMNS)


def export_monthly_csv(result: ForecastResult, output_path: Path) -> Path:
  """
  Write monthly rows as Year, Month, Revenue, Costs, Profit.

  Args:
    result: Forecast to export
    output_path: Destination CSV file; parent directories are created

  Returns:
    The path written
  """
  output_path = Path(output_path)
  output_path.parent.mkdir(parents=True, exist_ok=True)

  df = monthly_frame(result)[list(CSV_COLUMNS)].rename(columns=CSV_COLUMNS)
  df.to_csv(output_path, index=False)

  logger.debug('Wrote %d monthly rows to %s', len(df), output_path)
  return output_path
