'''
Forecast analysis utilities.

Import directly from the submodules:
  from revenue_forecast.analysis.export import export_monthly_csv
  from revenue_forecast.analysis.kpis import compute_kpis
  from revenue_forecast.analysis.sensitivity import SensitivityTableBuilder
'''
