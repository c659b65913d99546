'''
Monthly revenue forecasting engine with per-variant revenue models.

Given a business-model variant, its parameters, global growth assumptions,
a cost structure and a horizon, the engine simulates revenue, costs and
profit month by month, rolls them into annual summaries and detects the
break-even month.

Usage:
  from revenue_forecast.run import run_forecast
  from revenue_forecast.scenarios.config import ForecastRequest

  request = ForecastRequest.from_dict({
      'businessModelVariant': 'Marketplace',
      'parameters': {'takeRate': 4},
      'costStructure': {'monthlyCost': 1500, 'annualCost': 6000},
      'forecastHorizonMonths': 24,
  })
  result = run_forecast(request)
'''
