'''Forecast simulation engine with pure functions.'''

from revenue_forecast.engine.aggregate import aggregate_annual
from revenue_forecast.engine.simulation import (
    apply_growth_overlay,
    compute_revenue,
    round_half_up,
    run_simulation,
)

__all__ = [
    'aggregate_annual',
    'apply_growth_overlay',
    'compute_revenue',
    'round_half_up',
    'run_simulation',
]
