'''
Domain types for the revenue forecasting engine.

These dataclasses are the typed seams between the parameter resolver, the
per-variant revenue models, the simulation loop and the consumers of a
forecast (export, KPIs, sensitivity). All of them are immutable so a result
can be shared freely once produced.
'''

from dataclasses import dataclass, field
from enum import Enum
from math import isfinite
from typing import Any, Dict, Mapping, Optional, Tuple

SUPPORTED_HORIZONS: Tuple[int, ...] = (12, 24, 36, 48, 60)


class BusinessModelVariant(str, Enum):
  '''Closed set of revenue-model shapes the engine supports.'''
  SAAS = 'SAAS'
  HARDWARE_SAAS = 'HardwareSAAS'
  STRAIGHT_SALES = 'StraightSales'
  SUBSCRIPTION_PRODUCT = 'SubscriptionProduct'
  MARKETPLACE = 'Marketplace'
  GENERIC = 'Generic'

  @classmethod
  def parse(cls, tag: Any) -> Optional['BusinessModelVariant']:
    '''
    Parse a variant tag.

    Accepts enum members, canonical tags ('HardwareSAAS') and the display
    labels stored by older saved models ('Hardware + SAAS').

    Returns:
      The matching variant, or None if the tag is not recognized
    '''
    if isinstance(tag, cls):
      return tag
    if not isinstance(tag, str):
      return None
    text = tag.strip()
    for member in cls:
      if text == member.value:
        return member
    return _VARIANT_LABELS.get(text)


_VARIANT_LABELS: Dict[str, BusinessModelVariant] = {
    'Hardware + SAAS': BusinessModelVariant.HARDWARE_SAAS,
    'Straight Sales': BusinessModelVariant.STRAIGHT_SALES,
    'Subscription Product': BusinessModelVariant.SUBSCRIPTION_PRODUCT,
}


def _require_finite(value: float, name: str) -> float:
  value = float(value)
  if not isfinite(value):
    raise ValueError(f'{name} must be finite, got: {value}')
  return value


def validate_horizon(horizon_months: Any) -> int:
  '''
  Reject forecast horizons outside the supported set.

  Integral floats (e.g. 12.0 from JSON) are accepted and returned as int;
  fractional numbers, bools and strings are rejected.
  '''
  if (isinstance(horizon_months, bool) or
      not isinstance(horizon_months, (int, float)) or
      horizon_months not in SUPPORTED_HORIZONS):
    raise ValueError(f'Unsupported forecast horizon: {horizon_months} months. '
                     f'Available: {list(SUPPORTED_HORIZONS)}')
  return int(horizon_months)


@dataclass(frozen=True)
class RevenueStep:
  '''
  Output of one month of a revenue model.

  Attributes:
    revenue: Gross revenue for the month, before the global growth overlay
    new_cumulative_state: Carried users/subscribers after this month
    diag: Intermediate values (new users, churned users, gmv, ...)
  '''
  revenue: float
  new_cumulative_state: float
  diag: Dict[str, float] = field(default_factory=dict)


@dataclass(frozen=True)
class GrowthAssumptions:
  '''
  Global growth assumptions, all expressed as percentages.

  Only monthly_growth_rate is read by the simulation. seasonal_uplift and
  churn_rate are carried for callers that store them alongside a model.
  '''
  monthly_growth_rate: float = 5.0
  seasonal_uplift: float = 0.0
  churn_rate: float = 5.0

  def __post_init__(self):
    _require_finite(self.monthly_growth_rate, 'monthly_growth_rate')
    _require_finite(self.seasonal_uplift, 'seasonal_uplift')
    _require_finite(self.churn_rate, 'churn_rate')

  @classmethod
  def from_dict(cls, data: Mapping[str, Any]) -> 'GrowthAssumptions':
    '''Create from the camelCase input contract, defaulting missing keys.'''
    defaults = cls()
    return cls(
        monthly_growth_rate=float(
            data.get('monthlyGrowthRate', defaults.monthly_growth_rate)),
        seasonal_uplift=float(
            data.get('seasonalUplift', defaults.seasonal_uplift)),
        churn_rate=float(data.get('churnRate', defaults.churn_rate)),
    )

  def to_dict(self) -> Dict[str, float]:
    return {
        'monthlyGrowthRate': self.monthly_growth_rate,
        'seasonalUplift': self.seasonal_uplift,
        'churnRate': self.churn_rate,
    }


@dataclass(frozen=True)
class CostStructure:
  '''
  Recurring cost structure.

  Attributes:
    monthly_cost: Cost incurred every month
    annual_cost: Yearly cost, amortized evenly over twelve months
  '''
  monthly_cost: float = 0.0
  annual_cost: float = 0.0

  def __post_init__(self):
    _require_finite(self.monthly_cost, 'monthly_cost')
    _require_finite(self.annual_cost, 'annual_cost')

  @property
  def monthly_total(self) -> float:
    '''Monthly cost plus the amortized share of the annual cost.'''
    return self.monthly_cost + self.annual_cost / 12

  @classmethod
  def from_dict(cls, data: Mapping[str, Any]) -> 'CostStructure':
    return cls(
        monthly_cost=float(data.get('monthlyCost', 0.0)),
        annual_cost=float(data.get('annualCost', 0.0)),
    )

  def to_dict(self) -> Dict[str, float]:
    return {'monthlyCost': self.monthly_cost, 'annualCost': self.annual_cost}


@dataclass(frozen=True)
class MonthlyForecastEntry:
  '''
  One simulated month, currency fields rounded to whole units.

  Attributes:
    month: Month within the relative year (1..12)
    year: Relative forecast year (1..N), not a calendar year
    revenue: Rounded revenue
    costs: Rounded costs
    profit: Rounded profit
  '''
  month: int
  year: int
  revenue: int
  costs: int
  profit: int

  def to_dict(self) -> Dict[str, int]:
    return {
        'month': self.month,
        'year': self.year,
        'revenue': self.revenue,
        'costs': self.costs,
        'profit': self.profit,
    }


@dataclass(frozen=True)
class AnnualForecastEntry:
  '''Sums of the monthly entries of one relative year.'''
  year: int
  revenue: int
  costs: int
  profit: int

  def to_dict(self) -> Dict[str, int]:
    return {
        'year': self.year,
        'revenue': self.revenue,
        'costs': self.costs,
        'profit': self.profit,
    }


@dataclass(frozen=True)
class ForecastResult:
  '''
  Complete forecast with diagnostics.

  Attributes:
    monthly: One entry per simulated month, in order
    annual: One entry per relative year, ascending
    break_even_month: First absolute month (1-based) with positive profit,
      or None if profit never turned positive within the horizon
    diag: Diagnostics (resolved variant, fallback flag, horizon, ...)
  '''
  monthly: Tuple[MonthlyForecastEntry, ...]
  annual: Tuple[AnnualForecastEntry, ...]
  break_even_month: Optional[int] = None
  diag: Dict[str, Any] = field(default_factory=dict)

  @property
  def horizon_months(self) -> int:
    return len(self.monthly)

  def to_dict(self) -> Dict[str, Any]:
    '''Convert to the output contract; breakEvenMonth is omitted if absent.'''
    result: Dict[str, Any] = {
        'monthly': [entry.to_dict() for entry in self.monthly],
        'annual': [entry.to_dict() for entry in self.annual],
    }
    if self.break_even_month is not None:
      result['breakEvenMonth'] = self.break_even_month
    return result
