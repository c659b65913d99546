'''
Stateless models with an intrinsic compounding growth term.

Both grow their base figure by (1 + rate)^(month - 1). The simulation's
global growth overlay is applied on top of this, so these two variants
compound growth twice; that behavior is kept as-is.
'''

from dataclasses import dataclass
from typing import Any, Mapping

from revenue_forecast.domain.types import BusinessModelVariant, RevenueStep
from revenue_forecast.models.base import RevenueModel, pct, read_param


def compound(base: float, rate: float, month: int) -> float:
  '''Grow base by a percentage rate for (month - 1) periods.'''
  return base * (1 + pct(rate))**(month - 1)


@dataclass(frozen=True)
class MarketplaceParams:
  base_gmv: float
  take_rate: float
  monthly_growth_rate: float


class MarketplaceModel(RevenueModel):
  '''Marketplace: a take rate on compounding gross merchandise value.'''
  variant = BusinessModelVariant.MARKETPLACE
  defaults = {
      'baseGmv': 50000.0,
      'takeRate': 3.0,
      'monthlyGrowthRate': 8.0,
  }
  aliases = {'gmv': 'baseGmv'}

  def __init__(self, params: MarketplaceParams):
    self.params = params

  @classmethod
  def from_parameters(cls,
                      parameters: Mapping[str, Any]) -> 'MarketplaceModel':
    return cls(
        MarketplaceParams(
            base_gmv=read_param(parameters, 'baseGmv'),
            take_rate=read_param(parameters, 'takeRate'),
            monthly_growth_rate=read_param(parameters, 'monthlyGrowthRate'),
        ))

  def compute(self, month: int, cumulative_state: float) -> RevenueStep:
    p = self.params
    gmv = compound(p.base_gmv, p.monthly_growth_rate, month)
    return RevenueStep(revenue=gmv * pct(p.take_rate),
                       new_cumulative_state=cumulative_state,
                       diag={'gmv': gmv})


@dataclass(frozen=True)
class GenericParams:
  monthly_revenue: float
  growth_rate: float


class GenericModel(RevenueModel):
  '''Generic fallback: a flat monthly revenue growing at a fixed rate.'''
  variant = BusinessModelVariant.GENERIC
  defaults = {
      'monthlyRevenue': 10000.0,
      'growthRate': 5.0,
  }

  def __init__(self, params: GenericParams):
    self.params = params

  @classmethod
  def from_parameters(cls, parameters: Mapping[str, Any]) -> 'GenericModel':
    return cls(
        GenericParams(
            monthly_revenue=read_param(parameters, 'monthlyRevenue'),
            growth_rate=read_param(parameters, 'growthRate'),
        ))

  def compute(self, month: int, cumulative_state: float) -> RevenueStep:
    p = self.params
    return RevenueStep(revenue=compound(p.monthly_revenue, p.growth_rate,
                                        month),
                       new_cumulative_state=cumulative_state)
