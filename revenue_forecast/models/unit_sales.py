'''
Stateless unit-sales revenue models.

Revenue depends only on the month number and the parameters; the carried
cumulative state passes through untouched.
'''

from dataclasses import dataclass
from typing import Any, Mapping

from revenue_forecast.domain.types import BusinessModelVariant, RevenueStep
from revenue_forecast.models.base import RevenueModel, pct, read_param

# month % 12 >= 9 with 1-based months: months 9, 10, 11 of every cycle.
SEASONAL_WINDOW_START = 9


def in_seasonal_window(month: int) -> bool:
  '''True if the seasonal uplift applies to this absolute 1-based month.'''
  return month % 12 >= SEASONAL_WINDOW_START


@dataclass(frozen=True)
class HardwareSaasParams:
  hardware_unit_cost: float
  hardware_markup: float
  monthly_saas_price: float
  units_per_month: float


class HardwareSaasModel(RevenueModel):
  '''
  Hardware + SAAS: marked-up hardware sale plus one month of SAAS per unit.

  revenue = units * cost * (1 + markup) + units * saas price
  '''
  variant = BusinessModelVariant.HARDWARE_SAAS
  defaults = {
      'hardwareUnitCost': 200.0,
      'hardwareMarkup': 100.0,
      'monthlySaasPrice': 19.0,
      'unitsPerMonth': 50.0,
  }
  aliases = {'averageUnitsPerMonth': 'unitsPerMonth'}

  def __init__(self, params: HardwareSaasParams):
    self.params = params

  @classmethod
  def from_parameters(cls,
                      parameters: Mapping[str, Any]) -> 'HardwareSaasModel':
    return cls(
        HardwareSaasParams(
            hardware_unit_cost=read_param(parameters, 'hardwareUnitCost'),
            hardware_markup=read_param(parameters, 'hardwareMarkup'),
            monthly_saas_price=read_param(parameters, 'monthlySaasPrice'),
            units_per_month=read_param(parameters, 'unitsPerMonth'),
        ))

  def compute(self, month: int, cumulative_state: float) -> RevenueStep:
    p = self.params
    hardware = p.units_per_month * (p.hardware_unit_cost *
                                    (1 + pct(p.hardware_markup)))
    saas = p.units_per_month * p.monthly_saas_price
    return RevenueStep(revenue=hardware + saas,
                       new_cumulative_state=cumulative_state,
                       diag={
                           'hardware_revenue': hardware,
                           'saas_revenue': saas,
                       })


@dataclass(frozen=True)
class StraightSalesParams:
  unit_price: float
  units_per_month: float
  seasonal_uplift: float


class StraightSalesModel(RevenueModel):
  '''Straight sales with a fixed seasonal uplift window.'''
  variant = BusinessModelVariant.STRAIGHT_SALES
  defaults = {
      'unitPrice': 100.0,
      'unitsPerMonth': 200.0,
      'seasonalUplift': 20.0,
  }

  def __init__(self, params: StraightSalesParams):
    self.params = params

  @classmethod
  def from_parameters(cls,
                      parameters: Mapping[str, Any]) -> 'StraightSalesModel':
    return cls(
        StraightSalesParams(
            unit_price=read_param(parameters, 'unitPrice'),
            units_per_month=read_param(parameters, 'unitsPerMonth'),
            seasonal_uplift=read_param(parameters, 'seasonalUplift'),
        ))

  def compute(self, month: int, cumulative_state: float) -> RevenueStep:
    p = self.params
    revenue = p.unit_price * p.units_per_month
    seasonal = in_seasonal_window(month)
    if seasonal:
      revenue *= 1 + pct(p.seasonal_uplift)
    return RevenueStep(revenue=revenue,
                       new_cumulative_state=cumulative_state,
                       diag={'seasonal': float(seasonal)})
