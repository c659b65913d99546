'''
Base class for per-variant revenue models.

Each business-model variant is a RevenueModel subclass carrying its own
typed parameter record. A model computes one month of gross revenue from
the month number and the carried cumulative state; it never holds state
of its own between months.
'''

from abc import ABC, abstractmethod
from math import isfinite
from typing import Any, ClassVar, Dict, Mapping

from revenue_forecast.domain.types import BusinessModelVariant, RevenueStep


def pct(value: float) -> float:
  '''Convert a percentage (e.g. 15) to a fraction (0.15).'''
  return value / 100.0


def read_param(parameters: Mapping[str, Any], key: str) -> float:
  '''Read a numeric parameter; absent or non-finite values read as 0.'''
  try:
    value = float(parameters.get(key, 0.0))
  except (TypeError, ValueError):
    return 0.0
  return value if isfinite(value) else 0.0


class RevenueModel(ABC):
  '''
  Base class for revenue models.

  Subclasses declare the variant they implement, its default parameter
  schema and any legacy key aliases, then implement from_parameters() and
  compute().

  Attributes:
    variant: Variant tag handled by the model
    defaults: Default parameter map (camelCase keys)
    aliases: Legacy key -> canonical key, honored by the resolver
  '''
  variant: ClassVar[BusinessModelVariant]
  defaults: ClassVar[Dict[str, float]] = {}
  aliases: ClassVar[Dict[str, str]] = {}

  @classmethod
  @abstractmethod
  def from_parameters(cls, parameters: Mapping[str, Any]) -> 'RevenueModel':
    '''
    Build the model from a resolved parameter map.

    Args:
      parameters: Parameter name -> value; missing keys read as 0
    '''

  @abstractmethod
  def compute(self, month: int, cumulative_state: float) -> RevenueStep:
    '''
    Compute gross revenue for one month.

    Args:
      month: Absolute simulated month, 1-based
      cumulative_state: Users/subscribers carried from the previous month

    Returns:
      RevenueStep with revenue and the updated cumulative state
    '''
