"""
Forecast request configuration.

ForecastRequest is the immutable input to a forecast run. It serializes to
and from the camelCase JSON contract used by the callers that store revenue
models, so a saved request can be re-run unchanged.
"""

from dataclasses import dataclass
from dataclasses import field
import json
from typing import Any, Dict, Mapping

from revenue_forecast.domain.types import BusinessModelVariant
from revenue_forecast.domain.types import CostStructure
from revenue_forecast.domain.types import GrowthAssumptions
from revenue_forecast.domain.types import validate_horizon

DEFAULT_HORIZON_MONTHS = 36


@dataclass(frozen=True)
class ForecastRequest:
  """
  Inputs for one forecast run.

  The variant is kept as a tag string so that an unrecognized tag survives
  until run time, where it falls back to the Generic model with a warning.

  Attributes:
    variant: Business-model variant tag (e.g., 'SAAS', 'Marketplace')
    parameters: Variant parameter overrides, merged onto defaults at run time
    growth_assumptions: Global growth assumptions (percentages)
    cost_structure: Monthly and annual costs
    horizon_months: Forecast horizon, one of 12, 24, 36, 48, 60
    name: Human-readable label
  """
  variant: str = BusinessModelVariant.SAAS.value
  parameters: Dict[str, float] = field(default_factory=dict)
  growth_assumptions: GrowthAssumptions = field(
      default_factory=GrowthAssumptions)
  cost_structure: CostStructure = field(default_factory=CostStructure)
  horizon_months: int = DEFAULT_HORIZON_MONTHS
  name: str = 'default'

  def __post_init__(self):
    object.__setattr__(self, 'horizon_months',
                       validate_horizon(self.horizon_months))
    if isinstance(self.variant, BusinessModelVariant):
      object.__setattr__(self, 'variant', self.variant.value)

  @classmethod
  def default(cls) -> 'ForecastRequest':
    """
    Create the default request.

    Uses:
      - SAAS with default parameters
      - 5% monthly global growth, 5% churn, no seasonal uplift
      - No costs
      - 36-month horizon
    """
    return cls(name='default')

  @classmethod
  def preset(cls, variant: BusinessModelVariant,
             horizon_months: int = DEFAULT_HORIZON_MONTHS) -> 'ForecastRequest':
    """Request for a variant using its default parameters."""
    return cls(variant=variant.value,
               horizon_months=horizon_months,
               name=variant.value)

  def to_dict(self) -> Dict[str, Any]:
    """Convert to the camelCase input contract."""
    return {
        'name': self.name,
        'businessModelVariant': self.variant,
        'parameters': dict(self.parameters),
        'growthAssumptions': self.growth_assumptions.to_dict(),
        'costStructure': self.cost_structure.to_dict(),
        'forecastHorizonMonths': self.horizon_months,
    }

  def to_json(self) -> str:
    """Serialize to JSON string."""
    return json.dumps(self.to_dict(), indent=2)

  @classmethod
  def from_dict(cls, data: Mapping[str, Any]) -> 'ForecastRequest':
    """
    Create from the camelCase input contract.

    Missing sections fall back to their defaults.

    Raises:
      ValueError: If the horizon is unsupported or a cost/growth value
        is not finite
    """
    return cls(
        variant=data.get('businessModelVariant',
                         BusinessModelVariant.SAAS.value),
        parameters=dict(data.get('parameters') or {}),
        growth_assumptions=GrowthAssumptions.from_dict(
            data.get('growthAssumptions') or {}),
        cost_structure=CostStructure.from_dict(
            data.get('costStructure') or {}),
        horizon_months=data.get('forecastHorizonMonths',
                                DEFAULT_HORIZON_MONTHS),
        name=data.get('name', 'default'),
    )

  @classmethod
  def from_json(cls, json_str: str) -> 'ForecastRequest':
    """Create from JSON string."""
    return cls.from_dict(json.loads(json_str))
