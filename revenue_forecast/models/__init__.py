"""
Per-variant revenue models.

Each model computes one month of gross revenue for one business-model
variant from its own typed parameter record.

To add a new variant:
1. Add the tag to BusinessModelVariant in domain/types.py
2. Create a RevenueModel subclass declaring variant, defaults and aliases
3. Register it in scenarios/registry.py

Example:
  class LicensingModel(RevenueModel):
    variant = BusinessModelVariant.LICENSING
    defaults = {'licensesPerMonth': 10.0, 'licenseFee': 500.0}

    @classmethod
    def from_parameters(cls, parameters):
      ...

    def compute(self, month, cumulative_state):
      return RevenueStep(revenue=..., new_cumulative_state=cumulative_state)
"""

from revenue_forecast.models.base import RevenueModel
from revenue_forecast.models.growth import GenericModel
from revenue_forecast.models.growth import MarketplaceModel
from revenue_forecast.models.subscription import SaasModel
from revenue_forecast.models.subscription import SubscriptionProductModel
from revenue_forecast.models.unit_sales import HardwareSaasModel
from revenue_forecast.models.unit_sales import StraightSalesModel

__all__ = [
    'GenericModel',
    'HardwareSaasModel',
    'MarketplaceModel',
    'RevenueModel',
    'SaasModel',
    'StraightSalesModel',
    'SubscriptionProductModel',
]
