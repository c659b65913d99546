import pytest

from revenue_forecast.domain.types import CostStructure
from revenue_forecast.domain.types import GrowthAssumptions


@pytest.fixture
def saas_params() -> dict[str, float]:
  """SAAS parameters from the worked example (25 paying users in month 1)."""
  return {
      'usersPerMonth': 100,
      'churnRate': 5,
      'pricingTier': 29,
      'upsellPercentage': 15,
      'freeTrialConversionRate': 25,
  }


@pytest.fixture
def default_growth() -> GrowthAssumptions:
  """5% monthly global growth, no seasonal uplift, 5% churn."""
  return GrowthAssumptions(monthly_growth_rate=5,
                           seasonal_uplift=0,
                           churn_rate=5)


@pytest.fixture
def no_growth() -> GrowthAssumptions:
  """Global overlay disabled, so model output passes through unchanged."""
  return GrowthAssumptions(monthly_growth_rate=0)


@pytest.fixture
def no_costs() -> CostStructure:
  return CostStructure(monthly_cost=0, annual_cost=0)


@pytest.fixture
def flat_generic_params() -> dict[str, float]:
  """Generic model with a constant 1,000 per month."""
  return {'monthlyRevenue': 1000, 'growthRate': 0}
