import pytest

from revenue_forecast.models.growth import compound
from revenue_forecast.models.growth import GenericModel
from revenue_forecast.models.growth import MarketplaceModel


class TestMarketplaceModel:
  """Tests for the marketplace model."""

  def test_month_three(self):
    """gmv = 50,000 * 1.08^2 = 58,320; revenue = 58,320 * 3% = 1,749.6."""
    model = MarketplaceModel.from_parameters({
        'baseGmv': 50000,
        'takeRate': 3,
        'monthlyGrowthRate': 8,
    })
    step = model.compute(month=3, cumulative_state=0.0)

    assert step.diag['gmv'] == pytest.approx(58320.0)
    assert step.revenue == pytest.approx(1749.6)

  def test_first_month_uses_base_gmv(self):
    model = MarketplaceModel.from_parameters(MarketplaceModel.defaults)
    step = model.compute(month=1, cumulative_state=3.0)

    assert step.revenue == pytest.approx(1500.0)
    assert step.new_cumulative_state == 3.0

  def test_legacy_alias_declared(self):
    assert MarketplaceModel.aliases == {'gmv': 'baseGmv'}


class TestGenericModel:
  """Tests for the generic fallback model."""

  def test_compounding(self):
    """10,000 * 1.05^2 = 11,025 in month 3."""
    model = GenericModel.from_parameters(GenericModel.defaults)
    assert model.compute(1, 0.0).revenue == pytest.approx(10000.0)
    assert model.compute(3, 0.0).revenue == pytest.approx(11025.0)

  def test_negative_growth(self):
    model = GenericModel.from_parameters({
        'monthlyRevenue': 2000,
        'growthRate': -10
    })
    assert model.compute(2, 0.0).revenue == pytest.approx(1800.0)

  def test_empty_parameters(self):
    model = GenericModel.from_parameters({})
    assert model.compute(5, 0.0).revenue == 0.0


class TestCompound:

  def test_no_growth_in_first_period(self):
    assert compound(100.0, 50.0, 1) == 100.0

  def test_growth(self):
    assert compound(100.0, 50.0, 3) == pytest.approx(225.0)
