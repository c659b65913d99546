import pytest

from revenue_forecast.domain.types import RevenueStep
from revenue_forecast.models.subscription import carry_base
from revenue_forecast.models.subscription import SaasModel
from revenue_forecast.models.subscription import SubscriptionProductModel


class TestSaasModel:
  """Tests for the SAAS revenue model."""

  def test_first_month(self, saas_params):
    """Month 1 with an empty base.

    - new users = 100 * 25% = 25
    - churned = 0 * 5% = 0
    - base revenue = 25 * 29 = 725
    - with 15% upsell = 833.75
    """
    model = SaasModel.from_parameters(saas_params)
    step = model.compute(month=1, cumulative_state=0.0)

    assert isinstance(step, RevenueStep)
    assert step.new_cumulative_state == pytest.approx(25.0)
    assert step.revenue == pytest.approx(833.75)
    assert step.diag['churned'] == 0.0
    assert step.diag['base_revenue'] == pytest.approx(725.0)

  def test_second_month_churns_carried_base(self, saas_params):
    """Month 2: 25 + 25 - 25 * 5% = 48.75 users."""
    model = SaasModel.from_parameters(saas_params)
    step = model.compute(month=2, cumulative_state=25.0)

    assert step.new_cumulative_state == pytest.approx(48.75)
    assert step.revenue == pytest.approx(48.75 * 29 * 1.15)

  def test_missing_parameters_read_as_zero(self):
    model = SaasModel.from_parameters({'usersPerMonth': 100})
    step = model.compute(month=1, cumulative_state=10.0)

    assert step.revenue == 0.0
    assert step.new_cumulative_state == 10.0

  def test_state_never_negative(self, saas_params):
    """Churn above 100% floors the base at zero."""
    params = dict(saas_params, churnRate=300)
    model = SaasModel.from_parameters(params)

    state = 0.0
    for month in range(1, 25):
      step = model.compute(month, state)
      assert step.new_cumulative_state >= 0
      state = step.new_cumulative_state

  def test_negative_signups_floor_at_zero(self, saas_params):
    params = dict(saas_params, usersPerMonth=-1000)
    step = SaasModel.from_parameters(params).compute(1, 5.0)

    assert step.new_cumulative_state == 0.0
    assert step.revenue == 0.0


class TestSubscriptionProductModel:
  """Tests for the subscription product model."""

  def test_no_trial_conversion(self):
    """New subscribers are added at face value."""
    model = SubscriptionProductModel.from_parameters({
        'subscribersPerMonth': 500,
        'monthlySubscriptionPrice': 10,
        'churnRate': 3,
        'upsellPercentage': 10,
    })
    step = model.compute(month=1, cumulative_state=0.0)

    assert step.new_cumulative_state == pytest.approx(500.0)
    assert step.revenue == pytest.approx(5500.0)

  def test_churn_on_carried_base(self):
    """1000 carried, 3% churn, 500 new -> 1470 subscribers."""
    model = SubscriptionProductModel.from_parameters({
        'subscribersPerMonth': 500,
        'monthlySubscriptionPrice': 10,
        'churnRate': 3,
        'upsellPercentage': 0,
    })
    step = model.compute(month=7, cumulative_state=1000.0)

    assert step.new_cumulative_state == pytest.approx(1470.0)
    assert step.revenue == pytest.approx(14700.0)

  def test_defaults_declared(self):
    assert SubscriptionProductModel.defaults['monthlySubscriptionPrice'] == 9.99
    assert SubscriptionProductModel.aliases == {}


class TestCarryBase:

  def test_upsell_applied_on_base_revenue(self):
    step = carry_base(cumulative_state=0.0,
                      new_users=10,
                      churn_rate=0,
                      price=100,
                      upsell_percentage=50)
    assert step.revenue == pytest.approx(1500.0)

  def test_full_churn_replaces_base(self):
    step = carry_base(cumulative_state=40.0,
                      new_users=10,
                      churn_rate=100,
                      price=1,
                      upsell_percentage=0)
    assert step.new_cumulative_state == pytest.approx(10.0)
