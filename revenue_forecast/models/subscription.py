'''
Stateful subscription revenue models.

Both models carry a cumulative user/subscriber base month to month: new
users are added, a churn percentage of the carried base is removed, and the
resulting base is billed at a flat monthly price plus an upsell percentage.
'''

from dataclasses import dataclass
from typing import Any, Mapping

from revenue_forecast.domain.types import BusinessModelVariant, RevenueStep
from revenue_forecast.models.base import RevenueModel, pct, read_param


def carry_base(
    cumulative_state: float,
    new_users: float,
    churn_rate: float,
    price: float,
    upsell_percentage: float,
) -> RevenueStep:
  '''
  Advance a subscriber base by one month and bill it.

  Args:
    cumulative_state: Base carried from the previous month
    new_users: Users added this month
    churn_rate: Monthly churn of the carried base, in percent
    price: Monthly price per user
    upsell_percentage: Extra revenue as a percentage of base revenue

  Returns:
    RevenueStep; the new base is floored at zero
  '''
  churned = cumulative_state * pct(churn_rate)
  new_state = max(0.0, cumulative_state + new_users - churned)
  base_revenue = new_state * price
  revenue = base_revenue + base_revenue * pct(upsell_percentage)
  return RevenueStep(revenue=revenue,
                     new_cumulative_state=new_state,
                     diag={
                         'new_users': new_users,
                         'churned': churned,
                         'base_revenue': base_revenue,
                     })


@dataclass(frozen=True)
class SaasParams:
  users_per_month: float
  churn_rate: float
  pricing_tier: float
  upsell_percentage: float
  free_trial_conversion_rate: float


class SaasModel(RevenueModel):
  '''
  SAAS: trial signups convert into paying users at a fixed rate.

  new users = usersPerMonth * freeTrialConversionRate
  '''
  variant = BusinessModelVariant.SAAS
  defaults = {
      'usersPerMonth': 100.0,
      'churnRate': 5.0,
      'pricingTier': 29.0,
      'upsellPercentage': 15.0,
      'freeTrialConversionRate': 25.0,
  }
  aliases = {'trialConversionRate': 'freeTrialConversionRate'}

  def __init__(self, params: SaasParams):
    self.params = params

  @classmethod
  def from_parameters(cls, parameters: Mapping[str, Any]) -> 'SaasModel':
    return cls(
        SaasParams(
            users_per_month=read_param(parameters, 'usersPerMonth'),
            churn_rate=read_param(parameters, 'churnRate'),
            pricing_tier=read_param(parameters, 'pricingTier'),
            upsell_percentage=read_param(parameters, 'upsellPercentage'),
            free_trial_conversion_rate=read_param(parameters,
                                                  'freeTrialConversionRate'),
        ))

  def compute(self, month: int, cumulative_state: float) -> RevenueStep:
    p = self.params
    new_users = p.users_per_month * pct(p.free_trial_conversion_rate)
    return carry_base(cumulative_state, new_users, p.churn_rate,
                      p.pricing_tier, p.upsell_percentage)


@dataclass(frozen=True)
class SubscriptionParams:
  subscribers_per_month: float
  monthly_subscription_price: float
  churn_rate: float
  upsell_percentage: float


class SubscriptionProductModel(RevenueModel):
  '''Subscription product: new subscribers are added at face value.'''
  variant = BusinessModelVariant.SUBSCRIPTION_PRODUCT
  defaults = {
      'subscribersPerMonth': 500.0,
      'monthlySubscriptionPrice': 9.99,
      'churnRate': 3.0,
      'upsellPercentage': 10.0,
  }

  def __init__(self, params: SubscriptionParams):
    self.params = params

  @classmethod
  def from_parameters(
      cls, parameters: Mapping[str, Any]) -> 'SubscriptionProductModel':
    return cls(
        SubscriptionParams(
            subscribers_per_month=read_param(parameters,
                                             'subscribersPerMonth'),
            monthly_subscription_price=read_param(parameters,
                                                  'monthlySubscriptionPrice'),
            churn_rate=read_param(parameters, 'churnRate'),
            upsell_percentage=read_param(parameters, 'upsellPercentage'),
        ))

  def compute(self, month: int, cumulative_state: float) -> RevenueStep:
    p = self.params
    return carry_base(cumulative_state, p.subscribers_per_month, p.churn_rate,
                      p.monthly_subscription_price, p.upsell_percentage)
