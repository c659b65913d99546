"""
Variant registry and parameter resolver.

Maps each BusinessModelVariant to the RevenueModel class implementing it,
and merges caller-supplied parameter overrides into the variant's default
schema.

To add a new variant:
1. Implement the model class in the appropriate module
   (e.g., models/unit_sales.py)
2. Register it in REVENUE_MODELS below

Example:
  REVENUE_MODELS[BusinessModelVariant.LICENSING] = LicensingModel
"""

import logging
from math import isfinite
from typing import Any, Dict, List, Mapping, Optional, Tuple, Type, Union

from revenue_forecast.domain.types import BusinessModelVariant
from revenue_forecast.models.base import RevenueModel
from revenue_forecast.models.growth import GenericModel
from revenue_forecast.models.growth import MarketplaceModel
from revenue_forecast.models.subscription import SaasModel
from revenue_forecast.models.subscription import SubscriptionProductModel
from revenue_forecast.models.unit_sales import HardwareSaasModel
from revenue_forecast.models.unit_sales import StraightSalesModel

logger = logging.getLogger(__name__)

VariantLike = Union[BusinessModelVariant, str]

REVENUE_MODELS: Dict[BusinessModelVariant, Type[RevenueModel]] = {
    BusinessModelVariant.SAAS: SaasModel,
    BusinessModelVariant.HARDWARE_SAAS: HardwareSaasModel,
    BusinessModelVariant.STRAIGHT_SALES: StraightSalesModel,
    BusinessModelVariant.SUBSCRIPTION_PRODUCT: SubscriptionProductModel,
    BusinessModelVariant.MARKETPLACE: MarketplaceModel,
    BusinessModelVariant.GENERIC: GenericModel,
}

FALLBACK_VARIANT = BusinessModelVariant.GENERIC


def resolve_variant(tag: Any) -> Tuple[BusinessModelVariant, bool]:
  """
  Resolve a variant tag, falling back to Generic for unknown tags.

  Args:
    tag: BusinessModelVariant, canonical tag or legacy display label

  Returns:
    Tuple of (variant, fell_back). fell_back is True when the tag was not
    recognized and the Generic model was substituted.
  """
  variant = BusinessModelVariant.parse(tag)
  if variant is not None:
    return variant, False

  logger.warning("Unknown business model variant '%s', using %s. "
                 'Available: %s', tag, FALLBACK_VARIANT.value,
                 [v.value for v in REVENUE_MODELS])
  return FALLBACK_VARIANT, True


def _model_class(variant: VariantLike) -> Type[RevenueModel]:
  resolved, _ = resolve_variant(variant)
  return REVENUE_MODELS[resolved]


def default_parameters(variant: VariantLike) -> Dict[str, float]:
  """Return a fresh copy of the variant's default parameter map."""
  return dict(_model_class(variant).defaults)


def _coerce(key: str, value: Any) -> float:
  """Coerce an override to a finite float; anything else reads as 0."""
  try:
    number = float(value)
  except (TypeError, ValueError):
    logger.warning('Parameter %s=%r is not numeric, using 0', key, value)
    return 0.0
  if not isfinite(number):
    logger.warning('Parameter %s=%r is not finite, using 0', key, value)
    return 0.0
  return number


def resolve_parameters(
    variant: VariantLike,
    overrides: Optional[Mapping[str, Any]] = None,
) -> Dict[str, float]:
  """
  Merge overrides into the variant's default parameters.

  Keys present in overrides replace the default for that key only; keys
  absent from overrides keep their default; unknown keys are ignored.
  Legacy aliases (e.g. 'gmv' for 'baseGmv') are honored when the canonical
  key is not supplied.

  Args:
    variant: Variant tag (unknown tags resolve against Generic)
    overrides: Caller-supplied parameter values

  Returns:
    Complete parameter map for the variant
  """
  model_cls = _model_class(variant)
  overrides = overrides or {}
  resolved = dict(model_cls.defaults)

  for alias, canonical in model_cls.aliases.items():
    if alias in overrides and canonical not in overrides:
      resolved[canonical] = _coerce(canonical, overrides[alias])

  for key in model_cls.defaults:
    if key in overrides:
      resolved[key] = _coerce(key, overrides[key])

  ignored = sorted(
      k for k in overrides
      if k not in model_cls.defaults and k not in model_cls.aliases)
  if ignored:
    logger.debug('Ignoring parameters not used by %s: %s',
                 model_cls.variant.value, ignored)

  return resolved


def create_model(variant: VariantLike,
                 parameters: Mapping[str, Any]) -> RevenueModel:
  """
  Instantiate the revenue model for a variant.

  Parameters are used as given (no defaults merged); missing keys read as 0.
  """
  return _model_class(variant).from_parameters(parameters)


def list_variants() -> Dict[str, List[str]]:
  """
  List all variants with their parameter keys.

  Returns:
    Dictionary mapping variant tags to their default parameter keys
  """
  return {
      variant.value: list(model_cls.defaults)
      for variant, model_cls in REVENUE_MODELS.items()
  }
