"""Wizard step components."""

from promo_wizard.wizard.steps.base import WizardStepComponent
from promo_wizard.wizard.steps.details import PromotionDetailsStep
from promo_wizard.wizard.steps.products import ProductSelectionStep, parse_discount
from promo_wizard.wizard.steps.stores import StoreSelectionStep

__all__ = [
    "ProductSelectionStep",
    "PromotionDetailsStep",
    "StoreSelectionStep",
    "WizardStepComponent",
    "parse_discount",
]
