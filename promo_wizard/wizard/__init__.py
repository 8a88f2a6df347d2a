"""Promotion creation wizard."""

from promo_wizard.wizard.controller import WizardController
from promo_wizard.wizard.host import LoggingWizardHost, WizardHost
from promo_wizard.wizard.states import WizardStep

__all__ = [
    "LoggingWizardHost",
    "WizardController",
    "WizardHost",
    "WizardStep",
]
