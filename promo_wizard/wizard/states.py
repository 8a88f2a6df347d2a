"""Wizard step states."""

from enum import IntEnum


class WizardStep(IntEnum):
    """Linear wizard steps."""

    DETAILS = 1
    """User enters the promotion name."""

    PRODUCTS = 2
    """User picks products and discounts from the paginated catalog."""

    STORES = 3
    """User picks target stores and submits."""

    @property
    def title(self) -> str:
        return STEP_TITLES[self]

    @property
    def validation_message(self) -> str:
        """Message surfaced when the step blocks forward movement."""
        return STEP_VALIDATION_MESSAGES[self]


STEP_TITLES = {
    WizardStep.DETAILS: "Step 1: Promotion Details",
    WizardStep.PRODUCTS: "Step 2: Select Products",
    WizardStep.STORES: "Step 3: Select Stores",
}

STEP_VALIDATION_MESSAGES = {
    WizardStep.DETAILS: "enter a promotion name",
    WizardStep.PRODUCTS: "select at least one product with a valid discount",
    WizardStep.STORES: "select at least one store",
}
