"""Step 1: promotion details."""

from promo_wizard.services.selection_store import SelectionStore
from promo_wizard.wizard.steps.base import WizardStepComponent


class PromotionDetailsStep(WizardStepComponent):
    """Edits the promotion name locally and commits it on Next."""

    def __init__(self, store: SelectionStore) -> None:
        super().__init__(store)
        self.promotion_name = store.get_state().promotion_name

    def set_name(self, value: str | None) -> None:
        self.promotion_name = value or ""

    def all_valid(self) -> bool:
        name = self.promotion_name.strip()
        if not name:
            return False

        self.store.update_promotion_name(name)
        return True
