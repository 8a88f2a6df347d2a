"""Step 3: target stores."""

from collections.abc import Iterable

from promo_wizard.services.dto.selection import SessionSnapshot, StoreSelection
from promo_wizard.services.selection_store import SelectionStore
from promo_wizard.wizard.steps.base import WizardStepComponent

NO_STORE_SELECTED = "select at least one store."


class StoreSelectionStep(WizardStepComponent):
    """Keeps a working list of chosen stores and commits it on Next/Submit."""

    def __init__(
        self,
        store: SelectionStore,
        available_stores: Iterable[StoreSelection] = (),
    ) -> None:
        super().__init__(store)
        self.available_stores = list(available_stores)
        self.chosen_stores: list[StoreSelection] = list(store.get_state().selected_stores)

    def is_store_chosen(self, store_id: str) -> bool:
        return any(s.store_id == store_id for s in self.chosen_stores)

    def toggle_store(self, store: StoreSelection, checked: bool) -> None:
        """Add or remove a store from the working list."""
        if checked:
            if not self.is_store_chosen(store.store_id):
                self.chosen_stores.append(store)
        else:
            self.chosen_stores = [s for s in self.chosen_stores if s.store_id != store.store_id]

    def all_valid(self) -> bool:
        if not self.chosen_stores:
            self.error = NO_STORE_SELECTED
            return False

        self.store.replace_store_selections(self.chosen_stores)
        self.error = None
        return True

    def get_promotion_data(self) -> SessionSnapshot:
        """Snapshot used to build the submit payload."""
        return self.store.get_state()
