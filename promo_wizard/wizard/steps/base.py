"""Step component contract."""

from abc import ABC, abstractmethod

from promo_wizard.services.selection_store import SelectionStore


class WizardStepComponent(ABC):
    """A mounted wizard step.

    A step validates itself on Next and, only when valid, commits its
    working data into the selection store.
    """

    def __init__(self, store: SelectionStore) -> None:
        self.store = store
        self.error: str | None = None

    @abstractmethod
    def all_valid(self) -> bool:
        """Validate and commit.

        Returns:
            True if the step is valid and its data is committed
        """

    def dispose(self) -> None:
        """Release store subscriptions when the step is left."""
