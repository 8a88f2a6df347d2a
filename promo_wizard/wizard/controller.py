"""Wizard controller: step sequencing, forward gating and submission."""

from collections.abc import Iterable

from promo_wizard.core.config import Settings, settings
from promo_wizard.core.exceptions import AppException
from promo_wizard.core.logging import get_logger
from promo_wizard.services.catalog.client import BaseCatalogClient
from promo_wizard.services.dto.notification import Notification, Severity
from promo_wizard.services.dto.selection import StoreSelection
from promo_wizard.services.dto.submission import PromotionPayload
from promo_wizard.services.selection_store import SelectionStore
from promo_wizard.services.submission.client import BasePromotionSubmitter
from promo_wizard.wizard.host import WizardHost
from promo_wizard.wizard.states import WizardStep
from promo_wizard.wizard.steps.base import WizardStepComponent
from promo_wizard.wizard.steps.details import PromotionDetailsStep
from promo_wizard.wizard.steps.products import ProductSelectionStep
from promo_wizard.wizard.steps.stores import StoreSelectionStep

logger = get_logger(__name__)

SAVE_LABEL = "Create Promotion"
SAVING_LABEL = "Creating..."


class WizardController:
    """Drives one promotion wizard session.

    Owns the selection store and passes it to each step component. Only the
    active step is mounted; leaving a step disposes it.
    """

    def __init__(
        self,
        catalog: BaseCatalogClient,
        submitter: BasePromotionSubmitter,
        host: WizardHost,
        record_id: str | None = None,
        available_stores: Iterable[StoreSelection] = (),
        store: SelectionStore | None = None,
        config: Settings | None = None,
    ) -> None:
        self.catalog = catalog
        self.submitter = submitter
        self.host = host
        self.record_id = record_id
        self.available_stores = list(available_stores)
        self.store = store or SelectionStore()
        self.config = config or settings

        self.current_step = WizardStep.DETAILS
        self.active_step: WizardStepComponent | None = None
        self.is_saving = False
        self.is_open = False
        self.validation_message: str | None = None

    # --- Session ---

    async def open(self) -> None:
        """Start a fresh session on step 1."""
        self._unmount()
        self.store.reset()
        self.current_step = WizardStep.DETAILS
        self.validation_message = None
        self.is_open = True
        await self._mount()
        logger.info("Wizard opened for record %s", self.record_id)

    def close(self) -> None:
        """Tear down the active step, reset the session and ask the host to close."""
        self._unmount()
        self.store.reset()
        self.is_open = False
        self.host.close()

    # --- Navigation ---

    async def next(self) -> bool:
        """Validate the active step and advance if it committed.

        Returns:
            True if the wizard moved forward
        """
        if self.current_step == WizardStep.STORES:
            return False

        step = self._require_active_step()
        if not step.all_valid():
            self._reject(step)
            return False

        self.validation_message = None
        await self._go_to(WizardStep(self.current_step + 1))
        return True

    async def previous(self) -> bool:
        """Go back one step without revalidating or discarding data."""
        if self.current_step == WizardStep.DETAILS:
            return False

        self.validation_message = None
        await self._go_to(WizardStep(self.current_step - 1))
        return True

    # --- Submission ---

    async def submit(self) -> bool:
        """Revalidate step 3 and send the assembled promotion.

        Steps 1 and 2 are trusted from their earlier commits.

        Returns:
            True if the promotion was created
        """
        if self.current_step != WizardStep.STORES:
            logger.warning("Submit ignored on %s", self.current_step.name)
            return False
        if self.is_saving:
            return False

        step = self._require_active_step()
        if not step.all_valid():
            self._reject(step)
            return False

        payload = PromotionPayload.from_snapshot(self.store.get_state(), self.record_id)

        self.is_saving = True
        logger.info(
            "Submitting promotion %r: %d products, %d stores",
            payload.promotion_name,
            len(payload.products),
            len(payload.stores),
        )
        try:
            result = await self.submitter.save_promotion(payload)
        except AppException as e:
            logger.warning("Promotion submit failed: %s", e.message)
            self._notify(Severity.ERROR, "Error", e.message or self.config.default_error_message)
            return False
        except Exception as e:
            logger.exception("Promotion submit unexpected error: %s", e)
            self._notify(Severity.ERROR, "Error", str(e) or self.config.default_error_message)
            return False
        finally:
            self.is_saving = False

        logger.info("Promotion created: %s", result.promotion_id)
        self._notify(Severity.SUCCESS, "Success", result.message or self.config.default_success_message)
        self.close()
        if result.promotion_id:
            self.host.navigate_to_record(result.promotion_id)
        return True

    # --- View ---

    @property
    def step_title(self) -> str:
        return self.current_step.title

    @property
    def save_button_label(self) -> str:
        return SAVING_LABEL if self.is_saving else SAVE_LABEL

    @property
    def is_save_disabled(self) -> bool:
        return self.is_saving

    @property
    def show_previous(self) -> bool:
        return self.current_step != WizardStep.DETAILS

    @property
    def show_next(self) -> bool:
        return self.current_step != WizardStep.STORES

    @property
    def show_finish(self) -> bool:
        return self.current_step == WizardStep.STORES

    # --- Internals ---

    def _create_step(self, step: WizardStep) -> WizardStepComponent:
        match step:
            case WizardStep.DETAILS:
                return PromotionDetailsStep(self.store)
            case WizardStep.PRODUCTS:
                return ProductSelectionStep(self.store, self.catalog)
            case WizardStep.STORES:
                return StoreSelectionStep(self.store, self.available_stores)

    async def _mount(self) -> None:
        self.active_step = self._create_step(self.current_step)
        if isinstance(self.active_step, ProductSelectionStep):
            await self.active_step.fetch_page()

    def _unmount(self) -> None:
        if self.active_step is not None:
            self.active_step.dispose()
            self.active_step = None

    async def _go_to(self, step: WizardStep) -> None:
        logger.info("Wizard step %d -> %d", self.current_step, step)
        self._unmount()
        self.current_step = step
        await self._mount()

    def _require_active_step(self) -> WizardStepComponent:
        if self.active_step is None:
            raise RuntimeError("Wizard is not open")
        return self.active_step

    def _reject(self, step: WizardStepComponent) -> None:
        message = self.current_step.validation_message
        # The step's own message is more specific
        self.validation_message = step.error or message
        logger.info("Step %d blocked: %s", self.current_step, self.validation_message)
        self._notify(Severity.ERROR, "Validation Error", message)

    def _notify(self, severity: Severity, title: str, message: str) -> None:
        self.host.notify(Notification(title=title, message=message, severity=severity))
