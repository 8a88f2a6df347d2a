"""Boundary to the UI shell hosting the wizard."""

from abc import ABC, abstractmethod

from promo_wizard.core.logging import get_logger
from promo_wizard.services.dto.notification import Notification, Severity

logger = get_logger(__name__)


class WizardHost(ABC):
    """Capabilities the wizard requests from its host."""

    @abstractmethod
    def notify(self, notification: Notification) -> None:
        """Show a toast-style notification."""

    @abstractmethod
    def close(self) -> None:
        """Close the wizard surface."""

    @abstractmethod
    def navigate_to_record(self, record_id: str) -> None:
        """Open the detail view of a created record."""


class LoggingWizardHost(WizardHost):
    """Host that logs and records every request.

    Used by the CLI and tests where no UI shell is present.
    """

    def __init__(self) -> None:
        self.notifications: list[Notification] = []
        self.close_requested = False
        self.navigated_to: list[str] = []

    def notify(self, notification: Notification) -> None:
        self.notifications.append(notification)
        log = logger.error if notification.severity == Severity.ERROR else logger.info
        log("[%s] %s: %s", notification.severity.value, notification.title, notification.message)

    def close(self) -> None:
        self.close_requested = True
        logger.info("Close requested")

    def navigate_to_record(self, record_id: str) -> None:
        self.navigated_to.append(record_id)
        logger.info("Navigate to record %s", record_id)

    @property
    def last_notification(self) -> Notification | None:
        return self.notifications[-1] if self.notifications else None
