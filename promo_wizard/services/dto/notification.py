"""Toast-style notification emitted to the host."""

from enum import Enum

from pydantic import BaseModel, ConfigDict


class Severity(str, Enum):
    """Notification severity."""

    INFO = "info"
    SUCCESS = "success"
    ERROR = "error"


class Notification(BaseModel):
    """Notification shown by the host UI."""

    model_config = ConfigDict(frozen=True)

    title: str
    message: str
    severity: Severity = Severity.INFO
