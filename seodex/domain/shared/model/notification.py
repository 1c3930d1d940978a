"""Admin notification value object."""

from enum import StrEnum

from pydantic import Field

from seodex.domain.shared.model.value import ValueObject


class NotificationType(StrEnum):
    ERROR = "error"
    WARNING = "warning"
    INFO = "info"
    SUCCESS = "success"


class Notification(ValueObject):
    """A message shown to administrators until dismissed."""

    id: str
    message: str
    type: NotificationType = NotificationType.INFO
    capabilities: list[str] = Field(default_factory=lambda: ["wpseo_manage_options"])
    priority: float = Field(default=0.5, ge=0.0, le=1.0)
