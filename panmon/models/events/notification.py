"""Toast notification event model."""

from pydantic import BaseModel, ConfigDict

from panmon.constants.enums import Severity
from panmon.constants.timeouts import NOTIFICATION_TIMEOUT


class Notification(BaseModel):
    """A transient warning or error toast, emitted once per appended log entry."""

    model_config = ConfigDict(frozen=True)

    severity: Severity
    message: str
    icon: str = ""
    timeout: float = NOTIFICATION_TIMEOUT
