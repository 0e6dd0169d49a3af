"""Status badges shared by the admin screens.

The remote API reports statuses in its own vocabulary (``PAID``,
``PARTIALLY_FULFILLED``, ``DISABLED``...). Screens render them as a
``Badge``: a tone understood by the UI component library plus a label.
"""

from dataclasses import dataclass
from enum import Enum


class Tone(Enum):
    SUCCESS = "success"
    INFO = "info"
    ATTENTION = "attention"
    WARNING = "warning"
    CRITICAL = "critical"
    SUBDUED = "subdued"


@dataclass(frozen=True)
class Badge:
    tone: Tone
    label: str

    def to_dict(self) -> dict:
        return {"tone": self.tone.value, "label": self.label}


def humanize_status(status: str | None) -> str:
    """``PARTIALLY_FULFILLED`` -> ``Partially fulfilled``."""
    if not status:
        return "Unknown"
    return status.replace("_", " ").capitalize()
