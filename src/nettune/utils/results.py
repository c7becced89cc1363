"""Result types shared by every operation."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Dict, Optional


class Outcome(Enum):
    """Severity class of a single action's result."""

    SUCCESS = "success"
    # Non-fatal and worth telling the user about
    WARNING = "warning"
    # Tolerated without any user-visible signal
    IGNORED = "ignored"
    # Fatal to the operation that produced it
    ERROR = "error"


@dataclass
class TweakResult:
    """Outcome of one action against one target.

    Attributes:
        action: What was attempted (e.g. "set_registry_value").
        target: What it was attempted on (value name, adapter, service, file).
        outcome: Severity classification.
        detail: Human-readable context, usually the failure reason.
    """

    action: str
    target: str
    outcome: Outcome
    detail: Optional[str] = None
    timestamp: str = field(default_factory=lambda: datetime.now().isoformat())

    @property
    def ok(self) -> bool:
        return self.outcome is Outcome.SUCCESS

    def to_dict(self) -> Dict[str, Any]:
        return {
            "timestamp": self.timestamp,
            "action": self.action,
            "target": self.target,
            "outcome": self.outcome.value,
            "detail": self.detail,
        }
