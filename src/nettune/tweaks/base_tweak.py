"""Base tweak class with common functionality."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, List, Optional

from ..utils.registry import Registry
from ..utils.results import Outcome, TweakResult
from ..utils.system import DEFAULT_TIMEOUT


@dataclass(frozen=True)
class SettingRecord:
    """One row of a fixed setting table.

    Attributes:
        name: Registry value name.
        value: Target data.
        comment: What the value means, kept for auditability.
        value_type: "REG_DWORD" or "REG_SZ".
    """

    name: str
    value: Any
    comment: str
    value_type: str = "REG_DWORD"


class BaseTweak(ABC):
    """Abstract base class for all settings groups."""

    def __init__(self, registry: Optional[Registry] = None, timeout: int = DEFAULT_TIMEOUT):
        """Initialize the tweak.

        Args:
            registry: Registry accessor. Defaults to the live registry.
            timeout: Seconds allowed for each external command.
        """
        self.registry = registry or Registry(timeout=timeout)
        self.timeout = timeout

    @property
    @abstractmethod
    def tweak_name(self) -> str:
        """Name of this settings group for logging."""
        pass

    @abstractmethod
    def apply(self) -> List[TweakResult]:
        """Apply this group's settings.

        Returns:
            One result per attempted action, in the order attempted.
        """
        pass

    def write_table(self, key_path: str, table: List[SettingRecord]) -> List[TweakResult]:
        """Write every record of a table, each independently.

        A failed write is classified as ignored and never stops the
        remaining records.

        Args:
            key_path: Key that receives the values.
            table: Records to write, in order.

        Returns:
            One result per record.
        """
        results = []
        for record in table:
            try:
                self.registry.set_value(key_path, record.name, record.value, record.value_type)
            except (OSError, ValueError) as e:
                results.append(TweakResult(
                    action="set_registry_value",
                    target=record.name,
                    outcome=Outcome.IGNORED,
                    detail=str(e),
                ))
                continue
            results.append(TweakResult(
                action="set_registry_value",
                target=record.name,
                outcome=Outcome.SUCCESS,
                detail=f"{record.value} ({record.comment})",
            ))
        return results
