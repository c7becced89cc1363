"""Service tweak - restarts the services that cache network settings."""

from typing import List, Tuple

import psutil

from ..utils.results import Outcome, TweakResult
from ..utils.system import ps_quote, run_powershell, succeeded
from .base_tweak import BaseTweak


DEPENDENT_SERVICES: List[Tuple[str, str]] = [
    ("Dnscache", "DNS Client"),
    ("iphlpsvc", "IP Helper"),
]


class ServiceTweak(BaseTweak):
    """Force-restarts the DNS Client and IP Helper services."""

    services = DEPENDENT_SERVICES

    @property
    def tweak_name(self) -> str:
        return "services"

    def apply(self) -> List[TweakResult]:
        return [self.restart_service(name, display_name) for name, display_name in self.services]

    def service_exists(self, service_name: str) -> bool:
        """Check whether a Windows service is installed.

        Args:
            service_name: Short service name.

        Returns:
            True if the service control manager knows it.
        """
        try:
            psutil.win_service_get(service_name)
            return True
        except (psutil.NoSuchProcess, psutil.AccessDenied, OSError):
            return False

    def restart_service(self, service_name: str, display_name: str = "") -> TweakResult:
        """Restart a service if present.

        Args:
            service_name: Short service name.
            display_name: Friendly name used in the result detail.

        Returns:
            SUCCESS if restarted, IGNORED if missing or the restart failed.
        """
        label = display_name or service_name
        if not self.service_exists(service_name):
            return TweakResult(
                action="restart_service",
                target=service_name,
                outcome=Outcome.IGNORED,
                detail=f"{label} service not installed",
            )

        result = run_powershell(
            f"Restart-Service -Name {ps_quote(service_name)} -Force -ErrorAction Stop",
            timeout=self.timeout,
        )
        return TweakResult(
            action="restart_service",
            target=service_name,
            outcome=Outcome.SUCCESS if succeeded(result) else Outcome.IGNORED,
            detail=label,
        )
