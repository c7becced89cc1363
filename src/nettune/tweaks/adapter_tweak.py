"""Adapter tweak - disables power saving on every active network adapter."""

import json
from typing import Any, Dict, List, Optional

from ..utils.registry import Registry
from ..utils.results import Outcome, TweakResult
from ..utils.system import DEFAULT_TIMEOUT, ps_quote, run_powershell, succeeded
from .base_tweak import BaseTweak


POWER_SAVING_PROPERTIES = [
    "Energy Efficient Ethernet",
    "Green Ethernet",
    "Power Saving Mode",
    "ASPM",
]

ACTIVE_STATUS = "Up"


class AdapterTweak(BaseTweak):
    """Turns off OS power management and driver power-saving features."""

    def __init__(
        self,
        registry: Optional[Registry] = None,
        timeout: int = DEFAULT_TIMEOUT,
        properties: Optional[List[str]] = None,
    ):
        """Initialize adapter tweak.

        Args:
            registry: Unused by this group; accepted for a uniform signature.
            timeout: Seconds allowed for each PowerShell call.
            properties: Advanced property display names to disable.
        """
        super().__init__(registry, timeout)
        self.properties = properties if properties is not None else list(POWER_SAVING_PROPERTIES)

    @property
    def tweak_name(self) -> str:
        return "adapters"

    def list_adapters(self) -> Optional[List[Dict[str, Any]]]:
        """Enumerate network adapters.

        Returns:
            List of adapter dictionaries, or None if enumeration failed.
        """
        ps_script = '''
        Get-NetAdapter | ForEach-Object {
            [PSCustomObject]@{
                Name = $_.Name
                InterfaceDescription = $_.InterfaceDescription
                Status = $_.Status
                ifIndex = $_.ifIndex
            }
        } | ConvertTo-Json -Depth 2
        '''

        result = run_powershell(ps_script, timeout=self.timeout)
        if not succeeded(result):
            return None
        if not result.stdout.strip():
            return []

        try:
            raw_adapters = json.loads(result.stdout)
        except json.JSONDecodeError:
            return None

        # Handle single adapter case (PowerShell returns object instead of array)
        if isinstance(raw_adapters, dict):
            raw_adapters = [raw_adapters]

        return [
            {
                "name": a.get("Name"),
                "description": a.get("InterfaceDescription"),
                "status": a.get("Status"),
                "index": a.get("ifIndex"),
            }
            for a in raw_adapters
            if a.get("Name")
        ]

    def active_adapters(self, adapters: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
        """Keep only adapters whose operational status is Up."""
        return [a for a in adapters if str(a.get("status", "")).lower() == ACTIVE_STATUS.lower()]

    def apply(self) -> List[TweakResult]:
        """Disable power saving on each active adapter.

        Returns:
            Results per adapter action; a single WARNING if enumeration failed.
        """
        adapters = self.list_adapters()
        if adapters is None:
            return [TweakResult(
                action="list_adapters",
                target="Get-NetAdapter",
                outcome=Outcome.WARNING,
                detail="Could not enumerate network adapters",
            )]

        results = []
        for adapter in self.active_adapters(adapters):
            results.append(self.disable_power_management(adapter["name"]))
            for display_name in self.properties:
                results.append(self.disable_advanced_property(adapter["name"], display_name))
        return results

    def disable_power_management(self, adapter_name: str) -> TweakResult:
        """Stop the OS from powering the adapter down.

        Failure is a WARNING: every physical adapter is expected to support this.
        """
        result = run_powershell(
            f"Disable-NetAdapterPowerManagement -Name {ps_quote(adapter_name)} "
            f"-NoRestart -ErrorAction Stop",
            timeout=self.timeout,
        )
        if succeeded(result):
            return TweakResult(
                action="disable_power_management",
                target=adapter_name,
                outcome=Outcome.SUCCESS,
            )
        reason = result.stderr.strip() if result is not None and result.stderr else "command failed"
        return TweakResult(
            action="disable_power_management",
            target=adapter_name,
            outcome=Outcome.WARNING,
            detail=f"Could not disable power management: {reason}",
        )

    def disable_advanced_property(self, adapter_name: str, display_name: str) -> TweakResult:
        """Set one driver advanced property to Disabled.

        Most drivers expose only some of these properties, so failure is IGNORED.
        """
        result = run_powershell(
            f"Set-NetAdapterAdvancedProperty -Name {ps_quote(adapter_name)} "
            f"-DisplayName {ps_quote(display_name)} -DisplayValue 'Disabled' "
            f"-NoRestart -ErrorAction Stop",
            timeout=self.timeout,
        )
        return TweakResult(
            action="disable_advanced_property",
            target=f"{adapter_name}: {display_name}",
            outcome=Outcome.SUCCESS if succeeded(result) else Outcome.IGNORED,
        )


if __name__ == "__main__":
    # Quick test
    tweak = AdapterTweak()
    adapters = tweak.list_adapters() or []
    print(f"Found {len(adapters)} adapters")
    for a in tweak.active_adapters(adapters):
        print(f"  {a['name']}: {a['description']}")
