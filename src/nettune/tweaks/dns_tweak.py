"""DNS tweak - caps resolver cache TTLs and flushes the cache."""

from typing import List

from ..utils.results import Outcome, TweakResult
from ..utils.system import run_command
from .base_tweak import BaseTweak, SettingRecord


DNSCACHE_PARAMETERS_KEY = r"HKLM\SYSTEM\CurrentControlSet\Services\Dnscache\Parameters"

DNS_SETTINGS: List[SettingRecord] = [
    SettingRecord("MaxCacheTtl", 86400, "positive answers cached up to one day"),
    SettingRecord("MaxNegativeCacheTtl", 0, "negative/SOA answers not cached"),
]


class DnsTweak(BaseTweak):
    """Applies the DNS client cache table, then flushes the resolver cache."""

    key_path = DNSCACHE_PARAMETERS_KEY
    table = DNS_SETTINGS

    @property
    def tweak_name(self) -> str:
        return "dns"

    def apply(self) -> List[TweakResult]:
        """Write the cache limits and flush the cache.

        Returns:
            One result per value, plus one for the flush.
        """
        results = self.write_table(self.key_path, self.table)
        results.append(self.flush_cache())
        return results

    def flush_cache(self) -> TweakResult:
        """Flush the resolver cache.

        Output is discarded, so the outcome is always IGNORED.
        """
        run_command(["ipconfig", "/flushdns"], timeout=self.timeout)
        return TweakResult(
            action="flush_dns",
            target="ipconfig /flushdns",
            outcome=Outcome.IGNORED,
        )
