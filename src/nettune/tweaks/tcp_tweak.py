"""TCP tweak - writes the fixed TCP/IP parameters table."""

from typing import List

from ..utils.backup import TCPIP_PARAMETERS_KEY
from ..utils.results import TweakResult
from .base_tweak import BaseTweak, SettingRecord


TCP_SETTINGS: List[SettingRecord] = [
    SettingRecord("TcpWindowSize", 64 * 1024 * 1024, "64KB*1024 receive window"),
    SettingRecord("GlobalMaxTcpWindowSize", 64 * 1024 * 1024, "64KB*1024 receive window ceiling"),
    SettingRecord("Tcp1323Opts", 3, "window scaling + timestamps"),
    SettingRecord("DefaultTTL", 64, "hop limit for outgoing packets"),
    SettingRecord("EnablePMTUDiscovery", 1, "path MTU discovery on"),
    SettingRecord("EnableRSS", 1, "receive-side scaling on"),
    SettingRecord("EnableTCPChimney", 0, "TCP chimney offload off"),
    SettingRecord("TcpAckFrequency", 1, "acknowledge every segment"),
    SettingRecord("TcpDelAckTicks", 0, "no delayed-ACK timer"),
    SettingRecord("CongestionProvider", "ctcp", "Compound TCP", value_type="REG_SZ"),
    SettingRecord("MaxUserPort", 65534, "ephemeral port ceiling"),
    SettingRecord("TcpTimedWaitDelay", 30, "TIME_WAIT seconds"),
]


class TcpTweak(BaseTweak):
    """Applies the TCP/IP parameters table."""

    key_path = TCPIP_PARAMETERS_KEY
    table = TCP_SETTINGS

    @property
    def tweak_name(self) -> str:
        return "tcp"

    def apply(self) -> List[TweakResult]:
        return self.write_table(self.key_path, self.table)
