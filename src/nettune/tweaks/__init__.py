# Tweaks module
"""
Settings groups applied by the optimizer, one per area of the network stack.
"""

from .base_tweak import BaseTweak, SettingRecord
from .tcp_tweak import TcpTweak, TCP_SETTINGS
from .adapter_tweak import AdapterTweak, POWER_SAVING_PROPERTIES
from .dns_tweak import DnsTweak, DNS_SETTINGS
from .service_tweak import ServiceTweak, DEPENDENT_SERVICES

__all__ = [
    "BaseTweak",
    "SettingRecord",
    "TcpTweak",
    "TCP_SETTINGS",
    "AdapterTweak",
    "POWER_SAVING_PROPERTIES",
    "DnsTweak",
    "DNS_SETTINGS",
    "ServiceTweak",
    "DEPENDENT_SERVICES",
]
