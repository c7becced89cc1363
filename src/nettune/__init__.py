"""
Windows network-stack tuning with registry backup and restore.
"""

from .optimizer import Mode, NetworkOptimizer

__version__ = "0.1.0"

__all__ = [
    "Mode",
    "NetworkOptimizer",
]
