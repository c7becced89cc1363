#!/usr/bin/env python3
"""
Tune the Windows network stack.

This script:
- Backs up HKLM\\SYSTEM\\CurrentControlSet\\Services\\Tcpip\\Parameters to the desktop
- Writes the TCP/IP and DNS cache tables
- Disables power saving on active network adapters
- Restarts the DNS Client and IP Helper services

Run from an elevated prompt.

Usage:
    python scripts/optimize_network.py [--mode {Apply,Restore,BackupOnly}]
"""

import sys
from pathlib import Path

# Fix encoding issues on Windows
if sys.platform == 'win32':
    sys.stdout.reconfigure(encoding='utf-8', errors='replace')
    sys.stderr.reconfigure(encoding='utf-8', errors='replace')

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from nettune.cli import main


if __name__ == "__main__":
    sys.exit(main())
