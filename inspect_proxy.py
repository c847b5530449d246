#!/usr/bin/env python3
"""Run the proxy inspector from a source checkout: python inspect_proxy.py --proxy 0x..."""

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent / "src"))

from eip1967_inspector.main import main

if __name__ == "__main__":
    sys.exit(main())
