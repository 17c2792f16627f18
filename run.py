#!/usr/bin/env python3
"""Run the Notice Gate application."""

import sys
from notice_gate.main import main

if __name__ == "__main__":
    sys.exit(main())
