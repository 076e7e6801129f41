#!/usr/bin/env python3
"""
Entry point for infoblox-nc CLI tool.
"""

import sys

from infoblox_provider.cli.cli import main

if __name__ == "__main__":
    sys.exit(main())
