#!/usr/bin/env python3
"""
Find every occurrence of a key in Terraform plan JSON.

See ``planpaths.cli`` for options and exit codes.
"""

import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(project_root))

from planpaths.cli import run


if __name__ == "__main__":
    run()
