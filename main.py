#!/usr/bin/env python3
"""
Inventory Demand Forecaster - Entry point.

Run this to replay the sample scenario and print the reports.
"""
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent
sys.path.insert(0, str(project_root))

from inventory_forecaster.demo import main

if __name__ == "__main__":
    sys.exit(main())
