"""
Pytest configuration for package tests.

This file adds the project root to the Python path so that tests
can import weekday_boundaries without an install.
"""

import sys
from pathlib import Path

# Add the project root to the Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))
