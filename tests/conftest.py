"""Pytest configuration to make the project root importable.

Lets ``import giftcalc`` work when tests are run from a checkout without
installing the package.
"""

import os
import sys

PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))

if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)
