"""Test bootstrap: import ``messfinder`` from this checkout.

Lets the suite run straight from a source tree, without an editable install.
"""

from __future__ import annotations

import sys
from pathlib import Path


PROJECT_ROOT = Path(__file__).resolve().parent.parent

if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))
