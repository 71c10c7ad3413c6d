"""Pytest configuration.

The `ordinals` package lives at the repository root. This conftest makes it importable when
running `pytest` without installing the package.
"""

from __future__ import annotations

import sys
from pathlib import Path

# Ensure `import ordinals` works when running pytest without installing the package.
REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT))
