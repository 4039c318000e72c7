"""Pytest bootstrap so tests import the checked-out ``dirtree`` package.

Running the ``pytest`` console script does not always put the repository
root on ``sys.path``; prepend it so no prior install is required.
"""

from __future__ import annotations

import sys
from pathlib import Path


REPO_ROOT = str(Path(__file__).resolve().parent.parent)

if REPO_ROOT not in sys.path:
    sys.path.insert(0, REPO_ROOT)
