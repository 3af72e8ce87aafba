# SPDX-FileCopyrightText: 2025 SSSA contributors
# SPDX-License-Identifier: MIT
#
# conftest.py: makes src/ importable without installation and isolates the
# sharing policy from the caller's environment.

from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parent
SRC = ROOT / "src"
if SRC.is_dir():
    sys.path.insert(0, str(SRC))


@pytest.fixture(autouse=True, scope="session")
def _default_policy():
    """Run the suite with the default policy regardless of SSSA_* variables."""
    from sssa import combiner, policy as policy_module, splitter

    default = policy_module.SharingPolicy()
    with pytest.MonkeyPatch.context() as mp:
        mp.setattr(splitter, "policy", default)
        mp.setattr(combiner, "policy", default)
        yield
