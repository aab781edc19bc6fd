from __future__ import annotations

import pytest

from recstore.factory import reset_shared_stores


@pytest.fixture(autouse=True)
def _fresh_shared_stores():
    """Shared stores are process-wide; give every test an empty set."""
    reset_shared_stores()
    yield
    reset_shared_stores()
