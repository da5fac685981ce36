from __future__ import annotations

import pytest

from tests._fixtures.fake_engine import FakeEngine
from tests._fixtures.library import sample_library


@pytest.fixture
def sample_engine() -> FakeEngine:
    """Provide an in-memory engine exposing the sample library as ``Lib``."""
    return FakeEngine({"Lib": sample_library()})
