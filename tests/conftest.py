from __future__ import annotations

import pytest

from src.models import Property
from tests.helpers import RICH_ROWS, SAMPLE_ROWS, FakeBackend


@pytest.fixture
def sample() -> list[Property]:
    return [Property.model_validate(row) for row in SAMPLE_ROWS]


@pytest.fixture
def listings() -> list[Property]:
    return [Property.model_validate(row) for row in RICH_ROWS]


@pytest.fixture
def backend() -> FakeBackend:
    return FakeBackend(RICH_ROWS)
