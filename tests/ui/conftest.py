"""Fixtures for UI tests."""

import pytest

from memban.service import KanbanService


@pytest.fixture
def sample_service():
    """Service holding the sample board: column_1..3 with cards 2/1/1."""
    service = KanbanService()
    service.create_sample_data()
    return service


@pytest.fixture
def settle():
    """Await a few pilot pauses so mounts triggered by mounts finish."""

    async def _settle(pilot, rounds=3):
        for _ in range(rounds):
            await pilot.pause()

    return _settle
