import itertools

import pytest

from uikit_blocks import BlockBuilder
from uikit_blocks.config import get_settings


@pytest.fixture
def id_generator():
    """Deterministic id source: id-1, id-2, ..."""
    counter = itertools.count(1)
    return lambda: f"id-{next(counter)}"


@pytest.fixture
def builder(id_generator):
    return BlockBuilder("app-1", id_generator=id_generator)


@pytest.fixture(autouse=True)
def clear_settings_cache():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
