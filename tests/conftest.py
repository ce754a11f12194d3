import pytest

import objwatch


@pytest.fixture(autouse=True)
def _reset_default_registry():
    objwatch.reset()
    yield
    objwatch.reset()
