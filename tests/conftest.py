import pytest

from as_pydantic.metadata import registry


@pytest.fixture(autouse=True)
def isolated_registry():
    """Models registered inside a test do not leak into the next one."""
    saved = dict(registry._MODELS)
    yield
    registry._MODELS.clear()
    registry._MODELS.update(saved)
