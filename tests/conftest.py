import pytest

from imgfilter.filters import FilterRegistry


@pytest.fixture(autouse=True)
def reset_registry():
    FilterRegistry.reset()
    yield
    FilterRegistry.reset()


@pytest.fixture
def read_lines(capsys):
    """Return the stdout lines printed since the last call."""
    def _read():
        return capsys.readouterr().out.splitlines()
    return _read
