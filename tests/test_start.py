import pytest

from scripts.start import resolve_port


def test_default_port_when_unset():
    assert resolve_port(None) == 8080
    assert resolve_port("  ") == 8080


def test_valid_port():
    assert resolve_port("5000") == 5000


@pytest.mark.parametrize("raw", ["0", "70000", "http"])
def test_invalid_port(raw):
    with pytest.raises(ValueError):
        resolve_port(raw)
