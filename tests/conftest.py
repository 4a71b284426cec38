import pytest

from config import ApplicationConfig


@pytest.fixture(autouse=True)
def fast_bcrypt(monkeypatch):
    """Minimum bcrypt cost keeps password hashing cheap in tests"""
    monkeypatch.setattr(ApplicationConfig, "BCRYPT_ROUNDS", 4)
