import pytest


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep RABBITMQ_* variables from the host out of the tests."""
    for name in ("HOST", "PORT", "SSL", "USER", "PASSWORD", "VHOST"):
        monkeypatch.delenv(f"RABBITMQ_{name}", raising=False)
