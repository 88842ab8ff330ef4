import importlib

import pytest

from scratchmerkle.crypto import Hasher


@pytest.fixture
def load_config_module(monkeypatch):
    def _loader(monkeypatch, **env):
        for key, value in env.items():
            monkeypatch.setenv(f"SCRATCHMERKLE_{key.upper()}", value)
        import scratchmerkle.config as config
        return importlib.reload(config)

    yield _loader
    monkeypatch.undo()
    import scratchmerkle.config as config
    importlib.reload(config)


@pytest.fixture
def hasher():
    return Hasher("sha256", "hex")


@pytest.fixture
def letters():
    def _letters(n):
        return [chr(ord("a") + i) for i in range(n)]

    return _letters
