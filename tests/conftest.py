import itertools
import os

import pytest

from envloader import EnvLoader

_counter = itertools.count()


@pytest.fixture
def env_name(monkeypatch):
    """Returns an unset variable name; cleaned up after the test."""
    name = f"ENVLOADER_TEST_{next(_counter)}"
    while name in os.environ:
        name = f"{name}1"
    # register for teardown so direct os.environ writes get undone too
    monkeypatch.setenv(name, "")
    monkeypatch.delenv(name)
    return name


@pytest.fixture
def loader():
    return EnvLoader()
