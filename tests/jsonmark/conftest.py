import os

import pytest

from jsonmark import JSONMark, Settings, uninstall
from jsonmark.instance import set_default


@pytest.fixture(autouse=True)
def isolated_environment(monkeypatch):
    """Keep JSONMARK_* variables and global patches from leaking between tests."""
    for key in list(os.environ):
        if key.startswith("JSONMARK_"):
            monkeypatch.delenv(key, raising=False)
    yield
    uninstall()
    set_default(None)


@pytest.fixture
def codec() -> JSONMark:
    return JSONMark(settings=Settings())


@pytest.fixture
def eq_codec() -> JSONMark:
    """Codec with a visible "=" marker so expected strings stay readable."""
    return JSONMark(marker="=", delimiter=":", settings=Settings())
