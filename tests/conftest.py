import os

import pytest


@pytest.fixture
def clean_environment(monkeypatch):
    """Ensure tests run with a clean environment.

    Unsets SHARDSPLIT_* variables that can alter balancing or Solr settings.
    """
    for k in [k for k in os.environ.keys() if k.startswith("SHARDSPLIT_")]:
        monkeypatch.delenv(k, raising=False)
    yield
