"""Root test configuration: isolate tests from MDSECTION_* environment variables"""

import pytest

from mdsection.config import Settings


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Unset every MDSECTION_<FIELD> variable for the duration of a test."""
    for name in Settings.model_fields:
        monkeypatch.delenv(f"MDSECTION_{name.upper()}", raising=False)
