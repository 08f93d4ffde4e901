import pytest


_ENV_VARS = (
    "HUNKPATCH_CONTEXT", "HUNKPATCH_EDITOR", "HUNKPATCH_COLOR", "HUNKPATCH_UI",
    "HUNKPATCH_LOG_DIR", "HUNKPATCH_ENCODING", "VISUAL", "EDITOR",
)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    """Keep the user's environment out of config resolution."""
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
