import pytest

from chartree import config


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Keep the user's config file and CHARTREE_* variables out of tests."""
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "xdg"))
    for key in ("CHARTREE_WIDTH", "CHARTREE_HEIGHT", "CHARTREE_AUTO_FIT", "CHARTREE_DEBOUNCE_DELAY"):
        monkeypatch.delenv(key, raising=False)
    config.reset_config()
    yield
    config.reset_config()
