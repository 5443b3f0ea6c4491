from pathlib import Path

from toolkicker.infrastructure.configuration.app_settings import AppSettings


def test_defaults():
    settings = AppSettings()
    assert settings.runtime_data_dir == Path("runtime_data")
    assert settings.storage_file_path == Path("runtime_data") / "toolkicker_store.json"
    assert settings.storage_keys.catalog_listings == "toolkicker.tools.v1"
    assert settings.storage_keys.catalog_favorites == "toolkicker.favs.v1"
    assert settings.storage_keys.cart == "toolkicker.cart.v1"
    assert settings.storage_keys.bookings == "toolkicker.bookings.v1"


def test_env_overrides(monkeypatch, tmp_path):
    monkeypatch.setenv("TOOLKICKER_RUNTIME_DATA_DIR", str(tmp_path))
    monkeypatch.setenv("TOOLKICKER_STORAGE_KEY_PREFIX", "staging")
    monkeypatch.setenv("TOOLKICKER_LOG_LEVEL", "DEBUG")

    settings = AppSettings()

    assert settings.runtime_data_dir == tmp_path
    assert settings.storage_keys.cart == "staging.cart.v1"
    assert settings.log_level == "DEBUG"


def test_log_format_is_unset_by_default(monkeypatch):
    monkeypatch.delenv("TOOLKICKER_LOG_FORMAT", raising=False)
    assert AppSettings().log_format is None

    monkeypatch.setenv("TOOLKICKER_LOG_FORMAT", "json")
    assert AppSettings().log_format == "json"
