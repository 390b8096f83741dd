# tests/test_config.py

from shelves.config import Settings, DEFAULT_DATABASE_URL

def test_defaults(monkeypatch):
    for name in ("DATABASE_URL", "SMART_SHELF_MAX_WORKERS", "SMART_SHELF_DEFAULT_LIMIT",
                 "SMART_SHELF_MAX_LIMIT", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)

    settings = Settings.from_env()
    assert settings.database_url == DEFAULT_DATABASE_URL
    assert settings.max_workers == 8
    assert settings.default_limit == 20
    assert settings.max_limit == 100
    assert settings.log_level == "INFO"

def test_values_from_environment(monkeypatch):
    monkeypatch.setenv("DATABASE_URL", "sqlite:///other.db")
    monkeypatch.setenv("SMART_SHELF_MAX_WORKERS", "3")
    monkeypatch.setenv("SMART_SHELF_MAX_LIMIT", "50")
    monkeypatch.setenv("LOG_LEVEL", "debug")

    settings = Settings.from_env()
    assert settings.database_url == "sqlite:///other.db"
    assert settings.max_workers == 3
    assert settings.max_limit == 50
    assert settings.log_level == "DEBUG"

def test_invalid_integers_fall_back(monkeypatch, caplog):
    monkeypatch.setenv("SMART_SHELF_MAX_WORKERS", "lots")
    monkeypatch.setenv("SMART_SHELF_DEFAULT_LIMIT", "0")

    settings = Settings.from_env()
    assert settings.max_workers == 8
    assert settings.default_limit == 1
    assert "SMART_SHELF_MAX_WORKERS" in caplog.text

def test_service_uses_settings_limits(store, sample_user):
    from shelves.smart import SmartShelfService

    service = SmartShelfService(store, Settings(default_limit=7, max_limit=9))
    assert service.get_shelf(sample_user.id, "favorites").limit == 7
    assert service.get_shelf(sample_user.id, "favorites", limit=50).limit == 9

def test_max_limit_is_capped_at_100(monkeypatch, store, sample_user):
    from shelves.smart import SmartShelfService

    monkeypatch.setenv("SMART_SHELF_MAX_LIMIT", "500")
    settings = Settings.from_env()
    assert settings.max_limit == 100
    assert SmartShelfService(store, settings).get_shelf(sample_user.id, "favorites", limit=500).limit == 100
