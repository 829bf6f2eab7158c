import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parents[1] / "src"))

from dms.config import Settings, get_settings


def test_defaults(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("DMS_CONFIG", raising=False)
    settings = Settings()
    assert settings.log_level == "DEBUG"
    assert settings.namespace == "AbcdsDMS"
    assert settings.service_name == "Abcdsdms"
    assert settings.transaction_id == "0"
    assert settings.halt_on_error is False


def test_load_from_dotenv(tmp_path, monkeypatch):
    (tmp_path / ".env").write_text("DMS_LOG_LEVEL=INFO\n", encoding="utf-8")
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("DMS_LOG_LEVEL", raising=False)
    assert Settings().log_level == "INFO"


def test_env_overrides_dotenv(tmp_path, monkeypatch):
    (tmp_path / ".env").write_text("DMS_LOG_LEVEL=INFO\n", encoding="utf-8")
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("DMS_LOG_LEVEL", "WARNING")
    assert Settings().log_level == "WARNING"


def test_yaml_config_file(tmp_path, monkeypatch):
    cfg = tmp_path / "dms.yml"
    cfg.write_text("namespace: Archive\nhalt_on_error: true\nunrelated: 1\n", encoding="utf-8")
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("DMS_CONFIG", str(cfg))
    settings = Settings()
    assert settings.namespace == "Archive"
    assert settings.halt_on_error is True


def test_env_overrides_yaml(tmp_path, monkeypatch):
    (tmp_path / "config.yml").write_text("service_name: fromyaml\n", encoding="utf-8")
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("DMS_CONFIG", raising=False)
    monkeypatch.setenv("DMS_SERVICE_NAME", "fromenv")
    assert Settings().service_name == "fromenv"


def test_unknown_level_falls_back_to_info(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    settings = Settings(log_level="chatty")
    assert settings.log_level == "INFO"
    assert settings.level == 20


def test_get_settings_is_cached(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    get_settings.cache_clear()
    try:
        assert get_settings() is get_settings()
    finally:
        get_settings.cache_clear()
