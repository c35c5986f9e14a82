import pytest

from auction_server.core.config import (
    DEFAULT_ADMIN_PASSWORD,
    DEFAULT_ADMIN_USER,
    DEFAULT_DATABASE_URL,
    load_settings,
)

ENV_VARS = [
    "DATABASE_URL",
    "DATABASE_ECHO",
    "ADMIN_USER",
    "ADMIN_PASSWORD",
    "BACKEND_ALLOWED_ORIGINS",
    "LOG_LEVEL",
    "APP_HOST",
    "APP_PORT",
    "RELOAD_APP",
]


@pytest.fixture
def clean_env(monkeypatch):
    # setenv first so monkeypatch restores the original state on teardown,
    # including for variables a .env file adds during the test.
    for name in ENV_VARS:
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
    return monkeypatch


def test_fallback_defaults(clean_env, tmp_path):
    settings = load_settings(env_file=tmp_path / "missing.env")
    assert settings.database_url == DEFAULT_DATABASE_URL
    assert settings.admin_user == DEFAULT_ADMIN_USER == "admin"
    assert settings.admin_password == DEFAULT_ADMIN_PASSWORD == "admin123"
    assert settings.allowed_origins == ["*"]
    assert settings.database_echo is False


def test_values_from_environment(clean_env, tmp_path):
    clean_env.setenv("DATABASE_URL", "sqlite+aiosqlite:///./other.db")
    clean_env.setenv("ADMIN_USER", "lab")
    clean_env.setenv("ADMIN_PASSWORD", "pw")
    clean_env.setenv("BACKEND_ALLOWED_ORIGINS", "http://a.example, http://b.example")
    clean_env.setenv("DATABASE_ECHO", "true")
    clean_env.setenv("APP_PORT", "9000")
    clean_env.setenv("LOG_LEVEL", "debug")

    settings = load_settings(env_file=tmp_path / "missing.env")
    assert settings.database_url == "sqlite+aiosqlite:///./other.db"
    assert settings.admin_user == "lab"
    assert settings.admin_password == "pw"
    assert settings.allowed_origins == ["http://a.example", "http://b.example"]
    assert settings.database_echo is True
    assert settings.app_port == 9000
    assert settings.log_level == "DEBUG"


def test_empty_credentials_fall_back(clean_env, tmp_path):
    clean_env.setenv("ADMIN_USER", "")
    clean_env.setenv("ADMIN_PASSWORD", "")
    settings = load_settings(env_file=tmp_path / "missing.env")
    assert settings.admin_user == "admin"
    assert settings.admin_password == "admin123"


def test_values_from_dotenv_file(clean_env, tmp_path):
    env_file = tmp_path / ".env"
    env_file.write_text('ADMIN_USER="from-file"\nADMIN_PASSWORD=file-pass\n')

    settings = load_settings(env_file=env_file)
    assert settings.admin_user == "from-file"
    assert settings.admin_password == "file-pass"


def test_environment_wins_over_dotenv_file(clean_env, tmp_path):
    env_file = tmp_path / ".env"
    env_file.write_text("ADMIN_USER=from-file\n")
    clean_env.setenv("ADMIN_USER", "from-env")

    assert load_settings(env_file=env_file).admin_user == "from-env"
