import dataclasses

import pytest

from workforce.config import ConfigurationError, Settings, validate_settings


def test_missing_secret_key_is_fatal():
    with pytest.raises(ConfigurationError, match="SECRET_KEY"):
        validate_settings(Settings.from_env({}))


def test_secret_key_has_no_default():
    assert Settings.from_env({}).SECRET_KEY == ""


def test_defaults():
    app_settings = Settings.from_env({"SECRET_KEY": "x"})

    validate_settings(app_settings)
    assert app_settings.ACCESS_TOKEN_EXPIRE_MINUTES == 24 * 60
    assert app_settings.BCRYPT_ROUNDS == 10
    assert app_settings.DEFAULT_LEAVE_BALANCE == 20
    assert app_settings.TIMEZONE == "UTC"


def test_settings_are_read_only():
    app_settings = Settings.from_env({"SECRET_KEY": "x"})

    with pytest.raises(dataclasses.FrozenInstanceError):
        app_settings.SECRET_KEY = "y"


def test_legacy_postgres_scheme_is_rewritten():
    app_settings = Settings.from_env({"DATABASE_URL": "postgres://u:p@db/workforce"})

    assert app_settings.database_url == "postgresql://u:p@db/workforce"
    assert not app_settings.is_sqlite


def test_cors_origins_are_split():
    app_settings = Settings.from_env({"CORS_ORIGINS": "http://a.test, http://b.test,"})

    assert app_settings.CORS_ORIGINS == ["http://a.test", "http://b.test"]
