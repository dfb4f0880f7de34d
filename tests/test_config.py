"""
Tests for settings loading
"""
from cf_r2_sdk.core.config import Settings, mask_secret
from cf_r2_sdk.core.logging_config import resolve_level


def make_settings(**overrides) -> Settings:
    values = {
        "BUCKET_NAME": None,
        "ACCESS_KEY_ID": None,
        "SECRET_ACCESS_KEY": None,
        "ENDPOINT_URL": None,
        "REGION": "auto",
        "ENVIRONMENT": "development",
        "DEBUG": False,
        "LOG_LEVEL": None,
    }
    values.update(overrides)
    return Settings(_env_file=None, **values)


def test_settings_from_environment(monkeypatch):
    """Variables are read from the environment"""
    monkeypatch.setenv("BUCKET_NAME", "env-bucket")
    monkeypatch.setenv("ACCESS_KEY_ID", "env-key")
    monkeypatch.setenv("SECRET_ACCESS_KEY", "env-secret")
    monkeypatch.setenv("ENDPOINT_URL", "https://env.r2.cloudflarestorage.com")
    monkeypatch.delenv("REGION", raising=False)

    settings = Settings(_env_file=None)

    assert settings.BUCKET_NAME == "env-bucket"
    assert settings.REGION == "auto"
    assert settings.r2_configured is True


def test_r2_not_configured():
    settings = make_settings(BUCKET_NAME="bucket", ACCESS_KEY_ID="key")
    assert settings.r2_configured is False


def test_mask_secret():
    assert mask_secret(None) == "NOT_SET"
    assert mask_secret("abc") == "***"
    assert mask_secret("abcdefgh") == "abcd****"


def test_to_safe_dict_masks_credentials():
    settings = make_settings(
        BUCKET_NAME="bucket",
        ACCESS_KEY_ID="AKIAEXAMPLE",
        SECRET_ACCESS_KEY="very-secret",
        ENDPOINT_URL="https://account.r2.cloudflarestorage.com",
    )

    safe = settings.to_safe_dict()

    assert safe["BUCKET_NAME"] == "bucket"
    assert safe["ACCESS_KEY_ID"] == "AKIA*******"
    assert "very-secret" not in safe.values()
    assert safe["r2_configured"] is True


def test_environment_checks():
    assert make_settings().is_development is True
    assert make_settings(ENVIRONMENT="production").is_production is True


def test_resolve_level():
    assert resolve_level(make_settings()) == "INFO"
    assert resolve_level(make_settings(DEBUG=True)) == "DEBUG"
    assert resolve_level(make_settings(DEBUG=True, LOG_LEVEL="warning")) == "WARNING"
