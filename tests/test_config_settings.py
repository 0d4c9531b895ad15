"""Regression tests for runtime settings loading and validation."""

import pytest

from credit_decision.config import AppSettings, SettingsLoadError, config_load_settings


def test_config_load_settings_reads_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Load settings from environment variables with normalization.

    Returns:
        None: Assertions validate environment mapping.

    Raises:
        AssertionError: Raised when settings are not loaded as expected.
    """

    monkeypatch.setenv("LOG_LEVEL", "debug")
    monkeypatch.setenv("LOG_FORMAT", "json")
    monkeypatch.setenv("INGESTION_UNKNOWN_FIELD_POLICY", "fail")
    monkeypatch.setenv("APPLICATION_PORT", "9000")

    settings = config_load_settings()

    assert settings.log_level == "DEBUG"
    assert settings.log_format == "json"
    assert settings.ingestion_unknown_field_policy == "fail"
    assert settings.application_port == 9000


@pytest.mark.parametrize(
    ("variable", "value"),
    [
        ("LOG_LEVEL", "verbose"),
        ("LOG_FORMAT", "xml"),
        ("INGESTION_UNKNOWN_FIELD_POLICY", "warn"),
        ("APPLICATION_PORT", "70000"),
        ("ENVIRONMENT_NAME", "  "),
    ],
)
def test_config_load_settings_wraps_invalid_values(monkeypatch: pytest.MonkeyPatch, variable: str, value: str) -> None:
    """Wrap invalid setting values in `SettingsLoadError`.

    Returns:
        None: Assertions validate startup validation failures.

    Raises:
        AssertionError: Raised when invalid settings are accepted.
    """

    monkeypatch.setenv(variable, value)

    with pytest.raises(SettingsLoadError, match="Startup configuration validation failed"):
        config_load_settings()


def test_config_defaults_are_valid() -> None:
    """Build settings with documented defaults.

    Returns:
        None: Assertions validate defaults.

    Raises:
        AssertionError: Raised when defaults change unexpectedly.
    """

    settings = AppSettings(_env_file=None)

    assert settings.ingestion_unknown_field_policy == "ignore"
    assert settings.log_format == "text"
    assert settings.application_port == 8000
