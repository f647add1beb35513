import pytest

from onewriter_actions.runtime.telemetry import TelemetrySettings, configure


def test_settings_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ONEWRITER_ACTIONS_LOG_LEVEL", "debug")
    monkeypatch.setenv("ONEWRITER_ACTIONS_NO_COLOR", "yes")
    monkeypatch.setenv("ONEWRITER_ACTIONS_LOG_BUFFER_SIZE", "64")

    settings = TelemetrySettings.from_env()

    assert settings.level == "DEBUG"
    assert settings.colored is False
    assert settings.console is True
    assert settings.buffer_size == 64


def test_settings_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("LOGGER", "LOG_LEVEL", "LOG_FILE", "LOG_JSON", "DISABLE_CONSOLE"):
        monkeypatch.delenv(f"ONEWRITER_ACTIONS_{name}", raising=False)

    settings = TelemetrySettings.from_env()

    assert settings.logger_name == "onewriter_actions"
    assert settings.level == "INFO"
    assert settings.json_format is False
    assert settings.log_file == ""


def test_presets() -> None:
    assert TelemetrySettings.preset("development").level == "DEBUG"
    assert TelemetrySettings.preset("Production").console is False
    with pytest.raises(ValueError):
        TelemetrySettings.preset("verbose")


def test_configure_rejects_settings_and_preset() -> None:
    with pytest.raises(ValueError):
        configure(settings=TelemetrySettings(), preset="development")
