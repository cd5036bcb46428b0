from __future__ import annotations

import pytest

from scribe.runtime.settings import load_settings


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in (
        "OPENAI_API_KEY",
        "OPENAI_BASE_URL",
        "OPENAI_TIMEOUT_S",
        "OPENAI_MAX_RETRIES",
        "TRANSCRIPTION_MODEL",
        "TRANSCRIPTION_LANGUAGE",
        "TRANSCRIPTION_TEMPERATURE",
        "TRANSCRIPTION_WINDOW_CHUNKS",
        "MAX_CONCURRENT_CONNECTIONS",
        "MAX_AUDIO_CHUNK_BYTES",
        "WS_IDLE_TIMEOUT_S",
        "WS_WATCHDOG_TICK_S",
        "WS_MAX_CONNECTION_DURATION_S",
    ):
        monkeypatch.delenv(name, raising=False)


def test_defaults() -> None:
    settings = load_settings()
    assert settings.transcription.model == "whisper-1"
    assert settings.transcription.language == "en"
    assert settings.transcription.temperature == 0.2
    assert settings.transcription.window_chunks == 8
    assert settings.limits.max_concurrent_connections == 100
    assert settings.openai.api_key == ""
    assert settings.openai.base_url is None


def test_env_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("OPENAI_API_KEY", " sk-test ")
    monkeypatch.setenv("OPENAI_BASE_URL", "http://localhost:9000/v1")
    monkeypatch.setenv("TRANSCRIPTION_LANGUAGE", "fr")
    monkeypatch.setenv("TRANSCRIPTION_WINDOW_CHUNKS", "4")
    monkeypatch.setenv("WS_IDLE_TIMEOUT_S", "30")

    settings = load_settings()
    assert settings.openai.api_key == "sk-test"
    assert settings.openai.base_url == "http://localhost:9000/v1"
    assert settings.transcription.language == "fr"
    assert settings.transcription.window_chunks == 4
    assert settings.websocket.idle_timeout_s == 30.0


def test_invalid_numbers_fall_back_to_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("MAX_CONCURRENT_CONNECTIONS", "lots")
    monkeypatch.setenv("TRANSCRIPTION_TEMPERATURE", "warm")

    settings = load_settings()
    assert settings.limits.max_concurrent_connections == 100
    assert settings.transcription.temperature == 0.2


def test_window_chunks_is_clamped(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TRANSCRIPTION_WINDOW_CHUNKS", "0")
    assert load_settings().transcription.window_chunks == 1
