"""Tests for configuration management."""

import pytest

from compactifai import ClientConfig, CompactifAIModels, create_client
from compactifai.core.config import DEFAULT_BASE_URL
from compactifai.core.exceptions import ConfigurationError
from compactifai.core.settings import CompactifAISettings, get_settings

ENV_VARS = (
    "COMPACTIFAI_API_KEY",
    "COMPACTIFAI_BASE_URL",
    "COMPACTIFAI_DEFAULT_MODEL",
    "COMPACTIFAI_TIMEOUT_S",
    "COMPACTIFAI_CONNECT_TIMEOUT_S",
    "COMPACTIFAI_STRICT_CHOICES",
    "COMPACTIFAI_LOG_LEVEL",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep the host environment out of settings tests."""
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


def test_client_config_defaults():
    config = ClientConfig()

    assert config.base_url == "https://api.compactif.ai/v1"
    assert config.default_model == CompactifAIModels.LLAMA_3_1_8B_SLIM
    assert config.timeout_s == 120.0
    assert config.api_key == ""
    assert config.strict_choices is False


def test_client_config_is_immutable():
    config = ClientConfig(api_key="k")
    with pytest.raises(AttributeError):
        config.api_key = "other"


def test_model_catalog():
    assert CompactifAIModels.DEEPSEEK_R1_SLIM == "cai-deepseek-r1-0528-slim"
    assert CompactifAIModels.LLAMA_4_SCOUT_SLIM == "cai-llama-4-scout-slim"
    assert CompactifAIModels.LLAMA_4_SCOUT == "llama-4-scout"
    assert CompactifAIModels.LLAMA_3_3_70B_SLIM == "cai-llama-3-3-70b-slim"
    assert CompactifAIModels.LLAMA_3_3_70B == "llama-3-3-70b"
    assert CompactifAIModels.LLAMA_3_1_8B_SLIM == "cai-llama-3-1-8b-slim"
    assert CompactifAIModels.LLAMA_3_1_8B_SLIM_R == "cai-llama-3-1-8b-slim-r"
    assert CompactifAIModels.LLAMA_3_1_8B == "llama-3-1-8b"
    assert CompactifAIModels.MISTRAL_SMALL_3_1_SLIM == "cai-mistral-small-3-1-slim"
    assert CompactifAIModels.MISTRAL_SMALL_3_1 == "mistral-small-3-1"
    assert CompactifAIModels.GPT_OSS_20B == "gpt-oss-20b"
    assert CompactifAIModels.GPT_OSS_120B == "gpt-oss-120b"
    assert CompactifAIModels.WHISPER_LARGE_V3 == "whisper-large-v3"


def test_settings_defaults():
    settings = CompactifAISettings(_env_file=None)

    assert settings.api_key == ""
    assert settings.base_url == DEFAULT_BASE_URL
    assert settings.default_model == CompactifAIModels.LLAMA_3_1_8B_SLIM
    assert settings.timeout_s == 120.0
    assert settings.log_level == "INFO"


def test_settings_loads_from_environment(monkeypatch):
    monkeypatch.setenv("COMPACTIFAI_API_KEY", "env-key")
    monkeypatch.setenv("COMPACTIFAI_BASE_URL", "http://127.0.0.1:8000/v1")
    monkeypatch.setenv("COMPACTIFAI_DEFAULT_MODEL", "gpt-oss-20b")
    monkeypatch.setenv("COMPACTIFAI_TIMEOUT_S", "30")
    monkeypatch.setenv("COMPACTIFAI_STRICT_CHOICES", "1")
    monkeypatch.setenv("COMPACTIFAI_LOG_LEVEL", "debug")

    settings = CompactifAISettings(_env_file=None)

    assert settings.api_key == "env-key"
    assert settings.base_url == "http://127.0.0.1:8000/v1"
    assert settings.default_model == "gpt-oss-20b"
    assert settings.timeout_s == 30.0
    assert settings.strict_choices is True
    assert settings.log_level == "DEBUG"
    assert settings.get_log_level() == 10


def test_settings_loads_from_env_file(tmp_path):
    env_file = tmp_path / ".env"
    env_file.write_text(
        "COMPACTIFAI_API_KEY=file-key\n"
        "COMPACTIFAI_DEFAULT_MODEL=cai-llama-3-3-70b-slim\n"
    )

    settings = CompactifAISettings(_env_file=env_file)

    assert settings.api_key == "file-key"
    assert settings.default_model == "cai-llama-3-3-70b-slim"


def test_settings_validates_url():
    with pytest.raises(ValueError, match="URL must use http or https scheme"):
        CompactifAISettings(_env_file=None, base_url="ftp://api.compactif.ai/v1")

    with pytest.raises(ValueError, match="URL must have a valid host"):
        CompactifAISettings(_env_file=None, base_url="https://")


def test_settings_validates_timeout():
    with pytest.raises(ValueError, match="Timeout must be positive"):
        CompactifAISettings(_env_file=None, timeout_s=0)

    with pytest.raises(ValueError, match="Timeout must be positive"):
        CompactifAISettings(_env_file=None, connect_timeout_s=-1)


def test_settings_validates_log_level():
    with pytest.raises(ValueError, match="log_level must be one of"):
        CompactifAISettings(_env_file=None, log_level="LOUD")


def test_get_settings_wraps_invalid_environment(monkeypatch):
    monkeypatch.setenv("COMPACTIFAI_TIMEOUT_S", "-5")

    with pytest.raises(ValueError, match="Failed to load configuration"):
        get_settings()


def test_get_settings_is_cached(monkeypatch):
    monkeypatch.setenv("COMPACTIFAI_API_KEY", "cached-key")

    assert get_settings() is get_settings()


def test_settings_to_config():
    settings = CompactifAISettings(
        _env_file=None,
        api_key="k",
        base_url="https://example.test/v1",
        timeout_s=15,
        connect_timeout_s=2,
        strict_choices=True,
    )

    config = settings.to_config()

    assert config == ClientConfig(
        api_key="k",
        base_url="https://example.test/v1",
        default_model=CompactifAIModels.LLAMA_3_1_8B_SLIM,
        timeout_s=15.0,
        connect_timeout_s=2.0,
        strict_choices=True,
    )


def test_create_client_from_settings():
    settings = CompactifAISettings(_env_file=None, api_key="settings-key", default_model="gpt-oss-120b")

    client = create_client(settings=settings)

    assert client.config.api_key == "settings-key"
    assert client.config.default_model == "gpt-oss-120b"


def test_create_client_overrides_win():
    settings = CompactifAISettings(_env_file=None, api_key="settings-key")

    client = create_client("explicit-key", settings=settings, timeout_s=5.0)

    assert client.config.api_key == "explicit-key"
    assert client.config.timeout_s == 5.0


def test_create_client_from_environment(monkeypatch):
    monkeypatch.setenv("COMPACTIFAI_API_KEY", "env-key")

    client = create_client()

    assert client.config.api_key == "env-key"


def test_create_client_without_key_fails():
    settings = CompactifAISettings(_env_file=None)

    with pytest.raises(ConfigurationError):
        create_client(settings=settings)
