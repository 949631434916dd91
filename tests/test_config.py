import pytest

from clinical_documentation.core.config import AssistantConfiguration
from clinical_documentation.core.enums import LLMProvider
from clinical_documentation.core.exceptions import ConfigurationError


def test_defaults_without_environment(clean_env):
    config = AssistantConfiguration.from_environment()

    assert config.provider == LLMProvider.GEMINI
    assert config.gemini_model == "gemini-2.5-flash"
    assert config.active_api_key is None
    assert config.request_timeout is None
    assert config.log_level == "INFO"


def test_api_key_variable_feeds_gemini(clean_env):
    clean_env.setenv("API_KEY", "k-123")
    config = AssistantConfiguration.from_environment()
    assert config.require_api_key() == "k-123"


def test_openai_selected_when_only_openai_key_present(clean_env):
    clean_env.setenv("OPENAI_API_KEY", "sk-test")
    config = AssistantConfiguration.from_environment()
    assert config.provider == LLMProvider.OPENAI
    assert config.active_model == "gpt-4o-mini"
    assert config.require_api_key() == "sk-test"


def test_env_file_is_loaded(clean_env, tmp_path):
    env_file = tmp_path / "custom.env"
    env_file.write_text("GEMINI_API_KEY=from-file\nREQUEST_TIMEOUT=30\n", encoding="utf-8")

    config = AssistantConfiguration.from_environment(env_file=str(env_file))

    assert config.gemini_api_key == "from-file"
    assert config.request_timeout == 30.0


def test_missing_key_is_not_a_load_error(clean_env):
    config = AssistantConfiguration.from_environment()
    with pytest.raises(ConfigurationError) as excinfo:
        config.require_api_key()
    assert excinfo.value.message == (
        "API key is missing. Please set the API_KEY environment variable."
    )


@pytest.mark.parametrize(
    "name,value",
    [
        ("LLM_PROVIDER", "anthropic"),
        ("GENERATION_TEMPERATURE", "5"),
        ("GENERATION_TEMPERATURE", "warm"),
        ("REQUEST_TIMEOUT", "-1"),
    ],
)
def test_malformed_settings_rejected(clean_env, name, value):
    clean_env.setenv(name, value)
    with pytest.raises(ConfigurationError):
        AssistantConfiguration.from_environment()


def test_to_dict_masks_keys():
    config = AssistantConfiguration(gemini_api_key="secret")
    assert config.to_dict()["gemini_api_key"] == "***"
    assert config.to_dict()["openai_api_key"] is None
