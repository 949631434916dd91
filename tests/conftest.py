import sys

import pytest
from loguru import logger

from clinical_documentation.core.config import AssistantConfiguration
from clinical_documentation.core.models import (
    ClientProfile,
    ClientRecord,
    PartnerRecord,
    ProgramRecord,
    SelectionSet,
)
from clinical_documentation.generation.generation_client import GenerationClient


ENV_VARS = [
    "API_KEY",
    "GEMINI_API_KEY",
    "GOOGLE_API_KEY",
    "OPENAI_API_KEY",
    "LLM_PROVIDER",
    "GEMINI_MODEL",
    "OPENAI_MODEL",
    "GENERATION_TEMPERATURE",
    "REQUEST_TIMEOUT",
    "ROSTER_PATH",
    "LOG_LEVEL",
]


class FakeLLMClient:
    """Stands in for GeminiClient/OpenAIClient; records every call."""

    def __init__(self, response="", error=None):
        self.response = response
        self.error = error
        self.calls = []

    def generate(self, prompt, response_schema=None):
        self.calls.append({"prompt": prompt, "response_schema": response_schema})
        if self.error is not None:
            raise self.error
        return self.response

    @property
    def model_name(self):
        return "fake-model"

    @property
    def provider_name(self):
        return "fake"


@pytest.fixture(autouse=True)
def reset_logger():
    yield
    # the CLI swaps loguru sinks; restore a plain one between tests
    logger.remove()
    logger.add(sys.stderr, level="WARNING")


@pytest.fixture()
def log_records():
    records = []
    handler_id = logger.add(lambda message: records.append(message.record), level="DEBUG")
    yield records
    logger.remove(handler_id)


@pytest.fixture()
def clean_env(monkeypatch, tmp_path):
    # set-then-delete so monkeypatch also removes anything load_dotenv adds
    for name in ENV_VARS:
        monkeypatch.setenv(name, "placeholder")
        monkeypatch.delenv(name)
    monkeypatch.chdir(tmp_path)
    return monkeypatch


@pytest.fixture()
def config():
    return AssistantConfiguration(gemini_api_key="test-key")


@pytest.fixture()
def keyless_config():
    return AssistantConfiguration()


@pytest.fixture()
def partner():
    return PartnerRecord(id="x", name="Acme")


@pytest.fixture()
def program():
    return ProgramRecord(id="p1", name="IOP", partner_id="x")


@pytest.fixture()
def jane():
    return ClientRecord(
        id="1",
        name="Jane Doe",
        program_id="p1",
        profile=ClientProfile(presenting_problem="Anxiety"),
    )


@pytest.fixture()
def john():
    return ClientRecord(
        id="2",
        name="John Roe",
        program_id="p1",
        profile=ClientProfile(barriers=("Transportation",)),
    )


@pytest.fixture()
def empty_selections():
    return SelectionSet(checkboxes={}, narratives={})


@pytest.fixture()
def make_generation_client(config):
    def _make(response="", error=None, cfg=None):
        fake = FakeLLMClient(response=response, error=error)
        return GenerationClient(cfg or config, llm_client=fake), fake

    return _make
