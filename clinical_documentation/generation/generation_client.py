"""
Generation Client - Single-Attempt Model Requests

This module sends a composed GenerationRequest to the configured LLM
provider and turns the raw reply into a typed GenerationResult.

Why Separate from Prompt Builders:
    1. Single Responsibility: this class handles the model call only
    2. Dependency injection: the LLM client can be a fake in tests
    3. Error handling: every failure leaves here as a GenerationError,
       except a missing credential, which is a ConfigurationError

Call Contract:
    1. The API credential is checked before anything else
    2. Exactly one call is made; there is no retry
    3. The caller receives either a complete result or an exception,
       never a partial result

Pipeline Position:
    PromptBuilder → [GenerationClient] → ResultValidator
                    ^^^^^^^^^^^^^^^^^^
                    You are here

Author: Shubham Singh
Date: December 2025
"""

import json
from typing import Any, List, Optional

from loguru import logger

from clinical_documentation.clients.llm_client import LLMClientProtocol
from clinical_documentation.core.config import AssistantConfiguration
from clinical_documentation.core.constants import NOTE_RESULT_FIELDS
from clinical_documentation.core.enums import LLMProvider
from clinical_documentation.core.exceptions import (
    ClinicalDocumentationError,
    GenerationError,
    ResponseParseError,
)
from clinical_documentation.core.models import GenerationRequest, GenerationResult, NoteResult


# =============================================================================
# STAGE 1: GENERATION CLIENT CLASS
# =============================================================================


class GenerationClient:
    """
    Sends one request to the generation service and parses the reply.

    What it does:
        STAGE 1.1: Fail fast when no API credential is configured
        STAGE 1.2: Create the provider client on first use
        STAGE 1.3: Issue exactly one call (with the schema in structured mode)
        STAGE 1.4: Parse the JSON array into NoteResults, or return text as-is

    Example:
        >>> client = GenerationClient(config)
        >>> result = client.send(request)
        >>> result.notes[0].client_id
        '1'
    """

    def __init__(
        self,
        config: AssistantConfiguration,
        llm_client: Optional[LLMClientProtocol] = None,
    ):
        """
        Initialize the generation client.

        Args:
            config: Assistant configuration (provider, keys, model)
            llm_client: Pre-built provider client; created lazily when None
        """
        self._config = config
        self._llm_client = llm_client
        self._request_count = 0

    # =========================================================================
    # STAGE 2: PUBLIC API
    # =========================================================================

    def send(self, request: GenerationRequest) -> GenerationResult:
        """
        Send a request and return the parsed result.

        Raises:
            ConfigurationError: If no API credential is configured
            ResponseParseError: If structured output is malformed
            GenerationError: If the call fails for any other reason
        """
        # =====================================================================
        # STAGE 2.1: CREDENTIAL PRECONDITION
        # =====================================================================
        api_key = self._config.require_api_key()

        # =====================================================================
        # STAGE 2.2: SINGLE CALL
        # =====================================================================
        client = self._get_llm_client(api_key)
        schema = request.response_schema if request.is_structured else None

        logger.info(
            f"Sending {request.label} request | "
            f"Provider: {client.provider_name} | "
            f"Model: {client.model_name} | "
            f"Mode: {request.mode.value} | "
            f"Prompt: {len(request.prompt)} chars"
        )

        self._request_count += 1
        try:
            raw = client.generate(request.prompt, response_schema=schema)
        except ClinicalDocumentationError:
            raise
        except Exception as e:
            raise GenerationError(str(e), context={"label": request.label})

        # =====================================================================
        # STAGE 2.3: PARSE
        # =====================================================================
        if not request.is_structured:
            logger.info(f"Received {request.label} text | Length: {len(raw or '')} chars")
            return GenerationResult.free_text(raw or "")

        notes = self.parse_notes(raw)
        logger.info(f"Received {request.label} response | Entries: {len(notes)}")
        return GenerationResult.structured(notes)

    @staticmethod
    def parse_notes(raw: Optional[str]) -> List[NoteResult]:
        """
        Parse a structured reply into NoteResults.

        Raises:
            ResponseParseError: If the text is not a JSON array of objects
                with string clientId, clientName and note
        """
        try:
            payload: Any = json.loads((raw or "").strip())
        except json.JSONDecodeError as e:
            raise ResponseParseError(f"Invalid JSON: {e}", raw_response=raw)

        if not isinstance(payload, list):
            raise ResponseParseError(
                f"Expected a JSON array, got {type(payload).__name__}", raw_response=raw
            )

        notes = []
        for index, entry in enumerate(payload):
            if not isinstance(entry, dict):
                raise ResponseParseError(f"Entry {index} is not an object", raw_response=raw)
            missing = [key for key in NOTE_RESULT_FIELDS if not isinstance(entry.get(key), str)]
            if missing:
                raise ResponseParseError(
                    f"Entry {index} is missing string field(s): {', '.join(missing)}",
                    raw_response=raw,
                )
            notes.append(NoteResult.from_dict(entry))
        return notes

    # =========================================================================
    # STAGE 3: PROVIDER CLIENT CREATION
    # =========================================================================

    def _get_llm_client(self, api_key: str) -> LLMClientProtocol:
        if self._llm_client is None:
            self._llm_client = self._create_llm_client(api_key)
        return self._llm_client

    def _create_llm_client(self, api_key: str) -> LLMClientProtocol:
        # Imported here so the SDKs load only when a real call is made.
        if self._config.provider == LLMProvider.OPENAI:
            from clinical_documentation.clients.openai_client import OpenAIClient

            return OpenAIClient(
                api_key=api_key,
                model_name=self._config.openai_model,
                temperature=self._config.temperature,
                request_timeout=self._config.request_timeout,
            )

        from clinical_documentation.clients.gemini_client import GeminiClient

        return GeminiClient(
            api_key=api_key,
            model_name=self._config.gemini_model,
            temperature=self._config.temperature,
            request_timeout=self._config.request_timeout,
        )

    # =========================================================================
    # STAGE 4: STATISTICS
    # =========================================================================

    @property
    def request_count(self) -> int:
        """Number of requests dispatched (successful or not)."""
        return self._request_count
