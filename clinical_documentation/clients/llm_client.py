"""
LLM Client Protocol and Base Implementation

This module defines the interface for LLM clients and provides a base
class with common functionality (error translation, call metrics).

Protocol Pattern:
    - LLMClientProtocol defines the interface
    - BaseLLMClient provides common implementation
    - Concrete clients (GeminiClient, OpenAIClient) extend base

Why This Design:
    1. Dependency Inversion: GenerationClient depends on protocol, not concrete class
    2. Open/Closed: Add new providers without modifying existing code
    3. Testing: a fake client only needs generate(), model_name and provider_name

Call Policy:
    Exactly one API call per generate(). There is no retry and no rate
    limiting; a failed call is surfaced to the caller, who re-triggers it.

Author: Shubham Singh
Date: December 2025
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, Optional, Protocol, runtime_checkable

from loguru import logger

from clinical_documentation.core.exceptions import LLMError


# =============================================================================
# STAGE 1: LLM CLIENT PROTOCOL
# =============================================================================
# Defines the contract that all LLM clients must follow.


@runtime_checkable
class LLMClientProtocol(Protocol):
    """
    Protocol defining the interface for LLM clients.

    Required Methods:
        generate(prompt, response_schema) → Generate text from prompt

    Optional Properties:
        model_name → Name of the model being used
        provider_name → Name of the provider (gemini, openai)
    """

    def generate(self, prompt: str, response_schema: Optional[Dict[str, Any]] = None) -> str:
        """
        Generate text from a prompt.

        Args:
            prompt: The generation prompt
            response_schema: When given, the provider must return JSON text
                conforming to this schema

        Returns:
            Generated text (JSON text in structured mode)

        Raises:
            LLMError: If generation fails
        """
        ...

    @property
    def model_name(self) -> str:
        """Name of the model being used."""
        ...

    @property
    def provider_name(self) -> str:
        """Name of the LLM provider."""
        ...


# =============================================================================
# STAGE 2: BASE LLM CLIENT (ABSTRACT)
# =============================================================================


class BaseLLMClient(ABC):
    """
    Abstract base class for LLM clients with common functionality.

    What it does:
        Wraps the provider-specific `_call_api` with a single-attempt call,
        uniform error translation and call counters, so concrete clients
        only implement the API-specific logic.

    What subclasses must implement:
        - _call_api(prompt, response_schema): Actual API call
        - provider_name: Property returning provider name
    """

    def __init__(
        self,
        api_key: str,
        model_name: str,
        temperature: float = 0.7,
        request_timeout: Optional[float] = None,
    ):
        """
        Initialize base LLM client.

        Args:
            api_key: API key for the provider
            model_name: Name of model to use
            temperature: Sampling temperature
            request_timeout: Per-request timeout in seconds (None = no timeout)
        """
        # =====================================================================
        # STAGE 2.1: STORE CONFIGURATION
        # =====================================================================
        self._api_key = api_key
        self._model_name = model_name
        self._temperature = temperature
        self._request_timeout = request_timeout

        # =====================================================================
        # STAGE 2.2: TRACKING STATE
        # =====================================================================
        self._total_calls = 0
        self._failed_calls = 0

    # =========================================================================
    # STAGE 3: PUBLIC API
    # =========================================================================

    def generate(self, prompt: str, response_schema: Optional[Dict[str, Any]] = None) -> str:
        """
        Generate text from prompt with a single API call.

        Args:
            prompt: The generation prompt
            response_schema: Optional structured-output schema

        Returns:
            Generated text

        Raises:
            LLMError: If the call fails for any reason
        """
        try:
            result = self._call_api(prompt, response_schema)
        except LLMError:
            self._failed_calls += 1
            raise
        except Exception as e:
            self._failed_calls += 1
            logger.error(f"Unexpected error in {self.provider_name} call: {e}")
            raise LLMError(str(e), provider=self.provider_name, original_error=e)

        self._total_calls += 1
        return result

    # =========================================================================
    # STAGE 4: ABSTRACT METHODS
    # =========================================================================

    @abstractmethod
    def _call_api(self, prompt: str, response_schema: Optional[Dict[str, Any]]) -> str:
        """
        Make the actual API call. Must be implemented by subclasses.

        Raises:
            LLMError: If API call fails
        """
        ...

    @property
    @abstractmethod
    def provider_name(self) -> str:
        """Return the provider name (e.g., 'gemini', 'openai')."""
        ...

    # =========================================================================
    # STAGE 5: COMMON IMPLEMENTATION
    # =========================================================================

    @property
    def model_name(self) -> str:
        """Return the model name."""
        return self._model_name

    # =========================================================================
    # STAGE 6: METRICS
    # =========================================================================

    @property
    def total_calls(self) -> int:
        """Total number of successful API calls."""
        return self._total_calls

    @property
    def failed_calls(self) -> int:
        return self._failed_calls
