"""
Gemini Client - Google Gemini API Implementation

This module provides the concrete implementation of LLMClient for
Google's Gemini API (gemini-2.5-flash by default).

Why Separate File:
    1. Single Responsibility: one provider per file
    2. Easy to swap: just change import
    3. Provider-specific handling: safety settings, JSON response schema

Author: Shubham Singh
Date: December 2025
"""

from typing import Any, Dict, Optional

from loguru import logger

from clinical_documentation.clients.llm_client import BaseLLMClient
from clinical_documentation.core.exceptions import (
    LLMError,
    LLMContentFilteredError,
)


# Permissive thresholds: clinical notes routinely discuss self-harm,
# substance use and violence.
SAFETY_SETTINGS = [
    {"category": "HARM_CATEGORY_HARASSMENT", "threshold": "BLOCK_NONE"},
    {"category": "HARM_CATEGORY_HATE_SPEECH", "threshold": "BLOCK_NONE"},
    {"category": "HARM_CATEGORY_SEXUALLY_EXPLICIT", "threshold": "BLOCK_NONE"},
    {"category": "HARM_CATEGORY_DANGEROUS_CONTENT", "threshold": "BLOCK_NONE"},
]


# =============================================================================
# STAGE 1: GEMINI CLIENT IMPLEMENTATION
# =============================================================================


class GeminiClient(BaseLLMClient):
    """
    Google Gemini API client for text and structured generation.

    What it does:
        Provides generation using Google's Gemini models via the
        google-generativeai library. When a response schema is given the
        request asks for `application/json` constrained by that schema.

    Why it exists:
        1. Encapsulates Gemini-specific API logic
        2. Handles Gemini's safety settings
        3. Translates Gemini errors to domain exceptions

    Example:
        >>> client = GeminiClient(api_key="...", model_name="gemini-2.5-flash")
        >>> text = client.generate("Write an assessment...")
    """

    def __init__(
        self,
        api_key: str,
        model_name: str = "gemini-2.5-flash",
        temperature: float = 0.7,
        request_timeout: Optional[float] = None,
    ):
        """
        Initialize Gemini client.

        STAGE 1.1: Initialize base class
        STAGE 1.2: Configure Gemini SDK
        """
        # =====================================================================
        # STAGE 1.1: INITIALIZE BASE CLASS
        # =====================================================================
        super().__init__(
            api_key=api_key,
            model_name=model_name,
            temperature=temperature,
            request_timeout=request_timeout,
        )

        # =====================================================================
        # STAGE 1.2: CONFIGURE GEMINI SDK
        # =====================================================================
        self._genai = None
        self._model = None
        self._initialize_client()

        logger.info(f"GeminiClient initialized | Model: {model_name}")

    def _initialize_client(self) -> None:
        """
        Initialize the Gemini client and model.

        Lazy import to avoid requiring google-generativeai at module load.
        """
        try:
            import google.generativeai as genai

            genai.configure(api_key=self._api_key)
            self._genai = genai
            self._model = genai.GenerativeModel(
                model_name=self._model_name,
                safety_settings=SAFETY_SETTINGS,
            )

        except ImportError:
            raise LLMError(
                "google-generativeai package not installed. "
                "Install with: pip install google-generativeai",
                provider="gemini",
            )
        except Exception as e:
            raise LLMError(
                f"Failed to initialize Gemini client: {e}", provider="gemini", original_error=e
            )

    # =========================================================================
    # STAGE 2: API CALL IMPLEMENTATION
    # =========================================================================

    def _generation_config(self, response_schema: Optional[Dict[str, Any]]):
        if response_schema is None:
            return self._genai.GenerationConfig(temperature=self._temperature)
        return self._genai.GenerationConfig(
            temperature=self._temperature,
            response_mime_type="application/json",
            response_schema=response_schema,
        )

    def _call_api(self, prompt: str, response_schema: Optional[Dict[str, Any]]) -> str:
        """
        Make the actual Gemini API call.

        Args:
            prompt: Generation prompt
            response_schema: Upper-case OpenAPI-style schema, or None for free text

        Returns:
            Generated text (JSON text when a schema was given)

        Raises:
            LLMError: If API call fails
            LLMContentFilteredError: If content was filtered
        """
        kwargs: Dict[str, Any] = {"generation_config": self._generation_config(response_schema)}
        if self._request_timeout is not None:
            kwargs["request_options"] = {"timeout": self._request_timeout}

        try:
            response = self._model.generate_content(prompt, **kwargs)

            # Check for blocked content
            if response.prompt_feedback and response.prompt_feedback.block_reason:
                raise LLMContentFilteredError(
                    provider="gemini", reason=str(response.prompt_feedback.block_reason)
                )

            # Extract text from response
            if response.candidates:
                candidate = response.candidates[0]
                if candidate.content and candidate.content.parts:
                    text = "".join(part.text for part in candidate.content.parts)
                    if text:
                        return text

            raise LLMError("Gemini returned empty response", provider="gemini")

        except LLMError:
            raise

        except Exception as e:
            error_str = str(e).lower()

            if "blocked" in error_str or "safety" in error_str:
                raise LLMContentFilteredError(provider="gemini", reason=str(e))

            raise LLMError(f"Gemini API error: {e}", provider="gemini", original_error=e)

    # =========================================================================
    # STAGE 3: PROPERTIES
    # =========================================================================

    @property
    def provider_name(self) -> str:
        """Return provider name."""
        return "gemini"
