"""
OpenAI Client - OpenAI API Implementation

This module provides the concrete implementation of LLMClient for
OpenAI's chat completions API (gpt-4o-mini by default).

Structured Output:
    OpenAI's strict `json_schema` response format requires an object at the
    root, so an array schema is wrapped as {"notes": [...]} for the request
    and the array is unwrapped again before returning JSON text. Callers see
    the same shape they would get from Gemini.

Author: Shubham Singh
Date: December 2025
"""

import json
from typing import Any, Dict, Optional

from loguru import logger

from clinical_documentation.clients.llm_client import BaseLLMClient
from clinical_documentation.core.exceptions import (
    LLMError,
    LLMContentFilteredError,
)


ENVELOPE_KEY = "notes"


def to_json_schema(schema: Dict[str, Any]) -> Dict[str, Any]:
    """
    Convert an upper-case OpenAPI-style schema to strict JSON Schema.

    Type names are lower-cased and every object gets
    `additionalProperties: false`, which strict mode requires.
    """
    converted: Dict[str, Any] = {}
    for key, value in schema.items():
        if key == "type" and isinstance(value, str):
            converted[key] = value.lower()
        elif key == "properties":
            converted[key] = {name: to_json_schema(prop) for name, prop in value.items()}
        elif key == "items":
            converted[key] = to_json_schema(value)
        else:
            converted[key] = value
    if converted.get("type") == "object":
        converted["additionalProperties"] = False
    return converted


def wrap_array_schema(schema: Dict[str, Any]) -> Dict[str, Any]:
    """Wrap a root array schema in a single-property object envelope."""
    json_schema = to_json_schema(schema)
    if json_schema.get("type") != "array":
        return json_schema
    return {
        "type": "object",
        "properties": {ENVELOPE_KEY: json_schema},
        "required": [ENVELOPE_KEY],
        "additionalProperties": False,
    }


# =============================================================================
# STAGE 1: OPENAI CLIENT IMPLEMENTATION
# =============================================================================


class OpenAIClient(BaseLLMClient):
    """
    OpenAI API client for text and structured generation.

    What it does:
        Provides generation using OpenAI's models via the openai library.

    Why it exists:
        1. Encapsulates OpenAI-specific API logic
        2. Hides the object-root envelope needed for array outputs
        3. Translates OpenAI errors to domain exceptions

    Example:
        >>> client = OpenAIClient(api_key="...", model_name="gpt-4o-mini")
        >>> text = client.generate("Write an assessment...")
    """

    def __init__(
        self,
        api_key: str,
        model_name: str = "gpt-4o-mini",
        temperature: float = 0.7,
        request_timeout: Optional[float] = None,
    ):
        """
        Initialize OpenAI client.

        STAGE 1.1: Initialize base class
        STAGE 1.2: Configure OpenAI SDK
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
        # STAGE 1.2: CONFIGURE OPENAI SDK
        # =====================================================================
        self._client = None
        self._initialize_client()

        logger.info(f"OpenAIClient initialized | Model: {model_name}")

    def _initialize_client(self) -> None:
        """
        Initialize the OpenAI client.

        Lazy import to avoid requiring openai at module load.
        """
        try:
            from openai import OpenAI

            self._client = OpenAI(api_key=self._api_key, timeout=self._request_timeout)

        except ImportError:
            raise LLMError(
                "openai package not installed. Install with: pip install openai",
                provider="openai",
            )
        except Exception as e:
            raise LLMError(
                f"Failed to initialize OpenAI client: {e}", provider="openai", original_error=e
            )

    # =========================================================================
    # STAGE 2: API CALL IMPLEMENTATION
    # =========================================================================

    def _call_api(self, prompt: str, response_schema: Optional[Dict[str, Any]]) -> str:
        """
        Make the actual OpenAI API call.

        Args:
            prompt: Generation prompt
            response_schema: Upper-case OpenAPI-style schema, or None for free text

        Returns:
            Generated text (JSON text when a schema was given)

        Raises:
            LLMError: If API call fails
            LLMContentFilteredError: If content was filtered
        """
        kwargs: Dict[str, Any] = {
            "model": self._model_name,
            "messages": [{"role": "user", "content": prompt}],
            "temperature": self._temperature,
        }
        wrapped = False
        if response_schema is not None:
            wrapped = str(response_schema.get("type", "")).lower() == "array"
            kwargs["response_format"] = {
                "type": "json_schema",
                "json_schema": {
                    "name": "generation_result",
                    "strict": True,
                    "schema": wrap_array_schema(response_schema),
                },
            }

        try:
            response = self._client.chat.completions.create(**kwargs)

            if response.choices:
                choice = response.choices[0]
                if choice.finish_reason == "content_filter":
                    raise LLMContentFilteredError(provider="openai", reason="content_filter")
                if choice.message.content:
                    content = choice.message.content
                    return self._unwrap(content) if wrapped else content

            raise LLMError("OpenAI returned empty response", provider="openai")

        except LLMError:
            raise

        except Exception as e:
            error_str = str(e).lower()

            if "content_filter" in error_str or "policy" in error_str:
                raise LLMContentFilteredError(provider="openai", reason=str(e))

            raise LLMError(f"OpenAI API error: {e}", provider="openai", original_error=e)

    @staticmethod
    def _unwrap(content: str) -> str:
        """Return the enveloped array as JSON text; malformed input passes through."""
        try:
            payload = json.loads(content)
        except json.JSONDecodeError:
            return content
        if isinstance(payload, dict) and ENVELOPE_KEY in payload:
            return json.dumps(payload[ENVELOPE_KEY])
        return content

    # =========================================================================
    # STAGE 3: PROPERTIES
    # =========================================================================

    @property
    def provider_name(self) -> str:
        """Return provider name."""
        return "openai"
