"""
Domain Exceptions for Clinical Documentation

This module defines all custom exceptions used throughout the clinical
documentation assistant. Well-defined exceptions enable:
    1. Clear error categorization for debugging
    2. Specific catch blocks for different failure modes
    3. Rich error context for troubleshooting

Exception Hierarchy:
    ClinicalDocumentationError (base)
    ├── ConfigurationError          → Missing credential / invalid configuration
    ├── GenerationError             → Any failed generation call
    │   ├── PromptError
    │   ├── ResponseParseError      → Structured response is not valid JSON / shape
    │   └── LLMError                → Provider SDK / transport failure
    │       └── LLMContentFilteredError
    └── RepositoryError             → Roster store failures
        ├── RosterLoadError
        └── RecordNotFoundError

Usage:
    from clinical_documentation.core.exceptions import GenerationError

    try:
        notes = pipeline.generate_notes(...)
    except GenerationError as e:
        logger.error(f"Generation failed: {e.message}")

Author: Shubham Singh
Date: December 2025
"""

from typing import Optional


# =============================================================================
# STAGE 1: BASE EXCEPTION
# =============================================================================
# All domain exceptions inherit from this base class.


class ClinicalDocumentationError(Exception):
    """
    Base exception for all clinical documentation errors.

    What it does:
        Provides a common base class for all domain-specific exceptions,
        enabling catch-all handling while preserving specific error types.

    Attributes:
        message: Human-readable error description
        context: Dictionary of additional context for debugging
    """

    def __init__(self, message: str, context: Optional[dict] = None):
        """
        Initialize with message and optional context.

        Args:
            message: Human-readable error description
            context: Additional debugging context (stage, ids, provider)
        """
        self.message = message
        self.context = context or {}
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format message with context for display."""
        if self.context:
            context_str = ", ".join(f"{k}={v}" for k, v in self.context.items())
            return f"{self.message} [{context_str}]"
        return self.message


# =============================================================================
# STAGE 2: CONFIGURATION ERRORS
# =============================================================================


class ConfigurationError(ClinicalDocumentationError):
    """
    Error in assistant configuration.

    When raised:
        - No API key available for the selected provider
        - Unknown provider name
        - Numeric settings out of range

    Example:
        >>> raise ConfigurationError(
        ...     "API key is missing. Please set the API_KEY environment variable.",
        ...     context={"setting": "API_KEY", "provider": "gemini"}
        ... )
    """

    pass


# =============================================================================
# STAGE 3: GENERATION ERRORS
# =============================================================================


class GenerationError(ClinicalDocumentationError):
    """
    A generation call failed.

    What it does:
        The single failure kind surfaced to callers for network, provider
        and malformed-response problems. Carries the underlying message so
        it can be shown to the user verbatim.
    """

    pass


class PromptError(GenerationError):
    """
    Error constructing a generation prompt.

    When raised:
        - Unknown note type or assessment type
        - Inputs that cannot be projected into prompt text
    """

    pass


class ResponseParseError(GenerationError):
    """
    Structured response could not be parsed into note results.

    When raised:
        - Response body is not valid JSON
        - JSON root is not an array
        - An entry lacks one of the required string fields

    Attributes:
        raw_response: The offending response text (truncated)
    """

    def __init__(self, reason: str, raw_response: Optional[str] = None):
        self.reason = reason
        self.raw_response = raw_response
        super().__init__(
            f"Could not parse structured response: {reason}",
            context={"response_length": len(raw_response) if raw_response else 0},
        )


class LLMError(GenerationError):
    """
    Error from an LLM API call.

    What it does:
        Wraps errors from the underlying LLM SDK (Gemini, OpenAI)
        with the provider name and the original exception.

    Attributes:
        provider: The LLM provider (gemini, openai)
        original_error: The wrapped original exception
    """

    def __init__(self, message: str, provider: str, original_error: Optional[Exception] = None):
        self.provider = provider
        self.original_error = original_error
        super().__init__(
            message,
            context={
                "provider": provider,
                "original_error": str(original_error) if original_error else None,
            },
        )


class LLMContentFilteredError(LLMError):
    """
    LLM response was blocked by the provider's safety settings.
    """

    def __init__(self, provider: str, reason: Optional[str] = None):
        super().__init__(
            f"Content filtered by {provider} safety settings: {reason or 'unknown reason'}",
            provider=provider,
        )
        self.reason = reason


# =============================================================================
# STAGE 4: REPOSITORY ERRORS
# =============================================================================


class RepositoryError(ClinicalDocumentationError):
    """
    Error accessing the roster store.
    """

    pass


class RosterLoadError(RepositoryError):
    """
    Error loading a roster JSON file.

    When raised:
        - File not found
        - Invalid JSON format
        - Permission denied

    Attributes:
        file_path: Path to the roster file
    """

    def __init__(self, file_path: str, reason: str):
        self.file_path = file_path
        self.reason = reason
        super().__init__(
            f"Failed to load roster from {file_path}: {reason}",
            context={"file_path": file_path, "reason": reason},
        )


class RecordNotFoundError(RepositoryError):
    """
    A partner, program or client id did not resolve.

    Attributes:
        record_type: "client", "program" or "partner"
        record_id: The id that was looked up
    """

    def __init__(self, record_type: str, record_id: str):
        self.record_type = record_type
        self.record_id = record_id
        super().__init__(
            f"{record_type.capitalize()} not found: {record_id}",
            context={"record_type": record_type, "record_id": record_id},
        )
