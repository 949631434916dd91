"""
Configuration for the Clinical Documentation Assistant

This module defines the configuration dataclass used to initialize the
documentation pipeline. Configuration is:
    1. Loaded from environment variables (with .env support)
    2. Validated at startup to fail fast on malformed settings
    3. Checked for a usable API credential on every generation call,
       not at load time, so dry runs work without a key

Configuration Hierarchy:
    AssistantConfiguration
    ├── LLM Settings (provider, API keys, model names, temperature, timeout)
    ├── Roster Settings (optional JSON roster path)
    └── Logging Settings (log level)

Usage:
    from clinical_documentation.core.config import AssistantConfiguration

    # Load from environment
    config = AssistantConfiguration.from_environment()

    # Or configure programmatically
    config = AssistantConfiguration(gemini_api_key="your-key")

Author: Shubham Singh
Date: December 2025
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from clinical_documentation.core.enums import LLMProvider
from clinical_documentation.core.exceptions import ConfigurationError


# =============================================================================
# STAGE 1: DEFAULT VALUES
# =============================================================================


class ConfigDefaults:
    """Default configuration values."""

    # -------------------------------------------------------------------------
    # 1.1 LLM Provider Defaults
    # -------------------------------------------------------------------------
    DEFAULT_PROVIDER = LLMProvider.GEMINI.value
    DEFAULT_GEMINI_MODEL = "gemini-2.5-flash"
    DEFAULT_OPENAI_MODEL = "gpt-4o-mini"
    DEFAULT_TEMPERATURE = 0.7

    # -------------------------------------------------------------------------
    # 1.2 Logging Defaults
    # -------------------------------------------------------------------------
    DEFAULT_LOG_LEVEL = "INFO"


# Environment variables checked, in order, for the Gemini credential.
GEMINI_KEY_VARIABLES = ("API_KEY", "GEMINI_API_KEY", "GOOGLE_API_KEY")


# =============================================================================
# STAGE 2: CONFIGURATION DATACLASS
# =============================================================================


@dataclass
class AssistantConfiguration:
    """
    Configuration for the clinical documentation pipeline.

    What it does:
        Encapsulates every setting needed to talk to the generation
        service and to load a roster.

    Credential Handling:
        `validate()` deliberately does not require an API key. The key is
        checked by `require_api_key()` immediately before each call, and
        its absence raises ConfigurationError before any network I/O.

    Example:
        >>> config = AssistantConfiguration.from_environment()
        >>> config.gemini_model
        'gemini-2.5-flash'
    """

    # -------------------------------------------------------------------------
    # 2.1 LLM Provider Configuration
    # -------------------------------------------------------------------------
    gemini_api_key: Optional[str] = None
    """Google Gemini API key (API_KEY / GEMINI_API_KEY / GOOGLE_API_KEY)."""

    gemini_model: str = ConfigDefaults.DEFAULT_GEMINI_MODEL
    """Gemini model name."""

    openai_api_key: Optional[str] = None
    """OpenAI API key. Required if using OpenAI provider."""

    openai_model: str = ConfigDefaults.DEFAULT_OPENAI_MODEL
    """OpenAI model name."""

    llm_provider: str = ConfigDefaults.DEFAULT_PROVIDER
    """Which LLM provider to use: 'gemini' or 'openai'."""

    temperature: float = ConfigDefaults.DEFAULT_TEMPERATURE
    """Sampling temperature passed to the provider."""

    request_timeout: Optional[float] = None
    """Per-request timeout in seconds. None waits indefinitely."""

    # -------------------------------------------------------------------------
    # 2.2 Roster Configuration
    # -------------------------------------------------------------------------
    roster_path: Optional[str] = None
    """Optional roster JSON file used by the CLI."""

    # -------------------------------------------------------------------------
    # 2.3 Logging Configuration
    # -------------------------------------------------------------------------
    log_level: str = ConfigDefaults.DEFAULT_LOG_LEVEL
    """Minimum loguru level for the CLI sink."""

    # -------------------------------------------------------------------------
    # 2.4 Derived Properties
    # -------------------------------------------------------------------------

    @property
    def provider(self) -> LLMProvider:
        return LLMProvider.from_string(self.llm_provider)

    @property
    def active_model(self) -> str:
        """Model name for the selected provider."""
        if self.provider == LLMProvider.OPENAI:
            return self.openai_model
        return self.gemini_model

    @property
    def active_api_key(self) -> Optional[str]:
        """API key for the selected provider (may be None)."""
        if self.provider == LLMProvider.OPENAI:
            return self.openai_api_key
        return self.gemini_api_key

    # -------------------------------------------------------------------------
    # 2.5 Validation Methods
    # -------------------------------------------------------------------------

    def validate(self) -> None:
        """
        Validate configuration parameters.

        Checks:
            1. Provider name is supported
            2. Temperature is within 0-2
            3. Timeout, when set, is positive

        Raises:
            ConfigurationError: If configuration is invalid
        """
        try:
            LLMProvider.from_string(self.llm_provider)
        except ValueError:
            raise ConfigurationError(
                f"Unsupported LLM provider: {self.llm_provider}",
                context={"supported": LLMProvider.get_all_values()},
            )

        if not (0.0 <= self.temperature <= 2.0):
            raise ConfigurationError(
                f"Temperature must be 0-2, got {self.temperature}",
                context={"temperature": self.temperature},
            )

        if self.request_timeout is not None and self.request_timeout <= 0:
            raise ConfigurationError(
                f"Request timeout must be positive, got {self.request_timeout}",
                context={"request_timeout": self.request_timeout},
            )

    def require_api_key(self) -> str:
        """
        Return the API key for the active provider.

        Raises:
            ConfigurationError: If no key is configured
        """
        api_key = self.active_api_key
        if not api_key:
            setting = "OPENAI_API_KEY" if self.provider == LLMProvider.OPENAI else "API_KEY"
            raise ConfigurationError(
                f"API key is missing. Please set the {setting} environment variable.",
                context={"setting": setting, "provider": self.provider.value},
            )
        return api_key

    # -------------------------------------------------------------------------
    # 2.6 Factory Methods
    # -------------------------------------------------------------------------

    @classmethod
    def from_environment(
        cls, env_file: Optional[str] = None, validate_on_load: bool = True
    ) -> "AssistantConfiguration":
        """
        Load configuration from environment variables.

        STAGE 1: Load .env file (if specified or found)
        STAGE 2: Read environment variables
        STAGE 3: Convert to typed configuration
        STAGE 4: Validate configuration (optional)

        Args:
            env_file: Path to .env file (optional, auto-detected if not provided)
            validate_on_load: Whether to validate after loading

        Raises:
            ConfigurationError: If settings are malformed
        """
        # STAGE 1: Load .env file
        if env_file:
            load_dotenv(env_file)
        else:
            possible_locations = [
                Path.cwd() / ".env",
                Path.cwd() / "clinical_documentation" / ".env",
            ]
            for location in possible_locations:
                if location.exists():
                    load_dotenv(location)
                    break

        # STAGE 2: Read environment variables
        gemini_key = next(
            (os.getenv(name) for name in GEMINI_KEY_VARIABLES if os.getenv(name)), None
        )
        openai_key = os.getenv("OPENAI_API_KEY")

        llm_provider = os.getenv("LLM_PROVIDER", ConfigDefaults.DEFAULT_PROVIDER).lower()
        if not gemini_key and openai_key and "LLM_PROVIDER" not in os.environ:
            llm_provider = LLMProvider.OPENAI.value

        timeout_raw = os.getenv("REQUEST_TIMEOUT")

        # STAGE 3: Create configuration
        try:
            config = cls(
                gemini_api_key=gemini_key,
                gemini_model=os.getenv("GEMINI_MODEL", ConfigDefaults.DEFAULT_GEMINI_MODEL),
                openai_api_key=openai_key,
                openai_model=os.getenv("OPENAI_MODEL", ConfigDefaults.DEFAULT_OPENAI_MODEL),
                llm_provider=llm_provider,
                temperature=float(
                    os.getenv("GENERATION_TEMPERATURE", ConfigDefaults.DEFAULT_TEMPERATURE)
                ),
                request_timeout=float(timeout_raw) if timeout_raw else None,
                roster_path=os.getenv("ROSTER_PATH"),
                log_level=os.getenv("LOG_LEVEL", ConfigDefaults.DEFAULT_LOG_LEVEL).upper(),
            )
        except ValueError as e:
            raise ConfigurationError(f"Invalid numeric setting: {e}")

        # STAGE 4: Validate
        if validate_on_load:
            config.validate()

        return config

    def to_dict(self) -> dict:
        """Convert configuration to dictionary (for logging/debugging)."""
        return {
            "llm_provider": self.llm_provider,
            "gemini_model": self.gemini_model,
            "openai_model": self.openai_model,
            "gemini_api_key": "***" if self.gemini_api_key else None,
            "openai_api_key": "***" if self.openai_api_key else None,
            "temperature": self.temperature,
            "request_timeout": self.request_timeout,
            "roster_path": self.roster_path,
            "log_level": self.log_level,
        }
