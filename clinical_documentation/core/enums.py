"""
Enumerations for Clinical Documentation

This module defines all enumeration types used throughout the clinical
documentation assistant. Enum values are the display labels used in the
prompts sent to the model, so `NoteType.INDIVIDUAL.value` is exactly the
text that appears after "Note Type:".

Enumeration Categories:
    NoteType        → Kinds of progress notes (drives checkbox groups)
    AssessmentType  → Initial vs comprehensive assessment (drives sections)
    GenerationMode  → Structured JSON array vs free text output
    LLMProvider     → Which generation service to call
    StageOfChange   → Transtheoretical readiness classification
    HousingStatus   → Client housing situation

Author: Shubham Singh
Date: December 2025
"""

from enum import Enum


class _LabelEnum(str, Enum):
    """String enum with case-insensitive lookup by value or member name."""

    @classmethod
    def get_all_values(cls) -> list:
        """Return all values as a list."""
        return [member.value for member in cls]

    @classmethod
    def from_string(cls, value: str):
        """
        Convert string to enum member with case-insensitive matching.

        Accepts either the display value ("Individual Therapy") or the
        member name ("INDIVIDUAL", "individual").

        Raises:
            ValueError: If string doesn't match any member
        """
        if isinstance(value, cls):
            return value
        normalized = str(value).strip().lower()
        for member in cls:
            if member.value.lower() == normalized or member.name.lower() == normalized:
                return member
        normalized_name = normalized.upper().replace(" ", "_").replace("-", "_")
        for member in cls:
            if member.name == normalized_name:
                return member
        raise ValueError(
            f"Unknown {cls.__name__}: '{value}'. Valid values: {cls.get_all_values()}"
        )


# =============================================================================
# STAGE 1: NOTE TYPE ENUMERATION
# =============================================================================
# Each note type selects a fixed set of checkbox groups (see reference/).


class NoteType(_LabelEnum):
    """
    Types of progress notes that can be generated.

    Checkbox Groups by Type:
        GROUP, CASE_MANAGEMENT → DAP groups
        INDIVIDUAL             → DAP groups + therapy modality
        PEER_SUPPORT           → peer support strategies
    """

    GROUP = "Group Therapy"
    INDIVIDUAL = "Individual Therapy"
    CASE_MANAGEMENT = "Case Management"
    PEER_SUPPORT = "Peer Support"

    @property
    def allows_multiple_clients(self) -> bool:
        """Only group sessions document more than one client at once."""
        return self is NoteType.GROUP


# =============================================================================
# STAGE 2: ASSESSMENT TYPE ENUMERATION
# =============================================================================


class AssessmentType(_LabelEnum):
    """
    Types of clinical assessments.

    INITIAL:       5 sections (presenting problem through medical history)
    COMPREHENSIVE: 16 expanded sections (II-A through II-P)
    """

    INITIAL = "Initial Assessment"
    COMPREHENSIVE = "Comprehensive Assessment"


# =============================================================================
# STAGE 3: GENERATION MODE ENUMERATION
# =============================================================================


class GenerationMode(str, Enum):
    """
    Output shape requested from the generation service.
    """

    STRUCTURED = "structured"
    """JSON array constrained by a response schema (progress notes)."""

    FREE_TEXT = "free_text"
    """Opaque text returned unmodified (assessments)."""


# =============================================================================
# STAGE 4: LLM PROVIDER ENUMERATION
# =============================================================================


class LLMProvider(_LabelEnum):
    """Supported generation services."""

    GEMINI = "gemini"
    OPENAI = "openai"


# =============================================================================
# STAGE 5: CLIENT PROFILE ENUMERATIONS
# =============================================================================


class StageOfChange(_LabelEnum):
    """Stage of change (transtheoretical model)."""

    PRECONTEMPLATION = "Precontemplation"
    CONTEMPLATION = "Contemplation"
    PREPARATION = "Preparation"
    ACTION = "Action"
    MAINTENANCE = "Maintenance"
    RELAPSE = "Recurrence"


class HousingStatus(_LabelEnum):
    """Client housing situation."""

    STABLE = "Stable Housing"
    TRANSITIONAL = "Transitional"
    HOMELESS = "Homeless"
    OTHER = "Other"
