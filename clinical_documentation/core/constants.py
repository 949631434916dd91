"""
Constants for Clinical Documentation

This module defines constant values used throughout the documentation
assistant. Constants are:
    1. Centralized for easy modification
    2. Literal prompt fragments that tests assert against
    3. Documented with usage context

Constant Categories:
    PROMPT FRAGMENTS     → Fallback lines, DAP template skeleton
    RESPONSE SCHEMA      → Output shape for structured note generation
    ROSTER DEFAULTS      → Standard programs created for each new partner
    LOGGING              → loguru format string

Author: Shubham Singh
Date: December 2025
"""

from typing import Any, Dict, List


# =============================================================================
# STAGE 1: PROMPT FRAGMENTS
# =============================================================================

NO_OBSERVATIONS_FALLBACK = "No specific checkbox observations provided."
"""Used in place of the observations block when no group has content."""

NOT_PROVIDED = "Not Provided"
"""Default for absent assessment demographics."""

PROFILE_NOT_AVAILABLE = "- Profile data is not available."
"""Emitted under the client header when a client has no profile at all."""

DAP_TEMPLATE = """
**D - Data:**
(Client's self-report, clinician's observations, and the specific intervention performed. This section is for factual information.)

**A - Assessment:**
(Clinician's professional interpretation of the data, client's response to the intervention, progress towards goals, and risk assessment.)

**P - Plan:**
(Next steps for the client and clinician, and the date/time of the next scheduled appointment.)
"""


# =============================================================================
# STAGE 2: STRUCTURED RESPONSE SCHEMA
# =============================================================================
# Array of {clientId, clientName, note}. Types use the upper-case OpenAPI
# names accepted by Gemini; the OpenAI client lower-cases them.

NOTE_RESULT_FIELDS: List[str] = ["clientId", "clientName", "note"]

NOTE_RESPONSE_SCHEMA: Dict[str, Any] = {
    "type": "ARRAY",
    "items": {
        "type": "OBJECT",
        "properties": {
            "clientId": {
                "type": "STRING",
                "description": "The unique ID of the client.",
            },
            "clientName": {
                "type": "STRING",
                "description": "The client's full name.",
            },
            "note": {
                "type": "STRING",
                "description": (
                    "The full, formatted clinical note for the client, strictly "
                    "following the DAP (Data, Assessment, Plan) format."
                ),
            },
        },
        "required": NOTE_RESULT_FIELDS,
    },
}


# =============================================================================
# STAGE 3: ROSTER DEFAULTS
# =============================================================================

STANDARD_PROGRAM_NAMES: List[str] = ["Outpatient SUD", "IOP SUD", "Peer Support Only"]
"""Programs created automatically for every new partner."""


# =============================================================================
# STAGE 4: LOGGING CONFIGURATION
# =============================================================================

LOG_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> | "
    "<level>{message}</level>"
)
