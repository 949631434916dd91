"""
Core Layer - Domain Models, Enums, and Configuration

This layer contains PURE, side-effect-free components that form the foundation
of the clinical documentation assistant.

Submodules:
    models.py     → Value objects (ClientRecord, SelectionSet, NoteResult, ...)
    enums.py      → Enumerations (NoteType, AssessmentType, GenerationMode)
    config.py     → Configuration dataclass
    constants.py  → Prompt fragments, response schema, log format
    exceptions.py → Domain-specific exceptions

Dependency Rule:
    This layer depends on NOTHING else in the package.
    All other layers may depend on this layer.

Author: Shubham Singh
Date: December 2025
"""

from clinical_documentation.core.models import (
    AssessmentFieldMap,
    AssessmentResult,
    BackgroundDocument,
    ClientInfoForAssessment,
    ClientProfile,
    ClientRecord,
    GenerationRequest,
    GenerationResult,
    NoteResult,
    PartnerRecord,
    ProgramRecord,
    SelectionSet,
)
from clinical_documentation.core.enums import (
    AssessmentType,
    GenerationMode,
    LLMProvider,
    NoteType,
)
from clinical_documentation.core.config import AssistantConfiguration
from clinical_documentation.core.exceptions import (
    ClinicalDocumentationError,
    ConfigurationError,
    GenerationError,
    ResponseParseError,
    RepositoryError,
)

__all__ = [
    # Models
    "AssessmentFieldMap",
    "AssessmentResult",
    "BackgroundDocument",
    "ClientInfoForAssessment",
    "ClientProfile",
    "ClientRecord",
    "GenerationRequest",
    "GenerationResult",
    "NoteResult",
    "PartnerRecord",
    "ProgramRecord",
    "SelectionSet",
    # Enums
    "AssessmentType",
    "GenerationMode",
    "LLMProvider",
    "NoteType",
    # Configuration
    "AssistantConfiguration",
    # Exceptions
    "ClinicalDocumentationError",
    "ConfigurationError",
    "GenerationError",
    "ResponseParseError",
    "RepositoryError",
]
