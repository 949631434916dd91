"""
Clinical Documentation Assistant

Drafts DAP progress notes and clinical assessments for behavioral-health
partner organizations by composing structured prompts from roster, session
and assessment data and sending them to an LLM.

Architecture Overview:
    clinical_documentation/
    ├── core/           → Domain models, enums, configuration (Layer 0 - Pure)
    ├── reference/      → Checkbox groups and assessment sections (Layer 0 - Data)
    ├── repository/     → Partner/program/client roster (Layer 1 - Infrastructure)
    ├── formatting/     → Profile, selection and assessment text (Layer 2 - Pure)
    ├── generation/     → Prompt builders + generation client (Layer 3 - Business Logic)
    ├── validation/     → Requested-client filtering (Layer 4 - Business Logic)
    ├── clients/        → LLM client abstractions (Layer 5 - Infrastructure)
    ├── pipeline.py     → Main orchestrator (Layer 6 - Public API)
    └── cli.py          → clinical-docs command line

Quick Start:
    from clinical_documentation import DocumentationPipeline, NoteType

    pipeline = DocumentationPipeline.from_environment()
    notes = pipeline.generate_notes(NoteType.GROUP, clients, programs, partners,
                                    [], "Relapse prevention", selections)

Author: Shubham Singh
Date: December 2025
"""

__version__ = "1.0.0"
__author__ = "Shubham Singh"

# =============================================================================
# PUBLIC API EXPORTS
# =============================================================================

# Main Entry Point
from clinical_documentation.pipeline import DocumentationPipeline

# Core Models
from clinical_documentation.core.models import (
    AssessmentResult,
    BackgroundDocument,
    ClientInfoForAssessment,
    ClientProfile,
    ClientRecord,
    NoteResult,
    PartnerRecord,
    ProgramRecord,
    SelectionSet,
)

# Enums
from clinical_documentation.core.enums import (
    AssessmentType,
    GenerationMode,
    NoteType,
)

# Configuration
from clinical_documentation.core.config import AssistantConfiguration

# Roster
from clinical_documentation.repository import InMemoryRosterRepository

__all__ = [
    # Main Entry Point (use this!)
    "DocumentationPipeline",
    # Core Models
    "AssessmentResult",
    "BackgroundDocument",
    "ClientInfoForAssessment",
    "ClientProfile",
    "ClientRecord",
    "NoteResult",
    "PartnerRecord",
    "ProgramRecord",
    "SelectionSet",
    # Enums
    "AssessmentType",
    "GenerationMode",
    "NoteType",
    # Configuration
    "AssistantConfiguration",
    # Roster
    "InMemoryRosterRepository",
]
