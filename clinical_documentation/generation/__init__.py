"""
Generation Layer - Prompt Construction and Model Calls

Submodules:
    note_prompt_builder.py       → NotePromptBuilder (structured DAP notes)
    assessment_prompt_builder.py → AssessmentPromptBuilder (free-text assessments)
    generation_client.py         → GenerationClient (single-attempt send + parse)

Author: Shubham Singh
Date: December 2025
"""

from clinical_documentation.generation.assessment_prompt_builder import AssessmentPromptBuilder
from clinical_documentation.generation.generation_client import GenerationClient
from clinical_documentation.generation.note_prompt_builder import (
    NOTE_GENERATION_SYSTEM_PROMPT,
    NotePromptBuilder,
)

__all__ = [
    "AssessmentPromptBuilder",
    "GenerationClient",
    "NOTE_GENERATION_SYSTEM_PROMPT",
    "NotePromptBuilder",
]
