"""
Reference Layer - Static Form Schemas

Pure data tables consumed by the formatters and by the CLI:
    checkbox_groups.py      → session-form checkbox groups per note type
    assessment_sections.py  → section/field schemas per assessment type

Author: Shubham Singh
Date: December 2025
"""

from clinical_documentation.reference.assessment_sections import (
    COMPREHENSIVE_ASSESSMENT_SECTIONS,
    INITIAL_ASSESSMENT_SECTIONS,
    assessment_sections_for,
)
from clinical_documentation.reference.checkbox_groups import (
    DAP_CHECKBOXES,
    INDIVIDUAL_THERAPY_MODALITY_CHECKBOXES,
    PEER_SUPPORT_CHECKBOXES,
    checkbox_groups_for,
    empty_selection_set,
)

__all__ = [
    "COMPREHENSIVE_ASSESSMENT_SECTIONS",
    "INITIAL_ASSESSMENT_SECTIONS",
    "assessment_sections_for",
    "DAP_CHECKBOXES",
    "INDIVIDUAL_THERAPY_MODALITY_CHECKBOXES",
    "PEER_SUPPORT_CHECKBOXES",
    "checkbox_groups_for",
    "empty_selection_set",
]
