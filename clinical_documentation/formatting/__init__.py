"""
Formatting Layer - Pure Projections Into Prompt Text

    profile_formatter.py     → ProfileFormatter (client + program + partner)
    selection_formatter.py   → SelectionFormatter (checkbox groups + narratives)
    assessment_formatter.py  → AssessmentDataFormatter (section/field answers)

Every formatter is stateless and side-effect free.

Author: Shubham Singh
Date: December 2025
"""

from clinical_documentation.formatting.assessment_formatter import AssessmentDataFormatter
from clinical_documentation.formatting.profile_formatter import ProfileFormatter
from clinical_documentation.formatting.selection_formatter import SelectionFormatter

__all__ = ["AssessmentDataFormatter", "ProfileFormatter", "SelectionFormatter"]
