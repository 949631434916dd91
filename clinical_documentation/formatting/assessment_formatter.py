"""
Assessment Data Formatter

Renders an AssessmentFieldMap (section id → field id → answer) into the
"Clinician's Notes" block of an assessment prompt, walking the fixed schema
for the assessment type so output order never depends on input order.

Output Shape:
    ## I. Presenting Problem
    - Description (in client's own words)
      - Feels overwhelmed at work.

Author: Shubham Singh
Date: December 2025
"""

from typing import List, Mapping, Optional

from clinical_documentation.core.models import AssessmentFieldMap, AssessmentSection
from clinical_documentation.reference.assessment_sections import assessment_sections_for


class AssessmentDataFormatter:
    """
    Projects clinician answers into structured text.

    What it does:
        For each schema section in order, emits a heading and one item per
        answered field. Sections where every answer is blank are skipped
        entirely; blank fields inside a kept section are skipped individually.

    Why it exists:
        Answers for ids outside the schema are ignored, so stale form state
        never leaks into the prompt.
    """

    def format(self, data: Optional[AssessmentFieldMap], assessment_type) -> str:
        """
        Format assessment answers for the given assessment type.

        Args:
            data: Section id → field id → free-text answer (may be None)
            assessment_type: AssessmentType member or label

        Returns:
            Text block; empty string when nothing was answered
        """
        data = data or {}
        blocks: List[str] = []
        for section in assessment_sections_for(assessment_type):
            block = self._format_section(section, data.get(section.id) or {})
            if block:
                blocks.append(block)
        return "\n\n".join(blocks)

    def _format_section(self, section: AssessmentSection, answers: Mapping[str, str]) -> str:
        items = []
        for schema_field in section.fields:
            value = (answers.get(schema_field.id) or "").strip()
            if value:
                items.append(f"- {schema_field.label}\n  - {value}")
        if not items:
            return ""
        return "\n".join([f"## {section.title}"] + items)
