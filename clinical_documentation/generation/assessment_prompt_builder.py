"""
Assessment Prompt Builder

Composes the free-text request used to draft an initial or comprehensive
assessment from the clinician's section-by-section notes.

Author: Shubham Singh
Date: December 2025
"""

from typing import Optional

from loguru import logger

from clinical_documentation.core.constants import NOT_PROVIDED
from clinical_documentation.core.enums import AssessmentType, GenerationMode
from clinical_documentation.core.exceptions import PromptError
from clinical_documentation.core.models import (
    AssessmentFieldMap,
    ClientInfoForAssessment,
    GenerationRequest,
)
from clinical_documentation.formatting.assessment_formatter import AssessmentDataFormatter


# =============================================================================
# STAGE 1: PROMPT TEMPLATE
# =============================================================================

ASSESSMENT_PROMPT_TEMPLATE = """You are an expert clinical writer specializing in comprehensive psychological and substance use assessments. Your task is to synthesize the provided clinician's notes into a formal, narrative-style assessment document. The document must be well-organized, professional, and use appropriate clinical language.

**Client & Assessment Information:**
{client_details}

**Assessment Type to Generate:** {assessment_type}

**Clinician's Notes / Data Points:**
{formatted_data}

**Mission Critical Instructions:**
1.  Generate a complete and cohesive **{assessment_type}**.
2.  Use the provided **Clinician's Notes** to construct the assessment. Transform the notes from bullet points or brief statements into full, well-written paragraphs under the appropriate headings.
3.  Structure the output logically, following the standard sections of a clinical assessment (e.g., Presenting Problem, Risk Assessment, Substance Use History, etc.).
4.  Ensure the tone is objective, formal, and clinical.
5.  Do not just repeat the notes. You must integrate them into a flowing, professional narrative.
6.  If a section in the clinician's notes is empty, you may state "Information not provided" or omit the section if appropriate.
7.  The final output must be a single block of formatted text. **DO NOT** use JSON.

Generate the complete assessment document now.
"""


# =============================================================================
# STAGE 2: BUILDER
# =============================================================================


class AssessmentPromptBuilder:
    """
    Constructs the free-text request for a clinical assessment.

    Demographic fields that are absent or blank render as "Not Provided".
    """

    def __init__(self, data_formatter: Optional[AssessmentDataFormatter] = None):
        self.data_formatter = data_formatter or AssessmentDataFormatter()

    def build(
        self,
        client_info: ClientInfoForAssessment,
        assessment_type,
        assessment_data: Optional[AssessmentFieldMap],
    ) -> GenerationRequest:
        """
        Build the assessment request.

        Raises:
            PromptError: If the assessment type is unknown
        """
        try:
            assessment_type = AssessmentType.from_string(assessment_type)
        except ValueError as e:
            raise PromptError(str(e), context={"assessment_type": assessment_type})

        prompt = ASSESSMENT_PROMPT_TEMPLATE.format(
            client_details=self.format_client_details(client_info),
            assessment_type=assessment_type.value,
            formatted_data=self.data_formatter.format(assessment_data, assessment_type),
        )

        logger.debug(f"Built {assessment_type.value} prompt: {len(prompt)} chars")

        return GenerationRequest(prompt=prompt, mode=GenerationMode.FREE_TEXT, label="assessment")

    @staticmethod
    def format_client_details(client_info: Optional[ClientInfoForAssessment]) -> str:
        info = client_info or ClientInfoForAssessment()

        def value(text: Optional[str]) -> str:
            return text.strip() if text and text.strip() else NOT_PROVIDED

        return "\n".join(
            [
                f"- **Client Name:** {value(info.name)}",
                f"- **Date of Birth:** {value(info.date_of_birth)}",
                f"- **Date of Assessment:** {value(info.date_of_assessment)}",
                f"- **Clinician Name:** {value(info.clinician_name)}",
                f"- **Program:** {value(info.program_name)}",
            ]
        )
