"""
Checkbox Group Reference Data

Static schemas for the session-form checkbox groups. Each note type maps to
a fixed, ordered list of groups; the group ids are the keys used in a
SelectionSet and the text that appears in the observations block of a
note prompt.

Group Sets:
    DAP_CHECKBOXES                          → participation ... plan
    INDIVIDUAL_THERAPY_MODALITY_CHECKBOXES  → therapyType
    PEER_SUPPORT_CHECKBOXES                 → peerStrategies

Author: Shubham Singh
Date: December 2025
"""

from typing import Dict, List, Sequence, Tuple

from clinical_documentation.core.enums import NoteType
from clinical_documentation.core.models import CheckboxGroup, CheckboxOption, SelectionSet


def _options(*labels: str) -> Tuple[CheckboxOption, ...]:
    return tuple(CheckboxOption(label=label) for label in labels)


# =============================================================================
# STAGE 1: DAP GROUPS
# =============================================================================

DAP_CHECKBOXES: Tuple[CheckboxGroup, ...] = (
    CheckboxGroup(
        id="participation",
        title="1. Participation",
        description="This section captures the client's level of engagement in the session.",
        options=_options(
            "Active and Engaged",
            "Cooperative and Responsive",
            "Appropriately Participatory",
            "Somewhat Passive/Reserved",
            "Guarded or Resistant",
            "Distracted or Inattentive",
            "Hesitant or Anxious",
        ),
        narrative_label="Narrative Details on Participation",
    ),
    CheckboxGroup(
        id="responseToIntervention",
        title="2. Response to Intervention(s)",
        description="This assesses how the client reacted to the clinical work done in the session.",
        options=_options(
            "Receptive and Insightful",
            "Appeared to Benefit",
            "Able to Apply Concepts",
            "Demonstrated Understanding",
            "Processed Material Effectively",
            "Struggled to Grasp Concepts",
            "Responded with Skepticism",
            "Became Emotionally Activated",
        ),
        narrative_label="Narrative on Response",
    ),
    CheckboxGroup(
        id="progress",
        title="3. Progress",
        description="This directly addresses movement toward or away from ISP goals.",
        options=_options(
            "Made Significant Progress",
            "Made Moderate Progress",
            "Made Minimal/Limited Progress",
            "Maintained Baseline",
            "Experienced a Setback / Some Regression",
            "Encountered New Barriers",
            "Successfully Utilized Skill(s)",
        ),
        narrative_label="Narrative on Progress (MUST link to specific ISP Goal #)",
    ),
    CheckboxGroup(
        id="riskAssessment",
        title="4. Suicidality / Risk Assessment",
        description="A mandatory part of the Assessment.",
        options=_options(
            "Suicidal ideas or intentions are not in evidence and not expressed. "
            "No suicidal plans are present. Client denies SI/HI.",
            "Client reported passive suicidal ideation without active intent or plan.",
            "Client reported active suicidal ideation.",
            "Client reported homicidal ideation.",
            "Risk factors were assessed",
            "Protective factors were reviewed",
        ),
        narrative_label="Narrative on Risk / Safety Plan Details",
    ),
    CheckboxGroup(
        id="plan",
        title="5. Plan",
        description="This outlines what happens next.",
        options=_options(
            "Continue with Current Treatment Plan",
            "Modify Treatment Plan",
            "Focus on Skill-Building in Next Session",
            "Focus on Insight/Processing in Next Session",
            "Provide Psychoeducation on...",
            "Coordinate Care with...",
            "Provide Client with Resources for...",
            "Next session is scheduled for...",
            "Client to call to schedule next session.",
        ),
        narrative_label="Narrative for Plan Specifics (Detail homework, coordination, etc.)",
    ),
)


# =============================================================================
# STAGE 2: INDIVIDUAL THERAPY MODALITY
# =============================================================================

INDIVIDUAL_THERAPY_MODALITY_CHECKBOXES: Tuple[CheckboxGroup, ...] = (
    CheckboxGroup(
        id="therapyType",
        title="Therapy Type(s) Utilized",
        options=_options(
            "Motivational Interviewing (MI)",
            "Cognitive Behavioral Therapy (CBT)",
            "Dialectical Behavior Therapy (DBT)",
            "Choice Theory",
            "Polyvagal Theory",
        ),
        narrative_label="Other/Specifics",
    ),
)


# =============================================================================
# STAGE 3: PEER SUPPORT
# =============================================================================

PEER_SUPPORT_CHECKBOXES: Tuple[CheckboxGroup, ...] = (
    CheckboxGroup(
        id="peerStrategies",
        title="Peer Support Strategies Implemented",
        options=_options(
            "Active Listening",
            "Validation and Empathy",
            "Encouragement and Celebrating Successes",
            "Sharing of Relevant Lived Experience",
            "Skill-Building Collaboration",
            "Goal Setting Support",
            "Resource Connection/Navigation",
            "Empowerment/Advocacy Support",
        ),
        narrative_label="Purpose of sharing lived experience, if applicable",
    ),
)


# =============================================================================
# STAGE 4: LOOKUP BY NOTE TYPE
# =============================================================================

_GROUPS_BY_NOTE_TYPE: Dict[NoteType, Tuple[CheckboxGroup, ...]] = {
    NoteType.GROUP: DAP_CHECKBOXES,
    NoteType.INDIVIDUAL: DAP_CHECKBOXES + INDIVIDUAL_THERAPY_MODALITY_CHECKBOXES,
    NoteType.CASE_MANAGEMENT: DAP_CHECKBOXES,
    NoteType.PEER_SUPPORT: PEER_SUPPORT_CHECKBOXES,
}


def checkbox_groups_for(note_type) -> List[CheckboxGroup]:
    """
    Ordered checkbox groups shown on the session form for a note type.

    Args:
        note_type: NoteType member or any string accepted by NoteType.from_string

    Raises:
        ValueError: If the note type is unknown
    """
    return list(_GROUPS_BY_NOTE_TYPE[NoteType.from_string(note_type)])


def empty_selection_set(note_type) -> SelectionSet:
    """A SelectionSet with an empty option list for every group of the note type."""
    groups: Sequence[CheckboxGroup] = checkbox_groups_for(note_type)
    return SelectionSet(checkboxes={group.id: () for group in groups}, narratives={})
