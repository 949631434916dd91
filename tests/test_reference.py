import pytest

from clinical_documentation.core.enums import AssessmentType, NoteType
from clinical_documentation.reference import (
    COMPREHENSIVE_ASSESSMENT_SECTIONS,
    INITIAL_ASSESSMENT_SECTIONS,
    assessment_sections_for,
    checkbox_groups_for,
    empty_selection_set,
)


DAP_GROUP_IDS = ["participation", "responseToIntervention", "progress", "riskAssessment", "plan"]


@pytest.mark.parametrize(
    "note_type,expected",
    [
        (NoteType.GROUP, DAP_GROUP_IDS),
        (NoteType.CASE_MANAGEMENT, DAP_GROUP_IDS),
        (NoteType.INDIVIDUAL, DAP_GROUP_IDS + ["therapyType"]),
        (NoteType.PEER_SUPPORT, ["peerStrategies"]),
    ],
)
def test_checkbox_groups_per_note_type(note_type, expected):
    assert [group.id for group in checkbox_groups_for(note_type)] == expected


def test_unknown_note_type_rejected():
    with pytest.raises(ValueError):
        checkbox_groups_for("Telehealth")


def test_empty_selection_set_has_every_group():
    selections = empty_selection_set("Individual Therapy")
    assert list(selections.checkboxes) == DAP_GROUP_IDS + ["therapyType"]
    assert all(options == () for options in selections.checkboxes.values())
    assert selections.narratives == {}


def test_assessment_section_counts():
    assert len(INITIAL_ASSESSMENT_SECTIONS) == 5
    assert len(COMPREHENSIVE_ASSESSMENT_SECTIONS) == 16
    assert assessment_sections_for(AssessmentType.INITIAL)[0].title == "I. Presenting Problem"


def test_field_ids_unique_within_each_section():
    for section in INITIAL_ASSESSMENT_SECTIONS + COMPREHENSIVE_ASSESSMENT_SECTIONS:
        ids = [field.id for field in section.fields]
        assert len(ids) == len(set(ids)), section.id
        assert all(field.label and field.script for field in section.fields)
