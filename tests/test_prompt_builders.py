import pytest

from clinical_documentation.core.constants import DAP_TEMPLATE, NOTE_RESPONSE_SCHEMA
from clinical_documentation.core.enums import AssessmentType, GenerationMode, NoteType
from clinical_documentation.core.exceptions import PromptError
from clinical_documentation.core.models import (
    BackgroundDocument,
    ClientInfoForAssessment,
    SelectionSet,
)
from clinical_documentation.generation import (
    NOTE_GENERATION_SYSTEM_PROMPT,
    AssessmentPromptBuilder,
    NotePromptBuilder,
)


def build_note(jane, program, partner, selections, documents=(), note_type=NoteType.GROUP, clients=None):
    return NotePromptBuilder().build(
        note_type,
        clients if clients is not None else [jane],
        [program],
        [partner],
        list(documents),
        "Discussed coping skills",
        selections,
    )


# ----------------------------------------------------------------------------
# Note prompts
# ----------------------------------------------------------------------------


def test_end_to_end_note_prompt(jane, program, partner, empty_selections):
    request = build_note(jane, program, partner, empty_selections)

    assert "No specific checkbox observations provided." in request.prompt
    assert "Presenting Problem: Anxiety" in request.prompt
    assert "Partner: Acme" in request.prompt
    assert request.mode == GenerationMode.STRUCTURED
    assert request.is_structured
    assert request.response_schema == NOTE_RESPONSE_SCHEMA


def test_response_schema_requires_three_string_fields():
    items = NOTE_RESPONSE_SCHEMA["items"]
    assert NOTE_RESPONSE_SCHEMA["type"] == "ARRAY"
    assert items["required"] == ["clientId", "clientName", "note"]
    assert {prop["type"] for prop in items["properties"].values()} == {"STRING"}


def test_prompt_sections_in_fixed_order(jane, program, partner):
    selections = SelectionSet(checkboxes={"participation": ("Active and Engaged",)})
    documents = [BackgroundDocument(id="d1", title="ASAM Criteria", content="Dimension 1 ...")]
    prompt = build_note(jane, program, partner, selections, documents).prompt

    markers = [
        NOTE_GENERATION_SYSTEM_PROMPT[:60],
        "**Background Knowledge Documents:**",
        "--- Document: ASAM Criteria ---\nDimension 1 ...",
        "--- End of Documents ---",
        "**Note Type:** Group Therapy",
        "**Core Session Intervention/Topic:**\nDiscussed coping skills",
        "**Clinician's Observations (Checkboxes and Narratives):**\n- participation: Active and Engaged",
        "**Client(s) for this Session:**\n### Client Information for: Jane Doe (ID: 1)",
        "**DAP Note Template to Follow:**",
        "Generate the DAP note(s) now based on all the information provided.",
    ]
    positions = [prompt.index(marker) for marker in markers]
    assert positions == sorted(positions)
    assert DAP_TEMPLATE in prompt
    assert "No specific checkbox observations provided." not in prompt


def test_document_block_omitted_without_documents(jane, program, partner, empty_selections):
    prompt = build_note(jane, program, partner, empty_selections).prompt
    assert "**Background Knowledge Documents:**" not in prompt
    assert "End of Documents" not in prompt


def test_multiple_clients_are_blank_line_separated(jane, john, program, partner, empty_selections):
    prompt = build_note(jane, program, partner, empty_selections, clients=[jane, john]).prompt
    jane_block = "### Client Information for: Jane Doe (ID: 1)"
    john_block = "### Client Information for: John Roe (ID: 2)"
    assert prompt.index(jane_block) < prompt.index(john_block)
    assert "- Presenting Problem: Anxiety\n\n" + john_block in prompt


def test_note_type_accepts_label_or_name(jane, program, partner, empty_selections):
    by_label = build_note(jane, program, partner, empty_selections, note_type="Peer Support")
    by_name = build_note(jane, program, partner, empty_selections, note_type="peer_support")
    assert by_label.prompt == by_name.prompt
    assert "**Note Type:** Peer Support" in by_label.prompt


def test_same_inputs_build_identical_prompts(jane, program, partner, empty_selections):
    first = build_note(jane, program, partner, empty_selections)
    second = build_note(jane, program, partner, empty_selections)
    assert first.prompt == second.prompt


def test_unknown_note_type_raises_prompt_error(jane, program, partner, empty_selections):
    with pytest.raises(PromptError):
        build_note(jane, program, partner, empty_selections, note_type="Telehealth")


def test_no_clients_raises_prompt_error(jane, program, partner, empty_selections):
    with pytest.raises(PromptError):
        build_note(jane, program, partner, empty_selections, clients=[])


# ----------------------------------------------------------------------------
# Assessment prompts
# ----------------------------------------------------------------------------


def test_assessment_prompt_defaults_missing_demographics():
    request = AssessmentPromptBuilder().build(
        ClientInfoForAssessment(name="Jane Doe", program_name="  "),
        AssessmentType.INITIAL,
        {"presentingProblem": {"description": "Trouble sleeping"}},
    )

    assert request.mode == GenerationMode.FREE_TEXT
    assert request.response_schema is None
    assert "- **Client Name:** Jane Doe" in request.prompt
    assert "- **Date of Birth:** Not Provided" in request.prompt
    assert "- **Date of Assessment:** Not Provided" in request.prompt
    assert "- **Clinician Name:** Not Provided" in request.prompt
    assert "- **Program:** Not Provided" in request.prompt


def test_assessment_prompt_embeds_type_and_formatted_data():
    request = AssessmentPromptBuilder().build(
        ClientInfoForAssessment(),
        "Comprehensive Assessment",
        {"legalInvolvement": {"probation": "On probation until 2026"}},
    )
    prompt = request.prompt
    assert prompt.startswith("You are an expert clinical writer")
    assert "**Assessment Type to Generate:** Comprehensive Assessment" in prompt
    assert "1.  Generate a complete and cohesive **Comprehensive Assessment**." in prompt
    assert "## II-K. Legal Involvement\n- Probation/parole\n  - On probation until 2026" in prompt
    assert prompt.rstrip().endswith("Generate the complete assessment document now.")


def test_unknown_assessment_type_raises_prompt_error():
    with pytest.raises(PromptError):
        AssessmentPromptBuilder().build(ClientInfoForAssessment(), "Discharge Summary", {})


@pytest.mark.parametrize(
    "note_type", [NoteType.INDIVIDUAL, NoteType.CASE_MANAGEMENT, NoteType.PEER_SUPPORT]
)
def test_single_client_note_types_reject_several_clients(
    jane, john, program, partner, empty_selections, note_type
):
    assert not note_type.allows_multiple_clients
    with pytest.raises(PromptError) as excinfo:
        build_note(jane, program, partner, empty_selections, note_type=note_type, clients=[jane, john])
    assert "single client" in excinfo.value.message


def test_single_client_note_type_accepts_one_client(jane, program, partner, empty_selections):
    request = build_note(jane, program, partner, empty_selections, note_type=NoteType.INDIVIDUAL)
    assert "**Note Type:** Individual Therapy" in request.prompt
