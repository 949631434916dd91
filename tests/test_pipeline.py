import json

import pytest

from clinical_documentation import DocumentationPipeline
from clinical_documentation.core.enums import AssessmentType, NoteType
from clinical_documentation.core.exceptions import (
    ConfigurationError,
    GenerationError,
    LLMError,
    PromptError,
    RecordNotFoundError,
)
from clinical_documentation.core.models import ClientInfoForAssessment, SelectionSet
from clinical_documentation.repository import InMemoryRosterRepository


def notes_json(*entries):
    return json.dumps(
        [{"clientId": cid, "clientName": name, "note": note} for cid, name, note in entries]
    )


def make_pipeline(make_generation_client, **kwargs):
    generation_client, fake = make_generation_client(**kwargs)
    return DocumentationPipeline(generation_client._config, generation_client=generation_client), fake


def run_notes(pipeline, clients, program, partner, selections=None):
    return pipeline.generate_notes(
        NoteType.GROUP,
        clients,
        [program],
        [partner],
        [],
        "Relapse prevention",
        selections or SelectionSet(),
    )


# ----------------------------------------------------------------------------
# Progress notes
# ----------------------------------------------------------------------------


def test_no_clients_returns_empty_without_key_or_call(make_generation_client, keyless_config, program, partner):
    pipeline, fake = make_pipeline(make_generation_client, cfg=keyless_config)

    assert run_notes(pipeline, [], program, partner) == []
    assert fake.calls == []


def test_missing_key_raises_configuration_error_unchanged(
    make_generation_client, keyless_config, jane, program, partner
):
    pipeline, fake = make_pipeline(make_generation_client, cfg=keyless_config)

    with pytest.raises(ConfigurationError) as excinfo:
        run_notes(pipeline, [jane], program, partner)

    assert not isinstance(excinfo.value, GenerationError)
    assert excinfo.value.message == (
        "API key is missing. Please set the API_KEY environment variable."
    )
    assert fake.calls == []


def test_notes_filtered_to_requested_clients(make_generation_client, jane, john, program, partner):
    reply = notes_json(
        ("1", "Jane Doe", "D: Jane ..."),
        ("99", "Ghost", "D: invented"),
        ("1", "Jane Doe", "D: duplicate"),
    )
    pipeline, fake = make_pipeline(make_generation_client, response=reply)

    notes = run_notes(pipeline, [jane, john], program, partner)

    assert [(n.client_id, n.note) for n in notes] == [("1", "D: Jane ...")]
    assert len(fake.calls) == 1
    assert "### Client Information for: John Roe (ID: 2)" in fake.calls[0]["prompt"]


def test_parse_failure_wrapped_with_notes_prefix(make_generation_client, jane, program, partner):
    pipeline, _ = make_pipeline(make_generation_client, response="Sorry, I cannot help.")

    with pytest.raises(GenerationError) as excinfo:
        run_notes(pipeline, [jane], program, partner)

    assert excinfo.value.message.startswith(
        "Failed to generate notes from AI: Could not parse structured response"
    )


def test_provider_failure_wrapped_with_notes_prefix(make_generation_client, jane, program, partner):
    error = LLMError("Gemini API error: 503 unavailable", provider="gemini")
    pipeline, _ = make_pipeline(make_generation_client, error=error)

    with pytest.raises(GenerationError) as excinfo:
        run_notes(pipeline, [jane], program, partner)

    assert (
        excinfo.value.message
        == "Failed to generate notes from AI: Gemini API error: 503 unavailable"
    )
    assert excinfo.value.__cause__ is error


def test_preview_does_not_call_model(make_generation_client, jane, program, partner):
    pipeline, fake = make_pipeline(make_generation_client)
    request = pipeline.preview_note_request(
        "Case Management", [jane], [program], [partner], [], "Housing referral", SelectionSet()
    )
    assert "**Note Type:** Case Management" in request.prompt
    assert fake.calls == []


def test_generate_notes_for_roster_resolves_ids(make_generation_client, jane, john, program, partner):
    roster = InMemoryRosterRepository(partners=[partner], programs=[program], clients=[jane, john])
    pipeline, fake = make_pipeline(
        make_generation_client, response=notes_json(("2", "John Roe", "D: ..."))
    )

    notes = pipeline.generate_notes_for_roster(
        roster, NoteType.PEER_SUPPORT, ["2"], "Goal setting", SelectionSet()
    )

    assert [n.client_id for n in notes] == ["2"]
    prompt = fake.calls[0]["prompt"]
    assert "John Roe" in prompt and "Jane Doe" not in prompt
    assert "- Partner: Acme" in prompt


def test_generate_notes_for_roster_unknown_id(make_generation_client, jane, program, partner):
    roster = InMemoryRosterRepository(partners=[partner], programs=[program], clients=[jane])
    pipeline, fake = make_pipeline(make_generation_client)

    with pytest.raises(RecordNotFoundError):
        pipeline.generate_notes_for_roster(roster, NoteType.GROUP, ["404"], "", SelectionSet())
    assert fake.calls == []


# ----------------------------------------------------------------------------
# Assessments
# ----------------------------------------------------------------------------


def test_assessment_text_returned_verbatim(make_generation_client):
    text = "# Initial Assessment\n\n**Presenting Problem:** ..."
    pipeline, fake = make_pipeline(make_generation_client, response=text)

    result = pipeline.generate_assessment(
        ClientInfoForAssessment(name="Jane Doe"),
        AssessmentType.INITIAL,
        {"presentingProblem": {"description": "Insomnia"}},
    )

    assert result.assessment_text == text
    assert result.client_name == "Jane Doe"
    assert fake.calls[0]["response_schema"] is None
    assert "## I. Presenting Problem" in fake.calls[0]["prompt"]


def test_assessment_failure_wrapped_with_assessment_prefix(make_generation_client):
    pipeline, _ = make_pipeline(make_generation_client, error=RuntimeError("socket closed"))

    with pytest.raises(GenerationError) as excinfo:
        pipeline.generate_assessment(ClientInfoForAssessment(), AssessmentType.COMPREHENSIVE, {})

    assert excinfo.value.message == "Failed to generate assessment from AI: socket closed"


def test_assessment_without_key_raises_configuration_error(make_generation_client, keyless_config):
    pipeline, fake = make_pipeline(make_generation_client, cfg=keyless_config)
    with pytest.raises(ConfigurationError):
        pipeline.generate_assessment(ClientInfoForAssessment(), AssessmentType.INITIAL, {})
    assert fake.calls == []


def test_assessment_without_client_info_uses_defaults(make_generation_client):
    pipeline, fake = make_pipeline(make_generation_client, response="Assessment text")

    result = pipeline.generate_assessment(None, AssessmentType.INITIAL, {})

    assert result.client_name is None
    assert result.assessment_text == "Assessment text"
    assert "- **Client Name:** Not Provided" in fake.calls[0]["prompt"]


def test_individual_note_for_several_clients_is_rejected_before_sending(
    make_generation_client, jane, john, program, partner
):
    pipeline, fake = make_pipeline(make_generation_client, response="[]")

    with pytest.raises(PromptError):
        pipeline.generate_notes(
            NoteType.INDIVIDUAL, [jane, john], [program], [partner], [], "CBT", SelectionSet()
        )
    assert fake.calls == []
