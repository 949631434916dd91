from clinical_documentation.core.enums import AssessmentType
from clinical_documentation.formatting import AssessmentDataFormatter


def test_section_with_only_blank_fields_is_absent():
    data = {
        "presentingProblem": {"description": "  ", "immediateConcerns": ""},
        "substanceUse": {"type": "Alcohol"},
    }
    text = AssessmentDataFormatter().format(data, AssessmentType.INITIAL)
    assert "Presenting Problem" not in text
    assert text == "## III. Substance Use\n- Type of substance\n  - Alcohol"


def test_values_are_trimmed_and_blank_fields_skipped():
    data = {"riskOfHarm": {"selfHarm": "  Denies.  ", "otherRisks": " "}}
    text = AssessmentDataFormatter().format(data, "Initial Assessment")
    assert "- Self-harm behaviors\n  - Denies." in text
    assert "Other risks" not in text


def test_output_follows_schema_order_not_input_order():
    data = {
        "medicalHistory": {"allergies": "Penicillin"},
        "presentingProblem": {"description": "Can't sleep"},
    }
    text = AssessmentDataFormatter().format(data, AssessmentType.INITIAL)
    assert text.index("I. Presenting Problem") < text.index("V. Medical History and Exam")


def test_comprehensive_schema_used_for_comprehensive_type():
    data = {"militaryHistory": {"branch": "Navy"}, "description": {"x": "ignored"}}
    text = AssessmentDataFormatter().format(data, AssessmentType.COMPREHENSIVE)
    assert text == "## II-J. Military History\n- Branch of service\n  - Navy"


def test_unknown_ids_and_empty_input_produce_empty_text():
    formatter = AssessmentDataFormatter()
    assert formatter.format({}, AssessmentType.INITIAL) == ""
    assert formatter.format(None, AssessmentType.INITIAL) == ""
    assert formatter.format({"bogus": {"field": "value"}}, AssessmentType.INITIAL) == ""
