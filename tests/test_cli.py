import json

import pytest

from clinical_documentation.cli import create_argument_parser, main


def write_json(path, payload):
    path.write_text(json.dumps(payload), encoding="utf-8")
    return str(path)


@pytest.fixture()
def roster_file(tmp_path):
    return write_json(
        tmp_path / "roster.json",
        {
            "partners": [{"id": "x", "name": "Acme"}],
            "programs": [{"id": "p1", "name": "IOP", "partnerId": "x"}],
            "clients": [
                {"id": "1", "name": "Jane Doe", "programId": "p1", "profile": {"presentingProblem": "Anxiety"}}
            ],
        },
    )


def test_parser_requires_a_command():
    with pytest.raises(SystemExit):
        create_argument_parser().parse_args([])


def test_checkboxes_lists_groups_for_note_type(capsys):
    assert main(["checkboxes", "--note-type", "Individual Therapy"]) == 0

    out = capsys.readouterr().out
    assert "1. Participation [participation]" in out
    assert "  - Active and Engaged" in out
    assert "Therapy Type(s) Utilized [therapyType]" in out


def test_checkboxes_unknown_note_type_fails(capsys):
    assert main(["checkboxes", "--note-type", "Telehealth"]) == 1
    assert capsys.readouterr().out == ""


def test_note_dry_run_prints_prompt_without_key(clean_env, tmp_path, roster_file, capsys):
    session = write_json(
        tmp_path / "session.json",
        {
            "noteType": "Group Therapy",
            "clientIds": ["1"],
            "interventionText": "Relapse prevention planning",
            "selections": {"checkboxes": {"plan": ["Modify Treatment Plan"]}, "narratives": {}},
        },
    )

    code = main(["note", "--session", session, "--roster", roster_file, "--dry-run"])

    assert code == 0
    out = capsys.readouterr().out
    assert "### Client Information for: Jane Doe (ID: 1)" in out
    assert "- plan: Modify Treatment Plan" in out
    assert "Relapse prevention planning" in out


def test_note_dry_run_with_no_clients_prints_nothing(clean_env, tmp_path, roster_file, capsys):
    session = write_json(tmp_path / "session.json", {"clientIds": []})
    assert main(["note", "--session", session, "--roster", roster_file, "--dry-run"]) == 0
    assert capsys.readouterr().out == ""


def test_note_unknown_client_fails(clean_env, tmp_path, roster_file):
    session = write_json(tmp_path / "session.json", {"clientIds": ["404"]})
    assert main(["note", "--session", session, "--roster", roster_file, "--dry-run"]) == 1


def test_note_without_roster_fails(clean_env, tmp_path):
    session = write_json(tmp_path / "session.json", {"clientIds": ["1"]})
    assert main(["note", "--session", session]) == 1


def test_assessment_without_key_fails(clean_env, tmp_path, capsys):
    payload = write_json(
        tmp_path / "assessment.json",
        {"assessmentType": "Initial Assessment", "clientInfo": {"name": "Jane Doe"}},
    )

    assert main(["assessment", "--input", payload]) == 1

    captured = capsys.readouterr()
    assert captured.out == ""
    assert "API key is missing" in captured.err


def test_assessment_dry_run(clean_env, tmp_path, capsys):
    payload = write_json(
        tmp_path / "assessment.json",
        {
            "assessmentType": "Comprehensive Assessment",
            "clientInfo": {"name": "Jane Doe", "clinicianName": "R. Lee"},
            "assessmentData": {"militaryHistory": {"branch": "Navy"}},
        },
    )

    assert main(["assessment", "--input", payload, "--dry-run"]) == 0

    out = capsys.readouterr().out
    assert "- **Clinician Name:** R. Lee" in out
    assert "## II-J. Military History" in out


def test_missing_input_file_fails(clean_env, tmp_path):
    assert main(["assessment", "--input", str(tmp_path / "nope.json")]) == 1


def test_unknown_log_level_flag_fails_cleanly(capsys, log_records):
    assert main(["--log-level", "bogus", "checkboxes", "--note-type", "Group Therapy"]) == 1
    assert capsys.readouterr().out == ""
    errors = [r["message"] for r in log_records if r["level"].name == "ERROR"]
    assert errors == ["Unknown log level: BOGUS"]


def test_unknown_log_level_setting_fails_cleanly(clean_env, tmp_path):
    clean_env.setenv("LOG_LEVEL", "loud")
    payload = write_json(tmp_path / "assessment.json", {"clientInfo": {"name": "Jane Doe"}})
    assert main(["assessment", "--input", payload, "--dry-run"]) == 1
