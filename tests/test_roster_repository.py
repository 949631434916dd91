import json

import pytest

from clinical_documentation.core.constants import STANDARD_PROGRAM_NAMES
from clinical_documentation.core.enums import StageOfChange
from clinical_documentation.core.exceptions import RecordNotFoundError, RosterLoadError
from clinical_documentation.core.models import ClientInfoForAssessment, ClientRecord
from clinical_documentation.repository import InMemoryRosterRepository, RosterRepository


ROSTER = {
    "partners": [{"id": "x", "name": "Acme"}, {"id": "y", "name": "Bayside"}],
    "programs": [
        {"id": "p1", "name": "IOP", "partnerId": "x"},
        {"id": "p2", "name": "Outpatient SUD", "partnerId": "x"},
        {"id": "p3", "name": "Peer Support Only", "partnerId": "y"},
    ],
    "clients": [
        {
            "id": "1",
            "name": "Jane Doe",
            "programId": "p1",
            "profile": {"presentingProblem": "Anxiety", "stageOfChange": "Preparation"},
        },
        {"id": "2", "name": "John Roe", "programId": "p2", "profile": {"historyOfTrauma": True}},
        {"id": "3", "name": "Sam Poe", "programId": "p3", "profile": None},
    ],
}


@pytest.fixture()
def roster():
    return InMemoryRosterRepository.from_dict(ROSTER)


def test_loads_from_json_file(tmp_path):
    path = tmp_path / "roster.json"
    path.write_text(json.dumps(ROSTER), encoding="utf-8")

    repo = InMemoryRosterRepository.from_json_file(path)

    assert isinstance(repo, RosterRepository)
    jane = repo.get_client("1")
    assert jane.profile.presenting_problem == "Anxiety"
    assert jane.profile.stage_of_change == StageOfChange.PREPARATION
    assert repo.get_client("3").profile is None


def test_missing_file_raises_load_error(tmp_path):
    with pytest.raises(RosterLoadError) as excinfo:
        InMemoryRosterRepository.from_json_file(tmp_path / "absent.json")
    assert excinfo.value.reason == "File not found"


def test_invalid_json_raises_load_error(tmp_path):
    path = tmp_path / "roster.json"
    path.write_text("{not json", encoding="utf-8")
    with pytest.raises(RosterLoadError):
        InMemoryRosterRepository.from_json_file(path)


def test_record_without_id_raises_load_error():
    with pytest.raises(RosterLoadError):
        InMemoryRosterRepository.from_dict({"clients": [{"name": "No Id"}]})


def test_foreign_key_filters(roster):
    assert [p.id for p in roster.programs_for_partner("x")] == ["p1", "p2"]
    assert [c.id for c in roster.clients_for_program("p3")] == ["3"]
    assert [c.id for c in roster.clients_for_partner("x")] == ["1", "2"]
    assert roster.clients_for_partner("nobody") == []


def test_resolve_clients_keeps_requested_order(roster):
    assert [c.id for c in roster.resolve_clients(["3", "1"])] == ["3", "1"]
    with pytest.raises(RecordNotFoundError) as excinfo:
        roster.resolve_clients(["1", "404"])
    assert excinfo.value.record_id == "404"


def test_snapshot_is_immutable_view(roster):
    partners, programs, clients = roster.snapshot()
    assert isinstance(clients, tuple)
    assert [p.name for p in partners] == ["Acme", "Bayside"]
    assert len(programs) == 3


def test_save_client_updates_or_adds(roster):
    updated = roster.save_client(ClientRecord(id="1", name="Jane Smith", program_id="p1"))
    assert roster.get_client("1").name == "Jane Smith"
    assert updated.id == "1"

    added = roster.save_client(ClientRecord(id="", name="New Person", program_id="p2"))
    assert added.id
    assert roster.get_client(added.id).name == "New Person"
    assert len(roster.clients) == 4


def test_delete_client(roster):
    assert roster.delete_client("2") is True
    assert roster.get_client("2") is None
    assert roster.delete_client("2") is False


def test_add_partner_creates_standard_programs(roster):
    partner = roster.add_partner("Harbor Health")

    programs = roster.programs_for_partner(partner.id)
    assert [p.name for p in programs] == STANDARD_PROGRAM_NAMES
    assert [p.id for p in programs] == [f"prog-{partner.id}-{n}" for n in (1, 2, 3)]
    assert roster.get_partner(partner.id).name == "Harbor Health"


def test_create_client_from_assessment(roster):
    info = ClientInfoForAssessment(
        name="Alex Kim", date_of_birth="1990-04-02", date_of_assessment="2025-12-01"
    )

    client = roster.create_client_from_assessment(info, "p1")

    assert roster.get_client(client.id) == client
    assert client.program_id == "p1"
    assert client.profile.date_of_birth == "1990-04-02"
    assert client.profile.intake_date == "2025-12-01"
