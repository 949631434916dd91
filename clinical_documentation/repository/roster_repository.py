"""
Roster Repository - Partner / Program / Client Data Access

This module provides an in-memory store for the partner organizations,
their programs and their clients, plus the lookups and edits the
documentation workflow needs.

Architecture:
    RosterRepository (Protocol)
    └── InMemoryRosterRepository → seeded from sequences or a JSON file

Roster File Shape:
    {
        "partners": [{"id": "...", "name": "..."}],
        "programs": [{"id": "...", "name": "...", "partnerId": "..."}],
        "clients":  [{"id": "...", "name": "...", "programId": "...", "profile": {...}}]
    }

Persistence:
    None. Edits live for the lifetime of the repository object.

Pipeline Position:
    Config → [Repository] → Formatters → PromptBuilder → GenerationClient
              ^^^^^^^^^^^
              You are here

Author: Shubham Singh
Date: December 2025
"""

import json
import uuid
from dataclasses import replace
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Protocol, Sequence, Tuple, runtime_checkable

from loguru import logger

from clinical_documentation.core.constants import STANDARD_PROGRAM_NAMES
from clinical_documentation.core.exceptions import RecordNotFoundError, RosterLoadError
from clinical_documentation.core.models import (
    ClientInfoForAssessment,
    ClientProfile,
    ClientRecord,
    PartnerRecord,
    ProgramRecord,
)


RosterSnapshot = Tuple[Tuple[PartnerRecord, ...], Tuple[ProgramRecord, ...], Tuple[ClientRecord, ...]]


def _new_id() -> str:
    return uuid.uuid4().hex[:12]


# =============================================================================
# STAGE 1: REPOSITORY PROTOCOL (INTERFACE)
# =============================================================================


@runtime_checkable
class RosterRepository(Protocol):
    """
    Protocol defining the read interface the pipeline depends on.

    Required Methods:
        get_client(client_id)      → Single client or None
        resolve_clients(ids)       → Clients in requested order
        snapshot()                 → (partners, programs, clients)
    """

    def get_client(self, client_id: str) -> Optional[ClientRecord]:
        ...

    def resolve_clients(self, client_ids: Iterable[str]) -> List[ClientRecord]:
        ...

    def snapshot(self) -> RosterSnapshot:
        ...


# =============================================================================
# STAGE 2: IN-MEMORY IMPLEMENTATION
# =============================================================================


class InMemoryRosterRepository:
    """
    Roster held in insertion-ordered dictionaries.

    What it does:
        Indexes partners, programs and clients by id, answers foreign-key
        filters (programs of a partner, clients of a program) and applies
        roster edits: save/delete client, add partner, and create a client
        from a completed assessment.

    Why it exists:
        1. Gives the CLI and tests one place to resolve client ids
        2. Keeps roster edits out of the prompt pipeline
        3. Records are frozen, so edits replace entries rather than mutate them

    Example:
        >>> repo = InMemoryRosterRepository.from_json_file("roster.json")
        >>> clients = repo.clients_for_partner("partner-1")
    """

    def __init__(
        self,
        partners: Sequence[PartnerRecord] = (),
        programs: Sequence[ProgramRecord] = (),
        clients: Sequence[ClientRecord] = (),
    ):
        self._partners: Dict[str, PartnerRecord] = {p.id: p for p in partners}
        self._programs: Dict[str, ProgramRecord] = {p.id: p for p in programs}
        self._clients: Dict[str, ClientRecord] = {c.id: c for c in clients}

        logger.debug(
            f"InMemoryRosterRepository initialized | "
            f"Partners: {len(self._partners)} | "
            f"Programs: {len(self._programs)} | "
            f"Clients: {len(self._clients)}"
        )

    # =========================================================================
    # STAGE 3: LOADING
    # =========================================================================

    @classmethod
    def from_json_file(cls, path) -> "InMemoryRosterRepository":
        """
        Load a roster from a JSON file.

        Raises:
            RosterLoadError: If the file is missing, unreadable or malformed
        """
        roster_path = Path(path)
        if not roster_path.exists():
            raise RosterLoadError(str(roster_path), "File not found")

        logger.info(f"Loading roster from: {roster_path}")
        try:
            with open(roster_path, "r", encoding="utf-8") as f:
                raw = json.load(f)
        except json.JSONDecodeError as e:
            raise RosterLoadError(str(roster_path), f"Invalid JSON: {e}")
        except OSError as e:
            raise RosterLoadError(str(roster_path), str(e))

        return cls.from_dict(raw, source=str(roster_path))

    @classmethod
    def from_dict(cls, raw, source: str = "<memory>") -> "InMemoryRosterRepository":
        """Build a roster from an already-parsed mapping."""
        if not isinstance(raw, dict):
            raise RosterLoadError(source, "Roster must be a JSON object")
        try:
            return cls(
                partners=[PartnerRecord.from_dict(p) for p in raw.get("partners") or []],
                programs=[ProgramRecord.from_dict(p) for p in raw.get("programs") or []],
                clients=[ClientRecord.from_dict(c) for c in raw.get("clients") or []],
            )
        except (KeyError, TypeError, ValueError) as e:
            raise RosterLoadError(source, f"Malformed record: {e}")

    # =========================================================================
    # STAGE 4: LOOKUPS
    # =========================================================================

    def get_client(self, client_id: str) -> Optional[ClientRecord]:
        return self._clients.get(client_id)

    def get_client_or_raise(self, client_id: str) -> ClientRecord:
        """
        Retrieve a client, raising if the id is unknown.

        Raises:
            RecordNotFoundError: If no client has this id
        """
        client = self._clients.get(client_id)
        if client is None:
            raise RecordNotFoundError("client", client_id)
        return client

    def get_program(self, program_id: str) -> Optional[ProgramRecord]:
        return self._programs.get(program_id)

    def get_partner(self, partner_id: str) -> Optional[PartnerRecord]:
        return self._partners.get(partner_id)

    def programs_for_partner(self, partner_id: str) -> List[ProgramRecord]:
        return [p for p in self._programs.values() if p.partner_id == partner_id]

    def clients_for_program(self, program_id: str) -> List[ClientRecord]:
        return [c for c in self._clients.values() if c.program_id == program_id]

    def clients_for_partner(self, partner_id: str) -> List[ClientRecord]:
        """Clients enrolled in any program of the partner."""
        program_ids = {p.id for p in self.programs_for_partner(partner_id)}
        return [c for c in self._clients.values() if c.program_id in program_ids]

    def resolve_clients(self, client_ids: Iterable[str]) -> List[ClientRecord]:
        """
        Resolve ids to clients, preserving the requested order.

        Raises:
            RecordNotFoundError: If any id is unknown
        """
        return [self.get_client_or_raise(client_id) for client_id in client_ids]

    @property
    def partners(self) -> List[PartnerRecord]:
        return list(self._partners.values())

    @property
    def programs(self) -> List[ProgramRecord]:
        return list(self._programs.values())

    @property
    def clients(self) -> List[ClientRecord]:
        return list(self._clients.values())

    def snapshot(self) -> RosterSnapshot:
        """Immutable (partners, programs, clients) view for the pipeline."""
        return (
            tuple(self._partners.values()),
            tuple(self._programs.values()),
            tuple(self._clients.values()),
        )

    # =========================================================================
    # STAGE 5: EDITS
    # =========================================================================

    def save_client(self, client: ClientRecord) -> ClientRecord:
        """
        Update a client in place when its id exists, otherwise add it.

        A client with an empty id is added under a freshly generated id.

        Returns:
            The stored record
        """
        if not client.id:
            client = replace(client, id=_new_id())

        action = "Updated" if client.id in self._clients else "Added"
        self._clients[client.id] = client
        logger.info(f"{action} client {client.id}")
        return client

    def delete_client(self, client_id: str) -> bool:
        """Remove a client. Returns False when the id was unknown."""
        removed = self._clients.pop(client_id, None) is not None
        if removed:
            logger.info(f"Deleted client {client_id}")
        return removed

    def add_partner(self, name: str) -> PartnerRecord:
        """
        Add a partner together with its standard programs.

        Program ids are `prog-<partner id>-<n>` for n = 1..3.
        """
        partner = PartnerRecord(id=f"partner-{_new_id()}", name=name)
        self._partners[partner.id] = partner
        for index, program_name in enumerate(STANDARD_PROGRAM_NAMES, 1):
            program = ProgramRecord(
                id=f"prog-{partner.id}-{index}", name=program_name, partner_id=partner.id
            )
            self._programs[program.id] = program

        logger.info(
            f"Added partner {partner.id} with {len(STANDARD_PROGRAM_NAMES)} standard programs"
        )
        return partner

    def create_client_from_assessment(
        self, client_info: ClientInfoForAssessment, program_id: str
    ) -> ClientRecord:
        """
        Enroll a newly assessed client.

        The profile carries the date of birth and uses the assessment date
        as the intake date.
        """
        client = ClientRecord(
            id=_new_id(),
            name=client_info.name or "",
            program_id=program_id,
            profile=ClientProfile(
                date_of_birth=client_info.date_of_birth,
                intake_date=client_info.date_of_assessment,
            ),
        )
        return self.save_client(client)
