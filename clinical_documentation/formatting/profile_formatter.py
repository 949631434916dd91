"""
Profile Formatter - Client Profile Projection

This module turns a ClientRecord plus the program/partner lookup tables into
the "Client Information" text block embedded in note prompts.

Output Shape:
    ### Client Information for: Jane Doe (ID: 1)
    #### Core Information
    - Partner: Acme
    - Program: IOP
    - Presenting Problem: Anxiety
    #### History
    - Flags: Trauma, Substance Use

Rules:
    1. Only non-empty fields are emitted
    2. Only sections with at least one emitted field appear
    3. An unresolved programId silently drops the Partner/Program lines
    4. A client with no profile at all gets a single "not available" line

Pipeline Position:
    Roster → [ProfileFormatter] → NotePromptBuilder → GenerationClient
             ^^^^^^^^^^^^^^^^^^
             You are here

Author: Shubham Singh
Date: December 2025
"""

from typing import Iterable, List, Optional, Sequence, Tuple

from clinical_documentation.core.constants import PROFILE_NOT_AVAILABLE
from clinical_documentation.core.models import (
    ClientProfile,
    ClientRecord,
    PartnerRecord,
    ProgramRecord,
)


# =============================================================================
# STAGE 1: SECTION TITLES
# =============================================================================

SECTION_TITLES: Tuple[str, ...] = (
    "Core Information",
    "Clinical Framework",
    "Strengths & Supports",
    "Barriers & Needs",
    "History",
)


def _line(label: str, value) -> Optional[str]:
    if value is None or value == "":
        return None
    return f"{label}: {value}"


def _list_line(label: str, values: Sequence[str]) -> Optional[str]:
    if not values:
        return None
    return f"{label}: {', '.join(values)}"


# =============================================================================
# STAGE 2: PROFILE FORMATTER
# =============================================================================


class ProfileFormatter:
    """
    Projects one client into a structured-text block.

    What it does:
        Resolves the client's program (and via the program, its partner),
        groups the profile's populated fields into five fixed sections and
        renders them as markdown bullet lines under a header.

    Why it exists:
        1. Keeps prompt assembly free of presence checks
        2. Pure function of its inputs, so it is tested without any model
        3. Absent data is never an error, only an omission

    Example:
        >>> formatter = ProfileFormatter()
        >>> text = formatter.format(client, programs, partners)
        >>> "Partner: Acme" in text
        True
    """

    def format(
        self,
        client: ClientRecord,
        programs: Iterable[ProgramRecord],
        partners: Iterable[PartnerRecord],
    ) -> str:
        """
        Format a client profile for a note prompt.

        Args:
            client: Client to describe
            programs: Full program lookup table
            partners: Full partner lookup table

        Returns:
            Multi-line text block starting with the client header
        """
        header = f"### Client Information for: {client.name} (ID: {client.id})"
        profile = client.profile
        if profile is None:
            return f"{header}\n{PROFILE_NOT_AVAILABLE}"

        program = next((p for p in programs if p.id == client.program_id), None)
        partner = None
        if program is not None:
            partner = next((p for p in partners if p.id == program.partner_id), None)

        lines = [header]
        for title, section_lines in zip(SECTION_TITLES, self._sections(profile, program, partner)):
            present = [line for line in section_lines if line]
            if not present:
                continue
            lines.append(f"#### {title}")
            lines.extend(f"- {line}" for line in present)

        return "\n".join(lines)

    # -------------------------------------------------------------------------
    # Section builders
    # -------------------------------------------------------------------------

    def _sections(
        self,
        profile: ClientProfile,
        program: Optional[ProgramRecord],
        partner: Optional[PartnerRecord],
    ) -> List[List[Optional[str]]]:
        stage = profile.stage_of_change.value if profile.stage_of_change else None
        readiness = f"{profile.readiness_ruler}/10" if profile.readiness_ruler else None
        flags = ", ".join(profile.history_flags) or None

        return [
            # Core Information
            [
                _line("Partner", partner.name if partner else None),
                _line("Program", program.name if program else None),
                _line("Intake Date", profile.intake_date),
                _line("Presenting Problem", profile.presenting_problem),
            ],
            # Clinical Framework
            [
                _line("Stage of Change", stage),
                _line("Primary Motivators", profile.primary_motivators),
                _line("Readiness Ruler", readiness),
                _line("MBTI Type", profile.mbti),
            ],
            # Strengths & Supports
            [
                _list_line("Strengths", profile.strengths),
                _list_line("Skills/Hobbies", profile.skills_and_hobbies),
                _list_line("Support System", profile.support_system),
            ],
            # Barriers & Needs
            [
                _list_line("Barriers", profile.barriers),
                _list_line("Case Management Needs", profile.case_management_needs),
            ],
            # History
            [
                _line("Flags", flags),
                _line("Notes on History", profile.notes_on_history),
            ],
        ]
