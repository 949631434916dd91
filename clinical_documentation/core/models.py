"""
Domain Models for Clinical Documentation

This module defines the core data structures consumed and produced by the
note and assessment pipelines. All models are frozen dataclasses: the
pipeline only reads and projects them, it never mutates caller state.

Model Hierarchy:
    PartnerRecord / ProgramRecord → id → name lookup tables
    ClientProfile                 → sparse bag of optional clinical attributes
    ClientRecord                  → identity + program foreign key + profile
    BackgroundDocument            → opaque reference text appended to prompts
    SelectionSet                  → checkbox selections + narratives per group
    ClientInfoForAssessment       → demographics block for assessments
    CheckboxGroup / AssessmentSection → static form schemas (see reference/)
    GenerationRequest             → composed prompt + output mode + schema
    NoteResult / AssessmentResult → typed generation output
    GenerationResult              → what GenerationClient.send() returns

Wire Format:
    `from_dict` accepts the camelCase keys used by roster files and by the
    model's JSON output (programId, clientId, presentingProblem, ...) as well
    as snake_case. `to_dict` always produces camelCase.

Author: Shubham Singh
Date: December 2025
"""

from dataclasses import dataclass, field, fields
from typing import Any, Dict, List, Mapping, Optional, Sequence, Tuple

from clinical_documentation.core.enums import (
    GenerationMode,
    HousingStatus,
    StageOfChange,
)


# Section id -> field id -> free-text answer
AssessmentFieldMap = Dict[str, Dict[str, str]]


def _pick(data: Mapping[str, Any], *keys: str, default: Any = None) -> Any:
    """Return the first present key from `keys` (camelCase / snake_case aliases)."""
    for key in keys:
        if key in data and data[key] is not None:
            return data[key]
    return default


def _to_camel(name: str) -> str:
    head, *tail = name.split("_")
    return head + "".join(part.capitalize() for part in tail)


# =============================================================================
# STAGE 1: ROSTER LOOKUP RECORDS
# =============================================================================


@dataclass(frozen=True)
class PartnerRecord:
    """A partner organization (e.g. a recovery services agency)."""

    id: str
    name: str

    def to_dict(self) -> Dict[str, Any]:
        return {"id": self.id, "name": self.name}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "PartnerRecord":
        return cls(id=str(data["id"]), name=str(data.get("name", "")))


@dataclass(frozen=True)
class ProgramRecord:
    """A program run by a partner (e.g. "IOP SUD")."""

    id: str
    name: str
    partner_id: str

    def to_dict(self) -> Dict[str, Any]:
        return {"id": self.id, "name": self.name, "partnerId": self.partner_id}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "ProgramRecord":
        return cls(
            id=str(data["id"]),
            name=str(data.get("name", "")),
            partner_id=str(_pick(data, "partnerId", "partner_id", default="")),
        )


# =============================================================================
# STAGE 2: CLIENT PROFILE
# =============================================================================
# Every field is optional. Presence is checked at formatting time, never
# enforced here.


@dataclass(frozen=True)
class ClientProfile:
    """
    Sparse clinical profile of a client.

    Field Groups:
        Core demographics   → date_of_birth ... expected_discharge_date
        Clinical portrait   → presenting_problem, mbti, stage_of_change, ...
        Strengths/supports  → strengths, skills_and_hobbies, support_system
        Barriers/needs      → barriers, case_management_needs
        History flags       → history_of_trauma, history_of_substance_use,
                              significant_medical_conditions, notes_on_history

    Example:
        >>> profile = ClientProfile(presenting_problem="Anxiety")
        >>> profile.history_flags
        []
    """

    # -------------------------------------------------------------------------
    # 2.1 Core Demographics
    # -------------------------------------------------------------------------
    date_of_birth: Optional[str] = None
    contact_phone: Optional[str] = None
    contact_email: Optional[str] = None
    address: Optional[str] = None
    housing_status: Optional[HousingStatus] = None
    intake_date: Optional[str] = None
    referral_source: Optional[str] = None
    emergency_contact: Optional[str] = None
    expected_discharge_date: Optional[str] = None

    # -------------------------------------------------------------------------
    # 2.2 Clinical & Psychosocial Portrait
    # -------------------------------------------------------------------------
    presenting_problem: Optional[str] = None
    mbti: Optional[str] = None
    introvert_extrovert_scale: Optional[int] = None  # 1-10
    stage_of_change: Optional[StageOfChange] = None
    primary_motivators: Optional[str] = None
    readiness_ruler: Optional[int] = None  # 1-10

    # -------------------------------------------------------------------------
    # 2.3 Strengths, Supports, Barriers
    # -------------------------------------------------------------------------
    strengths: Tuple[str, ...] = ()
    skills_and_hobbies: Tuple[str, ...] = ()
    support_system: Tuple[str, ...] = ()
    barriers: Tuple[str, ...] = ()
    case_management_needs: Tuple[str, ...] = ()

    # -------------------------------------------------------------------------
    # 2.4 History Flags
    # -------------------------------------------------------------------------
    history_of_trauma: bool = False
    history_of_substance_use: bool = False
    significant_medical_conditions: bool = False
    notes_on_history: Optional[str] = None

    @property
    def history_flags(self) -> List[str]:
        """True history flags, in fixed order (Trauma, Substance Use, Medical Conditions)."""
        flags = []
        if self.history_of_trauma:
            flags.append("Trauma")
        if self.history_of_substance_use:
            flags.append("Substance Use")
        if self.significant_medical_conditions:
            flags.append("Medical Conditions")
        return flags

    def to_dict(self) -> Dict[str, Any]:
        """Convert to camelCase dictionary, omitting absent fields."""
        result: Dict[str, Any] = {}
        for f in fields(self):
            value = getattr(self, f.name)
            if value is None or value == () or value is False:
                continue
            if isinstance(value, tuple):
                value = list(value)
            elif isinstance(value, (StageOfChange, HousingStatus)):
                value = value.value
            result[_to_camel(f.name)] = value
        return result

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "ClientProfile":
        """Create from a camelCase or snake_case dictionary."""
        kwargs: Dict[str, Any] = {}
        for f in fields(cls):
            value = _pick(data, _to_camel(f.name), f.name)
            if value is None or value == "":
                continue
            if f.name == "stage_of_change":
                value = StageOfChange.from_string(value) if value else None
            elif f.name == "housing_status":
                value = HousingStatus.from_string(value) if value else None
            elif f.name in ("introvert_extrovert_scale", "readiness_ruler"):
                value = int(value)
            elif isinstance(f.default, tuple):
                if isinstance(value, str):
                    value = (value,)
                value = tuple(str(item) for item in value)
            elif isinstance(f.default, bool):
                # only JSON true sets a flag; "false" / 1 / "yes" do not
                value = value is True
            kwargs[f.name] = value
        return cls(**kwargs)


# =============================================================================
# STAGE 3: CLIENT RECORD
# =============================================================================


@dataclass(frozen=True)
class ClientRecord:
    """
    A client on a partner's roster.

    Attributes:
        id: Opaque client identifier
        name: Display name
        program_id: Foreign key into ProgramRecord; may not resolve
        profile: Sparse profile; None means no profile data at all
    """

    id: str
    name: str
    program_id: str = ""
    profile: Optional[ClientProfile] = field(default_factory=ClientProfile)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "programId": self.program_id,
            "profile": self.profile.to_dict() if self.profile is not None else None,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "ClientRecord":
        profile_data = data.get("profile", {})
        return cls(
            id=str(data["id"]),
            name=str(data.get("name", "")),
            program_id=str(_pick(data, "programId", "program_id", default="")),
            profile=ClientProfile.from_dict(profile_data) if profile_data is not None else None,
        )


# =============================================================================
# STAGE 4: SESSION INPUTS
# =============================================================================


@dataclass(frozen=True)
class BackgroundDocument:
    """Reference document appended verbatim to note prompts."""

    id: str
    title: str
    content: str

    def to_dict(self) -> Dict[str, Any]:
        return {"id": self.id, "title": self.title, "content": self.content}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "BackgroundDocument":
        return cls(
            id=str(data.get("id", "")),
            title=str(data.get("title", "")),
            content=str(data.get("content", "")),
        )


@dataclass(frozen=True)
class SelectionSet:
    """
    Immutable snapshot of the session form's checkbox groups.

    What it does:
        Holds, per group id, the ordered chosen option labels and the
        free-text narrative. Mapping order is insertion order and is
        preserved into the formatted prompt.

    Editing:
        `with_option_toggled` and `with_narrative` return new snapshots;
        the original is never modified.
    """

    checkboxes: Dict[str, Tuple[str, ...]] = field(default_factory=dict)
    narratives: Dict[str, str] = field(default_factory=dict)

    def __post_init__(self):
        object.__setattr__(
            self,
            "checkboxes",
            {group: tuple(options) for group, options in self.checkboxes.items()},
        )
        object.__setattr__(self, "narratives", dict(self.narratives))

    def narrative_for(self, group_id: str) -> str:
        """Narrative for a group, stripped; empty string when absent."""
        return (self.narratives.get(group_id) or "").strip()

    def is_group_empty(self, group_id: str) -> bool:
        """A group with no chosen options and no narrative contributes nothing."""
        return not self.checkboxes.get(group_id) and not self.narrative_for(group_id)

    def with_option_toggled(self, group_id: str, option: str) -> "SelectionSet":
        """Return a copy with `option` added to (or removed from) `group_id`."""
        current = self.checkboxes.get(group_id, ())
        if option in current:
            updated = tuple(item for item in current if item != option)
        else:
            updated = current + (option,)
        checkboxes = dict(self.checkboxes)
        checkboxes[group_id] = updated
        return SelectionSet(checkboxes=checkboxes, narratives=self.narratives)

    def with_narrative(self, group_id: str, text: str) -> "SelectionSet":
        """Return a copy with the narrative for `group_id` replaced."""
        narratives = dict(self.narratives)
        narratives[group_id] = text
        return SelectionSet(checkboxes=self.checkboxes, narratives=narratives)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "checkboxes": {group: list(options) for group, options in self.checkboxes.items()},
            "narratives": dict(self.narratives),
        }

    @classmethod
    def from_dict(cls, data: Optional[Mapping[str, Any]]) -> "SelectionSet":
        data = data or {}
        return cls(
            checkboxes={
                str(group): tuple(str(option) for option in options or ())
                for group, options in (data.get("checkboxes") or {}).items()
            },
            narratives={
                str(group): str(text) for group, text in (data.get("narratives") or {}).items()
            },
        )


@dataclass(frozen=True)
class ClientInfoForAssessment:
    """Demographics block of an assessment. Absent values render as "Not Provided"."""

    name: Optional[str] = None
    date_of_birth: Optional[str] = None
    date_of_assessment: Optional[str] = None
    clinician_name: Optional[str] = None
    program_name: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Optional[Mapping[str, Any]]) -> "ClientInfoForAssessment":
        data = data or {}
        return cls(
            name=_pick(data, "name"),
            date_of_birth=_pick(data, "dateOfBirth", "date_of_birth"),
            date_of_assessment=_pick(data, "dateOfAssessment", "date_of_assessment"),
            clinician_name=_pick(data, "clinicianName", "clinician_name"),
            program_name=_pick(data, "programName", "program_name"),
        )


# =============================================================================
# STAGE 5: STATIC FORM SCHEMAS
# =============================================================================
# Values for these live in clinical_documentation/reference/.


@dataclass(frozen=True)
class CheckboxOption:
    label: str
    description: Optional[str] = None


@dataclass(frozen=True)
class CheckboxGroup:
    """One group of checkboxes on the session form."""

    id: str
    title: str
    options: Tuple[CheckboxOption, ...]
    has_narrative: bool = True
    description: Optional[str] = None
    narrative_label: Optional[str] = None

    @property
    def option_labels(self) -> List[str]:
        return [option.label for option in self.options]


@dataclass(frozen=True)
class AssessmentField:
    """An assessment question: field id, display label and interview script."""

    id: str
    label: str
    script: str


@dataclass(frozen=True)
class AssessmentSection:
    id: str
    title: str
    fields: Tuple[AssessmentField, ...]


# =============================================================================
# STAGE 6: GENERATION REQUEST / RESULTS
# =============================================================================


@dataclass(frozen=True)
class GenerationRequest:
    """
    A fully composed model request.

    Attributes:
        prompt: Opaque prompt string sent as-is
        mode: STRUCTURED (JSON array) or FREE_TEXT
        response_schema: Output schema, required for STRUCTURED mode
        label: Short description for logging ("notes", "assessment")
    """

    prompt: str
    mode: GenerationMode
    response_schema: Optional[Dict[str, Any]] = None
    label: str = "generation"

    @property
    def is_structured(self) -> bool:
        return self.mode == GenerationMode.STRUCTURED


@dataclass(frozen=True)
class NoteResult:
    """A generated DAP note for one client."""

    client_id: str
    client_name: str
    note: str

    def to_dict(self) -> Dict[str, Any]:
        return {"clientId": self.client_id, "clientName": self.client_name, "note": self.note}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "NoteResult":
        return cls(
            client_id=_pick(data, "clientId", "client_id"),
            client_name=_pick(data, "clientName", "client_name"),
            note=_pick(data, "note"),
        )


@dataclass(frozen=True)
class AssessmentResult:
    """A generated assessment document."""

    client_name: Optional[str]
    assessment_text: str

    def to_dict(self) -> Dict[str, Any]:
        return {"clientName": self.client_name, "assessmentText": self.assessment_text}


@dataclass(frozen=True)
class GenerationResult:
    """
    Outcome of a single successful GenerationClient.send() call.

    Exactly one of `notes` (STRUCTURED) or `text` (FREE_TEXT) is meaningful.
    """

    mode: GenerationMode
    notes: Tuple[NoteResult, ...] = ()
    text: Optional[str] = None

    @classmethod
    def structured(cls, notes: Sequence[NoteResult]) -> "GenerationResult":
        return cls(mode=GenerationMode.STRUCTURED, notes=tuple(notes))

    @classmethod
    def free_text(cls, text: str) -> "GenerationResult":
        return cls(mode=GenerationMode.FREE_TEXT, text=text)
