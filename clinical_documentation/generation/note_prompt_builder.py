"""
Note Prompt Builder - DAP Progress Note Prompts

This module composes the single request sent to the model when drafting
progress notes for one or more clients in a session.

Prompt Layout (fixed order):
    1. NOTE_GENERATION_SYSTEM_PROMPT (documentation philosophy, DAP rules)
    2. Background documents block (omitted when there are no documents)
    3. Note type line
    4. Core session intervention text
    5. Clinician's observations (SelectionFormatter output or fallback line)
    6. Client information (ProfileFormatter output per client)
    7. DAP template skeleton

Why Separate Prompt Builder:
    1. Prompts are tested without any network call
    2. Exact request text is reproducible for the same inputs
    3. The CLI dry run prints exactly what would be sent

Pipeline Position:
    Formatters → [NotePromptBuilder] → GenerationClient → ResultValidator
                 ^^^^^^^^^^^^^^^^^^^
                 You are here

Author: Shubham Singh
Date: December 2025
"""

from typing import Optional, Sequence

from loguru import logger

from clinical_documentation.core.constants import (
    DAP_TEMPLATE,
    NO_OBSERVATIONS_FALLBACK,
    NOTE_RESPONSE_SCHEMA,
)
from clinical_documentation.core.enums import GenerationMode, NoteType
from clinical_documentation.core.exceptions import PromptError
from clinical_documentation.core.models import (
    BackgroundDocument,
    ClientRecord,
    GenerationRequest,
    PartnerRecord,
    ProgramRecord,
    SelectionSet,
)
from clinical_documentation.formatting.profile_formatter import ProfileFormatter
from clinical_documentation.formatting.selection_formatter import SelectionFormatter


# =============================================================================
# STAGE 1: SYSTEM INSTRUCTION
# =============================================================================

NOTE_GENERATION_SYSTEM_PROMPT = """You are an expert clinical documentation assistant for behavioral health providers in Ohio. Your purpose is to craft defensible and effective progress notes that are simultaneously a faithful narrative of the clinical encounter and a bulletproof shield against the scrutiny of auditors from Medicaid, CARF, and OMHAS. Your documentation is a fundamental component of the clinical service itself.

**The Guiding Philosophy: Documentation as Stewardship**
Your notes are a testament to the work providers do in their community. Each note is a brick building the fortress that protects the agency, validates the work, and chronicles the client's path toward their goals.

---
**Core Traits of a Quality Note (Non-Negotiable Rules)**

**1. The Golden Thread is Visible and Unbroken:**
You MUST ensure a clear, logical connection from the assessment/diagnosis, through the treatment plan, into every progress note. The intervention described in the note must be a logical action taken to address a specific ISP goal/objective mentioned in the client's profile or session data.

**2. Medical Necessity is Explicitly Stated:**
Every note MUST justify why the service was necessary for this client on this day. The note must document symptoms, behaviors, or functional impairments that require intervention. Vague statements are unacceptable. The note must justify the time and expense.

**3. The Client's Voice and Participation are Evident:**
The note must reflect a collaborative process.
- Use direct quotes from the client's report when powerful and relevant.
- Describe the client's reaction to interventions (e.g., "Client appeared relieved...", "Client responded by...").
- Document the client's contribution to the plan ("Client agreed to...").

**4. Language is Objective, Behavioral, and Free of Jargon:**
The note must paint a clear picture for an outside reader.
- **Describe, don't label:** Instead of "Client was angry," write "Client spoke in a raised voice, leaned forward, and stated, 'This is unfair!'"
- **Avoid slang and acronyms:** Write out terms like "Cognitive Behavioral Therapy (CBT)" initially.
- **Separate fact from interpretation:** Use phrases like "Client reported...", "Clinician observed...", "This presentation is consistent with...".

**5. Be Concise Yet Complete:**
The note must be long enough to tell the story and justify the service, but not a word longer. Avoid "note cloning" (copying/pasting from previous notes). Each note must be unique to the specific date of service.

---
**Structure and Language**

**Verbiage:** Use specific, active, and justifiable language.
- Instead of "Discussed coping skills," use "Clinician educated client on 3 positive self-talk statements..."
- Instead of "Provided support," use "Clinician validated the client's stated feelings of..."

**Format:** You MUST use the DAP (Data, Assessment, Plan) format. Adhere strictly to this structure.

---
**Your Task**
Generate a separate and complete DAP note for EACH client provided. Seamlessly integrate the information from the "Session Information," "Clinician's Observations," and the detailed "Client Information" into the narrative of the DAP note. DO NOT just list the checkbox items or profile data. Use them to inform the descriptive language of the note, creating a rich, cohesive story of the session. If Background Knowledge Documents are provided, use them as a primary reference.

The final output MUST be a valid JSON array, where each object represents a client's note.
"""


# =============================================================================
# STAGE 2: SESSION BLOCK TEMPLATES
# =============================================================================

DOCUMENTS_HEADER = (
    "**Background Knowledge Documents:**\n"
    "You have access to the following documents. Refer to this information when relevant."
)
DOCUMENTS_FOOTER = "--- End of Documents ---"

SESSION_TEMPLATE = """**Note Type:** {note_type}

**Core Session Intervention/Topic:**
{intervention_text}

**Clinician's Observations (Checkboxes and Narratives):**
{observations}

**Client(s) for this Session:**
{client_info}

**DAP Note Template to Follow:**
{dap_template}

Generate the DAP note(s) now based on all the information provided.
"""


# =============================================================================
# STAGE 3: NOTE PROMPT BUILDER CLASS
# =============================================================================


class NotePromptBuilder:
    """
    Constructs the structured-output request for DAP progress notes.

    What it does:
        Combines the system instruction, optional background documents,
        session narrative, formatted checkbox observations and formatted
        client profiles into one prompt, and declares a JSON array response
        of {clientId, clientName, note}.

    Why it exists:
        1. Single place that owns prompt ordering
        2. Formatters are injected so tests can substitute them
        3. Empty client lists are rejected here; callers short-circuit first

    Example:
        >>> builder = NotePromptBuilder()
        >>> request = builder.build(NoteType.GROUP, clients, programs, partners,
        ...                         [], "Discussed coping skills", SelectionSet())
        >>> request.is_structured
        True
    """

    def __init__(
        self,
        profile_formatter: Optional[ProfileFormatter] = None,
        selection_formatter: Optional[SelectionFormatter] = None,
    ):
        self.profile_formatter = profile_formatter or ProfileFormatter()
        self.selection_formatter = selection_formatter or SelectionFormatter()

    def build(
        self,
        note_type,
        clients: Sequence[ClientRecord],
        programs: Sequence[ProgramRecord],
        partners: Sequence[PartnerRecord],
        documents: Sequence[BackgroundDocument],
        intervention_text: str,
        selections: SelectionSet,
    ) -> GenerationRequest:
        """
        Build the note generation request.

        STAGE 3.1: Format documents, observations and client profiles
        STAGE 3.2: Assemble session block
        STAGE 3.3: Prepend system instruction and declare output schema

        Raises:
            PromptError: If clients is empty, the note type is unknown, or a
                single-client note type is given several clients
        """
        if not clients:
            raise PromptError("Cannot build a note prompt without clients")
        try:
            note_type = NoteType.from_string(note_type)
        except ValueError as e:
            raise PromptError(str(e), context={"note_type": note_type})
        if len(clients) > 1 and not note_type.allows_multiple_clients:
            raise PromptError(
                f"{note_type.value} notes document a single client, got {len(clients)}",
                context={"note_type": note_type.value},
            )

        # =====================================================================
        # STAGE 3.1: FORMAT INPUT BLOCKS
        # =====================================================================
        observations = self.selection_formatter.format(selections) or NO_OBSERVATIONS_FALLBACK
        client_info = "\n\n".join(
            self.profile_formatter.format(client, programs, partners) for client in clients
        )

        # =====================================================================
        # STAGE 3.2: ASSEMBLE SESSION BLOCK
        # =====================================================================
        session_block = SESSION_TEMPLATE.format(
            note_type=note_type.value,
            intervention_text=intervention_text,
            observations=observations,
            client_info=client_info,
            dap_template=DAP_TEMPLATE,
        )
        document_block = self.format_documents(documents)
        if document_block:
            session_block = f"{document_block}\n\n{session_block}"

        # =====================================================================
        # STAGE 3.3: FULL PROMPT
        # =====================================================================
        prompt = f"{NOTE_GENERATION_SYSTEM_PROMPT}\n\n{session_block}"

        logger.debug(
            f"Built {note_type.value} note prompt: {len(clients)} client(s), "
            f"{len(documents)} document(s), {len(prompt)} chars"
        )

        return GenerationRequest(
            prompt=prompt,
            mode=GenerationMode.STRUCTURED,
            response_schema=NOTE_RESPONSE_SCHEMA,
            label="notes",
        )

    @staticmethod
    def format_documents(documents: Sequence[BackgroundDocument]) -> str:
        """Background documents block, or an empty string when there are none."""
        if not documents:
            return ""
        bodies = "\n\n".join(
            f"--- Document: {document.title} ---\n{document.content}" for document in documents
        )
        return f"{DOCUMENTS_HEADER}\n{bodies}\n{DOCUMENTS_FOOTER}"
