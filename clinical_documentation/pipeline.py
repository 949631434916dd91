"""
Clinical Documentation Pipeline - Main Orchestrator

This is the PUBLIC API entry point for the documentation assistant. It
coordinates the formatting, prompt-building, generation and validation
layers behind two calls: one for progress notes, one for assessments.

Architecture Diagram:
    ┌─────────────────────────────────────────────────────────────────────┐
    │                       DocumentationPipeline                         │
    │                        (This Orchestrator)                          │
    ├─────────────────────────────────────────────────────────────────────┤
    │                                                                     │
    │   ┌───────────┐    ┌───────────┐    ┌───────────┐    ┌───────────┐  │
    │   │Formatters │ →  │  Prompt   │ →  │Generation │ →  │  Result   │  │
    │   │           │    │  Builders │    │  Client   │    │ Validator │  │
    │   └───────────┘    └───────────┘    └───────────┘    └───────────┘  │
    │                                                                     │
    └─────────────────────────────────────────────────────────────────────┘

Error Surface:
    ConfigurationError → raised unchanged (missing API key)
    GenerationError    → "Failed to generate notes from AI: <cause>"
                         "Failed to generate assessment from AI: <cause>"

Usage:
    from clinical_documentation import DocumentationPipeline

    pipeline = DocumentationPipeline.from_environment()
    notes = pipeline.generate_notes(
        NoteType.GROUP, clients, programs, partners,
        documents=[], intervention_text="Relapse prevention", selections=selections,
    )

Author: Shubham Singh
Date: December 2025
"""

from typing import List, Optional, Sequence

from loguru import logger

from clinical_documentation.core.config import AssistantConfiguration
from clinical_documentation.core.enums import AssessmentType, NoteType
from clinical_documentation.core.exceptions import ConfigurationError, GenerationError
from clinical_documentation.core.models import (
    AssessmentFieldMap,
    AssessmentResult,
    BackgroundDocument,
    ClientInfoForAssessment,
    ClientRecord,
    GenerationRequest,
    NoteResult,
    PartnerRecord,
    ProgramRecord,
    SelectionSet,
)
from clinical_documentation.generation import (
    AssessmentPromptBuilder,
    GenerationClient,
    NotePromptBuilder,
)
from clinical_documentation.repository import RosterRepository
from clinical_documentation.validation import ResultValidator


def _cause(error: Exception) -> str:
    return getattr(error, "message", None) or str(error)


# =============================================================================
# STAGE 1: PIPELINE CLASS
# =============================================================================


class DocumentationPipeline:
    """
    Main orchestrator for note and assessment generation.

    What it does:
        Builds the prompt, sends it through GenerationClient exactly once
        and, for notes, filters the reply down to the requested clients.

    Why it exists:
        1. Simple API: one call per document kind
        2. Encapsulation: callers never see prompts unless they ask for a preview
        3. Testability: every component can be overridden

    How it works:
        generate_notes():
            1. Zero clients → [] (no request is built, nothing is sent)
            2. NotePromptBuilder.build
            3. GenerationClient.send
            4. ResultValidator.filter
        generate_assessment():
            1. AssessmentPromptBuilder.build
            2. GenerationClient.send (free text, returned unmodified)

    Example:
        >>> pipeline = DocumentationPipeline.from_environment()
        >>> result = pipeline.generate_assessment(info, AssessmentType.INITIAL, data)
        >>> print(result.assessment_text)
    """

    def __init__(
        self,
        config: AssistantConfiguration,
        generation_client: Optional[GenerationClient] = None,
        validator: Optional[ResultValidator] = None,
        note_builder: Optional[NotePromptBuilder] = None,
        assessment_builder: Optional[AssessmentPromptBuilder] = None,
    ):
        """
        Initialize pipeline with configuration and optional component overrides.

        Args:
            config: Assistant configuration
            generation_client: Optional client override (for testing)
            validator: Optional validator override
            note_builder: Optional note prompt builder override
            assessment_builder: Optional assessment prompt builder override
        """
        self._config = config
        self._generation_client = generation_client or GenerationClient(config)
        self._validator = validator or ResultValidator()
        self._note_builder = note_builder or NotePromptBuilder()
        self._assessment_builder = assessment_builder or AssessmentPromptBuilder()

        logger.info(
            f"DocumentationPipeline initialized | "
            f"Provider: {config.llm_provider} | "
            f"Model: {config.active_model}"
        )

    # =========================================================================
    # STAGE 2: PROGRESS NOTES
    # =========================================================================

    def preview_note_request(
        self,
        note_type,
        clients: Sequence[ClientRecord],
        programs: Sequence[ProgramRecord],
        partners: Sequence[PartnerRecord],
        documents: Sequence[BackgroundDocument],
        intervention_text: str,
        selections: SelectionSet,
    ) -> GenerationRequest:
        """Build the note request without sending it (dry run)."""
        return self._note_builder.build(
            note_type, clients, programs, partners, documents, intervention_text, selections
        )

    def generate_notes(
        self,
        note_type,
        clients: Sequence[ClientRecord],
        programs: Sequence[ProgramRecord],
        partners: Sequence[PartnerRecord],
        documents: Sequence[BackgroundDocument],
        intervention_text: str,
        selections: SelectionSet,
    ) -> List[NoteResult]:
        """
        Generate one DAP note per requested client.

        Returns:
            Notes for requested clients only; may be shorter than `clients`

        Raises:
            ConfigurationError: If no API credential is configured
            GenerationError: If the call or response parsing fails
        """
        # =====================================================================
        # STAGE 2.1: EMPTY SESSION SHORT-CIRCUIT
        # =====================================================================
        if not clients:
            logger.info("No clients selected; skipping note generation")
            return []

        # =====================================================================
        # STAGE 2.2: BUILD REQUEST
        # =====================================================================
        request = self.preview_note_request(
            note_type, clients, programs, partners, documents, intervention_text, selections
        )
        logger.info(
            f"Generating {NoteType.from_string(note_type).value} notes | "
            f"Clients: {[client.id for client in clients]}"
        )

        # =====================================================================
        # STAGE 2.3: SEND AND FILTER
        # =====================================================================
        try:
            result = self._generation_client.send(request)
        except ConfigurationError:
            raise
        except Exception as e:
            logger.error(f"Note generation failed: {_cause(e)}")
            raise GenerationError(f"Failed to generate notes from AI: {_cause(e)}") from e

        notes = self._validator.filter(result.notes, clients)
        logger.info(f"Note generation complete | Notes: {len(notes)}/{len(clients)}")
        return notes

    def generate_notes_for_roster(
        self,
        roster: RosterRepository,
        note_type,
        client_ids: Sequence[str],
        intervention_text: str,
        selections: SelectionSet,
        documents: Sequence[BackgroundDocument] = (),
    ) -> List[NoteResult]:
        """
        Resolve client ids through a roster, then generate notes.

        Raises:
            RecordNotFoundError: If a client id is not on the roster
        """
        clients = roster.resolve_clients(client_ids)
        partners, programs, _ = roster.snapshot()
        return self.generate_notes(
            note_type, clients, programs, partners, documents, intervention_text, selections
        )

    # =========================================================================
    # STAGE 3: ASSESSMENTS
    # =========================================================================

    def preview_assessment_request(
        self,
        client_info: ClientInfoForAssessment,
        assessment_type,
        assessment_data: Optional[AssessmentFieldMap],
    ) -> GenerationRequest:
        """Build the assessment request without sending it (dry run)."""
        return self._assessment_builder.build(client_info, assessment_type, assessment_data)

    def generate_assessment(
        self,
        client_info: Optional[ClientInfoForAssessment],
        assessment_type,
        assessment_data: Optional[AssessmentFieldMap],
    ) -> AssessmentResult:
        """
        Generate an assessment document.

        Raises:
            ConfigurationError: If no API credential is configured
            GenerationError: If the call fails
        """
        client_info = client_info or ClientInfoForAssessment()
        request = self.preview_assessment_request(client_info, assessment_type, assessment_data)
        logger.info(f"Generating {AssessmentType.from_string(assessment_type).value}")

        try:
            result = self._generation_client.send(request)
        except ConfigurationError:
            raise
        except Exception as e:
            logger.error(f"Assessment generation failed: {_cause(e)}")
            raise GenerationError(f"Failed to generate assessment from AI: {_cause(e)}") from e

        return AssessmentResult(client_name=client_info.name, assessment_text=result.text or "")

    # =========================================================================
    # STAGE 4: FACTORY METHODS
    # =========================================================================

    @classmethod
    def from_environment(cls, env_file: Optional[str] = None) -> "DocumentationPipeline":
        """
        Create pipeline from environment configuration.

        The API key is not required here; it is checked on each call.

        Raises:
            ConfigurationError: If settings are malformed
        """
        config = AssistantConfiguration.from_environment(env_file=env_file, validate_on_load=True)
        return cls(config)

    # =========================================================================
    # STAGE 5: PROPERTIES
    # =========================================================================

    @property
    def config(self) -> AssistantConfiguration:
        """Access to assistant configuration."""
        return self._config

    @property
    def generation_client(self) -> GenerationClient:
        return self._generation_client
