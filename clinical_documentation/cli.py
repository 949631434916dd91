"""
clinical-docs - Command Line Interface

Drafts progress notes and assessments from JSON inputs, or prints the
checkbox groups available for a note type.

Usage:
    clinical-docs note --session session.json --roster roster.json
    clinical-docs note --session session.json --roster roster.json --dry-run
    clinical-docs assessment --input assessment.json
    clinical-docs checkboxes --note-type "Individual Therapy"

Session File:
    {"noteType": "Group Therapy", "clientIds": ["1", "2"],
     "interventionText": "...", "selections": {"checkboxes": {...}, "narratives": {...}},
     "documents": [{"id": "...", "title": "...", "content": "..."}]}

Assessment File:
    {"assessmentType": "Initial Assessment",
     "clientInfo": {"name": "...", "dateOfBirth": "..."},
     "assessmentData": {"presentingProblem": {"description": "..."}}}

Generated text is written to stdout verbatim; logs go to stderr.

Author: Shubham Singh
Date: December 2025
"""

import argparse
import json
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

from loguru import logger

from clinical_documentation.core.config import AssistantConfiguration
from clinical_documentation.core.constants import LOG_FORMAT
from clinical_documentation.core.enums import AssessmentType, NoteType
from clinical_documentation.core.exceptions import ClinicalDocumentationError, ConfigurationError
from clinical_documentation.core.models import (
    BackgroundDocument,
    ClientInfoForAssessment,
    SelectionSet,
)
from clinical_documentation.pipeline import DocumentationPipeline
from clinical_documentation.reference import checkbox_groups_for
from clinical_documentation.repository import InMemoryRosterRepository


# =============================================================================
# STAGE 1: ARGUMENT PARSER
# =============================================================================


def create_argument_parser() -> argparse.ArgumentParser:
    """Create and configure the command-line argument parser."""
    parser = argparse.ArgumentParser(
        prog="clinical-docs",
        description="Draft DAP progress notes and clinical assessments with an LLM",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=f"""
Note Types:
  {", ".join(NoteType.get_all_values())}

Assessment Types:
  {", ".join(AssessmentType.get_all_values())}

Requirements:
  - API_KEY (Gemini) or OPENAI_API_KEY with LLM_PROVIDER=openai, in the
    environment or a .env file. Not needed for --dry-run.
        """,
    )
    parser.add_argument("--env-file", help="Path to .env file (default: auto-detect)")
    parser.add_argument("--log-level", help="Override LOG_LEVEL (DEBUG, INFO, WARNING, ...)")

    subparsers = parser.add_subparsers(dest="command", required=True)

    note = subparsers.add_parser("note", help="Generate DAP progress notes for a session")
    note.add_argument("--session", required=True, help="Session JSON file")
    note.add_argument("--roster", help="Roster JSON file (default: ROSTER_PATH)")
    note.add_argument("--dry-run", action="store_true", help="Print the prompt, do not call the model")

    assessment = subparsers.add_parser("assessment", help="Generate a clinical assessment")
    assessment.add_argument("--input", required=True, help="Assessment JSON file")
    assessment.add_argument(
        "--dry-run", action="store_true", help="Print the prompt, do not call the model"
    )

    checkboxes = subparsers.add_parser("checkboxes", help="List checkbox groups for a note type")
    checkboxes.add_argument("--note-type", required=True, help="Note type label or name")

    return parser


def configure_logging(level: str) -> None:
    """
    Route loguru output to stderr at the given level.

    Raises:
        ConfigurationError: If loguru does not know the level; existing
            sinks are left in place so the error itself is still reported
    """
    level = level.upper()
    try:
        logger.level(level)
    except ValueError:
        raise ConfigurationError(f"Unknown log level: {level}", context={"log_level": level})
    logger.remove()
    logger.add(sys.stderr, level=level, format=LOG_FORMAT)


def _read_json(path: str, what: str) -> Dict[str, Any]:
    file_path = Path(path)
    try:
        with open(file_path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except FileNotFoundError:
        raise ConfigurationError(f"{what} file not found: {file_path}")
    except json.JSONDecodeError as e:
        raise ConfigurationError(f"{what} file is not valid JSON: {e}", context={"file": str(file_path)})
    if not isinstance(data, dict):
        raise ConfigurationError(f"{what} file must contain a JSON object", context={"file": str(file_path)})
    return data


# =============================================================================
# STAGE 2: SUB-COMMANDS
# =============================================================================


def run_note(args: argparse.Namespace, pipeline: DocumentationPipeline) -> int:
    session = _read_json(args.session, "Session")
    roster_path = args.roster or pipeline.config.roster_path
    if not roster_path:
        raise ConfigurationError("No roster given. Pass --roster or set ROSTER_PATH.")
    roster = InMemoryRosterRepository.from_json_file(roster_path)

    note_type = session.get("noteType", NoteType.GROUP.value)
    clients = roster.resolve_clients(session.get("clientIds") or [])
    partners, programs, _ = roster.snapshot()
    documents = [BackgroundDocument.from_dict(d) for d in session.get("documents") or []]
    selections = SelectionSet.from_dict(session.get("selections"))
    intervention_text = session.get("interventionText", "")

    if args.dry_run:
        if not clients:
            logger.warning("No clients in session; nothing would be sent")
            return 0
        request = pipeline.preview_note_request(
            note_type, clients, programs, partners, documents, intervention_text, selections
        )
        print(request.prompt)
        return 0

    notes = pipeline.generate_notes(
        note_type, clients, programs, partners, documents, intervention_text, selections
    )
    for note in notes:
        print(f"===== {note.client_name} (ID: {note.client_id}) =====")
        print(note.note)
        print()
    return 0


def run_assessment(args: argparse.Namespace, pipeline: DocumentationPipeline) -> int:
    payload = _read_json(args.input, "Assessment")
    assessment_type = payload.get("assessmentType", AssessmentType.INITIAL.value)
    client_info = ClientInfoForAssessment.from_dict(payload.get("clientInfo"))
    data = payload.get("assessmentData") or {}

    if args.dry_run:
        print(pipeline.preview_assessment_request(client_info, assessment_type, data).prompt)
        return 0

    result = pipeline.generate_assessment(client_info, assessment_type, data)
    print(result.assessment_text)
    return 0


def run_checkboxes(args: argparse.Namespace) -> int:
    try:
        groups = checkbox_groups_for(args.note_type)
    except ValueError as e:
        raise ConfigurationError(str(e))
    for group in groups:
        print(f"{group.title} [{group.id}]")
        for label in group.option_labels:
            print(f"  - {label}")
        if group.has_narrative and group.narrative_label:
            print(f"  Narrative: {group.narrative_label}")
        print()
    return 0


# =============================================================================
# STAGE 3: ENTRY POINT
# =============================================================================


def main(argv: Optional[List[str]] = None) -> int:
    """
    Run the CLI.

    Returns:
        0 on success, 1 on any documentation error
    """
    parser = create_argument_parser()
    args = parser.parse_args(argv)

    try:
        if args.command == "checkboxes":
            configure_logging(args.log_level or "WARNING")
            return run_checkboxes(args)

        config = AssistantConfiguration.from_environment(env_file=args.env_file)
        configure_logging(args.log_level or config.log_level)
        pipeline = DocumentationPipeline(config)

        if args.command == "note":
            return run_note(args, pipeline)
        return run_assessment(args, pipeline)

    except ClinicalDocumentationError as error:
        logger.error(error.message)
        return 1


if __name__ == "__main__":
    sys.exit(main())
