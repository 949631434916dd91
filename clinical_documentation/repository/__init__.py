"""
Repository Layer - Roster Data Access

This layer holds the partner/program/client roster the pipeline draws on.
    1. Hides where the roster came from (JSON file or in-code seed)
    2. Provides foreign-key lookups (programs of a partner, clients of a program)
    3. Applies roster edits without touching the prompt pipeline

Submodules:
    roster_repository.py → Protocol + in-memory implementation

Dependency Rule:
    This layer depends on: core (models, exceptions, constants)
    This layer is used by: pipeline, cli

Author: Shubham Singh
Date: December 2025
"""

from clinical_documentation.repository.roster_repository import (
    InMemoryRosterRepository,
    RosterRepository,
)

__all__ = [
    "InMemoryRosterRepository",
    "RosterRepository",
]
