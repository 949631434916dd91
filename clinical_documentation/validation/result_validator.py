"""
Result Validator - Requested-Client Filtering

This module sanitizes the model's note array before it reaches the caller.
The model may invent client ids, repeat a client, or skip one; only entries
for clients that were actually requested survive.

Filtering Rules:
    1. Keep an entry only if its clientId matches a requested client id
    2. Keep only the first entry for each client id
    3. Never pad the output: a requested client with no entry gets none

The output order follows the model's order. When the retained count differs
from the requested count a WARNING names the missing client ids.

Pipeline Position:
    GenerationClient → [ResultValidator] → caller
                       ^^^^^^^^^^^^^^^^^
                       You are here

Author: Shubham Singh
Date: December 2025
"""

from typing import Iterable, List, Set

from loguru import logger

from clinical_documentation.core.models import ClientRecord, NoteResult


class ResultValidator:
    """
    Filters generated notes down to the requested clients.

    Example:
        >>> validator = ResultValidator()
        >>> kept = validator.filter(raw_notes, [client_a, client_b])
        >>> [note.client_id for note in kept]
        ['A']
    """

    def filter(
        self, raw_results: Iterable[NoteResult], requested_clients: Iterable[ClientRecord]
    ) -> List[NoteResult]:
        """
        Retain only first entries whose client id was requested.

        Args:
            raw_results: Parsed entries returned by the model
            requested_clients: Clients the prompt was built for

        Returns:
            Filtered list (possibly shorter than requested_clients)
        """
        requested_ids = [client.id for client in requested_clients]
        allowed: Set[str] = set(requested_ids)
        seen: Set[str] = set()
        kept: List[NoteResult] = []
        dropped = 0

        for result in raw_results:
            if result.client_id not in allowed or result.client_id in seen:
                dropped += 1
                continue
            seen.add(result.client_id)
            kept.append(result)

        if dropped:
            logger.debug(f"Dropped {dropped} unrequested or duplicate note entr(ies)")

        if len(kept) != len(allowed):
            missing = [client_id for client_id in requested_ids if client_id not in seen]
            logger.warning(
                f"Model returned notes for {len(kept)} of {len(allowed)} requested client(s) | "
                f"Missing: {missing}"
            )

        return kept
