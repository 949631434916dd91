"""
Selection Formatter - Checkbox Observations Projection

Renders a SelectionSet into the "Clinician's Observations" block of a note
prompt:

    - participation: Active and Engaged, Cooperative and Responsive
      - Narrative on participation: Shared openly about cravings.

Groups are emitted in the mapping's insertion order. A group with no chosen
options and a blank narrative contributes nothing.

Author: Shubham Singh
Date: December 2025
"""

from clinical_documentation.core.models import SelectionSet


class SelectionFormatter:
    """Pure projection of a SelectionSet into prompt text."""

    def format(self, selections: SelectionSet) -> str:
        """
        Format selections, one line (plus optional narrative line) per group.

        Returns:
            Text block, or an empty string when every group is empty
        """
        lines = []
        for group_id, options in selections.checkboxes.items():
            if selections.is_group_empty(group_id):
                continue
            line = f"- {group_id}: {', '.join(options)}"
            narrative = selections.narrative_for(group_id)
            if narrative:
                line += f"\n  - Narrative on {group_id}: {narrative}"
            lines.append(line)
        return "\n".join(lines)
