# This project was developed with assistance from AI tools.
"""Manual activation of dormant sections.

The engine has no notion of overrides. An ops tool that has flagged an
application (e.g. "borrower is on maternity leave") builds a modified rule
list here and passes it to ``generate_checklist``.
"""

import dataclasses
import logging
from typing import Iterable, Sequence

from .base import ChecklistRule, always
from .catalog import dormant_section_ids

logger = logging.getLogger(__name__)


def activate_sections(
    rules: Sequence[ChecklistRule],
    sections: Iterable[str],
) -> list[ChecklistRule]:
    """Return a copy of ``rules`` with every rule in ``sections`` switched on.

    Rules outside the named sections are returned unchanged, in the same
    order. The input sequence is not modified.

    Raises:
        ValueError: If a section is not one of the dormant sections.
    """
    requested = set(sections)
    unknown = requested - dormant_section_ids()
    if unknown:
        raise ValueError(f"Not a dormant section: {', '.join(sorted(unknown))}")

    activated = [
        dataclasses.replace(rule, condition=always) if rule.section in requested else rule
        for rule in rules
    ]
    logger.debug("Activated dormant sections: %s", ", ".join(sorted(requested)))
    return activated
