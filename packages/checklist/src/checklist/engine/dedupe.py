# This project was developed with assistance from AI tools.
"""Within-bucket deduplication of checklist items.

A borrower with two salaried jobs matches the pay stub rule twice. The two
candidates collapse into one request whose notes name both employers.

Only ever called on a single bucket (one borrower, one property, or the
shared list). Co-borrowers each keep their own copy of a request.
"""

from typing import Sequence

from ..schemas.checklist import ChecklistItem

NOTE_SEPARATOR = " / "


def merge_notes(items: Sequence[ChecklistItem]) -> list[ChecklistItem]:
    """Collapse same-rule items whose notes differ into one merged item.

    Groups are emitted in order of each rule id's first appearance. A group
    with more than one distinct non-empty note becomes a single copy of its
    first item with the notes joined in first-seen order. Other groups pass
    through as-is, duplicates included.
    """
    groups: dict[str, list[ChecklistItem]] = {}
    for item in items:
        groups.setdefault(item.rule_id, []).append(item)

    result: list[ChecklistItem] = []
    for group in groups.values():
        # dict keeps first-seen order and drops repeats
        notes = list(dict.fromkeys(item.notes for item in group if item.notes))
        if len(notes) > 1:
            result.append(group[0].model_copy(update={"notes": NOTE_SEPARATOR.join(notes)}))
        else:
            result.extend(group)
    return result


def dedupe_items(items: Sequence[ChecklistItem]) -> list[ChecklistItem]:
    """Merge divergent notes, then keep the first item per rule id."""
    seen: set[str] = set()
    result: list[ChecklistItem] = []
    for item in merge_notes(items):
        if item.rule_id not in seen:
            seen.add(item.rule_id)
            result.append(item)
    return result
