# This project was developed with assistance from AI tools.
"""Declarative checklist rule catalog."""

from .base import ChecklistRule
from .catalog import ALL_RULES, DORMANT_SECTIONS, get_rule
from .overrides import activate_sections

__all__ = [
    "ALL_RULES",
    "ChecklistRule",
    "DORMANT_SECTIONS",
    "activate_sections",
    "get_rule",
]
