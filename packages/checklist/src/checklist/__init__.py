# This project was developed with assistance from AI tools.
"""Mortgage document checklist engine."""

from .engine import RuleEvaluationError, generate_checklist
from .rules import ALL_RULES, DORMANT_SECTIONS, activate_sections, get_rule
from .schemas import ApplicationSnapshot, GeneratedChecklist

__version__ = "0.1.0"

__all__ = [
    "ALL_RULES",
    "ApplicationSnapshot",
    "DORMANT_SECTIONS",
    "GeneratedChecklist",
    "RuleEvaluationError",
    "activate_sections",
    "generate_checklist",
    "get_rule",
]
