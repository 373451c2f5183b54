# This project was developed with assistance from AI tools.
"""Checklist engine configuration via pydantic-settings.

All settings read from ``CHECKLIST_``-prefixed environment variables with
defaults that match production behaviour.
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ChecklistSettings(BaseSettings):
    """Checklist engine settings -- reads from environment variables."""

    model_config = SettingsConfigDict(env_prefix="CHECKLIST_", extra="ignore")

    LOG_LEVEL: str = "INFO"

    TAX_SLIP_RELEASE_MONTH: int = Field(
        default=5,
        ge=2,
        le=12,
        description="First month in which last year's tax slips (T4, NOA) are expected to exist.",
    )

    SYNTHESIZE_MISSING_BORROWER: bool = Field(
        default=True,
        description=(
            "Build a main borrower from the applicant record when the application "
            "has no borrowers, so base-pack rules still fire."
        ),
    )


settings = ChecklistSettings()
