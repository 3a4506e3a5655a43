"""Slot candidate model."""

from pydantic import BaseModel, ConfigDict, field_validator


class SlotCandidate(BaseModel):
    """Visible element text that looks like a free appointment time.

    Identity is the trimmed text; two candidates with equal text are the same slot.
    """

    model_config = ConfigDict(frozen=True)

    text: str

    @field_validator("text")
    @classmethod
    def _strip(cls, value: str) -> str:
        return value.strip()
