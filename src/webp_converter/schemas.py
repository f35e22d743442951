"""Pydantic schemas for runtime validation of conversion inputs."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict, field_validator


class ConversionJobConfig(BaseModel):
    """Validated input for a conversion job.

    Only the shape of the paths is checked; whether they exist is left to
    the traversal and conversion stages.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    source_root: Path
    output_root: Path
    fail_fast: bool = True

    @field_validator("source_root", "output_root", mode="before")
    @classmethod
    def _reject_empty(cls, value: object) -> object:
        if isinstance(value, str) and not value:
            raise ValueError("path cannot be empty.")
        return value
