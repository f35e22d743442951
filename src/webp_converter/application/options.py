"""Typed option objects shared across conversion use-cases."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class ConversionJob:
    """Parameters for one batch conversion.

    Constructing a job performs no I/O; neither root has to exist yet.
    """

    source_root: Path
    output_root: Path
    fail_fast: bool = True
