"""Application-layer result objects."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from webp_converter.errors import ConversionError


@dataclass(frozen=True)
class ConversionResult:
    """Structured single-file conversion outcome."""

    source_path: Path
    output_path: Path
    extension: str
    width: int
    height: int
    size_bytes: int


@dataclass(frozen=True)
class ConversionFailure:
    """A file that failed while the batch kept going."""

    source_path: Path
    error: ConversionError


@dataclass(frozen=True)
class BatchResult:
    """Structured batch outcome, in processing order."""

    converted: tuple[ConversionResult, ...] = ()
    failures: tuple[ConversionFailure, ...] = ()
    skipped: int = 0

    @property
    def ok(self) -> bool:
        """Return whether every accepted file converted."""
        return not self.failures

    @property
    def output_paths(self) -> list[Path]:
        """Return written output paths in processing order."""
        return [result.output_path for result in self.converted]
