"""Application ports for clean architecture boundaries."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol

from webp_converter.types import EntryKind, PixelBuffer


@dataclass(frozen=True)
class WalkEntry:
    """One filesystem entry reached during traversal."""

    path: Path
    kind: EntryKind

    @property
    def is_file(self) -> bool:
        """Return whether the entry is a regular file."""
        return self.kind == "file"


@dataclass(frozen=True)
class DecodedImage:
    """Decoded pixel buffer owned by a single conversion call."""

    pixels: PixelBuffer
    width: int
    height: int
    mode: str
    source_format: str | None = None

    def close(self) -> None:
        """Release the backend buffer."""
        self.pixels.close()


class FileTraverser(Protocol):
    """Enumerate filesystem entries below a root."""

    def walk(self, root: Path) -> Iterable[WalkEntry]:
        """Yield entries lazily; raise ``TraversalError`` on failure."""


class ImageDecoder(Protocol):
    """Decode encoded image bytes into a pixel buffer."""

    def decode(self, data: bytes, source_path: Path) -> DecodedImage:
        """Decode bytes read from ``source_path``; raise ``DecodeError``."""


class ImageEncoder(Protocol):
    """Encode a pixel buffer as WebP."""

    def encode(self, image: DecodedImage, output_path: Path) -> bytes:
        """Return WebP bytes destined for ``output_path``; raise ``EncodeError``."""
