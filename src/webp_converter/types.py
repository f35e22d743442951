"""Shared type aliases and protocols for converter modules."""

from __future__ import annotations

from os import PathLike
from typing import Literal, Protocol

type EntryKind = Literal["file", "directory", "other"]
type PathLikeStr = str | PathLike[str]


class PixelBuffer(Protocol):
    """Marker protocol for backend-specific in-memory images."""

    def close(self) -> None:
        """Release any memory held by the buffer."""
