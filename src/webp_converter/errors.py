"""Error taxonomy for WebP conversion."""

from __future__ import annotations

from pathlib import Path


class ConversionError(Exception):
    """Base error for every conversion failure.

    ``exit_code`` is used by the CLI when the error reaches the user.
    """

    exit_code = 1


class PathError(ConversionError):
    """Conversion error tied to one filesystem path."""

    stage = "conversion"

    def __init__(self, path: Path | str, message: str | None = None) -> None:
        self.path = Path(path)
        detail = f": {message}" if message else ""
        super().__init__(f"{self.stage} failed for '{self.path}'{detail}")


class TraversalError(PathError):
    """Source root missing/unreadable, or an entry vanished during the walk."""

    stage = "traversal"
    exit_code = 2


class DecodeError(PathError):
    """File is unreadable or not a valid image of a decodable format."""

    stage = "decode"
    exit_code = 3


class DirectoryCreateError(PathError):
    """Output parent directory could not be created."""

    stage = "directory creation"
    exit_code = 4


class EncodeError(PathError):
    """WebP encoding or the final write failed."""

    stage = "encode"
    exit_code = 5


class DependencyError(ConversionError):
    """Codec backend is missing a required capability."""

    exit_code = 6
