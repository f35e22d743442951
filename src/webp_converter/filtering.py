"""Extension-based classification of traversal candidates."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import PurePath

from webp_converter.types import PathLikeStr

ACCEPTED_EXTENSIONS: frozenset[str] = frozenset({"jpg", "jpeg", "png", "gif"})


@dataclass(frozen=True)
class CandidatePath:
    """A discovered path and its classification outcome."""

    path: PurePath
    accepted: bool
    extension: str | None = None


def classify(path: PathLikeStr) -> CandidatePath:
    """Classify ``path`` by the extension of its final segment.

    Parameters
    ----------
    path : str | os.PathLike
        Path to classify. Never touched on disk.

    Returns
    -------
    CandidatePath
        Accepted with the lowercase extension when it is one of
        ``ACCEPTED_EXTENSIONS``, rejected otherwise.
    """
    pure = PurePath(path)
    # ``suffix`` is empty for "name", "name." and dotfiles such as ".gif".
    suffix = pure.suffix
    if not suffix or suffix == ".":
        return CandidatePath(path=pure, accepted=False)
    extension = suffix[1:].lower()
    if extension not in ACCEPTED_EXTENSIONS:
        return CandidatePath(path=pure, accepted=False)
    return CandidatePath(path=pure, accepted=True, extension=extension)


def is_accepted(path: PathLikeStr) -> bool:
    """Return whether ``path`` carries an accepted image extension."""
    return classify(path).accepted
