"""Recursive directory traversal implementing the traverser port."""

from __future__ import annotations

import os
import stat
from collections.abc import Iterator
from pathlib import Path

from webp_converter.application.ports import WalkEntry
from webp_converter.errors import TraversalError
from webp_converter.types import EntryKind, PathLikeStr


def _reason(exc: OSError) -> str:
    return exc.strerror or str(exc)


def _entry_kind(entry: os.DirEntry[str]) -> EntryKind:
    # Symlinks are reported but never followed.
    if entry.is_symlink():
        return "other"
    if entry.is_dir(follow_symlinks=False):
        return "directory"
    if entry.is_file(follow_symlinks=False):
        return "file"
    return "other"


def _mode_kind(mode: int) -> EntryKind:
    if stat.S_ISDIR(mode):
        return "directory"
    if stat.S_ISREG(mode):
        return "file"
    return "other"


def _scan_directory(directory: Path) -> list[tuple[Path, EntryKind]]:
    try:
        with os.scandir(directory) as scanner:
            return [(Path(entry.path), _entry_kind(entry)) for entry in scanner]
    except OSError as exc:
        raise TraversalError(directory, _reason(exc)) from exc


def walk(root: PathLikeStr) -> Iterator[WalkEntry]:
    """Lazily enumerate ``root`` and everything below it.

    The root is yielded first, then entries in pre-order using the
    platform's directory ordering. A root that is a regular file yields
    only itself.

    Parameters
    ----------
    root : str | os.PathLike
        Directory (or file) to enumerate.

    Yields
    ------
    WalkEntry
        Every reachable entry with its kind.

    Raises
    ------
    TraversalError
        If the root cannot be read, or any directory below it becomes
        unreadable while walking. The walk stops at the first failure.
    """
    root_path = Path(root)
    try:
        mode = root_path.stat().st_mode
    except OSError as exc:
        raise TraversalError(root_path, _reason(exc)) from exc

    kind = _mode_kind(mode)
    yield WalkEntry(path=root_path, kind=kind)
    if kind != "directory":
        return

    # One pending-entry iterator per open directory keeps depth off the call stack.
    pending: list[Iterator[tuple[Path, EntryKind]]] = [iter(_scan_directory(root_path))]
    while pending:
        try:
            path, kind = next(pending[-1])
        except StopIteration:
            pending.pop()
            continue
        yield WalkEntry(path=path, kind=kind)
        if kind == "directory":
            pending.append(iter(_scan_directory(path)))


class DirectoryTraverser:
    """Default traverser backed by ``os.scandir``."""

    def walk(self, root: Path) -> Iterator[WalkEntry]:
        """Enumerate ``root`` recursively; see :func:`walk`."""
        return walk(root)
