"""Batch conversion of JPEG/PNG/GIF trees into WebP files."""

from __future__ import annotations

from typing import TYPE_CHECKING

from webp_converter.errors import (
    ConversionError,
    DecodeError,
    DependencyError,
    DirectoryCreateError,
    EncodeError,
    TraversalError,
)
from webp_converter.types import PathLikeStr

if TYPE_CHECKING:
    from webp_converter.application.options import ConversionJob
    from webp_converter.application.results import BatchResult, ConversionResult

__version__ = "0.1.0"


def new(source_dir: PathLikeStr, output_dir: PathLikeStr) -> ConversionJob:
    """Create a conversion job.

    Parameters
    ----------
    source_dir : str | os.PathLike
        Root of the tree scanned for JPEG/PNG/GIF files.
    output_dir : str | os.PathLike
        Directory receiving the ``.webp`` files. Created on demand.

    Returns
    -------
    ConversionJob
        Immutable job. No filesystem access happens here.
    """
    from .application.use_cases import build_job

    return build_job(source_dir, output_dir)


def run(job: ConversionJob) -> BatchResult:
    """Convert every accepted image below ``job.source_root``.

    Parameters
    ----------
    job : ConversionJob
        Job created by :func:`new`.

    Returns
    -------
    BatchResult
        Converted files in processing order.

    Raises
    ------
    ConversionError
        The first traversal, decode, directory or encode error; the batch
        stops there.
    """
    from .application.use_cases import run as _impl

    return _impl(job)


def convert_one(path: PathLikeStr, job: ConversionJob) -> ConversionResult:
    """Convert a single image into ``job.output_root``.

    Parameters
    ----------
    path : str | os.PathLike
        Image to convert. It does not need to live below
        ``job.source_root``.
    job : ConversionJob
        Job providing the output root.

    Returns
    -------
    ConversionResult
        Source and output paths plus image dimensions.
    """
    from .application.use_cases import convert_one as _impl

    return _impl(path, job)


__all__ = [
    "ConversionError",
    "DecodeError",
    "DependencyError",
    "DirectoryCreateError",
    "EncodeError",
    "TraversalError",
    "convert_one",
    "new",
    "run",
]
