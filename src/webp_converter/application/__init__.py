"""Application-layer use-cases and option objects."""

from __future__ import annotations

from webp_converter.application.options import ConversionJob
from webp_converter.application.ports import (
    DecodedImage,
    FileTraverser,
    ImageDecoder,
    ImageEncoder,
    WalkEntry,
)
from webp_converter.application.results import (
    BatchResult,
    ConversionFailure,
    ConversionResult,
)
from webp_converter.types import PathLikeStr


def build_job(
    source_dir: PathLikeStr,
    output_dir: PathLikeStr,
    *,
    fail_fast: bool = True,
) -> ConversionJob:
    """Build a validated conversion job via lazy use-case import."""
    from webp_converter.application.use_cases import build_job as _impl

    return _impl(source_dir, output_dir, fail_fast=fail_fast)


def convert_one(
    source_path: PathLikeStr,
    job: ConversionJob,
    *,
    decoder: ImageDecoder | None = None,
    encoder: ImageEncoder | None = None,
) -> ConversionResult:
    """Convert one image via lazy use-case import."""
    from webp_converter.application.use_cases import convert_one as _impl

    return _impl(source_path, job, decoder=decoder, encoder=encoder)


def run(
    job: ConversionJob,
    *,
    traverser: FileTraverser | None = None,
    decoder: ImageDecoder | None = None,
    encoder: ImageEncoder | None = None,
) -> BatchResult:
    """Run a batch conversion via lazy use-case import."""
    from webp_converter.application.use_cases import run as _impl

    return _impl(job, traverser=traverser, decoder=decoder, encoder=encoder)


__all__ = [
    "BatchResult",
    "ConversionFailure",
    "ConversionJob",
    "ConversionResult",
    "DecodedImage",
    "FileTraverser",
    "ImageDecoder",
    "ImageEncoder",
    "WalkEntry",
    "build_job",
    "convert_one",
    "run",
]
