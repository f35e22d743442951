"""Application use-cases orchestrating WebP conversion."""

from __future__ import annotations

import logging
from pathlib import Path

from pydantic import ValidationError

from webp_converter.adapters.codecs import PillowImageDecoder, PillowWebpEncoder
from webp_converter.adapters.traversal import DirectoryTraverser
from webp_converter.application.options import ConversionJob
from webp_converter.application.ports import (
    FileTraverser,
    ImageDecoder,
    ImageEncoder,
)
from webp_converter.application.results import (
    BatchResult,
    ConversionFailure,
    ConversionResult,
)
from webp_converter.errors import (
    ConversionError,
    DecodeError,
    DirectoryCreateError,
    EncodeError,
)
from webp_converter.filtering import is_accepted
from webp_converter.schemas import ConversionJobConfig
from webp_converter.types import PathLikeStr

logger = logging.getLogger(__name__)

WEBP_SUFFIX = ".webp"

# Per-file failures that keep-going mode records instead of raising.
_PER_FILE_ERRORS = (DecodeError, DirectoryCreateError, EncodeError)


def build_job(
    source_dir: PathLikeStr,
    output_dir: PathLikeStr,
    *,
    fail_fast: bool = True,
) -> ConversionJob:
    """Build a validated job without touching the filesystem."""
    try:
        config = ConversionJobConfig(
            source_root=source_dir,
            output_root=output_dir,
            fail_fast=fail_fast,
        )
    except ValidationError as exc:
        raise ConversionError(f"Invalid conversion job parameters: {exc}") from exc
    return ConversionJob(
        source_root=config.source_root,
        output_root=config.output_root,
        fail_fast=config.fail_fast,
    )


def derive_output_path(source_path: PathLikeStr, output_root: PathLikeStr) -> Path:
    """Map a source file to ``output_root/<stem>.webp``.

    Only the base name is used: files sharing a name in different
    sub-directories map to the same output path.
    """
    file_name = Path(Path(source_path).name)
    return Path(output_root) / file_name.with_suffix(WEBP_SUFFIX)


def _read_source(source_path: Path) -> bytes:
    try:
        return source_path.read_bytes()
    except OSError as exc:
        raise DecodeError(source_path, exc.strerror or str(exc)) from exc


def _ensure_parent(output_path: Path) -> None:
    try:
        output_path.parent.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise DirectoryCreateError(output_path.parent, exc.strerror or str(exc)) from exc


def _write_output(output_path: Path, payload: bytes) -> None:
    try:
        output_path.write_bytes(payload)
    except OSError as exc:
        raise EncodeError(output_path, exc.strerror or str(exc)) from exc


def convert_one(
    source_path: PathLikeStr,
    job: ConversionJob,
    *,
    decoder: ImageDecoder | None = None,
    encoder: ImageEncoder | None = None,
) -> ConversionResult:
    """Use-case: convert a single image into the job's output root.

    Steps run in order: decode, derive the output path, create its parent
    directory, encode and write. Nothing is written when decoding or
    directory creation fails; an existing output file is overwritten.

    Raises
    ------
    DecodeError
        If the source cannot be read or decoded.
    DirectoryCreateError
        If the output directory cannot be created.
    EncodeError
        If WebP encoding or the final write fails.
    """
    source = Path(source_path)
    decoder = decoder or PillowImageDecoder()
    encoder = encoder or PillowWebpEncoder()

    image = decoder.decode(_read_source(source), source)
    try:
        output_path = derive_output_path(source, job.output_root)
        _ensure_parent(output_path)
        payload = encoder.encode(image, output_path)
    finally:
        image.close()
    _write_output(output_path, payload)

    logger.debug("converted %s -> %s (%d bytes)", source, output_path, len(payload))
    return ConversionResult(
        source_path=source,
        output_path=output_path,
        extension=source.suffix[1:].lower(),
        width=image.width,
        height=image.height,
        size_bytes=len(payload),
    )


def run(
    job: ConversionJob,
    *,
    traverser: FileTraverser | None = None,
    decoder: ImageDecoder | None = None,
    encoder: ImageEncoder | None = None,
) -> BatchResult:
    """Use-case: convert every accepted image below ``job.source_root``.

    With ``job.fail_fast`` (the default) the first error from any stage is
    raised and the batch stops; files converted before it stay on disk.
    Otherwise per-file failures are collected in the result while traversal
    errors still abort the batch.
    """
    traverser = traverser or DirectoryTraverser()
    decoder = decoder or PillowImageDecoder()
    encoder = encoder or PillowWebpEncoder()

    converted: list[ConversionResult] = []
    failures: list[ConversionFailure] = []
    skipped = 0

    logger.info("converting images under %s into %s", job.source_root, job.output_root)
    for entry in traverser.walk(job.source_root):
        if not entry.is_file:
            continue
        if not is_accepted(entry.path):
            skipped += 1
            continue
        try:
            result = convert_one(entry.path, job, decoder=decoder, encoder=encoder)
        except _PER_FILE_ERRORS as exc:
            if job.fail_fast:
                raise
            logger.warning("conversion failed, continuing: %s", exc)
            failures.append(ConversionFailure(source_path=entry.path, error=exc))
            continue
        converted.append(result)

    logger.info(
        "batch finished: %d converted, %d failed, %d skipped",
        len(converted),
        len(failures),
        skipped,
    )
    return BatchResult(
        converted=tuple(converted),
        failures=tuple(failures),
        skipped=skipped,
    )
