"""Public path-based conversion API (delegates to application use-cases)."""

from __future__ import annotations

from pathlib import Path

from webp_converter.application.results import BatchResult
from webp_converter.application.use_cases import build_job, convert_one, run
from webp_converter.types import PathLikeStr


def convert_directory_to_webp(
    source_dir: PathLikeStr,
    output_dir: PathLikeStr,
    *,
    fail_fast: bool = True,
) -> BatchResult:
    """Convert every accepted image below ``source_dir`` into ``output_dir``."""
    job = build_job(source_dir, output_dir, fail_fast=fail_fast)
    return run(job)


def convert_file_to_webp(image_path: PathLikeStr, output_dir: PathLikeStr) -> Path:
    """Convert a single image into ``output_dir`` and return the output path."""
    job = build_job(Path(image_path).parent, output_dir)
    return convert_one(image_path, job).output_path
