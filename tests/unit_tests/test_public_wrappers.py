"""Unit tests for thin public wrapper modules."""

from __future__ import annotations

from pathlib import Path

import pytest

import webp_converter
from webp_converter import api, application
from webp_converter.application import use_cases
from webp_converter.application.options import ConversionJob
from webp_converter.application.results import BatchResult


def test_new_builds_job_without_io(tmp_path: Path) -> None:
    """Create an immutable job for paths that do not exist."""
    job = webp_converter.new(str(tmp_path / "src"), tmp_path / "out")

    assert job.source_root == tmp_path / "src"
    assert job.output_root == tmp_path / "out"
    assert job.fail_fast is True
    assert not (tmp_path / "out").exists()
    with pytest.raises(AttributeError):
        job.source_root = tmp_path  # type: ignore[misc]


def test_top_level_run_forwards(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Forward ``run`` to the use-case implementation."""
    expected = BatchResult()
    seen: list[ConversionJob] = []

    def fake_run(job: ConversionJob, **kwargs: object) -> BatchResult:
        seen.append(job)
        return expected

    monkeypatch.setattr(use_cases, "run", fake_run)
    job = webp_converter.new(tmp_path, tmp_path / "out")

    assert webp_converter.run(job) is expected
    assert seen == [job]


def test_top_level_convert_one_forwards(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path
) -> None:
    """Forward ``convert_one`` to the use-case implementation."""
    called: dict[str, object] = {}

    def fake_convert_one(path: object, job: ConversionJob, **kwargs: object) -> str:
        called.update(path=path, job=job)
        return "result"

    monkeypatch.setattr(use_cases, "convert_one", fake_convert_one)
    job = webp_converter.new(tmp_path, tmp_path / "out")

    assert webp_converter.convert_one("x.png", job) == "result"
    assert called == {"path": "x.png", "job": job}


def test_application_wrappers_forward_ports(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path
) -> None:
    """Pass injected ports through the lazy application wrappers."""
    called: dict[str, object] = {}

    def fake_run(job: ConversionJob, **kwargs: object) -> BatchResult:
        called.update(kwargs)
        return BatchResult()

    monkeypatch.setattr(use_cases, "run", fake_run)
    traverser, decoder, encoder = object(), object(), object()

    application.run(
        application.build_job(tmp_path, tmp_path / "out", fail_fast=False),
        traverser=traverser,  # type: ignore[arg-type]
        decoder=decoder,  # type: ignore[arg-type]
        encoder=encoder,  # type: ignore[arg-type]
    )

    assert called == {"traverser": traverser, "decoder": decoder, "encoder": encoder}


def test_api_file_wrapper_uses_image_folder_as_source(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path
) -> None:
    """Build the single-file job from the image's folder and output dir."""
    seen: dict[str, object] = {}

    class _Result:
        output_path = tmp_path / "out" / "logo.webp"

    def fake_convert_one(path: object, job: ConversionJob) -> _Result:
        seen.update(path=path, job=job)
        return _Result()

    monkeypatch.setattr(api, "convert_one", fake_convert_one)

    out = api.convert_file_to_webp(tmp_path / "img" / "logo.png", tmp_path / "out")

    assert out == tmp_path / "out" / "logo.webp"
    assert seen["job"] == ConversionJob(
        source_root=tmp_path / "img", output_root=tmp_path / "out"
    )


def test_package_exports_error_taxonomy() -> None:
    """Expose every error type from the package root."""
    for name in (
        "ConversionError",
        "TraversalError",
        "DecodeError",
        "DirectoryCreateError",
        "EncodeError",
    ):
        assert issubclass(getattr(webp_converter, name), webp_converter.ConversionError)
    assert webp_converter.__version__
