"""Shared pytest configuration, marker assignment and image fixtures."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest
from PIL import Image

type ImageWriter = Callable[..., Path]


def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Attach suite markers based on test file path."""
    del config
    for item in items:
        path = Path(str(item.fspath))
        parts = set(path.parts)
        if "e2e_tests" in parts:
            item.add_marker(pytest.mark.e2e)
        elif "integration_tests" in parts:
            item.add_marker(pytest.mark.integration)
        elif "unit_tests" in parts:
            item.add_marker(pytest.mark.unit)


@pytest.fixture
def write_image() -> ImageWriter:
    """Return a helper writing a small real image; format follows the suffix."""

    def _write(
        path: Path,
        *,
        mode: str = "RGB",
        size: tuple[int, int] = (8, 6),
        image_format: str | None = None,
    ) -> Path:
        path.parent.mkdir(parents=True, exist_ok=True)
        with Image.new(mode, size) as image:
            image.save(path, format=image_format)
        return path

    return _write


@pytest.fixture
def ferris_source(tmp_path: Path, write_image: ImageWriter) -> Path:
    """Source tree with three images and one text file."""
    source = tmp_path / "source"
    write_image(source / "ferris_jpg.jpg")
    write_image(source / "ferris_jpeg.jpeg")
    write_image(source / "ferris_png.png", mode="RGBA")
    (source / "notes.txt").write_text("not an image", encoding="utf-8")
    return source
