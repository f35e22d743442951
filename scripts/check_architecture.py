#!/usr/bin/env python3
"""Architecture boundary checks."""

from __future__ import annotations

from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
PACKAGE = ROOT / "src/webp_converter"


def _read(path: Path) -> str:
    return path.read_text(encoding="utf-8")


def _assert_no_imports(path: Path, banned: list[str]) -> None:
    text = _read(path)
    for token in banned:
        if token in text:
            raise SystemExit(f"Architecture violation in {path}: found '{token}'")


def main() -> None:
    """Run repository architecture boundary checks."""
    # Codec access goes through the adapters only.
    for path in [PACKAGE / "cli/cli.py", PACKAGE / "filtering.py", PACKAGE / "api.py"]:
        _assert_no_imports(path, ["import PIL", "from PIL"])

    app_dir = PACKAGE / "application"
    for path in app_dir.glob("*.py"):
        _assert_no_imports(
            path,
            [
                "import typer",
                "from typer",
                "import PIL",
                "from PIL",
            ],
        )

    print("Architecture checks passed.")


if __name__ == "__main__":
    main()
