from __future__ import annotations

from pathlib import Path
import os
import tempfile


def create_if_absent(path: Path) -> None:
    """Create an empty file, leaving an existing file untouched."""
    fd = os.open(path, os.O_WRONLY | os.O_CREAT, 0o644)
    os.close(fd)


def create_exclusive(path: Path, text: str) -> None:
    """Write a new text file. Raises FileExistsError if the path exists."""
    with path.open("x", encoding="utf-8", newline="") as handle:
        handle.write(text)


def replace_text(path: Path, text: str) -> None:
    """Rewrite a text file through a sibling temp file."""
    tmp_path: Path | None = None
    try:
        with tempfile.NamedTemporaryFile(
            "w", encoding="utf-8", delete=False, dir=str(path.parent)
        ) as tmp:
            tmp_path = Path(tmp.name)
            tmp.write(text)
        tmp_path.replace(path)
    finally:
        if tmp_path and tmp_path.exists():
            try:
                tmp_path.unlink()
            except OSError:
                pass
