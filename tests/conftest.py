"""Shared fixtures for photo slider tests."""

from pathlib import Path

import pytest

from photoslider.captions import ImageMeta


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    monkeypatch.delenv("PHOTO_SLIDER_SEED", raising=False)
    monkeypatch.delenv("PHOTO_SLIDER_DEBUG", raising=False)


@pytest.fixture
def image_dir(tmp_path: Path) -> Path:
    """An images/ folder with 3 valid images, 2 rejected files and a subfolder."""
    folder = tmp_path / "images"
    folder.mkdir()
    for name in ("jane doe - sunset.jpg", "cabin%view.PNG", "bob - sea%side.webp",
                 "notes.txt", "archive.zip"):
        (folder / name).write_bytes(b"x")
    (folder / "nested.jpg").mkdir()
    return folder


@pytest.fixture
def sample_metas() -> list[ImageMeta]:
    return [
        ImageMeta(rel_path="images/jane doe - sunset.jpg", author="jane doe", title="sunset"),
        ImageMeta(rel_path="images/cabin%view.png", author="", title="cabin<br>view"),
    ]
