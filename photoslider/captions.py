"""Légendes auteur / titre tirées des noms de fichiers.

FR: Format attendu "auteur - titre"; "%" devient un saut de ligne <br>.
EN: Expected format "author - title"; each "%" becomes a <br> line break.

NOTE: les légendes sont injectées telles quelles dans le HTML (non échappées),
afin de conserver le <br>. Un nom de fichier peut donc contenir du HTML.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from photoslider.config import BREAK_CHAR, BREAK_MARKER


@dataclass(frozen=True)
class ImageMeta:
    rel_path: str
    author: str
    title: str


def apply_breaks(text: str) -> str:
    return text.replace(BREAK_CHAR, BREAK_MARKER)


def parse_author_title(name: str) -> tuple[str, str]:
    """
    Split a file stem into ``(author, title)``.

    "jane doe - sunset" -> ("jane doe", "sunset")
    "cabin%view"        -> ("", "cabin<br>view")
    """
    if "-" not in name:
        return "", apply_breaks(name)

    raw_author, raw_title = name.split("-", 1)
    author = apply_breaks(raw_author.strip()).strip()
    title = apply_breaks(raw_title.strip()).strip()
    return author, title


def file_stem(name: str) -> str:
    # ".jpg" -> "" (l'extension compte même sans nom devant)
    _, ext = os.path.splitext("x" + name)
    return name[: len(name) - len(ext)]


def relative_posix(path: Path, base_dir: Path) -> str:
    try:
        return path.relative_to(base_dir).as_posix()
    except ValueError:
        return path.as_posix()


def build_image_metas(paths: list[Path], base_dir: Path) -> list[ImageMeta]:
    metas = []
    for p in paths:
        author, title = parse_author_title(file_stem(p.name))
        metas.append(ImageMeta(rel_path=relative_posix(p, base_dir), author=author, title=title))
    return metas
