"""Couche disque (scan).

FR: Découverte des images du dossier (non récursif) et ordre aléatoire.
EN: Image discovery in the input folder (non-recursive) and random ordering.
"""

from __future__ import annotations

import os
import random
from pathlib import Path

from photoslider.config import ALLOWED_EXTENSIONS, ENV_SEED
from photoslider.logging_utils import dbg, warn


def is_allowed_image(path: Path) -> bool:
    # "x" + nom: un fichier nommé ".jpg" garde son extension
    _, ext = os.path.splitext("x" + path.name)
    return ext.lower() in ALLOWED_EXTENSIONS


def ensure_image_folder(folder: Path) -> bool:
    """Return True if *folder* already existed, otherwise create it and return False."""
    if folder.exists():
        return True
    folder.mkdir(parents=True, exist_ok=True)
    return False


def find_images(folder: Path) -> list[Path]:
    folder = Path(folder)
    results = []
    for p in sorted(folder.iterdir(), key=lambda x: x.name):
        if p.is_dir():
            continue
        if not is_allowed_image(p):
            dbg(f"Fichier ignoré (extension): {p.name!r}")
            continue
        results.append(folder / p.name)
    return results


def rng_from_env() -> random.Random:
    raw = os.environ.get(ENV_SEED, "").strip()
    if not raw:
        return random.Random()
    try:
        return random.Random(int(raw))
    except ValueError:
        warn(f"{ENV_SEED} invalide ({raw!r}) -> ordre aléatoire non reproductible")
        return random.Random()


def shuffle_images(paths: list[Path], rng: random.Random | None = None) -> list[Path]:
    out = list(paths)
    (rng or random.Random()).shuffle(out)
    return out
