"""Fichier de réglages utilisateur (photo-slider.config).

FR: Lecture d'un fichier texte clé=valeur; création du fichier par défaut au
    premier lancement. Les lignes invalides sont ignorées sans erreur.
EN: Reads a plain key=value text file; writes the default file on first run.
    Malformed lines are ignored, only I/O errors propagate (OSError).
"""

from __future__ import annotations

from dataclasses import dataclass, fields, replace
from pathlib import Path

from photoslider.logging_utils import dbg

BORDER_STYLES = ("none", "solid", "dashed", "dotted", "double", "groove", "ridge", "inset", "outset")


@dataclass(frozen=True)
class SliderConfig:
    include_author: bool = True
    author_text_color: str = "#ffffff"
    author_stroke_color: str = "#803128"
    title_text_color: str = "#ffffff"
    title_stroke_color: str = "#bd685e"
    image_border_color: str = "#741d34"
    image_border_style: str = "dashed"


DEFAULT_CONFIG = SliderConfig()

CONFIG_KEYS = tuple(f.name for f in fields(SliderConfig))


def default_config_text(cfg: SliderConfig = DEFAULT_CONFIG) -> str:
    include = "true" if cfg.include_author else "false"
    return f"""# Photo Slider Configuration
# Set include_author to true to show author names, false to hide them
include_author={include}

# Color customization (use hex color codes like #ffffff)
author_text_color={cfg.author_text_color}
author_stroke_color={cfg.author_stroke_color}
title_text_color={cfg.title_text_color}
title_stroke_color={cfg.title_stroke_color}
image_border_color={cfg.image_border_color}

# Border style options: {", ".join(BORDER_STYLES)}
image_border_style={cfg.image_border_style}
"""


def parse_config_text(text: str, base: SliderConfig = DEFAULT_CONFIG) -> SliderConfig:
    """Apply every recognized ``key=value`` line of *text* on top of *base*."""
    overrides = {}
    for raw in text.splitlines():
        line = raw.strip()
        if not line or line.startswith("#"):
            continue
        if "=" not in line:
            continue

        key, value = line.split("=", 1)
        key = key.strip()
        value = value.strip()

        if key not in CONFIG_KEYS:
            dbg(f"Clé de configuration ignorée: {key!r}")
            continue
        if key == "include_author":
            overrides[key] = value == "true"
        else:
            overrides[key] = value

    return replace(base, **overrides)


def write_default_config(path: Path) -> None:
    path.write_text(default_config_text(), encoding="utf-8")


def load_config(path: Path) -> SliderConfig:
    """
    Charge la configuration; crée le fichier par défaut s'il est absent.

    Returns the built-in defaults when the file had to be created.
    """
    path = Path(path)
    if not path.exists():
        write_default_config(path)
        return DEFAULT_CONFIG
    # Octets non UTF-8 conservés (surrogateescape), réécrits tels quels dans le HTML
    return parse_config_text(path.read_text(encoding="utf-8", errors="surrogateescape"))
