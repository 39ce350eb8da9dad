"""Génération HTML/CSS du diaporama défilant.

FR: La liste d'images est écrite deux fois à la suite; l'animation translate
    la piste de -50% pour une boucle sans coupure.
EN: The image list is written twice back to back; the keyframes translate the
    track by -50% so the loop is seamless.
"""

from __future__ import annotations

import os
from pathlib import Path

from photoslider.captions import ImageMeta
from photoslider.config import (
    CAPTION_FONT_CSS,
    GOOGLE_FONTS_PRECONNECT,
    GOOGLE_FONTS_STATIC,
    PAGE_TITLE,
    SECONDS_PER_IMAGE,
)
from photoslider.settings import SliderConfig


def html_escape(s: str) -> str:
    s = s or ""
    return (s.replace("&", "&amp;")
              .replace("<", "&lt;")
              .replace(">", "&gt;")
              .replace('"', "&quot;")
              .replace("'", "&#039;"))


def animation_duration(image_count: int) -> int:
    return image_count * SECONDS_PER_IMAGE


# ------------------------------------------------------------
# CSS
# ------------------------------------------------------------
def build_styles_css(cfg: SliderConfig, image_count: int) -> str:
    return f"""      html, body {{
        display: flex;
        flex-direction: column;
        width: 100%;
        height: 100%;
        margin: 0px;
        padding: 0px;
        overflow: hidden;
        max-width: 100%;
        overflow-x: hidden;
        scrollbar-width: none;
        -ms-overflow-style: none;
      }}
      html::-webkit-scrollbar, body::-webkit-scrollbar {{
        display: none;
      }}

      *, *::before, *::after {{
        box-sizing: border-box;
      }}

      #permas {{
        height: 750px;
        position: absolute;
        overflow: hidden;
        overflow-y: hidden;
        white-space: nowrap;
        left: 0;
        animation-name: scroll;
        animation-duration: {animation_duration(image_count)}s;
        animation-iteration-count: infinite;
        animation-timing-function: linear;
        display: flex;
        width: max-content;
      }}

      #permas .scroll-content,
      #permas .scroll-content-duplicate {{
        display: flex;
        white-space: nowrap;
        flex-shrink: 0;
      }}

      .image-container {{
        display: inline-block;
        margin-top: 32px;
        margin-right: 80px;
        text-align: center;
      }}

      #permas img {{
        height: 500px;
        border-radius: 12px;
        display: block;
        margin-bottom: 10px;
        outline: 5px {cfg.image_border_style} {cfg.image_border_color};
        outline-offset: 16px;
      }}

      #permas .caption {{
        font-family: "Nunito", sans-serif;
        white-space: normal;
        overflow: hidden;
        text-overflow: ellipsis;
        max-width: 100%;
        text-align: center;
        margin: 0 auto;
        margin-top: 32px;
      }}

      #permas .author {{
        font-size: 48px;
        color: {cfg.author_text_color};
        -webkit-text-stroke: 10px {cfg.author_stroke_color};
        paint-order: stroke fill;
        font-weight: bold;
        display: block;
      }}

      #permas .title {{
        font-size: 40px;
        display: block;
        color: {cfg.title_text_color};
        -webkit-text-stroke: 10px {cfg.title_stroke_color};
        paint-order: stroke fill;
      }}

      @keyframes scroll {{
        0% {{
          transform: translateX(0);
        }}
        100% {{
          transform: translateX(-50%);
        }}
      }}
"""


# ------------------------------------------------------------
# HTML builders
# ------------------------------------------------------------
def build_image_container(meta: ImageMeta, cfg: SliderConfig) -> str:
    # Légendes non échappées (conserve les <br>), seul le src l'est.
    lines = [
        '        <div class="image-container">',
        f'          <img class="scroller" src="{html_escape(meta.rel_path.replace(os.sep, "/"))}">',
        '          <div class="caption">',
    ]
    if cfg.include_author:
        lines.append(f'            <div class="author">{meta.author}</div>')
    lines.append(f'            <div class="title">{meta.title}</div>')
    lines.append('          </div>')
    lines.append('        </div>')
    return "\n".join(lines) + "\n"


def build_slider_html(metas: list[ImageMeta], cfg: SliderConfig) -> str:
    track = "".join(build_image_container(m, cfg) for m in metas)
    return f"""<!DOCTYPE html>
<html>
  <head>
    <meta charset="utf-8">
    <title>{PAGE_TITLE}</title>
    <link rel="preconnect" href="{GOOGLE_FONTS_PRECONNECT}">
    <link rel="preconnect" href="{GOOGLE_FONTS_STATIC}" crossorigin>
    <link href="{CAPTION_FONT_CSS}" rel="stylesheet">
    <style>
{build_styles_css(cfg, len(metas))}    </style>
  </head>
  <body>
    <div id="permas">
      <div class="scroll-content">
{track}      </div>
      <div class="scroll-content-duplicate">
{track}      </div>
    </div>
  </body>
</html>
"""


def write_html(path: Path, metas: list[ImageMeta], cfg: SliderConfig) -> None:
    """
    Écrit le document de façon atomique (fichier temporaire + os.replace).

    On any failure the temporary file is removed and the error propagates; a
    previous output file stays untouched.
    """
    path = Path(path)
    document = build_slider_html(metas, cfg)
    tmp = path.with_name(path.name + ".tmp")
    try:
        with open(tmp, "w", encoding="utf-8", errors="surrogateescape", newline="\n") as f:
            f.write(document)
            f.flush()
            os.fsync(f.fileno())
        os.replace(tmp, path)
    except BaseException:
        tmp.unlink(missing_ok=True)
        raise
