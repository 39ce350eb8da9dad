#!/usr/bin/env python3
# -*- coding: utf-8 -*-

import os
import sys
from pathlib import Path

from photoslider.captions import build_image_metas
from photoslider.config import CONFIG_FILE, IMAGE_FOLDER, OUTPUT_FILE
from photoslider.fs_scan import ensure_image_folder, find_images, rng_from_env, shuffle_images
from photoslider.html_builder import write_html
from photoslider.logging_utils import dbg, error, info
from photoslider.settings import load_config


def print_instructions():
    print()
    print("Instructions:")
    print(f'1. Place your images in the "{IMAGE_FOLDER}" folder')
    print(f"2. Run this program to generate the HTML (edit {CONFIG_FILE} to hide author)")
    print(f"3. Add {OUTPUT_FILE} as web source in OBS to view the photo slider")
    print()


# ------------------------------------------------------------
# MAIN
# ------------------------------------------------------------
def run(root: Path) -> int:
    cfg = load_config(root / CONFIG_FILE)
    dbg(f"Configuration: {cfg}")

    # Premier lancement: on crée le dossier et on s'arrête là
    image_dir = root / IMAGE_FOLDER
    if not ensure_image_folder(image_dir):
        info(f"Creating {IMAGE_FOLDER} folder...")
        print(f"Please place your images in the {IMAGE_FOLDER} folder and run this program again.")
        return 0

    images = find_images(image_dir)
    images = shuffle_images(images, rng_from_env())
    metas = build_image_metas(images, root)

    write_html(root / OUTPUT_FILE, metas, cfg)

    print()
    info(f"Generated {OUTPUT_FILE} with {len(metas)} images from {IMAGE_FOLDER} folder.")
    print_instructions()
    return 0


def main() -> int:
    try:
        return run(Path(os.getcwd()))
    except OSError as e:
        error(str(e))
        return 1


if __name__ == "__main__":
    sys.exit(main())
