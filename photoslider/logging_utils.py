"""Journalisation console (bilingue).

FR: Centraliser les messages [INFO]/[WARN]/[DBG]/[ERROR].
EN: Centralize [INFO]/[WARN]/[DBG]/[ERROR] console messages.
"""

import os
import sys

from photoslider.config import ENV_DEBUG


def debug_enabled() -> bool:
    return os.environ.get(ENV_DEBUG, "").strip().lower() in ("1", "true", "yes")


def info(msg: str) -> None:
    print(f"[INFO] {msg}")


def warn(msg: str) -> None:
    print(f"[WARN] {msg}")


def dbg(msg: str) -> None:
    if debug_enabled():
        print(f"[DBG] {msg}")


def error(msg: str) -> None:
    print(f"[ERROR] {msg}", file=sys.stderr)
