"""Text helpers for table cells."""

from __future__ import annotations

import re

NBSP_RE = re.compile(r"\xa0|&nbsp;?")
WS_RE = re.compile(r"\s+")
INT_RE = re.compile(r"[+-]?[0-9]+")


def clean_cell(text: str) -> str:
    text = NBSP_RE.sub(" ", text)
    return WS_RE.sub(" ", text).strip()


def parse_int(text: str, default: int = 0) -> int:
    """Integer value of ``text`` or ``default`` unless it is plain ASCII digits with an optional sign."""
    text = text.strip()
    if not INT_RE.fullmatch(text):
        return default
    return int(text)
