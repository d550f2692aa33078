"""Whitespace tokenizing and finite-float parsing shared by ingest stages."""

from __future__ import annotations

import math
import re
from typing import Optional

# Plain ASCII decimal or scientific notation only
_NUMBER_RE = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")


def tokenize(line: str) -> list[str]:
    """Split on runs of whitespace."""
    return line.split()


def parse_finite(token: str) -> Optional[float]:
    """Parse `token` as a finite float, or return None."""
    if _NUMBER_RE.fullmatch(token) is None:
        return None
    try:
        value = float(token)
    except ValueError:
        return None
    if not math.isfinite(value):
        return None
    return value


def looks_like_data(tokens: list[str]) -> bool:
    """True when tokens form a valid sample row: even count >= 2, all finite."""
    if len(tokens) < 2 or len(tokens) % 2 != 0:
        return False
    return all(parse_finite(tok) is not None for tok in tokens)
