"""Text encodings of genotypes and the key/value session file format."""

from __future__ import annotations

import math
import re
from typing import Dict, Iterable, List

_SCALE = 10000
_SEPARATOR = "|"
_ATOI = re.compile(r"\s*([+-]?\d+)")
_LINE_BREAK = re.compile(r"\r\n|\r|\n")


def compress_genotype(genotype: Iterable[float]) -> str:
    """Encode genes as integers scaled by 10000, joined by ``|``."""
    return _SEPARATOR.join(str(math.floor(gene * _SCALE + 0.5)) for gene in genotype)


def _atoi(text: str) -> int:
    match = _ATOI.match(text)
    return int(match.group(1)) if match else 0


def decompress_genotype(data: str) -> List[float]:
    """Decode a genotype written by :func:`compress_genotype`.

    Empty fields are skipped; a field that is not a number reads as zero.
    """
    return [_atoi(part) * 0.0001 for part in data.split(_SEPARATOR) if part]


def parse_key_values(text: str) -> Dict[str, str]:
    """Read ``key=value`` lines; lines without ``=`` are ignored, later keys win."""
    parsed: Dict[str, str] = {}
    for line in _LINE_BREAK.split(text):
        key, sep, value = line.partition("=")
        if sep:
            parsed[key] = value
    return parsed


def _sanitize_float(value: float) -> str:
    if value == 0.0:
        value = 0.0
    text = f"{value:f}"
    if not math.isfinite(value) or "." not in text:
        return text
    whole, _, fraction = text.partition(".")
    fraction = fraction.rstrip("0") or "0"
    return f"{whole}.{fraction}"


def format_genotype(genotype: Iterable[float]) -> str:
    """Render a genotype as a parenthesised, comma separated list of numbers."""
    return "(" + ",".join(_sanitize_float(gene) for gene in genotype) + ")"