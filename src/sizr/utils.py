"""Shared utility functions."""

from __future__ import annotations

import os
import re
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from pathlib import Path

_UNITS = ("B", "KB", "MB", "GB", "TB")
_MULTIPLIERS = {unit: 1024**i for i, unit in enumerate(_UNITS)}
_SIZE_RE = re.compile(r"^\s*(\d+(?:\.\d*)?|\.\d+)\s*([KMGT]?B)?\s*$", re.IGNORECASE)
_ONE_DECIMAL = Decimal("0.1")

TRUNCATION_MARKER = "..."


def xdg_config_home() -> Path:
    """Return XDG_CONFIG_HOME, defaulting to ~/.config."""
    return Path(os.environ.get("XDG_CONFIG_HOME", Path.home() / ".config"))


def bytes_to_human(size_bytes: int) -> str:
    """Convert byte count to a human-readable string.

    Binary (1024-based) units, one decimal place rounded half-up. Values
    under 1 KB are printed as whole bytes.
    """
    if size_bytes < 1024:
        return f"{size_bytes} B"

    index = 1
    while index < len(_UNITS) - 1 and size_bytes >= 1024 ** (index + 1):
        index += 1

    value = (Decimal(size_bytes) / _MULTIPLIERS[_UNITS[index]]).quantize(_ONE_DECIMAL, rounding=ROUND_HALF_UP)
    if value >= 1024 and index < len(_UNITS) - 1:
        index += 1
        value = (Decimal(size_bytes) / _MULTIPLIERS[_UNITS[index]]).quantize(_ONE_DECIMAL, rounding=ROUND_HALF_UP)
    return f"{value} {_UNITS[index]}"


def parse_size(text: str) -> int:
    """Parse a size string such as ``500``, ``1.5KB`` or ``2gb`` into bytes.

    Raises:
        ValueError: if ``text`` does not match the size grammar.
    """
    match = _SIZE_RE.match(text)
    if match is None:
        raise ValueError(f"invalid size {text!r}")
    number, unit = match.groups()
    try:
        value = Decimal(number)
    except InvalidOperation as e:
        raise ValueError(f"invalid size {text!r}") from e
    multiplier = _MULTIPLIERS[(unit or "B").upper()]
    return int(value * multiplier)


def truncate_path(path: str, width: int) -> str:
    """Keep the tail of ``path`` so it fits in ``width`` characters."""
    if len(path) <= width:
        return path
    keep = width - len(TRUNCATION_MARKER)
    return TRUNCATION_MARKER + path[-keep:]


def format_elapsed_ms(milliseconds: float) -> str:
    """Format an elapsed time in milliseconds with two decimals."""
    return f"{milliseconds:.2f} ms"
