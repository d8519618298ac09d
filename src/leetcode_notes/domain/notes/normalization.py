"""Normalization of free-form runtime and memory values."""

import math
import re

RUNTIME_PATTERN = re.compile(
    r"([0-9]+(?:\.[0-9]+)?)\s*(ms|milliseconds?|s|sec|seconds?)?", re.IGNORECASE
)
MEMORY_PATTERN = re.compile(r"([0-9]+(?:\.[0-9]+)?)\s*(b|bytes?|kb|mb|gb)?", re.IGNORECASE)

# Unit-less memory values are guessed by magnitude. These thresholds are
# heuristics for raw upstream counts, not unit boundaries.
RAW_BYTES_THRESHOLD = 1_000_000
RAW_KILOBYTES_THRESHOLD = 10_000

_MEMORY_TO_MB = {
    "b": 1 / (1024 * 1024),
    "byte": 1 / (1024 * 1024),
    "bytes": 1 / (1024 * 1024),
    "kb": 1 / 1024,
    "mb": 1.0,
    "gb": 1024.0,
}


def _format_decimal(value: float) -> str:
    """Two decimal places with trailing zeros trimmed: 1.50 -> 1.5, 1.00 -> 1."""
    text = f"{value:.2f}".rstrip("0").rstrip(".")
    if text in ("", "-0"):
        return "0"
    return text


def _raw_text(raw: str | int | float | None) -> str:
    if raw is None:
        return ""
    return str(raw).strip()


def format_runtime(raw: str | int | float | None) -> str:
    """
    Normalize a runtime value to milliseconds.

    "56 ms" -> "56 ms", "1.2 s" -> "1200 ms", "3.456 ms" -> "3.46 ms".
    Text without any number is returned as is.
    """
    text = _raw_text(raw)
    if not text:
        return ""

    match = RUNTIME_PATTERN.search(text)
    if not match:
        return text

    value = float(match.group(1))
    unit = (match.group(2) or "").lower()

    ms = value * 1000 if unit.startswith("s") else value

    if ms >= 10:
        return f"{math.floor(ms + 0.5)} ms"
    return f"{_format_decimal(ms)} ms"


def format_memory(raw: str | int | float | None) -> str:
    """
    Normalize a memory value to megabytes.

    "42.1 MB" -> "42.1 MB", "1024 KB" -> "1 MB". Unit-less values above
    1,000,000 are read as bytes, above 10,000 as kilobytes, otherwise as
    megabytes. Text without any number is returned as is.
    """
    text = _raw_text(raw)
    if not text:
        return ""

    match = MEMORY_PATTERN.search(text)
    if not match:
        return text

    value = float(match.group(1))
    unit = (match.group(2) or "").lower()

    if unit:
        mb = value * _MEMORY_TO_MB[unit]
    elif value > RAW_BYTES_THRESHOLD:
        mb = value / (1024 * 1024)
    elif value > RAW_KILOBYTES_THRESHOLD:
        mb = value / 1024
    else:
        mb = value

    return f"{_format_decimal(mb)} MB"
