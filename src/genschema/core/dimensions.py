"""Normalisation helpers for the numeric-or-label resolution fields.

``Resolution.width``, ``Resolution.height`` and ``Resolution.dpi`` accept
either a raw number or one of a fixed set of label strings such as
``"4096"`` or ``"300 (Standard Print)"``.  Consumers that need arithmetic
must normalise first; :func:`parse_dimension` is the one routine shared by
all three fields.

The aspect ratio is free text and is never cross-checked at construction.
:func:`aspect_ratio_mismatch` offers a soft check that reports (and logs) a
disagreement with the pixel dimensions without raising.
"""

from __future__ import annotations

import logging
import re
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from genschema.core.models import Resolution

logger = logging.getLogger(__name__)

# Leading number, optionally signed and with a decimal part.  Anything after
# it (units, parenthetical labels) is ignored.
_LEADING_NUMBER = re.compile(r"^\s*([+-]?\d+(?:\.\d+)?)")

# First "a:b" pair in the text.  Decimals are allowed on both sides so that
# cinematic labels such as "2.39:1" parse.
_RATIO = re.compile(r"(\d+(?:\.\d+)?)\s*:\s*(\d+(?:\.\d+)?)")


class DimensionParseError(ValueError):
    """Raised when a dimension label has no leading number."""

    pass


def parse_dimension(value: int | float | str) -> int | float:
    """Normalise a width, height or DPI value to a number.

    Numbers are returned unchanged.  Strings have their leading number
    parsed and any suffix stripped, so ``"300 (Standard Print)"`` becomes
    ``300`` and ``"4096"`` becomes ``4096``.  Whole numbers come back as
    ``int``.

    Args:
        value: A raw number or a label string.

    Returns:
        The numeric value.

    Raises:
        DimensionParseError: If ``value`` is a string that does not start
            with a number.
        TypeError: If ``value`` is neither a number nor a string.
    """
    if isinstance(value, bool):
        raise TypeError(f"Expected a number or label string, got {value!r}")
    if isinstance(value, (int, float)):
        return value
    if not isinstance(value, str):
        raise TypeError(f"Expected a number or label string, got {type(value).__name__}")

    match = _LEADING_NUMBER.match(value)
    if match is None:
        raise DimensionParseError(f"No leading number in dimension label: {value!r}")

    text = match.group(1)
    if "." in text:
        return float(text)
    return int(text)


def parse_aspect_ratio(text: str) -> float | None:
    """Extract the numeric ratio from an aspect ratio description.

    The first ``a:b`` pair in the text is used, e.g. ``"16:9"`` gives
    ``1.777...`` and ``"Golden Ratio (~1.618:1)"`` gives ``1.618``.

    Returns:
        ``a / b``, or None when the text contains no usable pair or either
        side is zero.
    """
    match = _RATIO.search(text)
    if match is None:
        return None

    numerator = float(match.group(1))
    denominator = float(match.group(2))
    if numerator == 0 or denominator == 0:
        return None
    return numerator / denominator


def aspect_ratio_mismatch(resolution: Resolution, tolerance: float = 0.01) -> str | None:
    """Compare a resolution's aspect ratio text against its pixel size.

    This is a soft check.  It never raises; a disagreement is logged at
    WARNING level and described in the returned message.

    Args:
        resolution: The resolution to inspect.
        tolerance: Allowed relative difference between the declared ratio and
            ``width / height``.

    Returns:
        A warning message, or None if the values agree or cannot be compared.
    """
    declared = parse_aspect_ratio(resolution.aspect_ratio)
    if declared is None:
        logger.debug(f"Aspect ratio {resolution.aspect_ratio!r} has no numeric ratio to check")
        return None

    try:
        width, height = resolution.pixel_size()
    except (DimensionParseError, TypeError) as e:
        logger.debug(f"Skipping aspect ratio check: {e}")
        return None

    if width == 0 or height == 0 or declared == 0:
        return None

    actual = width / height
    if abs(actual - declared) / declared <= tolerance:
        return None

    message = (
        f"Aspect ratio {resolution.aspect_ratio!r} ({declared:.3f}) does not match "
        f"{width}x{height} ({actual:.3f})"
    )
    logger.warning(message)
    return message
