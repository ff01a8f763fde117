"""Numeric list parsing for config values.

Config sources store curves as lists of numeric strings. A value that cannot
be parsed becomes 0.0, which makes it indistinguishable from a measured zero
through the public API. `parse_numeric_list_checked` keeps the failed
positions for validation code that needs to tell the two apart.
"""

from __future__ import annotations

import logging
from typing import Any, Iterable, Optional

import numpy as np

logger = logging.getLogger(__name__)


def _to_float(value: Any) -> Optional[float]:
    """Parse one value, None if it is not numeric."""
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return float(value)
    try:
        return float(str(value).strip())
    except ValueError:
        return None


def parse_numeric_list_checked(values: Iterable[Any]) -> tuple[np.ndarray, list[int]]:
    """Parse values into a float array, reporting parse failures.

    Args:
        values: Numeric strings or numbers.

    Returns:
        Tuple of (parsed array with failures set to 0.0, indices that failed).
    """
    parsed = []
    failed = []
    for index, value in enumerate(values):
        number = _to_float(value)
        if number is None:
            failed.append(index)
            number = 0.0
        parsed.append(number)
    return np.array(parsed, dtype=np.float64), failed


def parse_numeric_list(values: Iterable[Any]) -> np.ndarray:
    """Parse values into a float array; unparsable entries become 0.0."""
    parsed, failed = parse_numeric_list_checked(values)
    if failed:
        logger.debug("%d value(s) could not be parsed and were set to 0.0", len(failed))
    return parsed
