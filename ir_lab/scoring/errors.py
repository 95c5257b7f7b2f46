"""
Parameter validation for the scoring pipeline.

Slider values arrive from the visualizers as numbers or numeric strings.
Anything that would turn into NaN inside a formula is rejected up front
instead of flowing through the scores.
"""

import math
from typing import Any


class InvalidParameterError(ValueError):
    """A scoring parameter is missing, non-numeric or not finite"""

    def __init__(self, name: str, value: Any, reason: str = "must be a finite number"):
        self.name = name
        self.value = value
        self.reason = reason
        super().__init__(f"Invalid parameter {name}={value!r}: {reason}")


def coerce_parameter(name: str, value: Any) -> float:
    """
    Convert a scoring parameter to float.

    Args:
        name: Parameter name (for the error message)
        value: int, float or numeric string

    Returns:
        The value as a finite float

    Raises:
        InvalidParameterError: bool, None, non-numeric, NaN or infinite values

    Examples:
        >>> coerce_parameter("k1", "1.2")
        1.2
        >>> coerce_parameter("b", "abc")
        Traceback (most recent call last):
        ...
        ir_lab.scoring.errors.InvalidParameterError: Invalid parameter b='abc': must be a finite number
    """
    # bool is an int subclass; a checkbox value is never a slider value
    if isinstance(value, bool) or value is None:
        raise InvalidParameterError(name, value)

    try:
        number = float(value)
    except (TypeError, ValueError) as e:
        raise InvalidParameterError(name, value) from e

    if not math.isfinite(number):
        raise InvalidParameterError(name, value)

    return number
