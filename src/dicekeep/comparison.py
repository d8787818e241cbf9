"""Three-way comparisons over rolled values.

A comparison is any callable `compare(a, b)` returning a
`ComparisonResult`. Unlike Python's rich comparisons it need not be
total: `INCOMPARABLE` is a legal answer and means no order can be
established between the two values.
"""

import enum
import math
import numbers
from typing import Any, Callable


class ComparisonResult(enum.Enum):
    LESS = -1
    EQUAL = 0
    GREATER = 1
    INCOMPARABLE = None

    def reversed(self):
        if self is ComparisonResult.LESS:
            return ComparisonResult.GREATER
        if self is ComparisonResult.GREATER:
            return ComparisonResult.LESS
        return self


LESS = ComparisonResult.LESS
EQUAL = ComparisonResult.EQUAL
GREATER = ComparisonResult.GREATER
INCOMPARABLE = ComparisonResult.INCOMPARABLE

Comparison = Callable[[Any, Any], ComparisonResult]


def as_comparison_result(value) -> ComparisonResult:
    """Coerce the raw return of a comparison to a `ComparisonResult`.

    Old style `cmp` functions returning a signed number (or `None` for
    "cannot compare") are accepted as well as the enum itself.

    Args:
      value: The value returned by a comparison.

    Returns:
      The matching `ComparisonResult`.

    Raises:
      TypeError: `value` is neither a `ComparisonResult`, `None` nor a real number.
    """
    if isinstance(value, ComparisonResult):
        return value
    if value is None:
        return INCOMPARABLE
    if isinstance(value, numbers.Real) and not isinstance(value, bool):
        if math.isnan(value):
            return INCOMPARABLE
        if value < 0:
            return LESS
        if value > 0:
            return GREATER
        return EQUAL
    raise TypeError(f"Comparison returned {value!r}, not a comparison result")


def default_comparison(a, b) -> ComparisonResult:
    """Natural ordering using identity, `==` and `<`.

    Values the operators cannot order, either because neither `a < b`
    nor `b < a` holds for unequal values (as with NaN) or because the
    operators raise `TypeError` (as with `1 < "A"`), are `INCOMPARABLE`.
    """
    try:
        if a is b or a == b:
            return EQUAL
        if a < b:
            return LESS
        if b < a:
            return GREATER
    except TypeError:
        pass
    return INCOMPARABLE


def _hex_kind(value):
    if isinstance(value, bool):
        return None
    if isinstance(value, str):
        return 1
    if isinstance(value, numbers.Real):
        return 0
    return None


def hex_digit_comparison(a, b) -> ComparisonResult:
    """Ordering of hex digits where every numeric digit ranks below every letter.

    >>> hex_digit_comparison(9, "A")
    <ComparisonResult.LESS: -1>
    """
    kind_a, kind_b = _hex_kind(a), _hex_kind(b)
    if kind_a is None or kind_b is None:
        return INCOMPARABLE
    if kind_a != kind_b:
        return LESS if kind_a < kind_b else GREATER
    return default_comparison(a, b)


def reversed_comparison(compare: Comparison) -> Comparison:
    """Returns the comparison ordering values the opposite way to `compare`."""
    def compare_reversed(a, b):
        return compare(b, a)

    return compare_reversed
