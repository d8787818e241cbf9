"""Checkers for integer, digit and letter die values.

Each checker returns the checked value unchanged when it is valid and
raises `InvalidValueError` otherwise.
"""

import math
import numbers

from .comparison import EQUAL, GREATER, LESS, as_comparison_result, default_comparison
from .exceptions import InvalidValueError

INVALID_INTEGER_MESSAGE = "Value was not an integer"
INVALID_DIGIT_MESSAGE = "Invalid digit"
INVALID_LETTER_MESSAGE = "Invalid letter"
INVALID_LETTER_DIGIT_MESSAGE = "Invalid letter digit"
INVALID_HEX_DIGIT_MESSAGE = "Invalid hex digit"


def check_integer(value, allow_infinity=False, message=INVALID_INTEGER_MESSAGE,
                  constraint=None):
    """Checks that `value` is an integer.

    `bool` is not accepted even though it subclasses `int`. numpy integers
    are accepted.

    Args:
      value: The checked value.
      allow_infinity: Whether positive and negative float infinity pass.
      message: The message of the raised error.
      constraint: An extra predicate the value has to satisfy.

    Returns:
      `value`.

    Raises:
      InvalidValueError: `value` is not an integer or fails `constraint`.
    """
    if isinstance(value, bool):
        raise InvalidValueError(message)
    if isinstance(value, numbers.Integral):
        pass
    elif allow_infinity and isinstance(value, float) and math.isinf(value):
        pass
    else:
        raise InvalidValueError(message)
    if constraint is not None and not constraint(value):
        raise InvalidValueError(message)
    return value


def _with_constraint(test, constraint):
    if constraint is None:
        return test
    return lambda value: test(value) and constraint(value)


def check_negative_integer(value, message=INVALID_INTEGER_MESSAGE, constraint=None):
    return check_integer(value, message=message,
                         constraint=_with_constraint(lambda v: v < 0, constraint))


def check_positive_integer(value, message=INVALID_INTEGER_MESSAGE, constraint=None):
    return check_integer(value, message=message,
                         constraint=_with_constraint(lambda v: v > 0, constraint))


def check_non_negative_integer(value, message=INVALID_INTEGER_MESSAGE, constraint=None):
    return check_integer(value, message=message,
                         constraint=_with_constraint(lambda v: v >= 0, constraint))


def check_zero(value, message=INVALID_INTEGER_MESSAGE, constraint=None):
    return check_integer(value, message=message,
                         constraint=_with_constraint(lambda v: v == 0, constraint))


def check_digit(value, message=INVALID_DIGIT_MESSAGE):
    """Checks that `value` is a decimal digit, an integer from 0 to 9."""
    return check_integer(value, message=message, constraint=lambda v: 0 <= v < 10)


def check_letter(value, max_length=1, rejected=(), constraint=None,
                 message=INVALID_LETTER_MESSAGE):
    """Checks that `value` is a non-empty string of at most `max_length` characters.

    Strings listed in `rejected` and strings failing `constraint` are not
    letters.
    """
    try:
        check_integer(max_length, constraint=lambda v: v > 0)
    except InvalidValueError as exc:
        raise TypeError(f"Invalid letter checker max_length {max_length!r}") from exc

    if (isinstance(value, str)
            and 0 < len(value) <= max_length
            and value not in rejected
            and (constraint is None or constraint(value))):
        return value
    raise InvalidValueError(message)


def check_letter_digit(value, first="A", last="Z", excluded=(),
                       compare=default_comparison, message=INVALID_LETTER_DIGIT_MESSAGE):
    """Checks that `value` is a letter within `first`..`last` under `compare`."""
    letter = check_letter(value, message=f"{message} - Invalid letter {value!r}")
    if (as_comparison_result(compare(first, letter)) in (LESS, EQUAL)
            and as_comparison_result(compare(last, letter)) in (GREATER, EQUAL)
            and letter not in excluded):
        return letter
    raise InvalidValueError(f"{message} - Invalid letter digit {value!r}")


def check_hex_digit(value):
    """Checks that `value` is a hex digit: an integer 0-9 or a letter "A"-"F"."""
    if isinstance(value, str):
        return check_letter_digit(value, first="A", last="F",
                                  message=INVALID_HEX_DIGIT_MESSAGE)
    return check_digit(value, message=INVALID_HEX_DIGIT_MESSAGE)
