"""Binary search over an array of indices into a read only source.

The searched array holds positions into `source`, sorted so that
`source[sorted_indexes[i]]` is ascending under the comparison. Neither
`source` nor `sorted_indexes` is modified; callers insert the returned
position themselves.

Results use the encoding common to both searches:

* a non-negative result is the position of an entry equal to the seeked
  value;
* a negative result `r` marks a miss, and `-1 - r` is where the seeked
  value has to be inserted to keep the indexes sorted;
* `None` means some comparison on the search path was `INCOMPARABLE`.
"""

import logging

from .comparison import (
    EQUAL,
    GREATER,
    INCOMPARABLE,
    as_comparison_result,
    default_comparison,
)


def _check_window(sorted_indexes, start, end):
    if end is None:
        end = len(sorted_indexes)
    if start < 0:
        raise IndexError(f"Invalid start index {start}")
    if end > len(sorted_indexes):
        raise IndexError(f"Invalid end index {end}")
    return start, end


def indirect_binary_search(source, sorted_indexes, seeked, start=0, end=None,
                           compare=default_comparison):
    """Finds `seeked` among the values referenced by `sorted_indexes[start:end]`.

    Args:
      source: The values. Only read.
      sorted_indexes: Positions into `source`, ascending by value under `compare`.
      seeked: The value looked for.
      start: First position of `sorted_indexes` searched.
      end: One past the last position searched. Defaults to the length of
        `sorted_indexes`.
      compare: The comparison ordering the values.

    Returns:
      The position of an equal entry, `-1 - insertion_position` if there is
      none, or `None` if `seeked` could not be compared with an entry.

    Raises:
      IndexError: The search window lies outside `sorted_indexes`.
    """
    start, end = _check_window(sorted_indexes, start, end)

    while start < end:
        cursor = (start + end) // 2
        cmp = as_comparison_result(compare(source[sorted_indexes[cursor]], seeked))
        if cmp is INCOMPARABLE:
            logging.debug("Cannot compare %r with entry %s.", seeked, cursor)
            return None
        if cmp is EQUAL:
            return cursor
        if cmp is GREATER:
            end = cursor
        else:
            start = cursor + 1

    return -1 - start


def _is_equal(compare, a, b):
    return as_comparison_result(compare(a, b)) is EQUAL


def indirect_binary_search_with_duplicates(source, sorted_indexes, seeked,
                                           start=0, end=None,
                                           compare=default_comparison,
                                           return_first_position=False):
    """Like `indirect_binary_search` but resolves runs of equal entries.

    When `seeked` is found, the returned position is moved to the first or
    the last entry of the run of entries equal to it, depending on
    `return_first_position`. Insertion markers are returned unchanged.
    The walk along the run never leaves the `[start, end)` window.
    """
    start, end = _check_window(sorted_indexes, start, end)
    position = indirect_binary_search(source, sorted_indexes, seeked, start, end, compare)
    if position is None or position < 0:
        return position

    found = source[sorted_indexes[position]]
    if return_first_position:
        while (position > start
               and _is_equal(compare, source[sorted_indexes[position - 1]], found)):
            position -= 1
    else:
        while (position < end - 1
               and _is_equal(compare, source[sorted_indexes[position + 1]], found)):
            position += 1
    return position


def insertion_point(position):
    """Where to insert a new entry given a search result.

    A found position yields the slot right after it, so a new entry lands
    after an equal one. An insertion marker is decoded.
    """
    if position is None:
        raise ValueError("No insertion point for an incomparable value")
    return position + 1 if position >= 0 else -1 - position
