"""Keep-best, keep-worst and keep-last policies for dice rolls."""

from .comparison import (
    ComparisonResult,
    EQUAL,
    GREATER,
    INCOMPARABLE,
    LESS,
    as_comparison_result,
    default_comparison,
    hex_digit_comparison,
    reversed_comparison,
)
from .combiners import (
    Combiner,
    KEEP_BEST,
    KEEP_NEW,
    KEEP_WORST,
    KeepBest,
    KeepLast,
    KeepNewest,
    KeepSingleBest,
    KeepSingleWorst,
    KeepWorst,
    RankingCombiner,
    SingleValueCombiner,
)
from .die import DicePool, SimpleDie, create_die_sides, create_sides
from .exceptions import (
    ComparabilityError,
    ConfigurationError,
    DiceError,
    InvalidRollError,
    InvalidValueError,
)
from .search import (
    indirect_binary_search,
    indirect_binary_search_with_duplicates,
    insertion_point,
)
from .utils import configure_logging
