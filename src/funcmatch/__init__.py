"""funcmatch — PyHamcrest matchers for functional data types.

Matchers for Option, Try, Either and immutable collections, with precise
mismatch messages. Factories live in three public modules:

    from funcmatch.value import is_empty
    from funcmatch.control import is_defined, is_success, has_failed_with, is_right
    from funcmatch.collection import has_size, contains_in_any_order, all_match

Matcher classes and the capability protocols are exported flat from this
module.
"""

__version__ = "0.1.0"

from funcmatch._collection import (
    AllMatch,
    ContainsAny,
    ContainsInAnyOrder,
    EmptyCollection,
    HasSize,
    SizeMatches,
)
from funcmatch._control import (
    DefinedOption,
    EmptyOption,
    FailedTry,
    FailedTryWith,
    LeftEither,
    RightEither,
    SuccessfulTry,
)
from funcmatch._matcher import MatcherError, SubjectMatcher
from funcmatch._types import Either, Option, Traversable, Try, Value
from funcmatch._value import EmptyValue

__all__ = [
    # Protocols
    "Value",
    "Option",
    "Try",
    "Either",
    "Traversable",
    # Base
    "SubjectMatcher",
    "MatcherError",
    # Value matchers
    "EmptyValue",
    # Control matchers
    "DefinedOption",
    "EmptyOption",
    "SuccessfulTry",
    "FailedTry",
    "FailedTryWith",
    "RightEither",
    "LeftEither",
    # Collection matchers
    "EmptyCollection",
    "HasSize",
    "SizeMatches",
    "ContainsAny",
    "ContainsInAnyOrder",
    "AllMatch",
]
