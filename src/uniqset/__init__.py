from ._exceptions import (
    GeneratorCallableError,
    InvalidArgumentError,
    NoneArgumentError,
    NotCallableError,
    NotDeparsableError,
    NotSetLikeError,
)
from ._operations import (
    difference,
    every,
    exists,
    filter,
    fold,
    fold_right,
    intersect,
    is_empty,
    is_proper_subset_of,
    is_proper_superset_of,
    is_subset_of,
    is_superset_of,
    map,
    partition,
    to_dict,
    to_list,
    union,
)
from ._parser import deparse, parse_set
from ._unique_set import UniqueSet
