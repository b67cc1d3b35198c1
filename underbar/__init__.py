"""
'                    _           _
'    _  _ _ _  __| |___ _ _| |__  __ _ _ _
'   | || | ' \/ _` / -_) '_| '_ \/ _` | '_|
'    \_,_|_||_\__,_\___|_| |_.__/\__,_|_|
'   ______________________________________
"""

# expose the iteration core
from .extensions.core import each, index_of, first, last, STOP

# expose the derived operators
from .extensions.derived import (
    filter_,
    reject,
    uniq,
    map_,
    pluck,
    invoke,
    reduce,
    contains,
    every,
    some
)

# merge utilities and decorators
from .extensions.objects import extend, defaults
from .extensions.functions import once, memoize, delay, Once, Memoized

# sequence and set algorithms
from .extensions.utility import shuffle, flatten
from .extensions.sorting import sort_by
from .extensions.zip import zip_
from .extensions.set import intersection

# supporting types and settings
from .types import (
    MISSING,
    SharedCallable,
    NamedMethod,
    UnderbarError,
    MissingMethodError
)
from .config import Settings, configure, get_settings, reset

# define what `import *` does
__all__ = [
    "each",
    "index_of",
    "first",
    "last",
    "STOP",
    "filter_",
    "reject",
    "uniq",
    "map_",
    "pluck",
    "invoke",
    "reduce",
    "contains",
    "every",
    "some",
    "extend",
    "defaults",
    "once",
    "memoize",
    "delay",
    "Once",
    "Memoized",
    "shuffle",
    "flatten",
    "sort_by",
    "zip_",
    "intersection",
    "MISSING",
    "SharedCallable",
    "NamedMethod",
    "UnderbarError",
    "MissingMethodError",
    "Settings",
    "configure",
    "get_settings",
    "reset"
]
