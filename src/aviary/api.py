## aviary — Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘

from .types import Pinned, Curried, Composition, Overloaded
from .errors import *
from .operators import compose, curry, pin
from .combinators import Trajectory, FixedPoint
from .builtins import load_builtins_catalog

_CATALOG = load_builtins_catalog()
catalog = _CATALOG


def lookup(name: str):
    """Find a catalog entry by symbol (`B¹`), ASCII name (`B1`) or bird name (`blackbird`)."""
    return _CATALOG.get(name)

def __getattr__(name):
    if name in _CATALOG:
        return _CATALOG.get(name)
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
