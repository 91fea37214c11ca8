# -*- coding: utf-8 -*
"""Lazily evaluated sequence combinators.

Counters, cyclic replay, accumulation, filtering, chaining (also of
heterogeneous inputs) and grouping, all pulled one element at a time.

See ``dir(gentools)`` and submodule docstrings for more.
"""

__version__ = '0.1.0'

from .collections import *  # noqa: F401, F403
from .combine import *  # noqa: F401, F403
from .filters import *  # noqa: F401, F403
from .fold import *  # noqa: F401, F403
from .lazy import *  # noqa: F401, F403
from .sources import *  # noqa: F401, F403
from .typecheck import *  # noqa: F401, F403
