"""
Mirror type compatibility helpers

Decide whether runtime values can be assigned to reified types, seeing
through transparent proxies and treating boxed primitives as their
primitive types. Also small helpers for classifying simple property
types, indexing forward-only iterators and formatting object identity.
"""

__version__ = "0.1.0"


from ._error import *
from ._assert import *
from ._primitive import *
from ._objects import *
from ._types import *
from ._remoting import *
from ._assign import *
from ._sequence import *
from ._typename import *
