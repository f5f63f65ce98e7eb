"""Primitive kinds and their boxed wrapper classes.

Primitive values have no direct Python representation, so each primitive
kind is paired with the Python class that carries (boxes) its values. Where
a builtin class already holds exactly the primitive's value set it is used
directly (bool, float). The other kinds get small fixed range subclasses
of int, float and str.
"""

__all__ = [
    "Primitive",
    "Byte",
    "SByte",
    "Int16",
    "Int32",
    "Int64",
    "Single",
    "Char",
]

import math
import struct
from enum import Enum


class _BoxedInt(int):
    """Fixed width integer wrapper.

    Subclasses define the inclusive range with `minimum` and `maximum`.
    Arithmetic produces plain ints; only construction is range checked.
    Numbers with a fractional part are rejected rather than truncated.
    """

    __slots__ = ()
    minimum = 0
    maximum = 0

    def __new__(cls, value=0):
        if not isinstance(value, (int, str, bytes)) and int(value) != value:
            raise ValueError(f"{value!r} is not integral for {cls.__name__}")
        self = super().__new__(cls, value)
        if not cls.minimum <= self <= cls.maximum:
            raise OverflowError(f"{int(self)} out of range for {cls.__name__}")
        return self

    def __repr__(self):
        return f"{type(self).__name__}({int(self)})"


class Byte(_BoxedInt):
    """Boxed unsigned 8-bit integer."""
    __slots__ = ()
    minimum = 0
    maximum = 0xFF


class SByte(_BoxedInt):
    """Boxed signed 8-bit integer."""
    __slots__ = ()
    minimum = -0x80
    maximum = 0x7F


class Int16(_BoxedInt):
    """Boxed signed 16-bit integer."""
    __slots__ = ()
    minimum = -0x8000
    maximum = 0x7FFF


class Int32(_BoxedInt):
    """Boxed signed 32-bit integer."""
    __slots__ = ()
    minimum = -0x80000000
    maximum = 0x7FFFFFFF


class Int64(_BoxedInt):
    """Boxed signed 64-bit integer."""
    __slots__ = ()
    minimum = -0x8000000000000000
    maximum = 0x7FFFFFFFFFFFFFFF


class Single(float):
    """Boxed 32-bit float.

    The value is rounded through IEEE single precision, values too large
    for single precision raise OverflowError.
    """

    __slots__ = ()

    def __new__(cls, value=0.0):
        value = float(value)
        rounded = struct.unpack("f", struct.pack("f", value))[0]
        if math.isinf(rounded) and not math.isinf(value):
            raise OverflowError(f"{value!r} out of range for Single")
        return super().__new__(cls, rounded)

    def __repr__(self):
        return f"Single({float(self)!r})"


class Char(str):
    """Boxed single character.

    Accepts a one character string or an integer code point.
    """

    __slots__ = ()

    def __new__(cls, value):
        if isinstance(value, int):
            value = chr(value)
        if len(value) != 1:
            raise ValueError(f"Char requires exactly one character, got {value!r}")
        return super().__new__(cls, value)

    def __repr__(self):
        return f"Char({str(self)!r})"


class Primitive(Enum):
    """Closed set of primitive kinds.

    The value of each member is the keyword used for it in type names.
    """

    BOOL = "bool"
    U8 = "u8"
    CHAR = "char"
    I8 = "i8"
    I16 = "i16"
    I32 = "i32"
    I64 = "i64"
    F32 = "f32"
    F64 = "f64"

    def __str__(self) -> str:
        return self.value

    @property
    def wrapper(self) -> type:
        """(type) Python class that carries boxed values of this kind."""
        return _WRAPPERS[self]

    @classmethod
    def from_keyword(cls, keyword):
        """Get the primitive for a type name keyword, or None."""
        return _KEYWORDS.get(keyword)


_WRAPPERS = {
    Primitive.BOOL: bool,
    Primitive.U8: Byte,
    Primitive.CHAR: Char,
    Primitive.I8: SByte,
    Primitive.I16: Int16,
    Primitive.I32: Int32,
    Primitive.I64: Int64,
    Primitive.F32: Single,
    Primitive.F64: float,
}

_KEYWORDS = {prim.value: prim for prim in Primitive}
