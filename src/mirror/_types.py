"""Type descriptors and typed arrays.

A TypeDescriptor is a small reified description of a type. There are three
kinds: the closed set of primitives, single element arrays of another
descriptor, and references to ordinary Python classes.
"""

__all__ = [
    "TypeKind",
    "TypeDescriptor",
    "Array",
    "array_of",
    "type_of",
    "type_bool",
    "type_u8",
    "type_char",
    "type_i8",
    "type_i16",
    "type_i32",
    "type_i64",
    "type_f32",
    "type_f64",
    "type_object",
    "type_string",
    "type_type",
]

from enum import Enum

import mirror


class TypeKind(Enum):
    PRIMITIVE = "primitive"
    ARRAY = "array"
    REFERENCE = "reference"

    def __str__(self) -> str:
        return self.value


class TypeDescriptor:
    """Reified description of a type.

    Descriptors are immutable and compare by structure, so two descriptors
    built separately for the same type are equal. Prefer the builtin
    constants and the factory methods over calling the constructor.

    Args:
        kind: (TypeKind) Which kind of type this describes
        name: (str) Display name
        primitive: (Primitive | None) Primitive kind for primitive types
        element: (TypeDescriptor | None) Element type for array types
        pytype: (type | None) Python class for reference types

    Attributes:
        kind: (TypeKind) Which kind of type this describes
        name: (str) Display name, e.g. "i32", "i32[]" or "collections.OrderedDict"
        primitive: (Primitive | None) Primitive kind for primitive types
        element: (TypeDescriptor | None) Element type for array types
        pytype: (type | None) Python class for reference types
    """

    __slots__ = ("kind", "name", "primitive", "element", "pytype")

    def __init__(self, kind, name, primitive=None, element=None, pytype=None):
        self.kind = kind
        self.name = name
        self.primitive = primitive
        self.element = element
        self.pytype = pytype

    def __repr__(self):
        return f"TypeDescriptor<{self.name}>"

    def __str__(self):
        return self.name

    def __eq__(self, other):
        if not isinstance(other, TypeDescriptor):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self):
        return hash(self._key())

    def _key(self):
        return (self.kind, self.primitive, self.element, self.pytype)

    @property
    def is_primitive(self):
        """(bool) This is one of the primitive kinds."""
        return self.kind is TypeKind.PRIMITIVE

    @property
    def is_array(self):
        """(bool) This is an array type."""
        return self.kind is TypeKind.ARRAY

    @classmethod
    def of(cls, pytype):
        """Get the reference descriptor for a Python class.

        The classes behind the builtin descriptors (object, str and
        TypeDescriptor) return those builtin descriptors.

        Raises:
            TypeError: If pytype is not a class
        """
        if not isinstance(pytype, type):
            raise TypeError(f"Expected a class, got {pytype!r}")
        builtin = _builtin_references.get(pytype)
        if builtin is not None:
            return builtin
        return cls(TypeKind.REFERENCE, mirror.get_qualified_type_name(pytype), pytype=pytype)

    @classmethod
    def of_primitive(cls, primitive):
        """Get the builtin descriptor for a Primitive kind."""
        return _primitive_types[primitive]

    def is_instance(self, value):
        """Ordinary is-a check of a runtime value against this type.

        Primitive types have no direct instances; primitive values only
        appear boxed in their wrapper classes. Arrays accept an Array whose
        element type is assignable to this element type.
        """
        if self.kind is TypeKind.REFERENCE:
            return isinstance(value, self.pytype)
        if self.kind is TypeKind.ARRAY:
            return isinstance(value, Array) and self.element.is_assignable_from(value.element_type)
        return False

    def is_assignable_from(self, other):
        """Check if values of another descriptor are also values of this one.

        Primitives only match themselves. Reference types follow Python
        subclassing, and arrays are instances of Array. Arrays are covariant
        over reference element types only.
        """
        if other is None:
            return False
        if self == other:
            return True
        if self.kind is TypeKind.REFERENCE:
            if other.kind is TypeKind.REFERENCE:
                return issubclass(other.pytype, self.pytype)
            if other.kind is TypeKind.ARRAY:
                return issubclass(Array, self.pytype)
            return False
        if self.kind is TypeKind.ARRAY and other.kind is TypeKind.ARRAY:
            if other.element.is_primitive:
                return False
            return self.element.is_assignable_from(other.element)
        return False


class Array:
    """Immutable array of values with a declared element type.

    Every item must be assignable to the element type, checked with
    `is_assignable` when the array is built.

    Args:
        element_type: (TypeDescriptor) Declared element type
        items: (Iterable) Initial items

    Attributes:
        element_type: (TypeDescriptor) Declared element type
        items: (tuple) Array contents
    """

    __slots__ = ("element_type", "items")

    def __init__(self, element_type, items=()):
        mirror.argument_not_none(element_type, "element_type")
        items = tuple(items)
        for item in items:
            if not mirror.is_assignable(element_type, item):
                raise TypeError(f"{item!r} is not assignable to {element_type.name}")
        self.element_type = element_type
        self.items = items

    def __repr__(self):
        return f"Array<{self.element_type.name}>{list(self.items)!r}"

    def __len__(self):
        return len(self.items)

    def __iter__(self):
        return iter(self.items)

    def __getitem__(self, index):
        return self.items[index]

    def __eq__(self, other):
        if not isinstance(other, Array):
            return NotImplemented
        return self.element_type == other.element_type and self.items == other.items

    __hash__ = None


def array_of(element):
    """Get the descriptor for a one dimensional array of element."""
    mirror.argument_not_none(element, "element")
    return TypeDescriptor(TypeKind.ARRAY, f"{element.name}[]", element=element)


def type_of(value):
    """Get the runtime type descriptor of a value.

    Boxed primitive wrappers report their primitive type, Array values
    report their array type, and anything else reports the reference type
    of its actual class (a transparent proxy reports its own class here,
    not the type it stands in for). None has no type and returns None.
    """
    if value is None:
        return None
    cls = type(value)
    if cls is Array:
        return array_of(value.element_type)
    primitive = _wrapped_primitives.get(cls)
    if primitive is not None:
        return _primitive_types[primitive]
    return TypeDescriptor.of(cls)


_primitive_types = {
    prim: TypeDescriptor(TypeKind.PRIMITIVE, prim.value, primitive=prim)
    for prim in mirror.Primitive
}
_wrapped_primitives = {prim.wrapper: prim for prim in mirror.Primitive}

type_bool = _primitive_types[mirror.Primitive.BOOL]
type_u8 = _primitive_types[mirror.Primitive.U8]
type_char = _primitive_types[mirror.Primitive.CHAR]
type_i8 = _primitive_types[mirror.Primitive.I8]
type_i16 = _primitive_types[mirror.Primitive.I16]
type_i32 = _primitive_types[mirror.Primitive.I32]
type_i64 = _primitive_types[mirror.Primitive.I64]
type_f32 = _primitive_types[mirror.Primitive.F32]
type_f64 = _primitive_types[mirror.Primitive.F64]

type_object = TypeDescriptor(TypeKind.REFERENCE, "object", pytype=object)
type_string = TypeDescriptor(TypeKind.REFERENCE, "string", pytype=str)
type_type = TypeDescriptor(TypeKind.REFERENCE, "type", pytype=TypeDescriptor)

_builtin_references = {
    object: type_object,
    str: type_string,
    TypeDescriptor: type_type,
}
