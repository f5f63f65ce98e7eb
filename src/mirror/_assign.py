"""Assignability checks and simple type classification."""

__all__ = [
    "is_assignable",
    "is_assignable_and_not_transparent_proxy",
    "is_simple_property",
    "is_primitive_array",
]

import logging

import mirror


logger = logging.getLogger(__name__)


def is_assignable(target_type, value, inspector=None):
    """Check if a value can be assigned to the target type.

    This is the check used when setting values by reflection, such as
    resolving constructor arguments by declared parameter type. A boxed
    primitive is assignable to its primitive type, so an Int32 value
    satisfies an `i32` parameter.

    Transparent proxies pass every ordinary type check, so they are
    resolved first. A proxy with a RemotingTypeInfo capability decides for
    itself. Otherwise the type it stands in for replaces the target, and a
    proxy that cannot resolve a type is never assignable.

    Args:
        target_type: (TypeDescriptor) Type being assigned to
        value: Value being assigned, may be None
        inspector: (ProxyInspector | None) Remoting queries, defaults to
            `default_inspector`

    Returns:
        (bool) True if the value is assignable to the type

    Raises:
        ArgumentNullError: If target_type is None
    """
    mirror.argument_not_none(target_type, "target_type")
    if not target_type.is_primitive and value is None:
        return True

    if inspector is None:
        inspector = mirror.default_inspector
    if inspector.is_transparent_proxy(value):
        capability = inspector.cast_capability(value)
        if capability is not None:
            verdict = capability.can_cast_to(target_type, value)
            logger.debug("Proxy cast to %s decided by %r: %s", target_type, capability, verdict)
            return verdict
        target_type = inspector.proxied_type(value)
        if target_type is None:
            logger.debug("Cannot resolve proxied type of %r", value)
            return False

    if target_type.is_instance(value):
        return True
    return target_type.is_primitive and type(value) is target_type.primitive.wrapper


def is_assignable_and_not_transparent_proxy(target_type, value, inspector=None):
    """Check a value is assignable to the type and is not a transparent proxy.

    Used where any remote stand-in must be rejected, even one whose type
    would be compatible.
    """
    if inspector is None:
        inspector = mirror.default_inspector
    if inspector.is_transparent_proxy(value):
        return False
    return is_assignable(target_type, value, inspector)


def is_simple_property(type_):
    """Check if a type is a "simple" property type.

    Simple types are primitives, strings, type descriptors and arrays of
    those. These are the properties checked by a "simple" dependency check.

    Raises:
        ArgumentNullError: If type_ is None
    """
    mirror.argument_not_none(type_, "type_")
    return (
        type_.is_primitive
        or type_ == mirror.type_string
        or type_ == _string_array
        or is_primitive_array(type_)
        or type_ == mirror.type_type
        or type_ == _type_array
    )


def is_primitive_array(type_):
    """Check if a type is an array of bool, i8, char, i16, i32, i64, f32 or f64.

    Unsigned byte arrays (u8[]) are not included.
    """
    return type_ in _primitive_arrays


_string_array = mirror.array_of(mirror.type_string)
_type_array = mirror.array_of(mirror.type_type)
_primitive_arrays = frozenset(
    mirror.array_of(mirror.TypeDescriptor.of_primitive(prim))
    for prim in (
        mirror.Primitive.BOOL,
        mirror.Primitive.I8,
        mirror.Primitive.CHAR,
        mirror.Primitive.I16,
        mirror.Primitive.I32,
        mirror.Primitive.I64,
        mirror.Primitive.F32,
        mirror.Primitive.F64,
    )
)
