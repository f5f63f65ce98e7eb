"""Small object helpers: emptiness, equality and identity formatting."""

__all__ = [
    "EMPTY_OBJECTS",
    "is_empty",
    "null_safe_equals",
    "get_qualified_type_name",
    "get_qualified_method_name",
    "identity_to_string",
    "get_identity_hex_string",
]

import mirror


EMPTY_OBJECTS = ()


def is_empty(array):
    """Check if an array is None or has no items."""
    return array is None or len(array) == 0


def null_safe_equals(first, second):
    """Compare two objects, treating two Nones as equal.

    Returns False when only one of them is None, otherwise the result of
    `first == second`.
    """
    return first is second or (first is not None and first == second)


def get_qualified_type_name(cls):
    """Get the dotted module and qualified name of a class."""
    module = getattr(cls, "__module__", "")
    qualname = getattr(cls, "__qualname__", getattr(cls, "__name__", str(cls)))
    return f"{module}.{qualname}" if module else qualname


def get_qualified_method_name(method):
    """Get the qualified name of a method or function.

    This is the defining module and the qualified name, which includes the
    class for methods, e.g. "collections.OrderedDict.popitem".

    Raises:
        ArgumentNullError: If method is None
    """
    mirror.argument_not_none(method, "method", "method must not be None")
    function = getattr(method, "__func__", method)
    return get_qualified_type_name(function)


def identity_to_string(obj):
    """Get a string for an object's overall identity.

    Returns:
        (str) "<qualified type name>@<identity hex>", or an empty string
        for None
    """
    if obj is None:
        return ""
    return f"{get_qualified_type_name(type(obj))}@{get_identity_hex_string(obj)}"


def get_identity_hex_string(obj):
    """Get the identity hash of an object in hex.

    The hash ignores any `__hash__` override and is truncated to 32 bits,
    formatted as upper case hex of at least six digits.
    """
    return format(object.__hash__(obj) & 0xFFFFFFFF, "06X")
