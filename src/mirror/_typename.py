"""Parse type names into type descriptors.

Type names are a dotted name followed by any number of `[]` array
suffixes. Primitive keywords (i32, f64, char, ...) and the aliases
`string`, `object` and `type` name the builtin descriptors. Any other name
is located as a Python class, so "decimal.Decimal[]" is an array of
Decimal references.
"""

__all__ = ["parse_type"]

import logging
import pydoc

import lark

import mirror


logger = logging.getLogger(__name__)

# Global parser instances (cached by grammar name)
_parsers: dict[str, lark.Lark] = {}


def parse_type(text):
    """Parse a type name.

    Args:
        text: (str) Type name, e.g. "i32[]" or "collections.abc.Mapping"

    Returns:
        (TypeDescriptor) The named type

    Raises:
        ArgumentNullError: If text is None
        TypeNameError: If the name is invalid or does not name a class
    """
    mirror.argument_not_none(text, "text")
    try:
        tree = _lark_parser("typename").parse(text)
    except lark.exceptions.LarkError as e:
        position = getattr(e, "pos_in_stream", None)
        raise mirror.TypeNameError(f"Invalid type name {text!r}", position) from e

    name, *arrays = tree.children
    descriptor = _resolve_name(".".join(str(token) for token in name.children))
    for _ in arrays:
        descriptor = mirror.array_of(descriptor)
    return descriptor


def _resolve_name(dotted):
    """Get the descriptor for a dotted name without array suffixes."""
    primitive = mirror.Primitive.from_keyword(dotted)
    if primitive is not None:
        return mirror.TypeDescriptor.of_primitive(primitive)
    alias = _aliases.get(dotted)
    if alias is not None:
        return alias

    try:
        obj = pydoc.locate(dotted)
    except pydoc.ErrorDuringImport as e:
        raise mirror.TypeNameError(f"Failed importing type {dotted!r}: {e}") from e
    if obj is None:
        raise mirror.TypeNameError(f"Could not locate type: {dotted!r}")
    if not isinstance(obj, type):
        raise mirror.TypeNameError(f"Not a class: {dotted!r}")
    return mirror.TypeDescriptor.of(obj)


def _lark_parser(name):
    """Get globally shared lark parser.

    Args:
        name: (str) name of the grammar file (without .lark)

    Returns:
        (lark.Lark) Parser instance
    """
    parser = _parsers.get(name)
    if parser is not None:
        return parser

    logger.debug("Building %s grammar parser", name)
    path = f"lark/{name}.lark"
    parser = lark.Lark.open(path, rel_to=__file__, parser="lalr")
    _parsers[name] = parser
    return parser


_aliases = {
    "string": mirror.type_string,
    "object": mirror.type_object,
    "type": mirror.type_type,
}
