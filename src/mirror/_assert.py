"""Argument contract checks"""

__all__ = ["argument_not_none"]

import mirror


def argument_not_none(value, name, message=None):
    """Raise ArgumentNullError when a required argument is None.

    Args:
        value: The argument value
        name: (str) Parameter name reported in the error
        message: (str | None) Optional replacement error text

    Raises:
        ArgumentNullError: If value is None
    """
    if value is None:
        raise mirror.ArgumentNullError(name, message)
