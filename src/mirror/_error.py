"""Error classes and helpers"""

__all__ = ["ArgumentNullError", "ArgumentRangeError", "TypeNameError"]


class ArgumentNullError(ValueError):
    """A required argument was None.

    Args:
        param_name: (str) Name of the offending parameter
        message: (str | None) Optional error description

    Attributes:
        param_name: (str) Name of the offending parameter
    """

    def __init__(self, param_name, message=None):
        self.param_name = param_name
        if message is None:
            message = f"Argument '{param_name}' must not be None"
        super().__init__(message)


class ArgumentRangeError(IndexError):
    """An index argument was outside the available range.

    Args:
        param_name: (str) Name of the offending parameter
        value: (int) The rejected value

    Attributes:
        param_name: (str) Name of the offending parameter
        value: (int) The rejected value
    """

    def __init__(self, param_name, value):
        self.param_name = param_name
        self.value = value
        super().__init__(f"Argument '{param_name}' out of range: {value}")


class TypeNameError(ValueError):
    """Exception raised for type names that cannot be parsed or resolved.

    Args:
        message: (str) Error description
        position: (int | None) Optional character position where error occurred

    Attributes:
        message: (str) Error description
        position: (int | None) Character position where error occurred
    """

    def __init__(self, message, position=None):
        self.message = message
        self.position = position
        super().__init__(message)
