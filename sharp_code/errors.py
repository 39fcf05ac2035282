"""
Exceptions raised while configuring builders and building source code.
"""


class SharpCodeError(Exception):
    """Base class for every error raised by sharp_code."""

    pass


class MissingBuilderSettingError(SharpCodeError):
    """Raised when building, but a required setting is missing.

    This happens when:
    - The name of a class, struct, interface, enum, enum member, namespace,
      field, property or type parameter was never set
    - The name or type was set to an empty or whitespace-only string
    - The type of a field or property is missing
    """

    pass


class InvalidArgumentError(SharpCodeError, ValueError):
    """Raised by a builder setter when it receives an unusable argument.

    The builder is left untouched when this is raised.
    """

    pass


class ArgumentNullError(InvalidArgumentError):
    """Raised when an argument is None but a value is required."""

    def __init__(self, argument: str):
        super().__init__(f"The argument '{argument}' cannot be None.")
        self.argument = argument


class ArgumentEmptyError(InvalidArgumentError):
    """Raised when a string argument is empty or whitespace-only."""

    def __init__(self, argument: str, message: str | None = None):
        super().__init__(message or f"The argument '{argument}' cannot be empty or whitespace.")
        self.argument = argument


class ArgumentTypeError(InvalidArgumentError):
    """Raised when an argument is not of the expected type, e.g. a non-integer enum value."""

    def __init__(self, argument: str, message: str | None = None):
        super().__init__(message or f"The argument '{argument}' has an invalid type.")
        self.argument = argument


class CSharpSyntaxError(SharpCodeError):
    """Raised when the configured builders would produce invalid C#.

    All mandatory settings are present, but their combination is illegal, e.g.:
    - A static constructor with parameters, an access modifier or a base call
    - An interface property with a body or a default value
    - A struct with a parameterless constructor or a property default value
    - A duplicated enum member name
    - A private type declared directly inside a namespace
    """

    pass
