"""Exception hierarchy for the command shell.

All custom exceptions inherit from ShellError to enable
selective catching at different levels.

Hierarchy:
    ShellError (base)
    ├── ConfigError - Invalid configuration values
    ├── RegistrationError - Command could not be registered
    │   ├── ReservedNameError - Name is reserved by the shell
    │   └── InvalidNameError - Name is not a single help-safe token
    ├── DefinitionError - Malformed command definition
    ├── CommandError - Domain failure raised by a command body
    └── HelpFormatError - Help text does not match the expected layout
"""


class ShellError(Exception):
    """
    Base exception for all command shell errors.

    Catching this will catch all custom exceptions from this module.
    """

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class ConfigError(ShellError):
    """
    Configuration error.

    Raised when a configuration value is present but unusable.
    Examples: unknown log level name.

    CLI Exit Code: 2
    """

    pass


class RegistrationError(ShellError):
    """Raised when a command cannot be added to an environment."""

    pass


class ReservedNameError(RegistrationError):
    """
    Attempt to register a command under a reserved name.

    The environment the registration was attempted on is left unchanged;
    the caller may retry with a different name.

    Attributes:
        name: The reserved name that was rejected
    """

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"command name '{name}' is reserved")


class InvalidNameError(RegistrationError):
    """
    Command name cannot be typed at the prompt or shown in help.

    Names must be a single non-empty token without "--", the
    delimiter between name and description in help text.

    Attributes:
        name: The rejected name
    """

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"invalid command name: {name!r}")


class DefinitionError(ShellError):
    """
    Malformed command definition.

    Raised while declaring a command, never while evaluating a line.
    Examples: two parameters with the same name.

    Attributes:
        parameter: Name of the offending parameter, if any
    """

    def __init__(self, message: str, parameter: str | None = None):
        self.parameter = parameter
        super().__init__(message)


class CommandError(ShellError):
    """
    Domain failure raised from inside a command body.

    The evaluator reports it as "ERROR: command failed (<message>)".
    """

    pass


class HelpFormatError(ShellError):
    """
    Help text did not match the fixed layout.

    This is an integration bug between a command's help output and
    the usage parser, not a user error.

    Attributes:
        text: The help text that failed to parse (None if no text was produced)
    """

    def __init__(self, message: str, text: str | None = None):
        self.text = text
        super().__init__(message)
