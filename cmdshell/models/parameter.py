"""Declared parameters of a command."""

import re
from enum import Enum
from typing import Any

from pydantic import BaseModel, Field, field_validator, model_validator

from cmdshell.lib.messages import HELP_FLAG_DESCRIPTION, HELP_FLAG_ENTRY

_TRUE_VALUES = {"true", "yes", "on", "1"}
_FALSE_VALUES = {"false", "no", "off", "0"}

# ASCII digits only: no "_" separators, no other Unicode digits.
_INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")


class ParameterKind(str, Enum):
    """How a parameter appears on the command line."""

    POSITIONAL = "positional"
    OPTION = "option"
    FLAG = "flag"


class ParameterType(str, Enum):
    """Value type of a parameter, named as shown in help text."""

    STRING = "str"
    INTEGER = "int"
    FLOAT = "float"
    BOOLEAN = "bool"

    def convert(self, raw: str) -> Any:
        """
        Convert a raw token to this type.

        Raises:
            ValueError: If the token is not a valid value of this type
        """
        if self is ParameterType.INTEGER:
            if not _INTEGER_PATTERN.fullmatch(raw):
                raise ValueError(f"invalid integer: {raw!r}")
            return int(raw)
        if self is ParameterType.FLOAT:
            if not raw.isascii() or "_" in raw:
                raise ValueError(f"invalid float: {raw!r}")
            return float(raw)
        if self is ParameterType.BOOLEAN:
            lowered = raw.lower()
            if lowered in _TRUE_VALUES:
                return True
            if lowered in _FALSE_VALUES:
                return False
            raise ValueError(f"invalid boolean: {raw!r}")
        return raw

    @classmethod
    def from_python(cls, value_type: Any) -> "ParameterType":
        """Map str/int/float/bool (or a ParameterType) to a ParameterType."""
        if isinstance(value_type, ParameterType):
            return value_type
        mapping = {str: cls.STRING, int: cls.INTEGER, float: cls.FLOAT, bool: cls.BOOLEAN}
        if value_type not in mapping:
            from cmdshell.lib.exceptions import DefinitionError

            raise DefinitionError(f"Unsupported parameter type: {value_type!r}")
        return mapping[value_type]


def _format_default(value: Any) -> str:
    if value is None:
        return "none"
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


class Parameter(BaseModel):
    """
    One argument a command accepts.

    Immutable after creation. Positionals are required; options and
    flags are optional and fall back to their default.
    """

    name: str = Field(..., description="Parameter name as used on the command line")
    kind: ParameterKind = Field(..., description="Positional, option or flag")
    value_type: ParameterType = Field(
        default=ParameterType.STRING, description="Type the raw token is converted to"
    )
    description: str = Field(default="", description="Shown in the Options block")
    default: Any = Field(default=None, description="Value used when the option is absent")
    builtin: bool = Field(default=False, description="Provided by the shell, not the command")

    model_config = {"frozen": True}

    @field_validator("name")
    @classmethod
    def name_is_token(cls, v: str) -> str:
        """Validate that the name is a single non-dash-prefixed token."""
        from cmdshell.lib.exceptions import DefinitionError

        if not v or v != v.strip() or any(c.isspace() for c in v):
            raise DefinitionError(
                f"Parameter name must be a single token: {v!r}", parameter=v
            )
        if v.startswith("-"):
            raise DefinitionError(
                f"Parameter name must not start with '-': {v!r}", parameter=v
            )
        return v

    @model_validator(mode="after")
    def help_is_builtin(self) -> "Parameter":
        """Reserve the help flag names for the built-in help parameter."""
        from cmdshell.lib.exceptions import DefinitionError

        if self.name in ("help", "h") and not self.builtin:
            raise DefinitionError(
                f"Parameter name '{self.name}' is reserved for the help flag",
                parameter=self.name,
            )
        return self

    @property
    def dest(self) -> str:
        """Attribute name under which the parsed value is exposed."""
        return self.name.replace("-", "_")

    @property
    def flag_name(self) -> str:
        return f"--{self.name}"

    def usage_fragment(self) -> str:
        """Render this parameter for the usage line."""
        if self.kind is ParameterKind.POSITIONAL:
            return f"<{self.name}>"
        if self.kind is ParameterKind.FLAG:
            return f"[{self.flag_name}]"
        return f"[{self.flag_name} <{self.value_type.value}>]"

    def option_line(self) -> str:
        """Render this parameter as an entry of the Options block."""
        if self.builtin:
            return f"{HELP_FLAG_ENTRY}  {self.description}"
        entry = self.flag_name
        if self.kind is ParameterKind.OPTION:
            entry = f"{entry} <{self.value_type.value}>"
        details = f"({self.value_type.value}, default: {_format_default(self.default)})"
        if self.description:
            return f"{entry}  {self.description} {details}"
        return f"{entry}  {details}"


HELP_PARAMETER = Parameter(
    name="help",
    kind=ParameterKind.FLAG,
    value_type=ParameterType.BOOLEAN,
    description=HELP_FLAG_DESCRIPTION,
    default=False,
    builtin=True,
)


def positional(name: str, value_type: Any = str, description: str = "") -> Parameter:
    """Declare a required positional parameter."""
    return Parameter(
        name=name,
        kind=ParameterKind.POSITIONAL,
        value_type=ParameterType.from_python(value_type),
        description=description,
    )


def option(
    name: str, value_type: Any = str, default: Any = None, description: str = ""
) -> Parameter:
    """Declare an optional ``--name value`` parameter."""
    return Parameter(
        name=name,
        kind=ParameterKind.OPTION,
        value_type=ParameterType.from_python(value_type),
        description=description,
        default=default,
    )


def flag(name: str, description: str = "") -> Parameter:
    """Declare a boolean ``--name`` switch, false unless given."""
    return Parameter(
        name=name,
        kind=ParameterKind.FLAG,
        value_type=ParameterType.BOOLEAN,
        description=description,
        default=False,
    )
