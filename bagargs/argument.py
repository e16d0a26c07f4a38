"""Argument module from Bagargs."""

from re import fullmatch
from enum import Enum
from dataclasses import dataclass


LONG_PREFIX: str = "--"
SHORT_PREFIX: str = "-"
SUBCOMMAND_PREFIX: str = "@"
INLINE_VALUE_SEPARATOR: str = "="
SUBCOMMAND_REGEX: str = r"^@([^@=]+)$"


@dataclass(slots=True)
class BagargsParsingError(Exception):
    """
    Bagargs Exception class for errors occurred during argument parsing.
    """

    msg: str
    argument: str
    position: int

    def __str__(self) -> str:
        return self.msg


class InvalidArgument(BagargsParsingError):
    """
    The surface form of an argument can't be classified.
    """


class ArgKind(Enum):
    """
    Enum representing the different kinds of classified arguments.
    """

    Flag = "flag"  # --name, -n
    Option = "option"  # --name=value, -n=value
    SubCommand = "subcommand"  # @name
    Operand = "operand"  # anything else


@dataclass(slots=True, frozen=True)
class Token:
    kind: ArgKind
    raw: str
    position: int
    name: str | None = None
    value: str | None = None
    prefix: str = ""

    def __str__(self) -> str:
        match self.kind:
            case ArgKind.Flag | ArgKind.SubCommand:
                return f"{self.prefix}{self.name}"
            case ArgKind.Option:
                return f"{self.prefix}{self.name}{INLINE_VALUE_SEPARATOR}{self.value}"
            case ArgKind.Operand:
                return self.raw


def classify(arg: str, position: int) -> Token:
    """
    Classifies a single raw argument string.
    Raises `InvalidArgument` on empty input, malformed sub-commands and empty flag or option names.
    """
    if arg == "":
        raise InvalidArgument(
            f"Empty argument at position {position}.", arg, position
        )

    if arg.startswith(SUBCOMMAND_PREFIX):
        match = fullmatch(SUBCOMMAND_REGEX, arg)
        if match is None:
            raise InvalidArgument(
                f"'{arg}' is not a valid subcommand. Names can't be empty or contain '@' or '='.",
                arg,
                position,
            )
        return Token(
            ArgKind.SubCommand, arg, position, name=match.group(1), prefix=SUBCOMMAND_PREFIX
        )

    prefix: str
    if arg.startswith(LONG_PREFIX):
        prefix = LONG_PREFIX
    elif arg.startswith(SHORT_PREFIX) and len(arg) > 1:
        prefix = SHORT_PREFIX
    else:
        # A lone '-' is an operand too, usually meaning stdin
        return Token(ArgKind.Operand, arg, position, value=arg)

    name, separator, value = arg[len(prefix) :].partition(INLINE_VALUE_SEPARATOR)
    if name == "":
        raise InvalidArgument(
            f"'{arg}' is not a valid {'option' if separator else 'flag'}. The name can't be empty.",
            arg,
            position,
        )

    if separator:
        return Token(ArgKind.Option, arg, position, name=name, value=value, prefix=prefix)
    return Token(ArgKind.Flag, arg, position, name=name, prefix=prefix)
