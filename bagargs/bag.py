"""Bag module from Bagargs."""

import sys
import logging
from collections import deque
from collections.abc import Iterable

from bagargs.argument import (
    ArgKind,
    Token,
    BagargsParsingError,
    classify,
)

_logger = logging.getLogger(__name__)


class DuplicateSubCommand(BagargsParsingError):
    """
    A second subcommand was found in the same argument list.
    """


class ArgumentBag:
    """
    Result obtained from parsing a list of arguments.
    Every `remove_*` method consumes what it returns, so after reading the expected
    arguments `remove_remaining` tells what the program didn't understand.

    Flags and options don't share names: `--x --x=1` keeps both a flag `x` and an option `x`.
    """

    program_name: str | None
    _flags: dict[str, Token]
    _options: dict[str, Token]
    _subcommand: Token | None
    _operands: deque[str]

    def __init__(self) -> None:
        self.program_name = None
        self._flags = {}
        self._options = {}
        self._subcommand = None
        self._operands = deque()

    def remove_flag(self, name: str) -> bool:
        """
        Returns True and removes the flag if it was supplied.
        """
        return self._flags.pop(name, None) is not None

    def remove_option(self, name: str) -> str | None:
        """
        Removes and returns the value of an option if it was supplied.
        """
        token: Token | None = self._options.pop(name, None)
        if token is not None:
            return token.value
        return None

    def remove_operand(self, index: int = 0) -> str | None:
        """
        Removes and returns the operand at `index` among the operands still in the bag.
        Following operands shift down one position.
        """
        if index < 0 or index >= len(self._operands):
            return None
        if index == 0:
            return self._operands.popleft()
        value: str = self._operands[index]
        del self._operands[index]
        return value

    def remove_subcommand(self) -> str | None:
        """
        Removes and returns the subcommand name if one was supplied.
        """
        token, self._subcommand = self._subcommand, None
        if token is not None:
            return token.name
        return None

    def is_empty(self) -> bool:
        """
        Returns True when every argument has been removed.
        `program_name` doesn't count.
        """
        return (
            len(self._flags) == 0
            and len(self._options) == 0
            and self._subcommand is None
            and len(self._operands) == 0
        )

    def remove_remaining(self) -> list[str]:
        """
        Removes everything left in the bag and returns it rendered as arguments.
        Order: flags, options, subcommand, operands.
        """
        remaining: list[str] = [str(t) for t in self._flags.values()]
        remaining += [str(t) for t in self._options.values()]
        if self._subcommand is not None:
            remaining.append(str(self._subcommand))
        remaining += self._operands

        self._flags.clear()
        self._options.clear()
        self._subcommand = None
        self._operands.clear()

        return remaining

    def _add(self, token: Token) -> None:
        match token.kind:
            case ArgKind.SubCommand:
                if self._subcommand is not None:
                    raise DuplicateSubCommand(
                        f"Repeated subcommand '{token.raw}', '{self._subcommand.raw}' was already given.",
                        token.raw,
                        token.position,
                    )
                self._subcommand = token
            case ArgKind.Flag:
                assert token.name is not None
                self._flags.setdefault(token.name, token)
            case ArgKind.Option:
                assert token.name is not None
                self._options[token.name] = token
            case ArgKind.Operand:
                assert token.value is not None
                self._operands.append(token.value)


def parse(arguments: Iterable[str]) -> ArgumentBag:
    """
    Parses a list of arguments into an `ArgumentBag`.
    The program name must not be included, use `parse_env` to read sys.argv.
    Raises a `BagargsParsingError` subclass on the first malformed argument.
    """
    if isinstance(arguments, str):
        raise TypeError(f"Expected a list of arguments, got a single string: '{arguments}'")

    bag: ArgumentBag = ArgumentBag()
    count: int = 0

    try:
        for position, arg in enumerate(arguments):
            bag._add(classify(arg, position))
            count += 1
    except BagargsParsingError as e:
        _logger.debug(f"Rejected argument {e.position} ('{e.argument}'): {e.msg}")
        raise

    _logger.debug(f"Parsed {count} arguments")
    return bag


def parse_env() -> ArgumentBag:
    """
    Parses sys.argv, keeping its first element as the program name.
    """
    bag: ArgumentBag = parse(sys.argv[1:])
    if len(sys.argv) > 0:
        bag.program_name = sys.argv[0]
    return bag
