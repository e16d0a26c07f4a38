"""Bagargs, a self-describing command line argument parser."""

from .argument import ArgKind, Token, classify, BagargsParsingError, InvalidArgument
from .bag import ArgumentBag, DuplicateSubCommand, parse, parse_env

__all__: list[str] = [
    "ArgKind",
    "ArgumentBag",
    "BagargsParsingError",
    "DuplicateSubCommand",
    "InvalidArgument",
    "Token",
    "classify",
    "parse",
    "parse_env",
]
