# -*- coding: utf-8 -*-
"""
Instruction model
=================

One line of the output program: either a comment or a command with
letter-keyed arguments.

Grammar of a command line::

    MNEMONIC [ARG ...]
    ARG := LETTER NUMBER | LETTER '"' TEXT '"' | LETTER

Numbers are fixed-point with at most ``NUMBER_DECIMALS`` decimals and no
exponent, so the parser in :mod:`stratum.gcode.parser` reads them back.
"""
from dataclasses import dataclass
from typing import Optional, Tuple, Union

ArgValue = Union[float, int, str, None]

NUMBER_DECIMALS = 4

# Command vocabulary
RAPID_MOVE = "G0"
LINEAR_MOVE = "G1"
DWELL = "G4"
UNITS_MM = "G21"
HOME = "G28"
ABSOLUTE_POSITIONING = "G90"
LASER_ON = "M3"
LASER_OFF = "M5"
PROGRAM_END = "M30"
PROJECT_MASK = "M701"


def format_number(value: float) -> str:
    """Fixed-point text without trailing zeros; -0 becomes 0."""
    text = f"{float(value):.{NUMBER_DECIMALS}f}".rstrip("0").rstrip(".")
    if text in ("-0", "", "-"):
        return "0"
    return text


@dataclass(frozen=True)
class Arg:
    """
    One command argument.

    Attributes:
        letter: Single uppercase letter.
        value: Number, quoted string, or None for a letter-only flag.
    """
    letter: str
    value: ArgValue = None

    def __post_init__(self):
        if len(self.letter) != 1 or not self.letter.isalpha() or not self.letter.isupper():
            raise ValueError(f"argument letter must be one uppercase letter, got {self.letter!r}")
        if isinstance(self.value, str) and ('"' in self.value or ";" in self.value):
            raise ValueError(f"string argument may not contain quotes or ';': {self.value!r}")

    def __str__(self) -> str:
        if self.value is None:
            return self.letter
        if isinstance(self.value, str):
            return f'{self.letter}"{self.value}"'
        return f"{self.letter}{format_number(self.value)}"


@dataclass(frozen=True)
class Instruction:
    """
    Immutable program line.

    Exactly one of ``command`` / ``comment`` is set.
    """
    command: Optional[str] = None
    args: Tuple[Arg, ...] = ()
    comment: Optional[str] = None

    def __post_init__(self):
        if (self.command is None) == (self.comment is None):
            raise ValueError("an instruction is either a command or a comment")

    @classmethod
    def cmd(cls, command: str, **kwargs: ArgValue) -> "Instruction":
        """Build a command; keyword order is argument order, None values are omitted.

        Example:
            >>> str(Instruction.cmd("G1", X=1.5, Y=0, F=1200))
            'G1 X1.5 Y0 F1200'
        """
        args = tuple(Arg(letter, value) for letter, value in kwargs.items() if value is not None)
        return cls(command=command, args=args)

    @classmethod
    def note(cls, text: str) -> "Instruction":
        return cls(comment=text)

    @property
    def is_comment(self) -> bool:
        return self.comment is not None

    def get(self, letter: str, default: ArgValue = None) -> ArgValue:
        for arg in self.args:
            if arg.letter == letter:
                return arg.value
        return default

    def __str__(self) -> str:
        if self.comment is not None:
            return f"; {self.comment}" if self.comment else ";"
        return " ".join([self.command] + [str(a) for a in self.args])
