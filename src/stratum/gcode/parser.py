# -*- coding: utf-8 -*-
"""
G-code Parser
=============

Reads command lines back into structured commands. Used to round-trip
generated programs and to inspect existing photocuring programs.

Lines are trimmed, blank lines and full-line ``;`` comments are skipped and
trailing ``;`` comments are stripped.
"""
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, Iterator, List, Union

from .instruction import Arg
from ..errors import MeshIOError, ParseError

NUMBER_CHARS = set("0123456789.-")


@dataclass
class GCodeCommand:
    command: str
    arguments: List[Arg] = field(default_factory=list)

    def get(self, letter: str, default=None):
        for arg in self.arguments:
            if arg.letter == letter:
                return arg.value
        return default


def parse_line(text: str, line_number: int = None) -> GCodeCommand:
    """
    Parse one command line (no comment, already trimmed).

    Raises:
        ParseError: Argument not starting with a letter, unterminated quote,
            or malformed number.
    """
    text = text.strip()
    head, _, rest = text.partition(" ")
    cmd = GCodeCommand(command=head)

    pos = 0
    n = len(rest)
    while pos < n:
        # Skip whitespace
        while pos < n and rest[pos].isspace():
            pos += 1
        if pos >= n:
            break

        letter = rest[pos]
        if not letter.isalpha():
            raise ParseError(f"argument must start with a letter: {rest[pos:]!r}", line_number)
        letter = letter.upper()
        pos += 1

        # Letter-only argument (e.g. a bare flag)
        if pos >= n or rest[pos].isspace():
            cmd.arguments.append(Arg(letter))
            continue

        if rest[pos] == '"':
            end_quote = rest.find('"', pos + 1)
            if end_quote < 0:
                raise ParseError(f"mismatched quote in argument {letter}", line_number)
            cmd.arguments.append(Arg(letter, rest[pos + 1:end_quote]))
            pos = end_quote + 1
            continue

        num_end = pos
        while num_end < n and rest[num_end] in NUMBER_CHARS:
            num_end += 1
        num_str = rest[pos:num_end]
        try:
            value = float(num_str)
        except ValueError as e:
            raise ParseError(f"invalid numeric value in argument {letter}: {rest[pos:]!r}", line_number) from e
        cmd.arguments.append(Arg(letter, value))
        pos = num_end
    return cmd


def parse_lines(lines: Iterable[str]) -> Iterator[GCodeCommand]:
    """Yield a GCodeCommand for every non-comment, non-blank line."""
    for line_number, line in enumerate(lines, start=1):
        view = line.strip()
        if not view or view.startswith(";"):
            continue
        comment_pos = view.find(";")
        if comment_pos >= 0:
            view = view[:comment_pos].rstrip()
        if not view:
            continue
        yield parse_line(view, line_number)


def parse_file(path: Union[str, Path]) -> List[GCodeCommand]:
    """
    Parse a G-code file.

    Raises:
        MeshIOError: If the file cannot be opened.
        ParseError: On the first malformed line.
    """
    try:
        f = open(path, "r", encoding="utf-8")
    except OSError as e:
        raise MeshIOError(f"Failed to open {path}: {e}") from e
    with f:
        return list(parse_lines(f))
