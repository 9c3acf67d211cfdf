from .instruction import Arg, ArgValue, Instruction, format_number
from .parser import GCodeCommand, parse_lines, parse_file, parse_line
from .writer import write_program

__all__ = [
    "Arg",
    "ArgValue",
    "GCodeCommand",
    "Instruction",
    "format_number",
    "parse_lines",
    "parse_file",
    "parse_line",
    "write_program",
]
