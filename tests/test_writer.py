"""Tests for atomic program output."""

import pytest

from stratum.errors import MeshIOError
from stratum.gcode import Instruction, write_program


def program():
    yield Instruction.note("test")
    yield Instruction.cmd("G21")
    yield Instruction.cmd("M30")


def failing_program():
    yield Instruction.cmd("G21")
    raise RuntimeError("boom")


class TestWriteProgram:
    """Tests for write_program."""

    def test_writes_lines(self, tmp_path):
        target = tmp_path / "out.gcode"

        count = write_program(program(), target)

        assert count == 3
        assert target.read_text(encoding="utf-8") == "; test\nG21\nM30\n"
        assert list(tmp_path.iterdir()) == [target]

    def test_failure_leaves_no_file(self, tmp_path):
        """An aborted stream leaves neither the target nor a temporary file."""
        target = tmp_path / "out.gcode"

        with pytest.raises(RuntimeError, match="boom"):
            write_program(failing_program(), target)

        assert not target.exists()
        assert list(tmp_path.iterdir()) == []

    def test_failure_keeps_previous_program(self, tmp_path):
        target = tmp_path / "out.gcode"
        target.write_text("old\n", encoding="utf-8")

        with pytest.raises(RuntimeError):
            write_program(failing_program(), target)

        assert target.read_text(encoding="utf-8") == "old\n"

    def test_missing_directory(self, tmp_path):
        with pytest.raises(MeshIOError):
            write_program(program(), tmp_path / "nope" / "out.gcode")
