"""Commands that move, show, hide and restyle the terminal cursor."""

from __future__ import annotations

import io
from dataclasses import dataclass
from enum import Enum
from typing import IO

from .command import Command

__all__ = [
    "MoveTo",
    "MoveToNextLine",
    "MoveToPreviousLine",
    "MoveToColumn",
    "MoveToRow",
    "MoveUp",
    "MoveRight",
    "MoveDown",
    "MoveLeft",
    "SavePosition",
    "RestorePosition",
    "Hide",
    "Show",
    "EnableBlinking",
    "DisableBlinking",
    "SetCursorStyle",
]

_CSI = "\x1b["
_U16_MAX = 0xFFFF


def _check_u16(name: str, value: int, *, shifted: bool = False) -> None:
    """Check that ``value`` fits an unsigned 16-bit cell coordinate or count.

    With ``shifted`` the value is written one-based, so it must leave room
    for the added one.
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an int, got {type(value).__name__}")
    limit = _U16_MAX - 1 if shifted else _U16_MAX
    if not 0 <= value <= limit:
        raise ValueError(f"{name} must be between 0 and {limit}, got {value}")


@dataclass(frozen=True)
class MoveTo(Command):
    """Move the cursor to ``(column, row)``; the top left cell is ``(0, 0)``."""

    column: int
    row: int

    def __post_init__(self) -> None:
        _check_u16("column", self.column, shifted=True)
        _check_u16("row", self.row, shifted=True)

    def write_ansi(self, out: IO[str]) -> None:
        out.write(f"{_CSI}{self.row + 1};{self.column + 1}H")


@dataclass(frozen=True)
class MoveToNextLine(Command):
    """Move the cursor down ``count`` lines, to the first column."""

    count: int

    def __post_init__(self) -> None:
        _check_u16("count", self.count)

    def write_ansi(self, out: IO[str]) -> None:
        out.write(f"{_CSI}{self.count}E")


@dataclass(frozen=True)
class MoveToPreviousLine(Command):
    """Move the cursor up ``count`` lines, to the first column."""

    count: int

    def __post_init__(self) -> None:
        _check_u16("count", self.count)

    def write_ansi(self, out: IO[str]) -> None:
        out.write(f"{_CSI}{self.count}F")


@dataclass(frozen=True)
class MoveToColumn(Command):
    """Move the cursor to a zero-based column on the current row."""

    column: int

    def __post_init__(self) -> None:
        _check_u16("column", self.column, shifted=True)

    def write_ansi(self, out: IO[str]) -> None:
        out.write(f"{_CSI}{self.column + 1}G")


@dataclass(frozen=True)
class MoveToRow(Command):
    """Move the cursor to a zero-based row in the current column."""

    row: int

    def __post_init__(self) -> None:
        _check_u16("row", self.row, shifted=True)

    def write_ansi(self, out: IO[str]) -> None:
        out.write(f"{_CSI}{self.row + 1}d")


@dataclass(frozen=True)
class MoveUp(Command):
    """Move the cursor up ``count`` rows."""

    count: int

    def __post_init__(self) -> None:
        _check_u16("count", self.count)

    def write_ansi(self, out: IO[str]) -> None:
        out.write(f"{_CSI}{self.count}A")


@dataclass(frozen=True)
class MoveRight(Command):
    """Move the cursor right ``count`` columns."""

    count: int

    def __post_init__(self) -> None:
        _check_u16("count", self.count)

    def write_ansi(self, out: IO[str]) -> None:
        out.write(f"{_CSI}{self.count}C")


@dataclass(frozen=True)
class MoveDown(Command):
    """Move the cursor down ``count`` rows."""

    count: int

    def __post_init__(self) -> None:
        _check_u16("count", self.count)

    def write_ansi(self, out: IO[str]) -> None:
        out.write(f"{_CSI}{self.count}B")


@dataclass(frozen=True)
class MoveLeft(Command):
    """Move the cursor left ``count`` columns."""

    count: int

    def __post_init__(self) -> None:
        _check_u16("count", self.count)

    def write_ansi(self, out: IO[str]) -> None:
        out.write(f"{_CSI}{self.count}D")


@dataclass(frozen=True)
class SavePosition(Command):
    """Save the current cursor position, for :class:`RestorePosition`."""

    def write_ansi(self, out: IO[str]) -> None:
        out.write("\x1b7")


@dataclass(frozen=True)
class RestorePosition(Command):
    """Restore the cursor position saved by :class:`SavePosition`."""

    def write_ansi(self, out: IO[str]) -> None:
        out.write("\x1b8")


@dataclass(frozen=True)
class Hide(Command):
    """Hide the cursor."""

    def write_ansi(self, out: IO[str]) -> None:
        out.write(f"{_CSI}?25l")


@dataclass(frozen=True)
class Show(Command):
    """Show the cursor."""

    def write_ansi(self, out: IO[str]) -> None:
        out.write(f"{_CSI}?25h")


@dataclass(frozen=True)
class EnableBlinking(Command):
    """Make the cursor blink; not every terminal honours this."""

    def write_ansi(self, out: IO[str]) -> None:
        out.write(f"{_CSI}?12h")


@dataclass(frozen=True)
class DisableBlinking(Command):
    """Stop the cursor blinking; not every terminal honours this."""

    def write_ansi(self, out: IO[str]) -> None:
        out.write(f"{_CSI}?12l")


class SetCursorStyle(Enum):
    """Set the cursor's shape and whether it blinks."""

    DEFAULT_USER_SHAPE = 0
    BLINKING_BLOCK = 1
    STEADY_BLOCK = 2
    BLINKING_UNDERSCORE = 3
    STEADY_UNDERSCORE = 4
    BLINKING_BAR = 5
    STEADY_BAR = 6

    def write_ansi(self, out: IO[str]) -> None:
        """Write the ANSI representation of this style to ``out``."""
        out.write(f"{_CSI}{self.value} q")

    def ansi(self) -> str:
        """Return the ANSI representation of this style as a string."""
        buffer = io.StringIO()
        self.write_ansi(buffer)
        return buffer.getvalue()

    def __str__(self) -> str:
        return self.ansi()


Command.register(SetCursorStyle)