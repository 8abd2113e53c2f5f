import io

import pytest

from termctl.command import Command, execute, queue
from termctl.cursor import (
    DisableBlinking,
    EnableBlinking,
    Hide,
    MoveDown,
    MoveLeft,
    MoveRight,
    MoveTo,
    MoveToColumn,
    MoveToNextLine,
    MoveToPreviousLine,
    MoveToRow,
    MoveUp,
    RestorePosition,
    SavePosition,
    SetCursorStyle,
    Show,
)

# Geometry of the demo's cursor box.
START_Y = 2
WIDTH = 21
HEIGHT = 11 + START_Y
CENTER_X = WIDTH // 2
CENTER_Y = (HEIGHT + START_Y) // 2


@pytest.mark.parametrize(
    "command, expected",
    [
        (MoveUp(2), "\x1b[2A"),
        (MoveDown(2), "\x1b[2B"),
        (MoveLeft(2), "\x1b[2D"),
        (MoveRight(2), "\x1b[2C"),
        (MoveToPreviousLine(1), "\x1b[1F"),
        (MoveToNextLine(1), "\x1b[1E"),
        (MoveToNextLine(2), "\x1b[2E"),
        (MoveToColumn(CENTER_X + 1), "\x1b[12G"),
        (MoveTo(CENTER_X + 1, CENTER_Y + 1), "\x1b[9;12H"),
        (MoveTo(0, 0), "\x1b[1;1H"),
        (MoveTo(8, 2), "\x1b[3;9H"),
        (MoveToRow(5), "\x1b[6d"),
        (MoveToRow(0), "\x1b[1d"),
        (SavePosition(), "\x1b7"),
        (RestorePosition(), "\x1b8"),
        (Hide(), "\x1b[?25l"),
        (Show(), "\x1b[?25h"),
        (EnableBlinking(), "\x1b[?12h"),
        (DisableBlinking(), "\x1b[?12l"),
    ],
)
def test_ansi_sequences(command, expected):
    assert command.ansi() == expected
    assert str(command) == expected


@pytest.mark.parametrize(
    "style, expected",
    [
        (SetCursorStyle.DEFAULT_USER_SHAPE, "\x1b[0 q"),
        (SetCursorStyle.BLINKING_BLOCK, "\x1b[1 q"),
        (SetCursorStyle.STEADY_BLOCK, "\x1b[2 q"),
        (SetCursorStyle.BLINKING_UNDERSCORE, "\x1b[3 q"),
        (SetCursorStyle.STEADY_UNDERSCORE, "\x1b[4 q"),
        (SetCursorStyle.BLINKING_BAR, "\x1b[5 q"),
        (SetCursorStyle.STEADY_BAR, "\x1b[6 q"),
    ],
)
def test_cursor_styles(style, expected):
    assert style.ansi() == expected
    assert str(style) == expected
    assert isinstance(style, Command)


def test_blinking_block_demo_sequence():
    out = io.StringIO()
    execute(out, MoveLeft(2), SetCursorStyle.BLINKING_BLOCK)
    assert out.getvalue() == "\x1b[2D\x1b[1 q"


def test_save_restore_demo_sequence():
    out = io.StringIO()
    execute(
        out,
        MoveTo(0, 0),
        MoveToNextLine(2),
        MoveTo(8, 2),
        SavePosition(),
        MoveTo(10, 10),
    )
    execute(out, RestorePosition())
    assert out.getvalue() == "\x1b[1;1H\x1b[2E\x1b[3;9H\x1b7\x1b[11;11H\x1b8"


def test_queue_to_binary_stream():
    out = io.BytesIO()
    queue(out, Hide(), MoveTo(CENTER_X, CENTER_Y))
    assert out.getvalue() == b"\x1b[?25l\x1b[8;11H"


def test_write_ansi_to_stream():
    out = io.StringIO()
    MoveTo(3, 4).write_ansi(out)
    SetCursorStyle.STEADY_BAR.write_ansi(out)
    assert out.getvalue() == "\x1b[5;4H\x1b[6 q"


def test_equality_of_commands():
    assert MoveTo(1, 2) == MoveTo(1, 2)
    assert MoveTo(1, 2) != MoveTo(2, 1)
    assert Hide() == Hide()
    assert {MoveUp(1), MoveUp(1), MoveUp(2)} == {MoveUp(1), MoveUp(2)}


def test_zero_counts_are_written_verbatim():
    assert MoveUp(0).ansi() == "\x1b[0A"
    assert MoveToNextLine(0).ansi() == "\x1b[0E"


def test_largest_values():
    assert MoveUp(65535).ansi() == "\x1b[65535A"
    assert MoveTo(65534, 65534).ansi() == "\x1b[65535;65535H"


@pytest.mark.parametrize(
    "factory",
    [
        lambda: MoveTo(-1, 0),
        lambda: MoveTo(0, 65535),
        lambda: MoveToColumn(65535),
        lambda: MoveToRow(-3),
        lambda: MoveUp(65536),
        lambda: MoveLeft(-1),
    ],
)
def test_out_of_range_values_raise(factory):
    with pytest.raises(ValueError):
        factory()


def test_non_integer_values_raise():
    with pytest.raises(TypeError):
        MoveDown(1.5)
    with pytest.raises(TypeError):
        MoveTo(True, 0)