import pytest

from termctl.events import (
    FocusGained,
    FocusLost,
    Key,
    KeyCode,
    KeyEvent,
    KeyModifiers,
    Mouse,
    MouseButton,
    MouseEvent,
    MouseEventKind,
    Paste,
    Resize,
)
from termctl.modifiers_demo import describe_event, main


def _key(code, modifiers):
    return Key(KeyEvent(code, modifiers))


def test_control_char():
    assert describe_event(_key(KeyCode.char("z"), KeyModifiers.CONTROL)) == (
        "Control + Char('z')"
    )


def test_shift_key():
    assert describe_event(_key(KeyCode.LEFT, KeyModifiers.SHIFT)) == (
        f"Shift + {KeyCode.LEFT!r}"
    )


def test_alt_key():
    assert describe_event(_key(KeyCode.DELETE, KeyModifiers.ALT)) == (
        f"Alt + {KeyCode.DELETE!r}"
    )


def test_alt_shift_key():
    event = _key(KeyCode.RIGHT, KeyModifiers.ALT | KeyModifiers.SHIFT)
    assert describe_event(event) == f"Alt + Shift {KeyCode.RIGHT!r}"


def test_other_combination_mentions_modifiers_and_key():
    modifiers = KeyModifiers.ALT | KeyModifiers.CONTROL
    text = describe_event(_key(KeyCode.HOME, modifiers))
    assert text == f"({modifiers!r}) with key: {KeyCode.HOME!r}"


def test_no_modifiers_falls_through_to_general_case():
    text = describe_event(_key(KeyCode.ENTER, KeyModifiers.NONE))
    assert text.endswith(f"with key: {KeyCode.ENTER!r}")
    assert text.startswith("(")


@pytest.mark.parametrize(
    "event",
    [
        FocusGained(),
        FocusLost(),
        Paste("hello"),
        Resize(80, 24),
        Mouse(MouseEvent(MouseEventKind("Down", MouseButton.LEFT), 1, 2)),
    ],
)
def test_non_key_events_give_none(event):
    assert describe_event(event) is None


def test_main_prints_one_line_per_sample(capsys):
    assert main() == 0
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 5
    assert lines[0] == describe_event(_key(KeyCode.char("z"), KeyModifiers.CONTROL))
    assert lines[3] == describe_event(
        _key(KeyCode.RIGHT, KeyModifiers.ALT | KeyModifiers.SHIFT)
    )
    assert lines[4].endswith(f"with key: {KeyCode.HOME!r}")


def test_main_ignores_arguments(capsys):
    assert main(["ignored"]) == 0
    assert len(capsys.readouterr().out.splitlines()) == 5