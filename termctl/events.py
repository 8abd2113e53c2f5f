"""Keyboard, mouse, focus, paste and resize events and the values they carry."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum, IntFlag
from typing import Optional, Union

__all__ = [
    "KeyboardEnhancementFlags",
    "KeyModifiers",
    "KeyEventKind",
    "KeyEventState",
    "MediaKeyCode",
    "ModifierKeyCode",
    "KeyCode",
    "MouseButton",
    "MouseEventKind",
    "MouseEvent",
    "KeyEvent",
    "FocusGained",
    "FocusLost",
    "Key",
    "Mouse",
    "Paste",
    "Resize",
    "Event",
]

_U16_MAX = 0xFFFF
_U8_MAX = 0xFF


def _check_int(name: str, value: object, limit: int) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an int, got {type(value).__name__}")
    if not 0 <= value <= limit:
        raise ValueError(f"{name} must be between 0 and {limit}, got {value}")


def _flag_repr(flag: IntFlag) -> str:
    """Render a flag set as ``Name(A | B)``, in declaration order."""
    cls = type(flag)
    value = int(flag)
    names = []
    seen = 0
    for name, member in cls.__members__.items():
        bit = int(member)
        if bit and bit & (bit - 1) == 0 and value & bit and not seen & bit:
            names.append(name)
            seen |= bit
    rest = value & ~seen
    if rest:
        names.append(hex(rest))
    if not names:
        return f"{cls.__name__}(0x0)"
    return f"{cls.__name__}({' | '.join(names)})"


class KeyboardEnhancementFlags(IntFlag):
    """Flags asking compatible terminals to report extra keyboard information."""

    DISAMBIGUATE_ESCAPE_CODES = 0b0000_0001
    REPORT_EVENT_TYPES = 0b0000_0010
    REPORT_ALTERNATE_KEYS = 0b0000_0100
    REPORT_ALL_KEYS_AS_ESCAPE_CODES = 0b0000_1000

    def __repr__(self) -> str:
        return _flag_repr(self)


class KeyModifiers(IntFlag):
    """Modifier keys held during a key or mouse event."""

    SHIFT = 0b0000_0001
    CONTROL = 0b0000_0010
    ALT = 0b0000_0100
    SUPER = 0b0000_1000
    HYPER = 0b0001_0000
    META = 0b0010_0000
    NONE = 0b0000_0000

    def __repr__(self) -> str:
        return _flag_repr(self)


class KeyEventKind(Enum):
    """Whether a key was pressed, auto-repeated or released."""

    PRESS = "Press"
    REPEAT = "Repeat"
    RELEASE = "Release"

    def __repr__(self) -> str:
        return self.value


class KeyEventState(IntFlag):
    """Extra state attached to a key event."""

    KEYPAD = 0b0000_0001
    CAPS_LOCK = 0b0000_1000
    NUM_LOCK = 0b0000_1000
    NONE = 0b0000_0000

    def __repr__(self) -> str:
        return _flag_repr(self)


class MediaKeyCode(Enum):
    """A media key."""

    PLAY = "Play"
    PAUSE = "Pause"
    PLAY_PAUSE = "PlayPause"
    REVERSE = "Reverse"
    STOP = "Stop"
    FAST_FORWARD = "FastForward"
    REWIND = "Rewind"
    TRACK_NEXT = "TrackNext"
    TRACK_PREVIOUS = "TrackPrevious"
    RECORD = "Record"
    LOWER_VOLUME = "LowerVolume"
    RAISE_VOLUME = "RaiseVolume"
    MUTE_VOLUME = "MuteVolume"

    def __repr__(self) -> str:
        return self.value


class ModifierKeyCode(Enum):
    """A modifier key pressed on its own."""

    LEFT_SHIFT = "LeftShift"
    LEFT_CONTROL = "LeftControl"
    LEFT_ALT = "LeftAlt"
    LEFT_SUPER = "LeftSuper"
    LEFT_HYPER = "LeftHyper"
    LEFT_META = "LeftMeta"
    RIGHT_SHIFT = "RightShift"
    RIGHT_CONTROL = "RightControl"
    RIGHT_ALT = "RightAlt"
    RIGHT_SUPER = "RightSuper"
    RIGHT_HYPER = "RightHyper"
    RIGHT_META = "RightMeta"
    ISO_LEVEL3_SHIFT = "IsoLevel3Shift"
    ISO_LEVEL5_SHIFT = "IsoLevel5Shift"

    def __repr__(self) -> str:
        return self.value


_SIMPLE_KEYS = {
    "BACKSPACE": "Backspace",
    "ENTER": "Enter",
    "LEFT": "Left",
    "RIGHT": "Right",
    "UP": "Up",
    "DOWN": "Down",
    "HOME": "Home",
    "END": "End",
    "PAGE_UP": "PageUp",
    "PAGE_DOWN": "PageDown",
    "TAB": "Tab",
    "BACK_TAB": "BackTab",
    "DELETE": "Delete",
    "INSERT": "Insert",
    "NULL": "Null",
    "ESC": "Esc",
    "CAPS_LOCK": "CapsLock",
    "SCROLL_LOCK": "ScrollLock",
    "NUM_LOCK": "NumLock",
    "PRINT_SCREEN": "PrintScreen",
    "PAUSE": "Pause",
    "MENU": "Menu",
    "KEYPAD_BEGIN": "KeypadBegin",
}
_SIMPLE_NAMES = frozenset(_SIMPLE_KEYS.values())


@dataclass(frozen=True)
class KeyCode:
    """A key.

    Keys without data are class attributes (``KeyCode.ENTER``); keys with
    data are built with :meth:`char`, :meth:`function`, :meth:`media` and
    :meth:`modifier`.
    """

    name: str
    value: Union[str, int, MediaKeyCode, ModifierKeyCode, None] = None

    def __post_init__(self) -> None:
        if self.name in _SIMPLE_NAMES:
            if self.value is not None:
                raise ValueError(f"key {self.name} carries no value")
        elif self.name == "Char":
            if not isinstance(self.value, str):
                raise TypeError("a character key needs a str")
            if len(self.value) != 1:
                raise ValueError(
                    f"a character key needs exactly one character, got {self.value!r}"
                )
        elif self.name == "F":
            _check_int("function key number", self.value, _U8_MAX)
        elif self.name == "Media":
            if not isinstance(self.value, MediaKeyCode):
                raise TypeError("a media key needs a MediaKeyCode")
        elif self.name == "Modifier":
            if not isinstance(self.value, ModifierKeyCode):
                raise TypeError("a modifier key needs a ModifierKeyCode")
        else:
            raise ValueError(f"unknown key name {self.name!r}")

    @classmethod
    def char(cls, c: str) -> KeyCode:
        """A character key, such as ``'c'``."""
        return cls("Char", c)

    @classmethod
    def function(cls, n: int) -> KeyCode:
        """A function key: ``function(1)`` is F1."""
        return cls("F", n)

    @classmethod
    def media(cls, code: MediaKeyCode) -> KeyCode:
        """A media key."""
        return cls("Media", code)

    @classmethod
    def modifier(cls, code: ModifierKeyCode) -> KeyCode:
        """A modifier key pressed on its own."""
        return cls("Modifier", code)

    def __repr__(self) -> str:
        if self.value is None:
            return self.name
        return f"{self.name}({self.value!r})"


for _attr, _name in _SIMPLE_KEYS.items():
    setattr(KeyCode, _attr, KeyCode(_name))
del _attr, _name


class MouseButton(Enum):
    """A mouse button."""

    LEFT = "Left"
    RIGHT = "Right"
    MIDDLE = "Middle"

    def __repr__(self) -> str:
        return self.value


_BUTTON_KINDS = frozenset({"Down", "Up", "Drag"})
_PLAIN_MOUSE_KINDS = frozenset({"Moved", "ScrollDown", "ScrollUp"})


@dataclass(frozen=True)
class MouseEventKind:
    """What happened with the mouse.

    ``Down``, ``Up`` and ``Drag`` carry the button involved; ``Moved``,
    ``ScrollDown`` and ``ScrollUp`` carry none.
    """

    name: str
    button: Optional[MouseButton] = None

    def __post_init__(self) -> None:
        if self.name in _BUTTON_KINDS:
            if not isinstance(self.button, MouseButton):
                raise TypeError(f"mouse event {self.name} needs a MouseButton")
        elif self.name in _PLAIN_MOUSE_KINDS:
            if self.button is not None:
                raise ValueError(f"mouse event {self.name} carries no button")
        else:
            raise ValueError(f"unknown mouse event kind {self.name!r}")

    def __repr__(self) -> str:
        if self.button is None:
            return self.name
        return f"{self.name}({self.button!r})"


MouseEventKind.MOVED = MouseEventKind("Moved")
MouseEventKind.SCROLL_DOWN = MouseEventKind("ScrollDown")
MouseEventKind.SCROLL_UP = MouseEventKind("ScrollUp")


@dataclass(frozen=True)
class MouseEvent:
    """A mouse event at a cell, with the modifiers held at the time."""

    kind: MouseEventKind
    column: int
    row: int
    modifiers: KeyModifiers = KeyModifiers.NONE

    def __post_init__(self) -> None:
        if not isinstance(self.kind, MouseEventKind):
            raise TypeError("kind must be a MouseEventKind")
        _check_int("column", self.column, _U16_MAX)
        _check_int("row", self.row, _U16_MAX)
        object.__setattr__(self, "modifiers", KeyModifiers(self.modifiers))


def _is_ascii_upper(c: str) -> bool:
    return "A" <= c <= "Z"


@dataclass(frozen=True, eq=False)
class KeyEvent:
    """A key event.

    Equality and hashing treat a shifted lower-case letter and an
    upper-case letter as the same key.
    """

    code: KeyCode
    modifiers: KeyModifiers = KeyModifiers.NONE
    kind: KeyEventKind = KeyEventKind.PRESS
    state: KeyEventState = field(default=KeyEventState.NONE)

    def __post_init__(self) -> None:
        if not isinstance(self.code, KeyCode):
            raise TypeError("code must be a KeyCode")
        if not isinstance(self.kind, KeyEventKind):
            raise TypeError("kind must be a KeyEventKind")
        object.__setattr__(self, "modifiers", KeyModifiers(self.modifiers))
        object.__setattr__(self, "state", KeyEventState(self.state))

    @classmethod
    def from_code(cls, code: KeyCode) -> KeyEvent:
        """A plain key press with no modifiers."""
        return cls(code)

    def normalize_case(self) -> KeyEvent:
        """Return this event with SHIFT set exactly when the character is upper case."""
        if self.code.name != "Char":
            return self
        c = self.code.value
        assert isinstance(c, str)
        if _is_ascii_upper(c):
            return replace(self, modifiers=self.modifiers | KeyModifiers.SHIFT)
        if self.modifiers & KeyModifiers.SHIFT:
            upper = c.upper() if c.isascii() else c
            return replace(self, code=KeyCode.char(upper))
        return self

    def _key(self) -> tuple:
        event = self.normalize_case()
        return (event.code, int(event.modifiers), event.kind, int(event.state))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, KeyEvent):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash(self._key())


@dataclass(frozen=True)
class FocusGained:
    """The terminal gained focus."""


@dataclass(frozen=True)
class FocusLost:
    """The terminal lost focus."""


@dataclass(frozen=True)
class Key:
    """A key event."""

    event: KeyEvent


@dataclass(frozen=True)
class Mouse:
    """A mouse event."""

    event: MouseEvent


@dataclass(frozen=True)
class Paste:
    """Text pasted while bracketed paste mode was on."""

    text: str


@dataclass(frozen=True)
class Resize:
    """The terminal was resized to ``columns`` by ``rows``."""

    columns: int
    rows: int

    def __post_init__(self) -> None:
        _check_int("columns", self.columns, _U16_MAX)
        _check_int("rows", self.rows, _U16_MAX)


Event = Union[FocusGained, FocusLost, Key, Mouse, Paste, Resize]