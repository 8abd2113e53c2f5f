"""Commands that switch terminal event reporting on and off."""

from __future__ import annotations

from dataclasses import dataclass
from typing import IO

from .command import Command
from .events import KeyboardEnhancementFlags

__all__ = [
    "EnableMouseCapture",
    "DisableMouseCapture",
    "EnableFocusChange",
    "DisableFocusChange",
    "EnableBracketedPaste",
    "DisableBracketedPaste",
    "PushKeyboardEnhancementFlags",
    "PopKeyboardEnhancementFlags",
]

_CSI = "\x1b["

# Normal tracking, button-event tracking, any-event tracking,
# RXVT coordinates beyond 223, and the preferred SGR coordinates.
_MOUSE_MODES = ("1000", "1002", "1003", "1015", "1006")

_ALL_ENHANCEMENT_BITS = 0
for _flag in KeyboardEnhancementFlags:
    _ALL_ENHANCEMENT_BITS |= int(_flag)
del _flag


@dataclass(frozen=True)
class EnableMouseCapture(Command):
    """Start reporting mouse presses, releases, drags and motion."""

    def write_ansi(self, out: IO[str]) -> None:
        out.write("".join(f"{_CSI}?{mode}h" for mode in _MOUSE_MODES))


@dataclass(frozen=True)
class DisableMouseCapture(Command):
    """Stop reporting mouse events, undoing the modes in reverse order."""

    def write_ansi(self, out: IO[str]) -> None:
        out.write("".join(f"{_CSI}?{mode}l" for mode in reversed(_MOUSE_MODES)))


@dataclass(frozen=True)
class EnableFocusChange(Command):
    """Start reporting focus gained and focus lost events."""

    def write_ansi(self, out: IO[str]) -> None:
        out.write(f"{_CSI}?1004h")


@dataclass(frozen=True)
class DisableFocusChange(Command):
    """Stop reporting focus events."""

    def write_ansi(self, out: IO[str]) -> None:
        out.write(f"{_CSI}?1004l")


@dataclass(frozen=True)
class EnableBracketedPaste(Command):
    """Turn on bracketed paste mode, so pasted text arrives as one event."""

    def write_ansi(self, out: IO[str]) -> None:
        out.write(f"{_CSI}?2004h")


@dataclass(frozen=True)
class DisableBracketedPaste(Command):
    """Turn off bracketed paste mode."""

    def write_ansi(self, out: IO[str]) -> None:
        out.write(f"{_CSI}?2004l")


@dataclass(frozen=True)
class PushKeyboardEnhancementFlags(Command):
    """Push a level of keyboard enhancement flags onto the terminal's stack.

    Pair it with :class:`PopKeyboardEnhancementFlags`.
    """

    flags: KeyboardEnhancementFlags

    def __post_init__(self) -> None:
        value = self.flags
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(
                f"flags must be KeyboardEnhancementFlags, got {type(value).__name__}"
            )
        if value < 0 or int(value) & ~_ALL_ENHANCEMENT_BITS:
            raise ValueError(f"unknown keyboard enhancement bits in {int(value):#x}")
        object.__setattr__(self, "flags", KeyboardEnhancementFlags(int(value)))

    def write_ansi(self, out: IO[str]) -> None:
        out.write(f"{_CSI}>{int(self.flags)}u")


@dataclass(frozen=True)
class PopKeyboardEnhancementFlags(Command):
    """Pop one level of keyboard enhancement flags."""

    def write_ansi(self, out: IO[str]) -> None:
        out.write(f"{_CSI}<1u")