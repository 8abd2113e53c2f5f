"""Show how key events are told apart by the modifiers held with them."""

from __future__ import annotations

from typing import Iterator, Optional, Sequence

from .events import Event, Key, KeyCode, KeyEvent, KeyModifiers

__all__ = ["describe_event", "main"]


def describe_event(event: Event) -> Optional[str]:
    """Describe a key event by its modifiers; other events give ``None``."""
    match event:
        case Key(KeyEvent(modifiers=KeyModifiers.CONTROL, code=code)):
            return f"Control + {code!r}"
        case Key(KeyEvent(modifiers=KeyModifiers.SHIFT, code=code)):
            return f"Shift + {code!r}"
        case Key(KeyEvent(modifiers=KeyModifiers.ALT, code=code)):
            return f"Alt + {code!r}"
        case Key(KeyEvent(code=code, modifiers=modifiers)):
            if modifiers == KeyModifiers.ALT | KeyModifiers.SHIFT:
                return f"Alt + Shift {code!r}"
            return f"({modifiers!r}) with key: {code!r}"
        case _:
            return None


def _sample_events() -> Iterator[Event]:
    yield Key(KeyEvent(KeyCode.char("z"), KeyModifiers.CONTROL))
    yield Key(KeyEvent(KeyCode.LEFT, KeyModifiers.SHIFT))
    yield Key(KeyEvent(KeyCode.DELETE, KeyModifiers.ALT))
    yield Key(KeyEvent(KeyCode.RIGHT, KeyModifiers.ALT | KeyModifiers.SHIFT))
    yield Key(KeyEvent(KeyCode.HOME, KeyModifiers.ALT | KeyModifiers.CONTROL))


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Print a description of a handful of sample key events."""
    for event in _sample_events():
        description = describe_event(event)
        if description is not None:
            print(description)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())