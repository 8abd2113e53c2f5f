# termctl

Build terminal control sequences from small command objects, and describe
keyboard, mouse, focus, paste and resize events with plain Python types.

## Install

    pip install termctl

The package has no runtime dependencies and needs Python 3.10 or later.

## Commands

Every command knows its ANSI escape sequence. `termctl.command.queue` writes
one or more commands to a stream without flushing it; `termctl.command.execute`
writes them and then flushes. Both return the stream they were given. Text
streams receive the sequences as `str`; binary streams receive them encoded as
UTF-8. Passing anything that is not a `Command` raises `TypeError`.

```python
import sys
from termctl.command import queue, execute
from termctl.cursor import MoveTo, Hide, Show, SetCursorStyle

queue(sys.stdout, Hide(), MoveTo(10, 5))
execute(sys.stdout, SetCursorStyle.BLINKING_BAR, Show())
```

`Command.ansi()` returns the sequence as a string, and `str()` of a command
gives the same, so it can be inspected or embedded in other output:

```python
>>> from termctl.cursor import MoveTo, MoveUp
>>> MoveTo(0, 0).ansi()
'\x1b[1;1H'
>>> MoveUp(2).ansi()
'\x1b[2A'
```

### Cursor (`termctl.cursor`)

- `MoveTo(column, row)`: zero-based, top left is `(0, 0)`.
- `MoveToColumn(column)`, `MoveToRow(row)`: zero-based.
- `MoveUp(count)`, `MoveDown(count)`, `MoveLeft(count)`, `MoveRight(count)`.
- `MoveToNextLine(count)`, `MoveToPreviousLine(count)`: move lines and go to
  the first column.
- `SavePosition()`, `RestorePosition()`.
- `Hide()`, `Show()`.
- `EnableBlinking()`, `DisableBlinking()`.
- `SetCursorStyle`: an enum with `DEFAULT_USER_SHAPE`, `BLINKING_BLOCK`,
  `STEADY_BLOCK`, `BLINKING_UNDERSCORE`, `STEADY_UNDERSCORE`, `BLINKING_BAR`
  and `STEADY_BAR`; its members are commands too.

Coordinates and counts must be ints from 0 to 65535 (65534 for the zero-based
positions, which are written one-based); other values raise `ValueError`, and
non-ints raise `TypeError`.

### Event reporting (`termctl.event_commands`)

- `EnableMouseCapture()`, `DisableMouseCapture()`
- `EnableFocusChange()`, `DisableFocusChange()`
- `EnableBracketedPaste()`, `DisableBracketedPaste()`
- `PushKeyboardEnhancementFlags(flags)`, `PopKeyboardEnhancementFlags()`

```python
from termctl.events import KeyboardEnhancementFlags as F
from termctl.event_commands import PushKeyboardEnhancementFlags

PushKeyboardEnhancementFlags(F.DISAMBIGUATE_ESCAPE_CODES | F.REPORT_EVENT_TYPES).ansi()
# '\x1b[>3u'
```

Flags with bits outside `KeyboardEnhancementFlags` raise `ValueError`.

## Events (`termctl.events`)

An event is one of `Key(event)`, `Mouse(event)`, `Paste(text)`,
`Resize(columns, rows)`, `FocusGained()` or `FocusLost()`; `Event` is the union
of them, handy in type hints and `match` statements.

- `KeyEvent(code, modifiers=KeyModifiers.NONE, kind=KeyEventKind.PRESS,
  state=KeyEventState.NONE)`, also `KeyEvent.from_code(code)`.
- `KeyCode`: keys without data are attributes such as `KeyCode.ENTER`,
  `KeyCode.ESC`, `KeyCode.LEFT`; keys with data come from `KeyCode.char("c")`,
  `KeyCode.function(1)`, `KeyCode.media(MediaKeyCode.PLAY)` and
  `KeyCode.modifier(ModifierKeyCode.LEFT_SHIFT)`.
- `KeyModifiers`, `KeyEventState` and `KeyboardEnhancementFlags` are
  `IntFlag`s; `KeyEventKind`, `MediaKeyCode`, `ModifierKeyCode` and
  `MouseButton` are enums.
- `MouseEvent(kind, column, row, modifiers=KeyModifiers.NONE)` with
  `MouseEventKind("Down", MouseButton.LEFT)` (also `"Up"` and `"Drag"`) or
  `MouseEventKind.MOVED`, `MouseEventKind.SCROLL_DOWN`,
  `MouseEventKind.SCROLL_UP`.

Key events compare and hash with Shift folded in: an ASCII uppercase character
implies `KeyModifiers.SHIFT`, and Shift with a lowercase character equals the
uppercase one. `KeyEvent.normalize_case()` returns the folded form.

```python
from termctl.events import KeyCode, KeyEvent, KeyModifiers

assert KeyEvent(KeyCode.char("d"), KeyModifiers.SHIFT) == KeyEvent(KeyCode.char("D"))
```

`termctl.modifiers_demo.describe_event(event)` shows matching on modifiers: it
returns a text such as `"Control + Char('z')"` for a key event and `None` for
any other event.

## Demo

Print how a handful of key events with modifiers are described:

    termctl-modifiers-demo

The same runs with `python -m termctl.modifiers_demo`.

## What it does not do

termctl only builds escape sequences and event values. It does not read input
from the terminal: there is no function to read or poll for events, no parser
that turns bytes from the terminal into events, no raw mode switch, and no way
to ask the terminal for the cursor position or its size. It writes ANSI
sequences only and makes no console API calls, so terminals that do not
understand ANSI sequences will not respond to the commands.