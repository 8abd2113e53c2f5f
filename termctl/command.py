"""Terminal commands and the helpers that write them to a stream."""

from __future__ import annotations

import io
from abc import ABC, abstractmethod
from typing import IO, Any, TypeVar

__all__ = ["Command", "queue", "execute"]

W = TypeVar("W")


class Command(ABC):
    """An action on the terminal, expressed as an ANSI escape sequence."""

    @abstractmethod
    def write_ansi(self, out: IO[str]) -> None:
        """Write the ANSI representation of this command to ``out``."""

    def ansi(self) -> str:
        """Return the ANSI representation of this command as a string."""
        buffer = io.StringIO()
        self.write_ansi(buffer)
        return buffer.getvalue()

    def __str__(self) -> str:
        return self.ansi()


def _write_text(writer: Any, text: str) -> None:
    """Write ``text`` to a text or binary stream, encoding as UTF-8 if needed."""
    if isinstance(writer, io.TextIOBase):
        writer.write(text)
        return
    if isinstance(writer, (io.RawIOBase, io.BufferedIOBase)):
        writer.write(text.encode("utf-8"))
        return
    try:
        writer.write(text)
    except TypeError:
        writer.write(text.encode("utf-8"))


def queue(writer: W, *args: Command) -> W:
    """Write the given commands to ``writer`` without flushing it.

    The commands take effect once the writer is flushed.  Returns the
    writer so that calls can be chained.
    """
    for command in args:
        if not isinstance(command, Command):
            raise TypeError(
                f"expected a Command, got {type(command).__name__}"
            )
        _write_text(writer, command.ansi())
    return writer


def execute(writer: W, *args: Command) -> W:
    """Write the given commands to ``writer`` and flush it immediately."""
    queue(writer, *args)
    flush = getattr(writer, "flush", None)
    if flush is not None:
        flush()
    return writer