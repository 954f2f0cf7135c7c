# =============================================================================
# georules_logger/stream.py - Tinting Stream
# =============================================================================
# A pass-through text stream that paints every chunk written to it with the
# scheduler's current background color before forwarding it downstream.
#
# Embedded resets ("\x1b[0m", e.g. from level colors) are followed by the
# background code again, so the tint survives style changes inside a chunk.
#
# The stream only reads the current color. Advancing to a new color once per
# log message is the handler's job (see handlers.py).
# =============================================================================

import io
import sys
from typing import TextIO

from georules_logger.colors import RGB, HueScheduler

RESET = "\x1b[0m"


def background_code(color: RGB | tuple[int, int, int]) -> str:
    """24-bit ANSI background escape for an RGB triple."""
    r, g, b = color
    return f"\x1b[48;2;{r};{g};{b}m"


def tint(text: str, color: RGB | tuple[int, int, int]) -> str:
    """
    Wrap text in a persistent background color.

    Example:
        tint("hello", (10, 20, 30))
        # "\x1b[48;2;10;20;30mhello\x1b[0m\n"
    """
    bg_code = background_code(color)
    return bg_code + text.replace(RESET, RESET + bg_code) + RESET + "\n"


class TintingStream(io.TextIOBase):
    """
    Text stream wrapper that tints each chunk and writes it downstream.

    Chunks are neither buffered nor split; each write produces exactly one
    tinted, newline-terminated block on the downstream stream.

    Args:
        scheduler: Source of the current background color
        downstream: Where tinted text goes (defaults to sys.stdout at write time)
        encoding: Used to decode bytes chunks

    Closing the wrapper flushes but never closes the downstream stream.
    """

    def __init__(
        self,
        scheduler: HueScheduler,
        downstream: TextIO | None = None,
        encoding: str = "utf-8",
    ):
        super().__init__()
        self.scheduler = scheduler
        self._downstream = downstream
        self._encoding = encoding

    @property
    def downstream(self) -> TextIO:
        # Resolved at write time, after any stdout redirection
        return self._downstream if self._downstream is not None else sys.stdout

    @property
    def encoding(self) -> str:
        return self._encoding

    def writable(self) -> bool:
        return True

    def write(self, chunk: str | bytes) -> int:
        if self.closed:
            raise ValueError("I/O operation on closed TintingStream")
        if isinstance(chunk, bytes):
            chunk = chunk.decode(self._encoding)
        self.downstream.write(tint(chunk, self.scheduler.latest()))
        return len(chunk)

    def flush(self) -> None:
        if not self.closed:
            self.downstream.flush()

    def isatty(self) -> bool:
        return self.downstream.isatty()

    def fileno(self) -> int:
        return self.downstream.fileno()
