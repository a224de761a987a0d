import logging
import os
import signal
import sys
import termios
import tty
from contextlib import ExitStack
from dataclasses import dataclass
from types import FrameType, TracebackType
from typing import TextIO

from .event import InputEvent, ResizeEvent
from .keyboard import Keyboard

logger = logging.getLogger(__name__)

U16_MAX = 0xFFFF

ENTER_ALTERNATE_SCREEN = "\x1b[?1049h"
LEAVE_ALTERNATE_SCREEN = "\x1b[?1049l"
HIDE_CURSOR = "\x1b[?25l"
SHOW_CURSOR = "\x1b[?25h"
CLEAR_SCREEN = "\x1b[2J"
CLEAR_LINE = "\x1b[2K"
ENABLE_MOUSE = "\x1b[?1000h\x1b[?1006h"
DISABLE_MOUSE = "\x1b[?1006l\x1b[?1000l"


class TerminalUnavailable(Exception):
    pass


@dataclass
class TerminalSize:
    width: int
    height: int

    @classmethod
    def clamped(cls, width: int, height: int) -> "TerminalSize":
        return cls(min(max(width, 0), U16_MAX), min(max(height, 0), U16_MAX))


class Terminal:
    """
    The single handle on the process terminal.

    Creating a terminal switches it to raw mode and the alternate screen,
    every step of which is undone by exit(). The terminal can be used as a
    context manager so that exit() also runs when the session is unwound by
    an exception.
    """

    input: TextIO
    output: TextIO
    mouse: bool
    size: TerminalSize
    keyboard: Keyboard
    resized: bool
    stack: ExitStack

    def __init__(
        self,
        input: TextIO = sys.stdin,
        output: TextIO = sys.stdout,
        mouse: bool = False,
    ):
        self.input = input
        self.output = output
        self.mouse = mouse
        self.size = self.query_size()
        self.keyboard = Keyboard(input.fileno())
        self.resized = False
        self.stack = ExitStack()
        self.enter()

    def __enter__(self) -> "Terminal":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        traceback: TracebackType | None,
    ) -> None:
        self.exit()

    def query_size(self) -> TerminalSize:
        try:
            width, height = os.get_terminal_size(self.output.fileno())
        except (OSError, ValueError) as e:
            raise TerminalUnavailable(f"could not query terminal size: {e}") from e
        return TerminalSize.clamped(width, height)

    def enter(self) -> None:
        self.stack.callback(logger.info, "restored terminal")

        try:
            # setup raw mode
            fd = self.input.fileno()
            attrs = tty.setraw(fd)
            self.stack.callback(termios.tcsetattr, fd, termios.TCSADRAIN, attrs)

            # setup resize and termination signals
            for signum, handler in [
                (signal.SIGWINCH, self.on_resize),
                (signal.SIGTERM, self.on_terminate),
                (signal.SIGHUP, self.on_terminate),
            ]:
                prev_handler = signal.signal(signum, handler)
                self.stack.callback(signal.signal, signum, prev_handler)

            # switch to alternative buffer
            self.write_and_flush(ENTER_ALTERNATE_SCREEN)
            self.stack.callback(
                self.write_and_flush, f"{SHOW_CURSOR}{LEAVE_ALTERNATE_SCREEN}"
            )

            if self.mouse:
                self.write_and_flush(ENABLE_MOUSE)
                self.stack.callback(self.write_and_flush, DISABLE_MOUSE)
        except (OSError, ValueError, termios.error) as e:
            self.stack.close()
            raise TerminalUnavailable(f"could not enter raw mode: {e}") from e

        logger.info("entered raw mode at %dx%d", self.size.width, self.size.height)

    def exit(self) -> None:
        # a closed session leaves an empty stack behind, so exiting twice is a no-op
        stack, self.stack = self.stack, ExitStack()
        stack.close()

    def on_resize(self, _signal: int, _frame: FrameType | None) -> None:
        self.resized = True

    def on_terminate(self, signum: int, _frame: FrameType | None) -> None:
        raise SystemExit(128 + signum)

    def poll(self, timeout: float) -> bool:
        # a resize may arrive while waiting for input
        return self.resized or self.keyboard.poll(timeout) or self.resized

    def read(self) -> InputEvent:
        if self.resized:
            self.resized = False
            size = self.query_size()
            return ResizeEvent(size.width, size.height)
        return self.keyboard.get()

    def write(self, content: str) -> None:
        self.output.write(content)

    def write_and_flush(self, content: str) -> None:
        self.output.write(content)
        self.output.flush()

    def flush(self) -> None:
        self.output.flush()

    def move_to(self, x: int, y: int) -> None:
        self.write(f"\x1b[{y + 1};{x + 1}H")

    def hide_cursor(self) -> None:
        self.write(HIDE_CURSOR)

    def show_cursor(self) -> None:
        self.write(SHOW_CURSOR)

    def clear(self) -> None:
        self.write(CLEAR_SCREEN)

    def clear_current_line(self) -> None:
        self.write(CLEAR_LINE)
