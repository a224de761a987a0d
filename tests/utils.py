import io
import os
from collections.abc import Iterable
from dataclasses import dataclass
from typing import override
from unittest.mock import Mock

from hecto.tui.event import InputEvent, KeyEvent, MouseEvent
from hecto.tui.keyboard import Keyboard
from hecto.tui.terminal import HIDE_CURSOR, Terminal, TerminalSize

FAKE_FD = 99


class FakeStream(io.StringIO):
    @override
    def fileno(self) -> int:
        return FAKE_FD


@dataclass
class FakeTty:
    get_terminal_size: Mock
    setraw: Mock
    tcsetattr: Mock


class EndOfInput(Exception):
    pass


class FakeTerminal(Terminal):
    """
    A terminal that never touches the tty.

    Events are replayed in order, a None in the events makes a single poll
    time out.
    """

    events: list[InputEvent | None]
    polls: list[float]
    enters: int
    exits: int

    def __init__(
        self,
        size: TerminalSize | None = None,
        events: Iterable[InputEvent | None] = (),
    ):
        self.initial_size = size or TerminalSize(80, 24)
        self.events = list(events)
        self.polls = []
        self.enters = 0
        self.exits = 0
        super().__init__(FakeStream(), FakeStream())

    @override
    def query_size(self) -> TerminalSize:
        return TerminalSize(self.initial_size.width, self.initial_size.height)

    @override
    def enter(self) -> None:
        self.enters += 1
        self.stack.callback(self.on_exit)

    def on_exit(self) -> None:
        self.exits += 1

    @override
    def poll(self, timeout: float) -> bool:
        self.polls.append(timeout)
        if self.events and self.events[0] is None:
            self.events.pop(0)
            return False
        return True

    @override
    def read(self) -> InputEvent:
        try:
            event = self.events.pop(0)
        except IndexError:
            raise EndOfInput() from None
        assert event is not None
        return event

    def frames(self) -> list[str]:
        assert isinstance(self.output, io.StringIO)
        return self.output.getvalue().split(HIDE_CURSOR)[1:]


def read_events(raw: bytes) -> list[KeyEvent | MouseEvent]:
    read_fd, write_fd = os.pipe()
    try:
        os.write(write_fd, raw)
        keyboard = Keyboard(read_fd)
        events: list[KeyEvent | MouseEvent] = []
        while keyboard.poll(0):
            events.append(keyboard.get())
        return events
    finally:
        os.close(read_fd)
        os.close(write_fd)
