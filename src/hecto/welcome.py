from collections.abc import Iterator
from typing import override

from .tui.drawable import Drawable
from .tui.terminal import TerminalSize
from .version import NAME, VERSION

FILLER = "~"


class Welcome(Drawable):
    message: str

    def __init__(self, message: str = f"{NAME} -- version {VERSION}"):
        self.message = message

    @override
    def render(self, size: TerminalSize) -> Iterator[str]:
        for row in range(1, size.height):
            if row == size.height // 3:
                yield self.banner(size.width)
            else:
                yield FILLER

    def banner(self, width: int) -> str:
        padding = max(0, width - len(self.message)) // 2
        spaces = " " * max(0, padding - 1)
        return f"{FILLER}{spaces}{self.message}"[:width]
