from abc import ABC, abstractmethod
from collections.abc import Iterator

from .terminal import TerminalSize


class Drawable(ABC):
    @abstractmethod
    def render(self, size: TerminalSize) -> Iterator[str]:
        """Yield the lines of a frame, each at most size.width wide."""
        raise NotImplementedError
