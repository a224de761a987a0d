import logging

from .config import Config, get_config
from .tui.drawable import Drawable
from .tui.event import InputEvent, KeyEvent, MouseEvent, ResizeEvent
from .tui.terminal import Terminal, TerminalSize
from .welcome import Welcome

logger = logging.getLogger(__name__)

FAREWELL = "Goodbye."


class Editor:
    terminal: Terminal
    view: Drawable
    config: Config
    should_quit: bool

    def __init__(
        self,
        terminal: Terminal | None = None,
        view: Drawable | None = None,
        config: Config | None = None,
    ):
        self.config = config or get_config()
        self.terminal = terminal or Terminal(mouse=self.config.input.mouse)
        self.view = view or Welcome()
        self.should_quit = False

    @property
    def poll_interval(self) -> float:
        return self.config.input.poll_interval_ms / 1000

    def run(self) -> None:
        with self.terminal:
            while True:
                self.refresh_screen()
                if self.should_quit:
                    break
                self.process_input()

    def refresh_screen(self) -> None:
        self.terminal.hide_cursor()
        self.terminal.move_to(0, 0)
        if self.should_quit:
            self.terminal.clear()
            self.terminal.write(f"{FAREWELL}\r\n")
        else:
            self.draw_rows()
        self.terminal.move_to(0, 0)
        self.terminal.show_cursor()
        self.terminal.flush()

    def draw_rows(self) -> None:
        for line in self.view.render(self.terminal.size):
            self.terminal.clear_current_line()
            self.terminal.write(f"{line}\r\n")

    def read_key(self) -> InputEvent:
        while True:
            if self.terminal.poll(self.poll_interval):
                return self.terminal.read()

    def process_input(self) -> None:
        match self.read_key():
            case KeyEvent() as key:
                self.process_keypress(key)
            case ResizeEvent(width, height):
                logger.debug("resized to %dx%d", width, height)
                self.terminal.size = TerminalSize(width, height)
                self.refresh_screen()
            case MouseEvent():
                pass

    def process_keypress(self, key: KeyEvent) -> None:
        try:
            command = self.config.keymap[key.name]
        except KeyError:
            return
        else:
            getattr(self, command)()

    def quit(self) -> None:
        logger.info("quitting")
        self.should_quit = True
