import os
import select
from typing import Literal, cast

from .event import KeyEvent, MouseEvent

type Key = Literal[
    "ctrl+space",
    "ctrl+a", "ctrl+b", "ctrl+c", "ctrl+d", "ctrl+e", "ctrl+f", "ctrl+g",
    "ctrl+j", "ctrl+k", "ctrl+l", "ctrl+n", "ctrl+o", "ctrl+p", "ctrl+q",
    "ctrl+r", "ctrl+s", "ctrl+t", "ctrl+u", "ctrl+v", "ctrl+w", "ctrl+x",
    "ctrl+y", "ctrl+z", "backspace", "tab", "enter", "escape",
    "up", "down", "right", "left",
    "shift+up", "shift+down", "shift+right", "shift+left",
    "ctrl+up", "ctrl+down", "ctrl+right", "ctrl+left",
    "home", "end", "pageup", "pagedown", "shift+tab",
    "insert", "delete",
    "f1", "f2", "f3", "f4", "f5", "f6", "f7", "f8", "f9", "f10", "f11", "f12",
    "space", "!", '"', "#", "$", "%", "&", "'", "(", ")", "*", "+", ",", "-", ".", "/",
    "0", "1", "2", "3", "4", "5", "6", "7", "8", "9",
    ":", ";", "<", "=", ">", "?", "@",
    "A", "B", "C", "D", "E", "F", "G", "H", "I", "J", "K", "L", "M", "N", "O", "P", "Q", "R", "S", "T", "U", "V", "W", "X", "Y", "Z",
    "[", "\\", "]", "^", "_", "`",
    "a", "b", "c", "d", "e", "f", "g", "h", "i", "j", "k", "l", "m", "n", "o", "p", "q", "r", "s", "t", "u", "v", "w", "x", "y", "z",
    "{", "|", "}", "~",
]  # fmt: skip

type KeyMap = dict[int, KeyMap] | KeyEvent

KEY_MAP: dict[int, KeyMap] = {}

ESCAPE = KeyEvent("escape")
MOUSE_PREFIX = [0x1B, 0x5B, 0x3C]  # ESC [ <
MOUSE_BODY = b"0123456789;"
REPLACEMENT = "\ufffd"


def add_key(raw_key: bytes, key: Key) -> None:
    tree: dict[int, KeyMap] = KEY_MAP

    for char in raw_key[:-1]:
        subtree = tree.setdefault(char, {})
        assert isinstance(subtree, dict)
        tree = subtree

    assert raw_key[-1] not in tree
    tree[raw_key[-1]] = KeyEvent.parse(key)


# Control keys, ^I ^M and ^H have their own names
add_key(b"\x00", "ctrl+space")
for char in "abcdefgjklnopqrstuvwxyz":
    add_key(bytes([ord(char) & 0b0001_1111]), cast(Key, f"ctrl+{char}"))
add_key(b"\x08", "backspace")
add_key(b"\x09", "tab")
add_key(b"\x0d", "enter")
add_key(b"\x7f", "backspace")
add_key(b" ", "space")

# Arrows
add_key(b"\x1b[A", "up")
add_key(b"\x1b[B", "down")
add_key(b"\x1b[C", "right")
add_key(b"\x1b[D", "left")
add_key(b"\x1b[1;2A", "shift+up")
add_key(b"\x1b[1;2B", "shift+down")
add_key(b"\x1b[1;2C", "shift+right")
add_key(b"\x1b[1;2D", "shift+left")
add_key(b"\x1b[1;5A", "ctrl+up")
add_key(b"\x1b[1;5B", "ctrl+down")
add_key(b"\x1b[1;5C", "ctrl+right")
add_key(b"\x1b[1;5D", "ctrl+left")

# Home/End/PgUp/PgDn
add_key(b"\x1b[H", "home")
add_key(b"\x1b[F", "end")
add_key(b"\x1b[5~", "pageup")
add_key(b"\x1b[6~", "pagedown")
add_key(b"\x1b[Z", "shift+tab")

# Insert/Delete
add_key(b"\x1b[2~", "insert")
add_key(b"\x1b[3~", "delete")

# Function keys F1-F12
add_key(b"\x1bOP", "f1")
add_key(b"\x1bOQ", "f2")
add_key(b"\x1bOR", "f3")
add_key(b"\x1bOS", "f4")
add_key(b"\x1b[15~", "f5")
add_key(b"\x1b[17~", "f6")
add_key(b"\x1b[18~", "f7")
add_key(b"\x1b[19~", "f8")
add_key(b"\x1b[20~", "f9")
add_key(b"\x1b[21~", "f10")
add_key(b"\x1b[23~", "f11")
add_key(b"\x1b[24~", "f12")


def utf8_length(char: int) -> int:
    if char < 0xC0:
        return 1
    elif char < 0xE0:
        return 2
    elif char < 0xF0:
        return 3
    else:
        return 4


class Keyboard:
    """Decodes the raw byte stream of a terminal into key and mouse events."""

    fd: int
    chars: list[int]

    def __init__(self, fd: int):
        self.fd = fd
        self.chars = []

    def get_char(self) -> int:
        (char,) = os.read(self.fd, 1) or b"\x04"
        return char

    def has_input(self, timeout: float = 0) -> bool:
        return bool(select.select([self.fd], [], [], timeout)[0])

    def poll(self, timeout: float) -> bool:
        return bool(self.chars) or self.has_input(timeout)

    def get(self) -> KeyEvent | MouseEvent:
        while True:
            if event := self.pop_event():
                return event
            self.chars.append(self.get_char())

    def pop_event(self) -> KeyEvent | MouseEvent | None:
        if not self.chars:
            return None

        if self.chars[:3] == MOUSE_PREFIX:
            try:
                return self.pop_mouse()
            except ValueError:
                # not a mouse report, decode the bytes as keys
                pass

        if self.chars[0] >= 0x80:
            return self.pop_utf8()

        key_map = KEY_MAP

        for i in range(len(self.chars)):
            try:
                key = key_map[self.chars[i]]
            except KeyError:
                char = self.chars.pop(0)
                if char == 0x1B:
                    return ESCAPE
                else:
                    return KeyEvent(chr(char))

            if isinstance(key, KeyEvent):
                self.chars[: i + 1] = []
                return key

            key_map = key

        if self.chars == [0x1B] and not self.has_input():
            self.chars.clear()
            return ESCAPE

        return None

    def pop_mouse(self) -> MouseEvent | None:
        # SGR encoding: ESC [ < button ; x ; y (M = press, m = release)
        for end in range(len(MOUSE_PREFIX), len(self.chars)):
            char = self.chars[end]
            if char in b"Mm":
                break
            if char not in MOUSE_BODY:
                raise ValueError(f"unexpected byte {char:#04x} in mouse report")
        else:
            return None

        body = bytes(self.chars[len(MOUSE_PREFIX) : end]).decode("ascii")
        button, x, y = (int(part) for part in body.split(";"))
        pressed = self.chars[end] == ord("M")
        self.chars[: end + 1] = []

        return MouseEvent(button, x - 1, y - 1, pressed)

    def pop_utf8(self) -> KeyEvent | None:
        length = utf8_length(self.chars[0])

        for char in self.chars[1:length]:
            if not 0x80 <= char < 0xC0:
                self.chars[:1] = []
                return KeyEvent(REPLACEMENT)

        if len(self.chars) < length:
            return None

        raw = bytes(self.chars[:length])
        self.chars[:length] = []
        return KeyEvent(raw.decode("utf-8", errors="replace"))
