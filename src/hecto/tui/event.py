from dataclasses import dataclass, field
from typing import Literal, cast

type Modifier = Literal["ctrl", "shift"]

MODIFIERS: tuple[Modifier, ...] = ("ctrl", "shift")


@dataclass(frozen=True)
class KeyEvent:
    code: str
    modifiers: frozenset[Modifier] = field(default_factory=frozenset)

    @property
    def name(self) -> str:
        parts = [modifier for modifier in MODIFIERS if modifier in self.modifiers]
        parts.append(self.code)
        return "+".join(parts)

    @classmethod
    def parse(cls, name: str) -> "KeyEvent":
        # a lone "+" is a key in itself
        *modifiers, code = name.split("+") if name != "+" else [name]
        for modifier in modifiers:
            if modifier not in MODIFIERS:
                raise ValueError(f"unknown modifier {modifier!r} in {name!r}")
        return cls(code, cast(frozenset[Modifier], frozenset(modifiers)))


@dataclass(frozen=True)
class ResizeEvent:
    width: int
    height: int


@dataclass(frozen=True)
class MouseEvent:
    button: int
    x: int
    y: int
    pressed: bool


type InputEvent = KeyEvent | ResizeEvent | MouseEvent
