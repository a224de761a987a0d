import os
import tomllib
from functools import cached_property, lru_cache
from pathlib import Path
from typing import Literal

from pydantic import BaseModel, PositiveInt, computed_field

from hecto.tui.keyboard import Key

type LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class InputConfig(BaseModel):
    poll_interval_ms: PositiveInt = 16
    mouse: bool = False


class KeybindingsConfig(BaseModel):
    quit: list[Key] = ["ctrl+q"]


class LoggingConfig(BaseModel):
    file: Path | None = None
    level: LogLevel = "INFO"


class Config(BaseModel):
    input: InputConfig = InputConfig()
    keybindings: KeybindingsConfig = KeybindingsConfig()
    logging: LoggingConfig = LoggingConfig()

    @computed_field
    @cached_property
    def keymap(self) -> dict[Key, str]:
        return {
            key: command
            for command in KeybindingsConfig.model_fields
            for key in getattr(self.keybindings, command)
        }


def get_config_path() -> Path:
    try:
        xdg_config_home = Path(os.environ["XDG_CONFIG_HOME"])
    except KeyError:
        xdg_config_home = Path.home() / ".config"
    return xdg_config_home / "hecto" / "config.toml"


@lru_cache(1)
def get_config() -> Config:
    config_path = get_config_path()
    try:
        with config_path.open("rb") as f:
            data = tomllib.load(f)
    except FileNotFoundError:
        return Config()
    else:
        return Config.model_validate(data)
