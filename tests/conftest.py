import os
from collections.abc import Iterator
from pathlib import Path
from unittest.mock import patch

import pytest

from hecto.config import get_config
from hecto.log import setup_logging

from .utils import FakeTty

# Always use default config in tests


@pytest.fixture(autouse=True)
def config_path(tmp_path: Path) -> Iterator[Path]:
    config_path = tmp_path / "config.toml"
    with patch("hecto.config.get_config_path", return_value=config_path):
        get_config.cache_clear()
        yield config_path
    get_config.cache_clear()


@pytest.fixture(autouse=True)
def silence_logging() -> Iterator[None]:
    yield
    setup_logging(None)


@pytest.fixture
def fake_tty() -> Iterator[FakeTty]:
    with (
        patch(
            "os.get_terminal_size", return_value=os.terminal_size((80, 24))
        ) as get_terminal_size,
        patch("tty.setraw", return_value=["attrs"]) as setraw,
        patch("termios.tcsetattr") as tcsetattr,
    ):
        yield FakeTty(get_terminal_size, setraw, tcsetattr)
