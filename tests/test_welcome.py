import pytest

from hecto.tui.terminal import TerminalSize
from hecto.version import VERSION
from hecto.welcome import Welcome


@pytest.mark.parametrize("height", [3, 4, 5, 10, 24, 100])
def test_rows(height: int) -> None:
    lines = list(Welcome().render(TerminalSize(80, height)))

    assert len(lines) == height - 1
    banners = [i for i, line in enumerate(lines) if line != "~"]
    # rows are counted from 1, the banner sits a third of the way down
    assert banners == [height // 3 - 1]


@pytest.mark.parametrize(
    "width,expected",
    [
        (0, ""),
        (1, "~"),
        (20, "~Hecto editor -- ver"),
        (29, "~Hecto editor -- version 0.1."),
        (31, "~Hecto editor -- version 0.1.0"),
        (33, "~ Hecto editor -- version 0.1.0"),
        (80, "~" + " " * 24 + "Hecto editor -- version 0.1.0"),
    ],
)
def test_banner(width: int, expected: str) -> None:
    assert VERSION == "0.1.0"
    assert Welcome().banner(width) == expected


@pytest.mark.parametrize(
    "width,expected",
    [
        (4, "~hel"),
        (5, "~hell"),
        (9, "~ hello"),
        (11, "~  hello"),
        (12, "~  hello"),
    ],
)
def test_banner_custom_message(width: int, expected: str) -> None:
    assert Welcome("hello").banner(width) == expected


def test_banner_never_wider_than_terminal() -> None:
    for width in range(60):
        assert len(Welcome().banner(width)) <= width
