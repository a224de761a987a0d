import argparse
import logging
import sys
from pathlib import Path
from typing import cast

from .config import get_config
from .editor import Editor
from .log import setup_logging
from .tui.terminal import TerminalUnavailable
from .version import NAME, VERSION

logger = logging.getLogger(__name__)

parser = argparse.ArgumentParser(prog="hecto")
parser.add_argument("--version", action="version", version=f"{NAME} {VERSION}")
parser.add_argument("--log-file", type=Path)
parser.add_argument(
    "--log-level", choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
)


def main(argv: list[str] | None = None) -> int:
    args = parser.parse_args(argv)
    log_file = cast(Path | None, args.log_file)
    log_level = cast(str | None, args.log_level)

    config = get_config()
    setup_logging(
        log_file or config.logging.file,
        log_level or config.logging.level,
    )

    try:
        editor = Editor(config=config)
    except TerminalUnavailable as e:
        logger.error("terminal unavailable: %s", e)
        print(f"hecto: {e}", file=sys.stderr)
        return 1

    editor.run()
    return 0
