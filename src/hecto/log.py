import logging
from pathlib import Path

FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def setup_logging(file: Path | None, level: str = "INFO") -> logging.Logger:
    """
    Configure the package logger.

    Standard output belongs to the screen, so records only ever go to a file.
    Without a file the logger is silenced.
    """
    logger = logging.getLogger("hecto")
    logger.propagate = False

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    if file is None:
        logger.addHandler(logging.NullHandler())
    else:
        handler = logging.FileHandler(file, encoding="utf-8")
        handler.setFormatter(logging.Formatter(FORMAT))
        logger.addHandler(handler)

    logger.setLevel(level)
    return logger
