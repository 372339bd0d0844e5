"""Root logger setup shared by the CLI commands"""

import logging
import sys
from typing import Optional


LOG_FORMAT = "%(levelname)s: %(message)s"
TRACE_FORMAT = "[%(asctime)s] [%(levelname)s] [%(name)s] %(message)s"


def configure_logging(level: int | str, log_file: Optional[str] = None, trace: bool = False) -> logging.Logger:
    """Install a stderr handler (and optional file handler) on the root logger.

    `level` is a logging constant or a name such as "INFO"; unknown names
    fall back to WARNING. Repeated calls close and replace earlier handlers.
    """
    if isinstance(level, int):
        resolved = level
    else:
        resolved = logging.getLevelNamesMapping().get(str(level).upper(), logging.WARNING)
    formatter = logging.Formatter(TRACE_FORMAT if trace else LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")

    root = logging.getLogger()
    root.setLevel(resolved)
    for old in root.handlers[:]:
        root.removeHandler(old)
        old.close()

    console = logging.StreamHandler(sys.stderr)
    console.setFormatter(formatter)
    root.addHandler(console)

    if log_file:
        handler = logging.FileHandler(log_file, mode="a", encoding="utf-8")
        handler.setFormatter(formatter)
        root.addHandler(handler)

    return root
