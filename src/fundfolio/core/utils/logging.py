"""
loguru setup for FundFolio hosts.

Library modules log through ``from loguru import logger`` and never add
sinks themselves. A host (the CLI, a test, an embedding app) calls
:func:`setup_logging` once to decide where records go.
"""

import os
import sys

from loguru import logger

CONSOLE_FORMAT = "<level>[{level.name}]</level> {message}"
FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level} | {name}:{function} | {message}"


def resolve_log_file(log_file: str | None, log_dir: str | os.PathLike | None = None) -> str | None:
    """Expand ``~`` and place bare file names under *log_dir*."""
    if not log_file:
        return None
    path = os.path.expanduser(log_file)
    if log_dir is not None and not os.path.isabs(path):
        path = os.path.join(os.path.expanduser(str(log_dir)), path)
    return path


def setup_logging(
    level: str = "WARNING",
    log_file: str | None = None,
    rotation: str = "10 MB",
    retention: str = "7 days",
) -> list[int]:
    """
    Replace every loguru sink with a stderr sink and, optionally, a rotating file.

    Args:
        level: Minimum level for both sinks (DEBUG, INFO, WARNING, ...).
        log_file: File sink path. Parent directories are created.
        rotation: When the file sink rolls over.
        retention: How long rolled files are kept.

    Returns:
        The loguru handler ids that were added.
    """
    logger.remove()
    handlers = [logger.add(sys.stderr, level=level, format=CONSOLE_FORMAT)]

    if log_file:
        os.makedirs(os.path.dirname(log_file) or ".", exist_ok=True)
        handlers.append(
            logger.add(log_file, level=level, format=FILE_FORMAT, rotation=rotation, retention=retention)
        )
    return handlers
