"""Logger setup for chainhash and its experiments."""

import logging
from pathlib import Path
from typing import Optional, Union

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def get_logger(
    name: str,
    log_file: Optional[Union[str, Path]] = None,
    level: int = logging.INFO,
) -> logging.Logger:
    """Get a logger under the ``chainhash`` namespace.

    Repeated calls with the same name return the same logger without
    stacking handlers. Records propagate to the root logger; a console
    handler is attached only when the root logger has no handlers. A file
    handler is added once per distinct path.

    Args:
        name: Logger name (prefixed with "chainhash." if not already)
        log_file: Optional path of a log file to also write to
        level: Logging level

    Returns:
        Configured logging.Logger
    """
    if name != "chainhash" and not name.startswith("chainhash."):
        name = f"chainhash.{name}"
    logger = logging.getLogger(name)
    logger.setLevel(level)
    formatter = logging.Formatter(LOG_FORMAT)

    # Console output only when the application has not configured logging
    root_configured = bool(logging.getLogger().handlers)
    has_stream = any(
        type(h) is logging.StreamHandler for h in logger.handlers
    )
    if not root_configured and not has_stream:
        stream_handler = logging.StreamHandler()
        stream_handler.setFormatter(formatter)
        logger.addHandler(stream_handler)

    if log_file is not None:
        log_path = Path(log_file).resolve()
        has_file = any(
            isinstance(h, logging.FileHandler) and Path(h.baseFilename) == log_path
            for h in logger.handlers
        )
        if not has_file:
            log_path.parent.mkdir(parents=True, exist_ok=True)
            file_handler = logging.FileHandler(log_path)
            file_handler.setFormatter(formatter)
            logger.addHandler(file_handler)

    return logger
