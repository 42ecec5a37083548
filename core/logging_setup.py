# core/logging_setup.py

import logging
import os

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(
    data_dir: str,
    log_file: str = "teachermate.log",
    level: int = logging.INFO,
    console: bool = False,
) -> logging.Logger:
    """
    Configures the root logger for the CLI session.

    Log records go to `<data_dir>/logs/<log_file>` so they never interleave with menu output.
    A console handler at DEBUG is added only when `console` is True.

    Returns:
        The configured root logger.
    """
    log_dir = os.path.join(data_dir, "logs")
    os.makedirs(log_dir, exist_ok=True)

    root = logging.getLogger()
    root.setLevel(logging.DEBUG if console else level)

    if not root.handlers:
        formatter = logging.Formatter(LOG_FORMAT)

        file_handler = logging.FileHandler(os.path.join(log_dir, log_file))
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        root.addHandler(file_handler)

        if console:
            console_handler = logging.StreamHandler()
            console_handler.setLevel(logging.DEBUG)
            console_handler.setFormatter(formatter)
            root.addHandler(console_handler)

    return root
