"""Logger of the py_unitsgame library.

What is logged:
    - DEBUG: every generated challenge (pair, level, value gap), tuning file discovery,
      and each level change after a correct pick.
    - INFO: game start with its quantities and pair count, and game over with the score.
    - WARNING: picks on an ended game, unknown tuning keys, and config files without
      a `[pyug.tuning]` section.

Console output is on at INFO level. `pyug --debug` lowers it to DEBUG, and
`enable_file_logging` adds a DEBUG file handler for replaying a session.

Global Variables:
    - logger: Pre-configured logger instance for the library.
    - file_handler: Global file handler reference (None when file logging disabled).

Functions:
    enable_file_logging: Enable logging to a file with DEBUG level.
    disable_file_logging: Disable file logging and clean up resources.

Examples:
    ```python
    from py_unitsgame.logger import enable_file_logging, disable_file_logging, logger

    enable_file_logging("game_debug.log")
    logger.debug("Every generated challenge is now written to the file")
    disable_file_logging()
    ```
"""
import logging
from typing import Optional

__all__ = ('logger',
           'enable_file_logging',
           'disable_file_logging',
)

formatter = logging.Formatter("%(levelname)s:%(name)s:%(message)s")
console_handler = logging.StreamHandler()
console_handler.setFormatter(formatter)
console_handler.setLevel(logging.DEBUG)  # Lowest level for console

logger: logging.Logger = logging.getLogger('py_unitsgame')
logger.addHandler(console_handler)
logger.setLevel(logging.INFO)

# File handler (optional, added dynamically)
file_handler: Optional[logging.FileHandler] = None


def enable_file_logging(filename: str = "debug.log") -> None:
    """Enable logging to a file with DEBUG level output.

    Replaces any existing file handler. The file is opened in append mode.

    Args:
        filename: Name of the log file to create. Defaults to "debug.log".
    """
    global file_handler
    if file_handler is not None:
        disable_file_logging()

    file_handler = logging.FileHandler(filename)
    file_handler.setLevel(logging.DEBUG)  # Log everything to the file
    file_formatter = logging.Formatter("%(asctime)s:%(levelname)s:%(message)s")
    file_handler.setFormatter(file_formatter)
    logger.addHandler(file_handler)


def disable_file_logging() -> None:
    """Disable file logging and close the file handle.

    Safe to call when file logging is not enabled.
    """
    global file_handler
    if file_handler is not None:
        logger.removeHandler(file_handler)
        file_handler.close()
        file_handler = None
