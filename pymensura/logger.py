"""
Logging (:mod:`pymensura.logger`)
=================================

.. currentmodule:: pymensura.logger

Library logger for ``pymensura``.  Messages are written to the console
at ``INFO`` level and above.  Library code only logs detailed steps
(definition resolution, scale pivot conversions, etc) at ``DEBUG``
level, which can be captured in a file using `enable_file_logging`.

Examples
--------
>>> from pymensura.logger import enable_file_logging, disable_file_logging
>>> enable_file_logging('pymensura_debug.log')  # doctest: +SKIP
>>> disable_file_logging()
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
console_handler.setLevel(logging.DEBUG)

logger: logging.Logger = logging.getLogger('pymensura')
logger.addHandler(console_handler)
logger.setLevel(logging.INFO)

# Added by enable_file_logging().
file_handler: Optional[logging.FileHandler] = None


def enable_file_logging(filename: str = "debug.log") -> None:
    """
    Log all messages (``DEBUG`` level and above) to a file, as well as
    the console.  The logger level is lowered to ``DEBUG``.  Any file
    previously enabled is closed first.

    Parameters
    ----------
    filename : str, default = "debug.log"
        Log file, opened in append mode.
    """
    global file_handler
    if file_handler is not None:
        disable_file_logging()

    file_handler = logging.FileHandler(filename)
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(
        logging.Formatter("%(asctime)s:%(levelname)s:%(message)s"))
    logger.addHandler(file_handler)
    logger.setLevel(logging.DEBUG)


def disable_file_logging() -> None:
    """
    Stop logging to file and close the file.  The logger returns to
    ``INFO`` level.  Has no effect if file logging is not enabled.
    """
    global file_handler
    if file_handler is not None:
        logger.removeHandler(file_handler)
        file_handler.close()
        file_handler = None
        logger.setLevel(logging.INFO)
