"""Generic utilities"""

from typing import Optional
from contextlib import contextmanager
import sys
import time
import logging


def eprint(*args, **kwargs):
    print(*args, file=sys.stderr, flush=True, **kwargs)


@contextmanager
def timeAndLog(logger: logging.Logger, startMessage: Optional[str] = None, doneMessage: Optional[str] = None, level=logging.INFO):
    """Logs <startMessage>, runs the body, then logs <doneMessage> % (elapsed seconds).\n
    Nothing is logged for the end of the task if the body raises."""
    if startMessage is not None:
        logger.log(level, startMessage)
    startTime = time.perf_counter()
    yield
    if doneMessage is not None:
        logger.log(level, doneMessage, time.perf_counter() - startTime)
