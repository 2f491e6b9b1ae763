import logging
import json
import sys
import time
import uuid
import os

class _C:
    RESET = "\033[0m"
    RED = "\033[31m"
    GREEN = "\033[32m"
    YELLOW = "\033[33m"
    CYAN = "\033[36m"
    MAGENTA = "\033[35m"


def _use_color() -> bool:
    # Color only if explicitly enabled and terminal supports it.
    return os.getenv("LOG_COLOR", "0") == "1" and sys.stdout.isatty()

def _event_color(level: int) -> str:
    if level >= logging.ERROR:
        return _C.RED
    if level >= logging.WARNING:
        return _C.YELLOW
    if level <= logging.DEBUG:
        return _C.CYAN
    return _C.MAGENTA

def _log_level() -> int:
    level = logging.getLevelName(os.getenv("LOG_LEVEL", "INFO").upper())
    return level if isinstance(level, int) else logging.INFO

def get_logger():
    logger = logging.getLogger("columntypes")
    if logger.handlers:
        return logger

    logger.setLevel(_log_level())
    handler = logging.StreamHandler(sys.stdout)
    formatter = logging.Formatter('%(message)s')
    handler.setFormatter(formatter)
    logger.addHandler(handler)
    logger.propagate = False
    return logger

logger = get_logger()

def set_log_stream(stream):
    """
    Point the event handler at another stream. Returns the previous one.
    """
    handler = logger.handlers[0]
    previous = handler.stream
    handler.setStream(stream)
    return previous

# Request ID Generator
def generate_request_id():
    return str(uuid.uuid4())

# Structured Log Event
def log_event(event_type: str, payload: dict, level: int = logging.INFO):
    if not logger.isEnabledFor(level):
        return

    record = {"event_type": event_type, "level": logging.getLevelName(level), **payload}
    text = json.dumps(record, default=str)

    if _use_color():
        logger.log(level, f"{_event_color(level)}{text}{_C.RESET}")
    else:
        logger.log(level, text)

# Timer Utility
class RequestTimer:
    """
    Simple execution timer.
    """
    def __init__(self):
        self.start_time = time.time()

    def duration(self):
        return round(time.time() - self.start_time, 4)
