import logging
import threading
from collections import deque
from typing import Deque, Dict, List, Optional

from switchbot_adv.config import get_settings

DECODER_LOGGER_NAME = "switchbot_adv.decode"


class RingBufferHandler(logging.Handler):
    def __init__(self, max_entries: int = 200):
        super().__init__()
        self.max_entries = max_entries
        self._events: Deque[Dict] = deque(maxlen=max_entries)
        self._lock = threading.Lock()

    def emit(self, record: logging.LogRecord) -> None:
        event = {
            "event": record.getMessage(),
            "level": record.levelname,
            "ts": record.created,
            "details": getattr(record, "details", {}),
        }
        with self._lock:
            self._events.append(event)

    def get_events(self) -> List[Dict]:
        with self._lock:
            return list(self._events)

    def clear(self) -> None:
        with self._lock:
            self._events.clear()


_create_lock = threading.Lock()


def create_logger(name: str, ring_size: int, level: str | int = logging.INFO) -> logging.Logger:
    logger = logging.getLogger(name)
    with _create_lock:
        if logger.handlers:
            return logger
        logger.setLevel(level)
        handler = RingBufferHandler(max_entries=ring_size)
        formatter = logging.Formatter("%(asctime)s %(levelname)s %(message)s")
        handler.setFormatter(formatter)
        logger.addHandler(handler)
    return logger


def get_decoder_logger() -> logging.Logger:
    settings = get_settings()
    logger = create_logger(DECODER_LOGGER_NAME, settings.diagnostic_ring_size, settings.log_level)
    logger.setLevel(settings.log_level)
    return logger


def get_diagnostics() -> Optional[RingBufferHandler]:
    for handler in get_decoder_logger().handlers:
        if isinstance(handler, RingBufferHandler):
            return handler
    return None
