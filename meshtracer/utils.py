# utils.py
import logging
import threading
import time

logger = logging.getLogger(__name__)


class ProgressReporter:
    """Thread-safe row counter that logs at most once per interval"""

    def __init__(self, total: int, interval: float = 1.0, label: str = "rows"):
        self.total = total
        self.interval = interval
        self.label = label
        self.completed = 0
        self.start_time = time.time()
        self.last_report_time = 0
        self.lock = threading.Lock()

    def update(self, count: int = 1):
        """Record finished work and log progress if enough time has passed"""
        with self.lock:
            self.completed += count
            current_time = time.time()
            finished = self.completed >= self.total
            if not finished and current_time - self.last_report_time < self.interval:
                return
            self.last_report_time = current_time
            elapsed = current_time - self.start_time
            eta = elapsed / self.completed * (self.total - self.completed)
            logger.info(f"{self.completed}/{self.total} {self.label} | "
                        f"elapsed {elapsed:.1f}s | eta {eta:.1f}s")

    @property
    def done(self) -> bool:
        with self.lock:
            return self.completed >= self.total
