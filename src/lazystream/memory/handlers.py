"""Memory pressure handlers."""

import gc
import time
import logging
from typing import Dict, Optional

from lazystream.config import config
from lazystream.memory.monitor import (
    MemoryPressureHandler,
    MemoryPressureLevel,
    MemoryInfo
)


class LoggingHandler(MemoryPressureHandler):
    """Log memory pressure events.

    Without an explicit ``min_level`` the threshold follows
    ``config.log_memory_pressure_from`` at the time of each check.
    """

    def __init__(self,
                 logger: Optional[logging.Logger] = None,
                 min_level: Optional[MemoryPressureLevel] = None,
                 quiet_period: float = 60.0):
        self.logger = logger or logging.getLogger(__name__)
        self._min_level = min_level
        self.quiet_period = quiet_period
        self._last_log: Dict[MemoryPressureLevel, float] = {}

    @property
    def min_level(self) -> MemoryPressureLevel:
        if self._min_level is not None:
            return self._min_level
        return MemoryPressureLevel[config.log_memory_pressure_from.upper()]

    def can_handle(self, level: MemoryPressureLevel, info: MemoryInfo) -> bool:
        return level >= self.min_level

    def handle(self, level: MemoryPressureLevel, info: MemoryInfo) -> None:
        # Only log a level again once the quiet period has passed
        last_time = self._last_log.get(level)
        if last_time is not None and time.time() - last_time < self.quiet_period:
            return

        self._last_log[level] = time.time()

        if level == MemoryPressureLevel.CRITICAL:
            self.logger.critical("CRITICAL memory pressure while traversing stream: %s", info)
        elif level == MemoryPressureLevel.HIGH:
            self.logger.error("HIGH memory pressure while traversing stream: %s", info)
        elif level == MemoryPressureLevel.MEDIUM:
            self.logger.warning("MEDIUM memory pressure while traversing stream: %s", info)
        else:
            self.logger.info("Memory pressure while traversing stream: %s", info)


class GarbageCollectionHandler(MemoryPressureHandler):
    """Collect garbage under memory pressure.

    Active only while ``config.collect_garbage_under_pressure`` is set.
    """

    def __init__(self, min_interval: float = 5.0):
        self.min_interval = min_interval
        self._last_gc = 0.0

    def can_handle(self, level: MemoryPressureLevel, info: MemoryInfo) -> bool:
        return config.collect_garbage_under_pressure and level >= MemoryPressureLevel.MEDIUM

    def handle(self, level: MemoryPressureLevel, info: MemoryInfo) -> None:
        now = time.time()
        if now - self._last_gc < self.min_interval:
            return

        self._last_gc = now

        # Full collection only at high pressure
        if level >= MemoryPressureLevel.HIGH:
            gc.collect(2)
        else:
            gc.collect(0)
