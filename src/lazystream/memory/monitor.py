"""Memory monitoring and pressure detection."""

import time
import logging
import psutil
from enum import Enum
from typing import List, Optional
from dataclasses import dataclass
from abc import ABC, abstractmethod

from lazystream.config import config

logger = logging.getLogger(__name__)


class MemoryPressureLevel(Enum):
    """Memory pressure levels."""
    NONE = 0
    LOW = 1
    MEDIUM = 2
    HIGH = 3
    CRITICAL = 4

    def __gt__(self, other):
        if not isinstance(other, MemoryPressureLevel):
            return NotImplemented
        return self.value > other.value

    def __ge__(self, other):
        if not isinstance(other, MemoryPressureLevel):
            return NotImplemented
        return self.value >= other.value

    @classmethod
    def for_percent(cls, percent: float) -> 'MemoryPressureLevel':
        """Map a usage percentage onto a pressure level."""
        if percent >= 95:
            return cls.CRITICAL
        elif percent >= 85:
            return cls.HIGH
        elif percent >= 70:
            return cls.MEDIUM
        elif percent >= 50:
            return cls.LOW
        return cls.NONE


@dataclass
class MemoryInfo:
    """Process memory usage measured against the configured limit."""
    limit: int
    rss: int
    percent: float
    pressure_level: MemoryPressureLevel
    timestamp: float

    def __str__(self) -> str:
        return (f"Memory: {self.percent:.1f}% of limit "
                f"({config.format_bytes(self.rss)}/{config.format_bytes(self.limit)}), "
                f"Pressure: {self.pressure_level.name}")


class MemoryPressureHandler(ABC):
    """Abstract base class for memory pressure handlers."""

    @abstractmethod
    def can_handle(self, level: MemoryPressureLevel, info: MemoryInfo) -> bool:
        """Check if this handler should handle the given pressure level."""
        pass

    @abstractmethod
    def handle(self, level: MemoryPressureLevel, info: MemoryInfo) -> None:
        """Handle memory pressure."""
        pass


class MemoryMonitor:
    """Watch the current process while terminal operators walk a stream."""

    def __init__(self, memory_limit: Optional[int] = None):
        """
        Initialize memory monitor.

        Args:
            memory_limit: Custom memory limit in bytes (None for the configured limit)
        """
        self._memory_limit = memory_limit
        self.handlers: List[MemoryPressureHandler] = []
        self._process = psutil.Process()

    @property
    def memory_limit(self) -> int:
        return self._memory_limit or config.memory_limit

    def add_handler(self, handler: MemoryPressureHandler) -> None:
        """Add a memory pressure handler."""
        self.handlers.append(handler)

    def remove_handler(self, handler: MemoryPressureHandler) -> None:
        """Remove a memory pressure handler."""
        if handler in self.handlers:
            self.handlers.remove(handler)

    def get_memory_info(self) -> MemoryInfo:
        """Get current memory information."""
        limit = max(1, self.memory_limit)
        rss = self._process.memory_info().rss
        percent = (rss / limit) * 100

        return MemoryInfo(
            limit=limit,
            rss=rss,
            percent=percent,
            pressure_level=MemoryPressureLevel.for_percent(percent),
            timestamp=time.time()
        )

    def check_memory_pressure(self) -> MemoryPressureLevel:
        """Check current memory pressure and notify handlers."""
        info = self.get_memory_info()

        for handler in self.handlers:
            if handler.can_handle(info.pressure_level, info):
                try:
                    handler.handle(info.pressure_level, info)
                except Exception:
                    # A failing handler must not abort the traversal
                    logger.exception("Memory pressure handler %r failed", handler)

        return info.pressure_level


class TraversalWatch:
    """Per-traversal element counter that polls the monitor periodically."""

    def __init__(self, operation: str, monitor: Optional[MemoryMonitor] = None):
        self.operation = operation
        self.monitor = monitor
        self.consumed = 0

    def tick(self) -> None:
        self.consumed += 1
        if not config.enable_memory_monitor:
            return
        if self.consumed % config.memory_check_interval == 0:
            level = (self.monitor or monitor).check_memory_pressure()
            logger.debug("%s: %d elements consumed, memory pressure %s",
                         self.operation, self.consumed, level.name)

    def done(self) -> None:
        logger.debug("%s: finished after %d elements", self.operation, self.consumed)


# Global monitor instance
monitor = MemoryMonitor()
