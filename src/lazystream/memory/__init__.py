"""Memory monitoring for terminal stream traversals."""

from lazystream.memory.monitor import (
    MemoryMonitor,
    MemoryPressureLevel,
    MemoryInfo,
    MemoryPressureHandler,
    TraversalWatch,
    monitor,
)
from lazystream.memory.handlers import (
    LoggingHandler,
    GarbageCollectionHandler,
)

__all__ = [
    "MemoryMonitor",
    "MemoryPressureLevel",
    "MemoryInfo",
    "MemoryPressureHandler",
    "TraversalWatch",
    "LoggingHandler",
    "GarbageCollectionHandler",
    "monitor",
    "install_default_handlers",
]


def install_default_handlers() -> None:
    """Attach the logging and garbage collection handlers to the global monitor once."""
    for handler_type in (LoggingHandler, GarbageCollectionHandler):
        if not any(isinstance(h, handler_type) for h in monitor.handlers):
            monitor.add_handler(handler_type())
