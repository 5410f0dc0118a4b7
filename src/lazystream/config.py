"""
Configuration management for stream traversal.
"""

from typing import ClassVar, Optional
from dataclasses import dataclass, field
import psutil


@dataclass
class StreamConfig:
    """Global configuration for terminal stream operations."""

    # Memory limits
    memory_limit: int = field(default_factory=lambda: int(psutil.virtual_memory().total * 0.8))

    # Monitoring during terminal traversals
    enable_memory_monitor: bool = True
    memory_check_interval: int = 10_000  # elements between checks
    log_memory_pressure_from: str = "MEDIUM"
    collect_garbage_under_pressure: bool = False

    _instance: ClassVar[Optional['StreamConfig']] = None

    def __post_init__(self):
        """Normalize numeric settings."""
        self.memory_check_interval = max(1, int(self.memory_check_interval))

    @classmethod
    def get_instance(cls) -> 'StreamConfig':
        """Get singleton instance."""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    @classmethod
    def set_defaults(cls, **kwargs) -> None:
        """Set default configuration values."""
        instance = cls.get_instance()
        for key, value in kwargs.items():
            if hasattr(instance, key):
                setattr(instance, key, value)
        instance.__post_init__()

    def format_bytes(self, bytes: int) -> str:
        """Format bytes as human-readable string."""
        for unit in ['B', 'KB', 'MB', 'GB', 'TB']:
            if bytes < 1024.0:
                return f"{bytes:.2f} {unit}"
            bytes /= 1024.0
        return f"{bytes:.2f} PB"


# Global configuration instance
config = StreamConfig.get_instance()
