"""Traversal configuration."""

from dataclasses import dataclass
from typing import Optional

from .exceptions import ConfigurationError


@dataclass(frozen=True)
class TraversalConfig:
    """
    Settings applied to a single traversal.

    Attributes:
        max_memory_mb (Optional[float]): Ceiling on resident memory growth during
            a traversal, in megabytes. None disables the memory guard.
        memory_check_interval (float): Minimum number of seconds between two
            memory samples
        trace (bool): Log every visited node at DEBUG level
    """

    max_memory_mb: Optional[float] = None
    memory_check_interval: float = 0.1
    trace: bool = False

    def __post_init__(self):
        """Validate configuration values."""
        if self.max_memory_mb is not None and self.max_memory_mb <= 0:
            raise ConfigurationError(
                f"max_memory_mb must be positive, got {self.max_memory_mb}"
            )
        if self.memory_check_interval < 0:
            raise ConfigurationError(
                f"memory_check_interval must be non-negative, got {self.memory_check_interval}"
            )


DEFAULT_CONFIG = TraversalConfig()
