"""
Base repository interface for data access.
"""

from abc import ABC, abstractmethod
from typing import Any


class BaseRepository(ABC):
    """Abstract base repository interface."""

    @abstractmethod
    def find_all(self) -> Any:
        """Find all records."""
        pass
