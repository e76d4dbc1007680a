"""
Base service interface for business logic.
"""

import logging
from abc import ABC, abstractmethod
from typing import Optional

from fastapi import HTTPException


class BaseService(ABC):
    """Abstract base service holding a repository and a module logger."""

    def __init__(self, repository=None):
        """Initialize service with repository dependency."""
        self.repository = repository
        self.logger = logging.getLogger(self.__class__.__module__)

    @abstractmethod
    def validate_input(self, **kwargs) -> bool:
        """Validate input parameters."""
        pass

    def handle_exception(self, e: Exception, context: Optional[str] = None) -> None:
        """Log an unexpected error and surface it as an HTTP 500."""
        error_message = f"{context}: {str(e)}" if context else str(e)
        self.logger.error(f"❌ {error_message}")
        raise HTTPException(status_code=500, detail=error_message)
