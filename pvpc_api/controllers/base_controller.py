"""
Base controller interface for API endpoints.

All controllers inherit from BaseController and implement
``_setup_routes()``, registering their handlers on ``self.router``.
Unexpected errors are converted to HTTP 500 through ``handle_exception``;
``HTTPException`` raised by services passes through unchanged.

Usage:
    ```python
    class MyController(BaseController):
        def _setup_routes(self):
            @self.router.get("/my-endpoint")
            async def my_endpoint():
                return {"message": "Hola"}
    ```
"""

import logging
from abc import ABC, abstractmethod
from fastapi import APIRouter, HTTPException
from typing import Optional


class BaseController(ABC):
    """
    Abstract base controller for consistent API endpoint patterns.

    Attributes:
        router (APIRouter): FastAPI router instance for endpoint registration
        logger (logging.Logger): Logger named after the concrete controller module
    """

    def __init__(self):
        """Create the router and register the concrete controller's routes."""
        self.router = APIRouter()
        self.logger = logging.getLogger(self.__class__.__module__)
        self._setup_routes()

    @abstractmethod
    def _setup_routes(self):
        """Setup routes for this controller."""
        pass

    def handle_exception(self, e: Exception, context: Optional[str] = None) -> None:
        """
        Handle exceptions consistently across all controllers.

        Args:
            e (Exception): The exception that occurred
            context (Optional[str]): Where the error occurred

        Raises:
            HTTPException: Always raises HTTP 500 with error details
        """
        error_message = f"{context}: {str(e)}" if context else str(e)
        self.logger.error(f"❌ {error_message}")
        raise HTTPException(status_code=500, detail=error_message)
