"""
Application configuration settings.
Spring Boot-like configuration management.
"""

import os
import logging
from pathlib import Path
from typing import Dict, Optional

from dotenv import load_dotenv
from pydantic import BaseModel

# Load environment overrides from an optional .env next to the package
env_path = Path(__file__).parent.parent / '.env'
load_dotenv(env_path)


def _env_float(name: str, default: Optional[float]) -> Optional[float]:
    """Read a float from the environment, keeping the default when unset."""
    value = os.getenv(name)
    if value is None or value == "":
        return default
    return float(value)


class APIConfig(BaseModel):
    """API configuration settings."""

    title: str = "PVPC Electricity Price API"
    description: str = "REST API for today's Spanish PVPC hourly electricity prices, cheap-hour detection and price charts"
    version: str = "1.0.0"
    host: str = os.getenv("PVPC_API_HOST", "0.0.0.0")
    port: int = int(os.getenv("PVPC_API_PORT", "8000"))
    reload: bool = False
    log_level: str = os.getenv("PVPC_LOG_LEVEL", "INFO")

    # CORS settings
    allow_origins: list = ["*"]
    allow_credentials: bool = True
    allow_methods: list = ["*"]
    allow_headers: list = ["*"]


class REEConfig(BaseModel):
    """Red Eléctrica de España (REE) apidatos endpoint settings."""

    base_url: str = "https://apidatos.ree.es/es/datos/mercados/precios-mercados-tiempo-real"
    time_trunc: str = "hour"
    geo_trunc: str = "electric_system"
    geo_limit: str = "peninsular"
    geo_ids: str = "8741"
    request_timeout: Optional[float] = _env_float("PVPC_REQUEST_TIMEOUT", 30.0)
    headers: Dict[str, str] = {
        "Accept": "application/json",
        "Content-Type": "application/json",
        "Host": "apidatos.ree.es",
    }


class PricingConfig(BaseModel):
    """Constants of the price scheme shown by the API."""

    market: str = "PVPC"
    units: str = "€/kWh"
    timezone: str = "Europe/Madrid"
    # REE publishes €/MWh
    mwh_to_kwh_divisor: float = 1000.0
    cheap_percentile: float = 0.33


class ApplicationConfig:
    """Main application configuration."""

    def __init__(self):
        self.api = APIConfig()
        self.ree = REEConfig()
        self.pricing = PricingConfig()

    @property
    def log_level(self) -> int:
        """Resolve the configured log level name to a logging constant."""
        return getattr(logging, self.api.log_level.upper(), logging.INFO)


# Global configuration instance
app_config = ApplicationConfig()
