"""Configuration management for the Fresco backend."""
import os
from typing import Final
from pathlib import Path

from dotenv import load_dotenv

# Load environment variables from .env file if it exists
env_path = Path(__file__).parent.parent.parent / '.env'
if env_path.exists():
    load_dotenv(env_path)

# Application Settings
APP_HOST: Final[str] = os.getenv('APP_HOST', '0.0.0.0')
APP_PORT: Final[int] = int(os.getenv('APP_PORT', '8000'))
DEBUG: Final[bool] = os.getenv('DEBUG', 'False').lower() == 'true'
LOG_LEVEL: Final[str] = os.getenv('LOG_LEVEL', 'DEBUG' if DEBUG else 'INFO').upper()

# Pantry Alerts Configuration
LOW_STOCK_THRESHOLD: Final[dict[str, float]] = {
    "g": float(os.getenv('LOW_STOCK_THRESHOLD_G', '200')),
    "ml": float(os.getenv('LOW_STOCK_THRESHOLD_ML', '250')),
    "uds": float(os.getenv('LOW_STOCK_THRESHOLD_UDS', '2')),
}
