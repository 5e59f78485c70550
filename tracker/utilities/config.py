"""Configuration management for the Food Tracker application."""
import os
from typing import Final
from pathlib import Path

from dotenv import load_dotenv

# Load environment variables from .env file if it exists
env_path = Path(__file__).parent.parent / '.env'
if env_path.exists():
    load_dotenv(env_path)

# Application Settings
APP_HOST: Final[str] = os.getenv('APP_HOST', '0.0.0.0')
APP_PORT: Final[int] = int(os.getenv('APP_PORT', '8000'))
DEBUG: Final[bool] = os.getenv('DEBUG', 'False').lower() == 'true'
LOG_LEVEL: Final[str] = os.getenv('LOG_LEVEL', 'DEBUG' if DEBUG else 'INFO').upper()

# Entry lifecycle
EXPIRATION_DAYS: Final[int] = int(os.getenv('EXPIRATION_DAYS', '30'))
CHECKLIST_RESET_DELAY: Final[float] = float(os.getenv('CHECKLIST_RESET_DELAY', '2.0'))
EXPIRING_SOON_DAYS: Final[int] = int(os.getenv('EXPIRING_SOON_DAYS', '3'))

# File Paths
BASE_DIR: Final[Path] = Path(__file__).parent.parent
DATA_DIR: Final[Path] = Path(os.getenv('TRACKER_DATA_DIR', str(BASE_DIR / 'data'))).resolve()
