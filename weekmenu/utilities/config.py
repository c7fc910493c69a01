"""Configuration management for the Weekly Menu Planner application."""
import os
from typing import Final
from pathlib import Path

from dotenv import load_dotenv

# Load environment variables from .env file if it exists
env_path = Path(__file__).parent.parent / '.env'
if env_path.exists():
    load_dotenv(env_path)

# Application Settings
APP_HOST: Final[str] = os.getenv('APP_HOST', '127.0.0.1')
APP_PORT: Final[int] = int(os.getenv('APP_PORT', '8000'))
DEBUG: Final[bool] = os.getenv('DEBUG', 'False').lower() == 'true'
LOG_LEVEL: Final[str] = os.getenv('LOG_LEVEL', 'INFO').upper()

# Generation / reveal
REVEAL_DELAY_SECONDS: Final[float] = float(os.getenv('REVEAL_DELAY_SECONDS', '0.6'))

# Storage caps
HISTORY_LIMIT: Final[int] = int(os.getenv('HISTORY_LIMIT', '52'))
SAMPLE_WEEK_LIMIT: Final[int] = int(os.getenv('SAMPLE_WEEK_LIMIT', '52'))

# File Paths
BASE_DIR: Final[Path] = Path(__file__).parent.parent
DATA_DIR: Final[Path] = Path(os.getenv('WEEKMENU_DATA_DIR', str(BASE_DIR / 'data'))).resolve()
