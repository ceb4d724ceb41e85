"""Configuration management for the Weekly Meal Planner."""
import os
from typing import Final, Optional
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

# File Paths
BASE_DIR: Final[Path] = Path(__file__).parent.parent
DATA_DIR: Final[Path] = Path(os.getenv('PLANNER_DATA_DIR', str(BASE_DIR / 'data')))

# Optional JSON document overriding the shopping list keyword sets
_keywords_file = os.getenv('CATEGORY_KEYWORDS_FILE', '')
CATEGORY_KEYWORDS_FILE: Final[Optional[Path]] = Path(_keywords_file) if _keywords_file else None
