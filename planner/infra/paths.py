from planner.utilities.config import DATA_DIR
from planner.utilities.constants import RECIPES_KEY, WEEKLY_PLAN_KEY

# Centralized paths for data files (single source of truth)
RECIPES_FILE = (DATA_DIR / f'{RECIPES_KEY}.json').resolve()
PLAN_FILE = (DATA_DIR / f'{WEEKLY_PLAN_KEY}.json').resolve()
IMAGES_DIR = (DATA_DIR / 'images').resolve()

__all__ = ['DATA_DIR', 'RECIPES_FILE', 'PLAN_FILE', 'IMAGES_DIR']
