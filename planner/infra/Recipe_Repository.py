"""Recipe catalog persistence (the "recipes" storage key)."""
import json
import logging
import os
import shutil
import tempfile
from pathlib import Path
from typing import List, Optional

from planner.domain.Recipe import Recipe, RecipeId, recipes_from_dicts
from planner.infra import paths

logger = logging.getLogger(__name__)


def atomic_write_json(path: Path, data) -> None:
    """Write JSON to `path` through a temp file in the same directory, then move it in place."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    fd, tmp_path = tempfile.mkstemp(dir=str(path.parent), prefix=f".{path.stem}_", suffix=".json")
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as tmp:
            json.dump(data, tmp, indent=2, ensure_ascii=False)
        shutil.move(tmp_path, path)
    finally:
        if os.path.exists(tmp_path):
            os.remove(tmp_path)


class RecipeRepository:
    def __init__(self, path: Optional[Path] = None):
        self.path = Path(path or paths.RECIPES_FILE)

    def load(self) -> List[Recipe]:
        """Read recipes from JSON file with proper error handling."""
        try:
            with open(self.path, 'r', encoding='utf-8') as f:
                recipes_data = json.load(f)
            return recipes_from_dicts(recipes_data if isinstance(recipes_data, list) else [])
        except FileNotFoundError:
            logger.warning(f"Recipes file not found: {self.path}. Returning empty list.")
            return []
        except json.JSONDecodeError as e:
            logger.error(f"Invalid JSON in recipes file: {e}")
            return []

    def save(self, recipes: List[Recipe]) -> None:
        atomic_write_json(self.path, [r.to_dict() for r in recipes])

    def get(self, recipe_id: RecipeId) -> Recipe:
        for recipe in self.load():
            if recipe.id == recipe_id:
                return recipe
        raise KeyError(recipe_id)

    def add(self, recipe: Recipe) -> List[Recipe]:
        recipes = self.load()
        taken = {r.id for r in recipes}
        # Millisecond ids can collide when recipes are created back to back
        while isinstance(recipe.id, int) and recipe.id in taken:
            recipe.id += 1
        recipes.append(recipe)
        self.save(recipes)
        logger.info(f"Added recipe {recipe.title!r} (#{recipe.id})")
        return recipes

    def extend(self, new_recipes: List[Recipe]) -> List[Recipe]:
        '''Appends recipes as-is: no de-duplication by id or title.'''
        recipes = self.load() + list(new_recipes)
        self.save(recipes)
        return recipes

    def update(self, recipe: Recipe) -> List[Recipe]:
        '''Replaces the recipe with the same id, keeping its position.'''
        recipes = self.load()
        for i, existing in enumerate(recipes):
            if existing.id == recipe.id:
                recipes[i] = recipe
                self.save(recipes)
                return recipes
        raise KeyError(recipe.id)

    def remove(self, recipe_id: RecipeId) -> List[Recipe]:
        '''Removes the first recipe with this id (imports may duplicate ids).'''
        remaining = self.load()
        for i, existing in enumerate(remaining):
            if existing.id == recipe_id:
                del remaining[i]
                break
        else:
            raise KeyError(recipe_id)
        self.save(remaining)
        logger.info(f"Removed recipe #{recipe_id}")
        return remaining
