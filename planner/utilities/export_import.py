"""
Export and Import functionality for the recipe catalog.

The interchange format is a JSON array of recipe objects using the catalog's
own field names (id, title, ingredients, instructions, image, tags).
"""
import json
from pathlib import Path
from typing import Iterable, List, Optional
import logging

from planner.domain.Recipe import Recipe, RecipeId
from planner.infra.Recipe_Repository import RecipeRepository
from planner.utilities.constants import EXPORT_FILE_NAME, RECIPES_KEY

logger = logging.getLogger(__name__)

IMPORT_ERROR_MESSAGE = "Error importing recipes. Please make sure the file is a valid JSON."


class RecipeImportError(ValueError):
    """The import document could not be turned into recipes."""


def export_recipes_document(recipes: List[Recipe]) -> str:
    """Serialize the whole catalog to the interchange format."""
    return json.dumps([r.to_dict() for r in recipes], ensure_ascii=False)


def parse_recipes_document(text, existing_ids: Iterable[RecipeId] = ()) -> List[Recipe]:
    """Parse an interchange document completely or not at all.

    Explicit ids are kept verbatim. Entries without an id get a fresh one that
    collides neither with `existing_ids` nor with any other id in the batch.

    Raises:
        RecipeImportError: invalid JSON, not an array of objects, or an id
            that is neither an integer nor a string.
    """
    try:
        data = json.loads(text)
    except (TypeError, ValueError) as e:
        raise RecipeImportError(f"Invalid JSON: {e}") from e
    if not isinstance(data, list):
        raise RecipeImportError("Expected a JSON array of recipes")
    for position, entry in enumerate(data):
        if not isinstance(entry, dict):
            raise RecipeImportError(f"Entry {position} is not a recipe object")
        recipe_id = entry.get("id")
        if recipe_id is not None and (isinstance(recipe_id, bool) or not isinstance(recipe_id, (int, str))):
            raise RecipeImportError(f"Entry {position} has an invalid id: {recipe_id!r}")

    taken = set(existing_ids)
    taken.update(entry["id"] for entry in data if entry.get("id") is not None)
    recipes = []
    for entry in data:
        recipe = Recipe.from_dict(entry)
        if entry.get("id") is None:
            while recipe.id in taken:
                recipe.id += 1
            taken.add(recipe.id)
        recipes.append(recipe)
    return recipes


class DataExporter:
    """Export the recipe catalog."""

    def __init__(self, data_dir: Path):
        self.data_dir = Path(data_dir)
        self.repository = RecipeRepository(self.data_dir / f"{RECIPES_KEY}.json")

    def export_recipes(self, output_path: Optional[Path] = None) -> Path:
        """Export all recipes to a JSON file (recipes.json in the working directory by default)."""
        output_path = Path(output_path or EXPORT_FILE_NAME)
        recipes = self.repository.load()
        with open(output_path, 'w', encoding='utf-8') as f:
            f.write(export_recipes_document(recipes))
        logger.info(f"Exported {len(recipes)} recipes to {output_path}")
        return output_path


class DataImporter:
    """Import recipes into the catalog."""

    def __init__(self, data_dir: Path):
        self.data_dir = Path(data_dir)
        self.repository = RecipeRepository(self.data_dir / f"{RECIPES_KEY}.json")

    def import_recipes(self, input_path: Path) -> bool:
        """
        Append recipes from a JSON file to the catalog.

        Recipes are appended as they are: no de-duplication, explicit ids kept verbatim.
        Nothing is written when the file cannot be parsed.
        """
        try:
            with open(input_path, 'r', encoding='utf-8') as f:
                text = f.read()
            existing_ids = [r.id for r in self.repository.load()]
            new_recipes = parse_recipes_document(text, existing_ids)
        except (OSError, RecipeImportError) as e:
            logger.error(f"Import failed: {e}")
            return False

        recipes = self.repository.extend(new_recipes)
        logger.info(f"Imported {len(new_recipes)} recipes ({len(recipes)} in catalog)")
        return True


# CLI interface
if __name__ == "__main__":
    import argparse
    from planner.infra.paths import DATA_DIR

    parser = argparse.ArgumentParser(description='Export/Import Weekly Meal Planner recipes')
    parser.add_argument('action', choices=['export', 'import'], help='Action to perform')
    parser.add_argument('--file', help='Input/output file path')

    args = parser.parse_args()

    if args.action == 'export':
        result = DataExporter(DATA_DIR).export_recipes(Path(args.file) if args.file else None)
        print(f"✓ Exported to: {result}")

    elif args.action == 'import':
        if not args.file:
            print("Error: --file is required for import")
            raise SystemExit(1)

        if DataImporter(DATA_DIR).import_recipes(Path(args.file)):
            print(f"✓ Successfully imported from: {args.file}")
        else:
            print(f"✗ {IMPORT_ERROR_MESSAGE}")
            raise SystemExit(1)
