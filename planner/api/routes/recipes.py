import logging
from typing import List

from fastapi import APIRouter, File, HTTPException, Response, UploadFile

from planner.domain.Recipe import Recipe, sanitize_filename
from planner.infra import paths
from planner.infra.Plan_Repository import PlanRepository
from planner.infra.Recipe_Repository import RecipeRepository
from planner.utilities.constants import EXPORT_FILE_NAME
from planner.utilities.export_import import (
    IMPORT_ERROR_MESSAGE, RecipeImportError, export_recipes_document, parse_recipes_document
)
from planner.utilities.validators import RecipeInput

router = APIRouter(prefix="/api/recipes", tags=["recipes"])
logger = logging.getLogger(__name__)


def _find(recipes: List[Recipe], recipe_id: str) -> Recipe:
    # Ids may be stored as numbers or strings; the path always carries text
    for recipe in recipes:
        if str(recipe.id) == recipe_id:
            return recipe
    raise HTTPException(status_code=404, detail="Recipe not found")


def _sync_plan(recipes: List[Recipe]) -> None:
    """Adding or removing a recipe reshuffles the week; edits keep it."""
    PlanRepository().sync_with_catalog(recipes)


@router.get("")
def list_recipes():
    return [r.to_dict() for r in RecipeRepository().load()]


@router.get("/export")
def export_recipes():
    """Whole catalog as a downloadable recipes.json."""
    content = export_recipes_document(RecipeRepository().load())
    return Response(
        content=content,
        media_type="application/json",
        headers={"Content-Disposition": f"attachment; filename={EXPORT_FILE_NAME}"},
    )


@router.post("/import")
async def import_recipes(file: UploadFile = File(...)):
    raw = await file.read()
    try:
        imported = parse_recipes_document(raw.decode("utf-8"), [r.id for r in RecipeRepository().load()])
    except (UnicodeDecodeError, RecipeImportError) as e:
        logger.error("Recipe import failed: %s", e)
        raise HTTPException(status_code=400, detail=IMPORT_ERROR_MESSAGE)
    recipes = RecipeRepository().extend(imported)
    _sync_plan(recipes)
    logger.info("Imported %s recipes from %s", len(imported), file.filename)
    return {"imported": len(imported), "total": len(recipes)}


@router.get("/{recipe_id}")
def get_recipe(recipe_id: str):
    return _find(RecipeRepository().load(), recipe_id).to_dict()


@router.post("", status_code=201)
def add_recipe(payload: RecipeInput):
    recipe = payload.to_recipe()
    recipes = RecipeRepository().add(recipe)
    _sync_plan(recipes)
    return recipe.to_dict()


@router.put("/{recipe_id}")
def edit_recipe(recipe_id: str, payload: RecipeInput):
    repo = RecipeRepository()
    existing = _find(repo.load(), recipe_id)
    recipe = payload.to_recipe(existing.id)
    if payload.image is None:
        recipe.image = existing.image
    recipes = repo.update(recipe)
    _sync_plan(recipes)
    return recipe.to_dict()


@router.delete("/{recipe_id}")
def delete_recipe(recipe_id: str):
    repo = RecipeRepository()
    existing = _find(repo.load(), recipe_id)
    recipes = repo.remove(existing.id)
    _sync_plan(recipes)
    return {"success": True}


@router.post("/{recipe_id}/image")
async def upload_image(recipe_id: str, image: UploadFile = File(...)):
    """Store an image as /images/<sanitized-title>.<ext> and attach it to the recipe."""
    repo = RecipeRepository()
    recipe = _find(repo.load(), recipe_id)
    if not (image.content_type or "").startswith("image/"):
        raise HTTPException(status_code=400, detail="Invalid image type")
    filename = image.filename or ""
    extension = sanitize_filename(filename.rsplit(".", 1)[-1]) if "." in filename else ""
    extension = extension or "jpg"
    image_name = f"{sanitize_filename(recipe.title) or recipe.id}.{extension}"

    paths.IMAGES_DIR.mkdir(parents=True, exist_ok=True)
    with open(paths.IMAGES_DIR / image_name, "wb") as f:
        f.write(await image.read())

    recipe.image = f"/images/{image_name}"
    repo.update(recipe)
    logger.info("Image for recipe #%s saved as %s", recipe.id, recipe.image)
    return recipe.to_dict()
