from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles

import logging

from planner.infra import paths
from planner.infra.Plan_Repository import PlanRepository
from planner.infra.Recipe_Repository import RecipeRepository
from planner.logic.shopping.list_builder import aggregate
from planner.utilities.constants import DAYS_OF_WEEK, MEAL_TIMES, SHOPPING_CATEGORIES, TAG_OPTIONS

# Routers
from planner.api.routes import recipes

# Logging
logger = logging.getLogger("planner_app")

# Initialize FastAPI app
app = FastAPI(title="Weekly Meal Planner API")
app.include_router(recipes.router)

# Uploaded recipe images
app.mount("/images", StaticFiles(directory=str(paths.IMAGES_DIR), check_dir=False), name="images")


# -------------------- API: Tag options --------------------
@app.get("/api/tag-options")
def api_tag_options():
    return {
        "tags": TAG_OPTIONS,
        "days": list(DAYS_OF_WEEK),
        "meal_times": list(MEAL_TIMES),
        "categories": list(SHOPPING_CATEGORIES),
    }


# -------------------- API: Weekly plan --------------------
@app.get("/api/plan")
def api_plan():
    """Current weekly plan with full recipe records (regenerated if the catalog size changed)."""
    catalog = RecipeRepository().load()
    plan = PlanRepository().sync_with_catalog(catalog)
    return {"days": plan.to_detailed_dict()}


@app.post("/api/plan/reshuffle")
def api_plan_reshuffle():
    catalog = RecipeRepository().load()
    plan = PlanRepository().reshuffle(catalog)
    logger.info("Weekly plan reshuffled on request")
    return {"days": plan.to_detailed_dict()}


# -------------------- API: Shopping List (JSON) --------------------
@app.get("/api/shopping-list")
def api_shopping_list():
    catalog = RecipeRepository().load()
    plan = PlanRepository().sync_with_catalog(catalog)
    shopping_list = aggregate(plan)
    return {"categories": shopping_list.to_dict(), "count": len(shopping_list)}
