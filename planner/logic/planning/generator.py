"""Weekly plan generator.

Provides generate(catalog, rng=None) -> WeeklyPlan.

Breakfast and dinner are drawn independently for every day. Lunch avoids
repeating a recipe until every matching lunch recipe has been used once; after
that the rotation starts over from the recipe just picked.
"""
import logging
import random
from typing import Iterable, List, Optional, Protocol, Sequence, Set

from planner.domain.Plan import WeeklyPlan, day_type
from planner.domain.Recipe import Recipe, RecipeId
from planner.utilities.constants import DAYS_OF_WEEK

logger = logging.getLogger(__name__)


class RandomSource(Protocol):
    def choice(self, seq: Sequence): ...


def _matching(catalog: Iterable[Recipe], meal_time: str, meal_day: str) -> List[Recipe]:
    return [r for r in catalog if r.matches(meal_time, meal_day)]


def pick_random(catalog: Iterable[Recipe], meal_time: str, meal_day: str, rng: RandomSource) -> Optional[Recipe]:
    """Uniform choice among recipes tagged for this slot, or None when there are none."""
    candidates = _matching(catalog, meal_time, meal_day)
    return rng.choice(candidates) if candidates else None


def pick_lunch(catalog: Iterable[Recipe], meal_day: str, used: Set[RecipeId], rng: RandomSource) -> Optional[Recipe]:
    """Pick a lunch not yet in `used`, updating `used` in place."""
    all_lunches = _matching(catalog, "Lunch", meal_day)
    available = [r for r in all_lunches if r.id not in used]
    if available:
        lunch = rng.choice(available)
        used.add(lunch.id)
        return lunch
    # Variety exhausted: reuse from the full pool and restart the rotation
    lunch = rng.choice(all_lunches) if all_lunches else None
    used.clear()
    if lunch is not None:
        used.add(lunch.id)
    return lunch


def generate(catalog: Sequence[Recipe], rng: Optional[RandomSource] = None) -> WeeklyPlan:
    """Assign recipes to all 21 slots of the week.

    Args:
        catalog: Recipes to choose from. Records with empty tags simply never match.
        rng: Object exposing choice(seq). Defaults to a fresh, OS-seeded random.Random.

    Returns:
        A complete WeeklyPlan; slots with no matching recipe are None.
    """
    rng = rng or random.Random()
    catalog = list(catalog or [])
    used_lunches: Set[RecipeId] = set()
    meals = {}
    for day in DAYS_OF_WEEK:
        kind = day_type(day)
        breakfast = pick_random(catalog, "Breakfast", kind, rng)
        dinner = pick_random(catalog, "Dinner", kind, rng)
        lunch = pick_lunch(catalog, kind, used_lunches, rng)
        meals[day] = {"Breakfast": breakfast, "Lunch": lunch, "Dinner": dinner}
    plan = WeeklyPlan(meals)
    logger.debug("Generated weekly plan from %s recipes (%s slots filled)",
                 len(catalog), len(plan.assigned_recipes()))
    return plan

__all__ = ['generate', 'pick_random', 'pick_lunch', 'RandomSource']
