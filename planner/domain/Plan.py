"""WeeklyPlan domain entity: 7 days x (Breakfast, Lunch, Dinner) of recipe references."""
from typing import Dict, Iterator, List, Optional, Tuple

from planner.domain.Recipe import Recipe
from planner.utilities.constants import DAYS_OF_WEEK, MEAL_TIMES, WEEKEND_DAYS


def day_type(day: str) -> str:
    return "Weekend" if day in WEEKEND_DAYS else "Weekday"


class WeeklyPlan:
    def __init__(self, meals: Optional[Dict[str, Dict[str, Optional[Recipe]]]] = None):
        meals = meals or {}
        # Always a full grid; slots not provided are unassigned
        self.meals: Dict[str, Dict[str, Optional[Recipe]]] = {
            day: {meal: meals.get(day, {}).get(meal) for meal in MEAL_TIMES}
            for day in DAYS_OF_WEEK
        }

    @classmethod
    def empty(cls) -> "WeeklyPlan":
        return cls()

    def get(self, day: str, meal_time: str) -> Optional[Recipe]:
        return self.meals.get(day, {}).get(meal_time)

    def slots(self) -> Iterator[Tuple[str, str, Optional[Recipe]]]:
        """Yield (day, meal_time, recipe) in day then meal-time order."""
        for day in DAYS_OF_WEEK:
            for meal in MEAL_TIMES:
                yield day, meal, self.meals[day][meal]

    def assigned_recipes(self) -> List[Recipe]:
        return [recipe for _, _, recipe in self.slots() if recipe is not None]

    def __eq__(self, other) -> bool:
        if not isinstance(other, WeeklyPlan):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def __str__(self) -> str:
        lines = []
        for day in DAYS_OF_WEEK:
            cells = [f"{meal}: {r.title if r else '-'}" for meal, r in self.meals[day].items()]
            lines.append(f"{day} - " + ", ".join(cells))
        return "\n".join(lines)

    __repr__ = __str__

    def to_dict(self):
        '''Persisted form: each slot holds the referenced recipe id (or None).'''
        return {
            day: {meal: (r.id if r is not None else None) for meal, r in meals.items()}
            for day, meals in self.meals.items()
        }

    def to_detailed_dict(self):
        '''Same grid with full recipe records, for display.'''
        return {
            day: {meal: (r.to_dict() if r is not None else None) for meal, r in meals.items()}
            for day, meals in self.meals.items()
        }

    @staticmethod
    def from_dict(data, catalog: List[Recipe]) -> "WeeklyPlan":
        '''Resolve a persisted grid of ids against the catalog; unknown ids become None.'''
        index: Dict = {}
        for r in catalog:
            index.setdefault(r.id, r)
        d = data if isinstance(data, dict) else {}
        meals = {}
        for day in DAYS_OF_WEEK:
            day_slots = d.get(day) if isinstance(d.get(day), dict) else {}
            meals[day] = {meal: index.get(day_slots.get(meal)) for meal in MEAL_TIMES}
        return WeeklyPlan(meals)
