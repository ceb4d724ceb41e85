import random
import unittest
from planner.domain.Plan import day_type
from planner.domain.Recipe import Recipe
from planner.logic.planning.generator import generate
from planner.utilities.constants import DAYS_OF_WEEK

WEEKDAYS = [d for d in DAYS_OF_WEEK if day_type(d) == "Weekday"]
WEEKEND = [d for d in DAYS_OF_WEEK if day_type(d) == "Weekend"]


def _recipe(recipe_id, meal_time, meal_day):
    return Recipe(id=recipe_id, title=f"Recipe {recipe_id}",
                  tags={"mealTime": meal_time, "mealDay": meal_day})


class FirstChoice:
    """Deterministic source that always takes the first candidate."""
    def choice(self, seq):
        return seq[0]


class TestPlanGenerator(unittest.TestCase):

    def setUp(self):
        self.catalog = [
            _recipe(1, "Breakfast", "Weekday"),
            _recipe(2, "Breakfast", "Weekday"),
            _recipe(3, "Breakfast", "Weekend"),
            _recipe(10, "Lunch", "Weekday"),
            _recipe(11, "Lunch", "Weekday"),
            _recipe(12, "Lunch", "Weekday"),
            _recipe(20, "Lunch", "Weekend"),
            _recipe(30, "Dinner", "Weekday"),
        ]

    def test_same_seed_same_plan(self):
        first = generate(self.catalog, random.Random(42))
        second = generate(self.catalog, random.Random(42))
        self.assertEqual(first.to_dict(), second.to_dict())

    def test_assigned_slots_match_tags(self):
        for seed in range(50):
            plan = generate(self.catalog, random.Random(seed))
            for day, meal, recipe in plan.slots():
                if recipe is None:
                    continue
                self.assertEqual(recipe.meal_time, meal)
                self.assertEqual(recipe.meal_day, day_type(day))

    def test_unmatched_slots_stay_empty(self):
        plan = generate(self.catalog, random.Random(1))
        for day in WEEKEND:
            self.assertIsNone(plan.get(day, "Dinner"))
        for day in WEEKDAYS:
            self.assertIsNotNone(plan.get(day, "Dinner"))

    def test_lunch_not_repeated_until_all_used(self):
        for seed in range(50):
            plan = generate(self.catalog, random.Random(seed))
            first_three = [plan.get(day, "Lunch").id for day in WEEKDAYS[:3]]
            self.assertEqual(sorted(first_three), [10, 11, 12], f"seed {seed}: {first_three}")

    def test_lunch_distinct_across_week_when_enough_recipes(self):
        catalog = [_recipe(i, "Lunch", "Weekday") for i in range(100, 105)]
        plan = generate(catalog, random.Random(7))
        ids = [plan.get(day, "Lunch").id for day in WEEKDAYS]
        self.assertEqual(len(set(ids)), 5)

    def test_single_lunch_fills_every_day_of_its_type(self):
        plan = generate(self.catalog, random.Random(3))
        self.assertEqual([plan.get(day, "Lunch").id for day in WEEKEND], [20, 20])

        only_one = [_recipe(40, "Lunch", "Weekday")]
        plan = generate(only_one, random.Random(3))
        self.assertEqual([plan.get(day, "Lunch").id for day in WEEKDAYS], [40] * 5)

    def test_lunch_rotation_restarts_after_exhaustion(self):
        plan = generate(self.catalog, FirstChoice())
        lunches = [plan.get(day, "Lunch").id for day in DAYS_OF_WEEK]
        # Thursday falls back to the full pool and restarts the rotation from 10
        self.assertEqual(lunches, [10, 11, 12, 10, 11, 20, 20])

    def test_empty_catalog_gives_empty_plan(self):
        plan = generate([], random.Random(0))
        self.assertEqual(plan.assigned_recipes(), [])
        self.assertEqual(len(list(plan.slots())), 21)

    def test_partially_tagged_recipes_are_tolerated(self):
        catalog = [Recipe.from_dict({"id": 1, "title": "Untagged"}),
                   Recipe.from_dict({"id": 2, "title": "Half", "tags": {"mealTime": "Lunch"}})]
        plan = generate(catalog, random.Random(0))
        self.assertEqual(plan.assigned_recipes(), [])

    def test_default_random_source(self):
        plan = generate(self.catalog)
        self.assertIsNotNone(plan.get("Monday", "Breakfast"))
