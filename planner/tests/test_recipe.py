import unittest
from planner.domain.Plan import WeeklyPlan, day_type
from planner.domain.Recipe import Recipe, sanitize_filename


class TestRecipe(unittest.TestCase):

    def setUp(self):
        self.recipe_pancakes = Recipe(
            id=1,
            title="Pancakes",
            ingredients="flour, 2 cups milk, eggs",
            instructions="Mix ingredients\nCook on skillet",
            tags={"mealDay": "Weekday", "mealTime": "Breakfast", "cuisine": "American", "prepTime": "15 min"},
        )

    def test_to_dict_uses_interchange_field_names(self):
        data = self.recipe_pancakes.to_dict()
        self.assertEqual(set(data), {"id", "title", "ingredients", "instructions", "image", "tags"})
        self.assertEqual(set(data["tags"]), {"mealDay", "mealTime", "cuisine", "prepTime"})
        self.assertEqual(Recipe.from_dict(data), self.recipe_pancakes)

    def test_from_dict_tolerates_partial_records(self):
        recipe = Recipe.from_dict({"id": 7, "title": "Toast"})
        self.assertEqual(recipe.ingredients, "")
        self.assertIsNone(recipe.image)
        self.assertEqual(recipe.tags, {"mealDay": "", "mealTime": "", "cuisine": "", "prepTime": ""})
        self.assertFalse(recipe.matches("Breakfast", "Weekday"))

    def test_from_dict_drops_binary_image_handles(self):
        recipe = Recipe.from_dict({"id": 2, "title": "Soup", "image": {"blob": True}})
        self.assertIsNone(recipe.image)

    def test_new_recipe_gets_an_id(self):
        self.assertIsInstance(Recipe(title="Fresh").id, int)

    def test_sanitize_filename(self):
        self.assertEqual(sanitize_filename("Pad Thai!"), "pad-thai")
        self.assertEqual(sanitize_filename("  Mom's -- Lasagna "), "mom-s-lasagna")


class TestWeeklyPlan(unittest.TestCase):

    def test_day_type(self):
        self.assertEqual(day_type("Saturday"), "Weekend")
        self.assertEqual(day_type("Sunday"), "Weekend")
        self.assertEqual(day_type("Wednesday"), "Weekday")

    def test_empty_plan_has_21_unassigned_slots(self):
        slots = list(WeeklyPlan.empty().slots())
        self.assertEqual(len(slots), 21)
        self.assertTrue(all(recipe is None for _, _, recipe in slots))

    def test_round_trip_through_ids(self):
        soup = Recipe(id=5, title="Soup", tags={"mealDay": "Weekday", "mealTime": "Lunch"})
        plan = WeeklyPlan({"Monday": {"Lunch": soup}})
        data = plan.to_dict()
        self.assertEqual(data["Monday"], {"Breakfast": None, "Lunch": 5, "Dinner": None})
        restored = WeeklyPlan.from_dict(data, [soup])
        self.assertIs(restored.get("Monday", "Lunch"), soup)

    def test_unknown_ids_resolve_to_none(self):
        data = WeeklyPlan.empty().to_dict()
        data["Friday"]["Dinner"] = 999
        restored = WeeklyPlan.from_dict(data, [])
        self.assertIsNone(restored.get("Friday", "Dinner"))
