import random
import tempfile
import unittest
from pathlib import Path
from planner.domain.Recipe import Recipe
from planner.infra.Plan_Repository import PlanRepository


class CountingRandom(random.Random):
    """Seeded source that records how many picks were made."""
    def __init__(self, seed=0):
        super().__init__(seed)
        self.picks = 0

    def choice(self, seq):
        self.picks += 1
        return super().choice(seq)


def _catalog():
    return [
        Recipe(id=1, title="Oats", ingredients="oats, milk", tags={"mealDay": "Weekday", "mealTime": "Breakfast"}),
        Recipe(id=2, title="Soup", ingredients="carrots, onion", tags={"mealDay": "Weekday", "mealTime": "Lunch"}),
        Recipe(id=3, title="Salad", ingredients="lettuce", tags={"mealDay": "Weekday", "mealTime": "Lunch"}),
        Recipe(id=4, title="Roast", ingredients="chicken", tags={"mealDay": "Weekend", "mealTime": "Dinner"}),
    ]


class TestPlanRepository(unittest.TestCase):

    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.repo = PlanRepository(Path(self._tmp.name) / "weeklyPlan.json")

    def tearDown(self):
        self._tmp.cleanup()

    def test_first_sync_generates_and_stores(self):
        catalog = _catalog()
        self.assertIsNone(self.repo.load(catalog))
        plan = self.repo.sync_with_catalog(catalog, random.Random(1))
        self.assertEqual(self.repo.stored_catalog_size(), 4)
        self.assertEqual(self.repo.load(catalog).to_dict(), plan.to_dict())

    def test_edit_keeps_plan(self):
        catalog = _catalog()
        plan = self.repo.sync_with_catalog(catalog, random.Random(1))

        catalog[1] = Recipe(id=2, title="Soup", ingredients="leeks",
                            tags={"mealDay": "Weekday", "mealTime": "Lunch"})
        rng = CountingRandom()
        synced = self.repo.sync_with_catalog(catalog, rng)
        self.assertEqual(rng.picks, 0)
        self.assertEqual(synced.to_dict(), plan.to_dict())
        # Slots see the edited record
        for _, _, recipe in synced.slots():
            if recipe is not None and recipe.id == 2:
                self.assertEqual(recipe.ingredients, "leeks")

    def test_adding_or_removing_regenerates(self):
        catalog = _catalog()
        self.repo.sync_with_catalog(catalog, random.Random(1))

        catalog.append(Recipe(id=5, title="Waffles", tags={"mealDay": "Weekend", "mealTime": "Breakfast"}))
        rng = CountingRandom()
        self.repo.sync_with_catalog(catalog, rng)
        self.assertGreater(rng.picks, 0)
        self.assertEqual(self.repo.stored_catalog_size(), 5)

        catalog.pop(0)
        plan = self.repo.sync_with_catalog(catalog, random.Random(2))
        self.assertEqual(self.repo.stored_catalog_size(), 4)
        self.assertNotIn(1, [r.id for r in plan.assigned_recipes()])

    def test_reshuffle_always_regenerates(self):
        catalog = _catalog()
        self.repo.sync_with_catalog(catalog, random.Random(1))
        rng = CountingRandom()
        self.repo.reshuffle(catalog, rng)
        self.assertGreater(rng.picks, 0)

    def test_corrupt_file_is_treated_as_missing(self):
        self.repo.path.write_text("{not json", encoding="utf-8")
        self.assertIsNone(self.repo.load(_catalog()))
        plan = self.repo.sync_with_catalog(_catalog(), random.Random(0))
        self.assertIsNotNone(plan.get("Monday", "Breakfast"))
