"""Weekly plan persistence (the "weeklyPlan" storage key)."""
import json
import logging
from pathlib import Path
from typing import List, Optional

from planner.domain.Plan import WeeklyPlan
from planner.domain.Recipe import Recipe
from planner.infra import paths
from planner.infra.Recipe_Repository import atomic_write_json
from planner.logic.planning.generator import RandomSource, generate

logger = logging.getLogger(__name__)


class PlanRepository:
    def __init__(self, path: Optional[Path] = None):
        self.path = Path(path or paths.PLAN_FILE)

    def _read_store(self) -> dict:
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                store = json.load(f)
            return store if isinstance(store, dict) else {}
        except FileNotFoundError:
            return {}
        except json.JSONDecodeError as e:
            logger.error(f"Invalid JSON in plan file: {e}")
            return {}

    def stored_catalog_size(self) -> Optional[int]:
        size = self._read_store().get("catalogSize")
        return size if isinstance(size, int) else None

    def load(self, catalog: List[Recipe]) -> Optional[WeeklyPlan]:
        """Stored plan resolved against the catalog, or None if nothing is stored."""
        store = self._read_store()
        if "meals" not in store:
            return None
        return WeeklyPlan.from_dict(store["meals"], catalog)

    def save(self, plan: WeeklyPlan, catalog_size: int) -> None:
        atomic_write_json(self.path, {"catalogSize": catalog_size, "meals": plan.to_dict()})

    def reshuffle(self, catalog: List[Recipe], rng: Optional[RandomSource] = None) -> WeeklyPlan:
        """Regenerate the whole week on explicit request."""
        plan = generate(catalog, rng)
        self.save(plan, len(catalog))
        logger.info(f"Weekly plan regenerated for {len(catalog)} recipes")
        return plan

    def sync_with_catalog(self, catalog: List[Recipe], rng: Optional[RandomSource] = None) -> WeeklyPlan:
        """Return the current plan, regenerating it when the catalog size changed.

        Rules:
          - No stored plan -> generate one.
          - Stored plan made for a different number of recipes (one was added or
            removed) -> regenerate the entire week.
          - Same number of recipes (e.g. an edit) -> keep the stored assignment;
            slots re-resolve to the edited records by id.
        """
        plan = self.load(catalog)
        if plan is None or self.stored_catalog_size() != len(catalog):
            return self.reshuffle(catalog, rng)
        return plan
