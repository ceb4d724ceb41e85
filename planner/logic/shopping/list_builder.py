"""Shopping list builder.

Provides aggregate(plan) -> ShoppingList: every ingredient phrase of the week,
deduplicated on a normalized form and grouped into categories.
"""
import re
from typing import Dict, List, Optional

from planner.domain.Plan import WeeklyPlan
from planner.domain.ShoppingList import ShoppingList
from planner.logic.shopping.categories import classify_ingredient

# A number with an optional unit word glued to it ("2", "1.5 cups", "200g")
_QUANTITY = re.compile(r'\d+(\.\d+)?(\s?[a-zA-Z]+)?')


def parse_ingredients(text: str) -> List[str]:
    """Split comma separated ingredient text into trimmed phrases, skipping empty ones."""
    if not isinstance(text, str):
        return []
    return [phrase.strip() for phrase in text.split(',') if phrase.strip()]


def normalize_ingredient(phrase: str) -> str:
    """Comparison key: quantities removed, lowercased, one trailing 's' dropped.

    Only used for matching, classification and sorting; the original phrase is
    what ends up on the list.
    """
    normalized = _QUANTITY.sub('', phrase or '').strip().lower()
    if normalized.endswith('s'):
        normalized = normalized[:-1]
    return normalized


def collect_ingredients(plan: WeeklyPlan) -> List[str]:
    """All phrases of all assigned recipes, days then meal times."""
    phrases: List[str] = []
    for recipe in plan.assigned_recipes():
        phrases.extend(parse_ingredients(recipe.ingredients))
    return phrases


def deduplicate(phrases: List[str]) -> Dict[str, str]:
    """normalized form -> first original phrase seen with that form."""
    unique: Dict[str, str] = {}
    for phrase in phrases:
        unique.setdefault(normalize_ingredient(phrase), phrase)
    return unique


def aggregate(plan: WeeklyPlan, keywords: Optional[List[tuple]] = None) -> ShoppingList:
    """Compute the categorized shopping list for a weekly plan.

    Args:
        plan: WeeklyPlan whose assigned recipes provide the ingredient text.
        keywords: compiled (category, pattern) pairs from categories.compile_keywords;
            defaults to the configured keyword sets.

    Returns:
        ShoppingList with all categories present, each sorted by normalized form.
    """
    groups: Dict[str, List[tuple]] = {}
    for normalized, phrase in deduplicate(collect_ingredients(plan)).items():
        category = classify_ingredient(normalized, keywords)
        groups.setdefault(category, []).append((normalized, phrase))

    return ShoppingList({
        name: [phrase for _, phrase in sorted(entries, key=lambda e: e[0])]
        for name, entries in groups.items()
    })

__all__ = ['aggregate', 'parse_ingredients', 'normalize_ingredient', 'collect_ingredients', 'deduplicate']
