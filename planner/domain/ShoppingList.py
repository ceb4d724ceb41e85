"""ShoppingList value: category name -> sorted list of distinct ingredient phrases."""
from typing import Dict, List, Optional

from planner.utilities.constants import SHOPPING_CATEGORIES


class ShoppingList:
    def __init__(self, categories: Optional[Dict[str, List[str]]] = None):
        categories = categories or {}
        self.categories: Dict[str, List[str]] = {
            name: list(categories.get(name, [])) for name in SHOPPING_CATEGORIES
        }

    def get_items(self, category: str) -> List[str]:
        '''
        Returns the phrases listed under a category (empty for unknown names).
        '''
        return self.categories.get(category, [])

    def __len__(self) -> int:
        return sum(len(items) for items in self.categories.values())

    def __eq__(self, other) -> bool:
        if not isinstance(other, ShoppingList):
            return NotImplemented
        return self.categories == other.categories

    def __str__(self) -> str:
        parts = [f"{name}: {', '.join(items)}" for name, items in self.categories.items() if items]
        return "Shopping List:\n\t" + "\n\t".join(parts)

    def __repr__(self) -> str:
        return self.__str__()

    def to_dict(self):
        return {name: list(items) for name, items in self.categories.items()}
