"""Recipe domain entity: id, title, free-text ingredients and instructions, image path, tags."""
import re
import time
from typing import Dict, List, Optional, Union

RecipeId = Union[int, str]

TAG_KEYS = ("mealDay", "mealTime", "cuisine", "prepTime")


def new_recipe_id() -> int:
    """Identity for a freshly created recipe: current time in milliseconds."""
    return int(time.time() * 1000)


def sanitize_filename(name: str) -> str:
    """Lowercase slug used for stored image names ("Pad Thai!" -> "pad-thai")."""
    slug = re.sub(r'[^a-z0-9]+', '-', (name or '').lower())
    return slug.strip('-')


class Recipe:
    def __init__(self, id: Optional[RecipeId] = None, title: str = "", ingredients: str = "",
                 instructions: str = "", image: Optional[str] = None,
                 tags: Optional[Dict[str, str]] = None):
        self.id = id if id is not None else new_recipe_id()
        self.title = title
        self.ingredients = ingredients
        self.instructions = instructions
        self.image = image
        t = tags or {}
        # Unknown tag keys are dropped, missing ones default to ""
        self.tags = {key: t.get(key) or "" for key in TAG_KEYS}

    @property
    def meal_day(self) -> str:
        return self.tags.get("mealDay", "")

    @property
    def meal_time(self) -> str:
        return self.tags.get("mealTime", "")

    def matches(self, meal_time: str, meal_day: str) -> bool:
        return self.meal_time == meal_time and self.meal_day == meal_day

    def __str__(self) -> str:
        tags = ", ".join(v for v in self.tags.values() if v)
        return f"{self.title} (#{self.id}) - Tags: {tags}"

    __repr__ = __str__

    def __eq__(self, other) -> bool:
        if not isinstance(other, Recipe):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def __hash__(self):
        return hash(self.id)

    @staticmethod
    def from_dict(data):
        '''Creates a Recipe from a dictionary. Ignores unknown keys.'''
        d = dict(data) if isinstance(data, dict) else {}
        image = d.get("image")
        return Recipe(
            id=d.get("id"),
            title=d.get("title") or "",
            ingredients=d.get("ingredients") or "",
            instructions=d.get("instructions") or "",
            # Only stored path strings survive persistence, never binary handles
            image=image if isinstance(image, str) and image else None,
            tags=d.get("tags") if isinstance(d.get("tags"), dict) else None,
        )

    def to_dict(self):
        '''Converts the Recipe to a dictionary using the interchange field names.'''
        return {
            "id": self.id,
            "title": self.title,
            "ingredients": self.ingredients,
            "instructions": self.instructions,
            "image": self.image,
            "tags": dict(self.tags),
        }


def recipes_from_dicts(data) -> List[Recipe]:
    return [Recipe.from_dict(entry) for entry in data or [] if isinstance(entry, dict)]
