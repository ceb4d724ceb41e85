from typing import Final

DAYS_OF_WEEK: Final[tuple[str, ...]] = (
    "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday"
)
WEEKEND_DAYS: Final[frozenset[str]] = frozenset({"Saturday", "Sunday"})
MEAL_TIMES: Final[tuple[str, ...]] = ("Breakfast", "Lunch", "Dinner")

TAG_OPTIONS: Final[dict[str, list[str]]] = {
    "mealDay": ["Weekday", "Weekend"],
    "mealTime": ["Breakfast", "Lunch", "Dinner"],
    "cuisine": ["Chinese", "Japanese", "Thai", "Italian", "Mexican", "American"],
    "prepTime": ["5 min", "15 min", "30 min", ">30 min"],
}

# Storage keys (one JSON document per key in the data directory)
RECIPES_KEY: Final[str] = "recipes"
WEEKLY_PLAN_KEY: Final[str] = "weeklyPlan"
EXPORT_FILE_NAME: Final[str] = "recipes.json"

# Order is classification precedence; "other" is the fallback and has no keywords.
CATEGORY_KEYWORDS: Final[dict[str, list[str]]] = {
    "sauce": ["sauce", "dressing", "oil", "vinegar", "paste", "mayo", "kimchi", "miso", "extract"],
    "meat": ["chicken", "beef", "pork", "fish", "turkey", "lamb", "salmon", "tuna", "crab", "shrimp", "sausage"],
    "fruits": ["apple", "banana", "orange", "berry", "fruit", "avocado", "lemon", "fig"],
    "veggies": [
        "lettuce", "tomato", "carrot", "onion", "pepper", "vegetable", "spinach", "broccoli",
        "cauliflower", "garlic", "eggplant", "sprout", "corn", "kale", "potato", "cilantro",
        "daikon", "dill", "cabbage", "zucchini",
    ],
    "grain": ["rice", "pasta", "bread", "cereal", "oat", "quinoa", "seed", "spaghetti", "chickpea", "walnut", "sesame", "peanut"],
    "dairy": ["milk", "cheese", "yogurt", "cream", "egg"],
}
OTHER_CATEGORY: Final[str] = "other"

# Display order of the shopping list categories
SHOPPING_CATEGORIES: Final[tuple[str, ...]] = (
    "meat", "fruits", "veggies", "grain", "dairy", "sauce", "other"
)
