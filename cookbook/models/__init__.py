from .user import User
from .profile import Profile
from .recipe import Recipe
from .ingredient import Ingredient
from .recipe_step import RecipeStep
from .rating import Rating

__all__ = [
    "User",
    "Profile",
    "Recipe",
    "Ingredient",
    "RecipeStep",
    "Rating",
]
