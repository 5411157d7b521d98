from .feed import RecipeFeedService, RecipeListOptions, RecipeListing
from .profile import ProfileService
from .ratings import Aggregate, aggregate, aggregate_many
from .recipe_detail import RatingSubmission, RecipeDetailComposer, RecipeDetailService
from .recipe_listing import RecipeListComposer, RecipeSummary
from .recipes import RecipeService

__all__ = [
    "Aggregate",
    "aggregate",
    "aggregate_many",
    "ProfileService",
    "RatingSubmission",
    "RecipeDetailComposer",
    "RecipeDetailService",
    "RecipeFeedService",
    "RecipeListComposer",
    "RecipeListing",
    "RecipeListOptions",
    "RecipeService",
    "RecipeSummary",
]
