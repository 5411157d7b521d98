"""Recipe listing service used by the home page tabs, My Recipes and the API."""

import logging
from dataclasses import dataclass, field
from typing import List, Optional

from django.conf import settings

from cookbook.errors import TransportError
from cookbook.repos.profile_repo import ProfileRepo
from cookbook.repos.rating_repo import RatingRepo
from cookbook.repos.recipe_repo import TIME_RANGES, RecipeRepo
from .ratings import aggregate_many
from .recipe_listing import RecipeListComposer, RecipeSummary

logger = logging.getLogger(__name__)

TAB_ALL = "all"
TAB_MEMBERS = "members"
TAB_TOP_RATED = "top_rated"
TAB_MINE = "mine"

TABS = [
    (TAB_ALL, "All recipes"),
    (TAB_MEMBERS, "By other members"),
    (TAB_TOP_RATED, "Top rated"),
]

TAB_VALUES = {TAB_ALL, TAB_MEMBERS, TAB_TOP_RATED, TAB_MINE}


@dataclass
class RecipeListOptions:
    """Which recipes to list and how to narrow them."""

    tab: str = TAB_ALL
    viewer_id: Optional[int] = None
    query: Optional[str] = None
    ingredient: Optional[str] = None
    difficulty: Optional[str] = None
    time_range: Optional[str] = None
    limit: Optional[int] = None

    def filters(self):
        """Search sidebar filters as repository keyword arguments."""
        return {
            "query": (self.query or "").strip() or None,
            "ingredient": (self.ingredient or "").strip() or None,
            "difficulty": (self.difficulty or "").strip() or None,
            "time_range": self.time_range if self.time_range in TIME_RANGES else None,
        }


@dataclass
class RecipeListing:
    """Composed summaries plus how they were ordered."""

    tab: str
    recipes: List[RecipeSummary] = field(default_factory=list)
    fallback_used: bool = False


class RecipeFeedService:
    """Select recipes for a tab, then compose them into summaries."""

    def __init__(
        self,
        *,
        recipe_repo: RecipeRepo | None = None,
        rating_repo: RatingRepo | None = None,
        profile_repo: ProfileRepo | None = None,
        composer: RecipeListComposer | None = None,
    ) -> None:
        self.recipe_repo = recipe_repo or RecipeRepo()
        self.rating_repo = rating_repo or RatingRepo()
        self.profile_repo = profile_repo or ProfileRepo()
        self.composer = composer or RecipeListComposer()

    def list(self, options: RecipeListOptions) -> RecipeListing:
        """Return the listing for options.tab; unknown tabs list everything."""
        tab = options.tab if options.tab in TAB_VALUES else TAB_ALL
        fallback_used = False
        if tab == TAB_TOP_RATED:
            recipes, fallback_used = self._top_rated(options)
        elif tab == TAB_MINE:
            recipes = self._mine(options)
        elif tab == TAB_MEMBERS:
            recipes = self.recipe_repo.list_newest(
                exclude_author_id=options.viewer_id, limit=options.limit, **options.filters()
            )
        else:
            recipes = self.recipe_repo.list_newest(limit=options.limit, **options.filters())
        return RecipeListing(tab=tab, recipes=self.summaries_for(recipes), fallback_used=fallback_used)

    def summaries_for(self, recipes) -> List[RecipeSummary]:
        """Compose summaries for already-selected recipes, keeping their order."""
        recipes = list(recipes)
        if not recipes:
            return []
        recipe_ids = [recipe.id for recipe in recipes]
        ratings = self.rating_repo.list_for_recipes(recipe_ids)
        aggregates = aggregate_many(recipe_ids, ratings)
        names = self.profile_repo.display_names({recipe.author_id for recipe in recipes})
        return self.composer.compose(recipes, names, aggregates)

    # --- internal helpers -----------------------------------------------
    def _top_rated(self, options: RecipeListOptions):
        """Database-side average ordering, falling back to newest first."""
        limit = options.limit or settings.TOP_RATED_LIMIT
        try:
            return self.recipe_repo.list_top_rated(limit=limit, **options.filters()), False
        except TransportError as exc:
            logger.warning("Top-rated ordering unavailable, showing newest instead: %s", exc)
        return self.recipe_repo.list_newest(limit=limit, **options.filters()), True

    def _mine(self, options: RecipeListOptions):
        if options.viewer_id is None:
            return []
        return self.recipe_repo.list_newest(
            author_id=options.viewer_id, limit=options.limit, **options.filters()
        )
