"""Single-recipe projection with the viewer's rating state.

`RecipeDetail.can_rate` is the one place that decides whether rating controls
are offered; templates and the API read it instead of re-deriving the rules.
"""

import enum
import logging
from dataclasses import dataclass, field
from typing import Any, List, Optional

from cookbook.errors import CookbookError, RecipeNotFound
from cookbook.repos.profile_repo import ProfileRepo
from cookbook.repos.rating_repo import RatingRepo
from cookbook.repos.recipe_repo import RecipeRepo
from cookbook.session import ANONYMOUS, SessionContext
from .ratings import Aggregate, aggregate
from .recipe_listing import RecipeListComposer, RecipeSummary

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RecipeDetail:
    """Summary fields plus full content and the viewer's rating state."""

    summary: RecipeSummary
    description: str
    author_id: Optional[int]
    ingredients: List[dict] = field(default_factory=list)
    steps: List[str] = field(default_factory=list)
    is_owner: bool = False
    viewer_own_rating: Optional[int] = None
    can_rate: bool = False


class RecipeDetailComposer:
    """Read-side projection of one recipe for one viewer."""

    def __init__(self, list_composer: RecipeListComposer | None = None) -> None:
        self.list_composer = list_composer or RecipeListComposer()

    def compose(
        self,
        recipe: Any,
        recipe_aggregate: Optional[Aggregate],
        viewer_own_rating: Optional[int],
        viewer: Optional[SessionContext],
        *,
        author_name: Optional[str] = None,
        submission_pending: bool = False,
    ) -> RecipeDetail:
        viewer = viewer or ANONYMOUS
        is_owner = viewer.user_id is not None and recipe.author_id == viewer.user_id
        return RecipeDetail(
            summary=self.list_composer.summarize(recipe, author_name, recipe_aggregate),
            description=recipe.description or "",
            author_id=recipe.author_id,
            ingredients=self._ingredients(recipe),
            steps=self._steps(recipe),
            is_owner=is_owner,
            viewer_own_rating=viewer_own_rating,
            can_rate=self.can_rate(viewer, is_owner, viewer_own_rating, submission_pending),
        )

    def can_rate(self, viewer, is_owner, viewer_own_rating, submission_pending) -> bool:
        """Identified, not the owner, nothing in flight, and not rated yet."""
        return (
            viewer.is_authenticated
            and not is_owner
            and not submission_pending
            and viewer_own_rating is None
        )

    def _ingredients(self, recipe) -> List[dict]:
        related = getattr(recipe, "ingredients", None)
        if related is None:
            return []
        return [ingredient.as_dict() for ingredient in related.all()]

    def _steps(self, recipe) -> List[str]:
        related = getattr(recipe, "steps", None)
        if related is None:
            return []
        return [step.description for step in related.all()]


class SubmissionState(str, enum.Enum):
    IDLE = "idle"
    SUBMITTING = "submitting"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


class RatingSubmission:
    """One viewer's rating attempt on one recipe.

    IDLE -> SUBMITTING -> SUCCEEDED | FAILED, and back to IDLE via reset().
    A failed attempt may be retried; after a success the stored rating makes
    can_rate false, so the store rejects any further attempt as a duplicate.
    """

    def __init__(self, recipe_id, viewer: Optional[SessionContext], *, rating_repo: RatingRepo | None = None):
        self.recipe_id = recipe_id
        self.viewer = viewer or ANONYMOUS
        self.rating_repo = rating_repo or RatingRepo()
        self.state = SubmissionState.IDLE
        self.error: Optional[CookbookError] = None
        self.rating = None

    @property
    def pending(self) -> bool:
        return self.state is SubmissionState.SUBMITTING

    def submit(self, value):
        """Create the rating; re-raises the store's error after recording it."""
        if self.pending:
            raise RuntimeError("A rating submission is already in flight.")
        self.state = SubmissionState.SUBMITTING
        self.error = None
        try:
            rating = self.rating_repo.submit_rating(self.recipe_id, self.viewer.user_id, value)
        except CookbookError as exc:
            self.state = SubmissionState.FAILED
            self.error = exc
            logger.info("Rating submission for recipe %s failed: %s", self.recipe_id, exc.message)
            raise
        self.state = SubmissionState.SUCCEEDED
        self.rating = rating
        return rating

    def reset(self) -> None:
        """Return a finished attempt to IDLE."""
        if self.state in (SubmissionState.SUCCEEDED, SubmissionState.FAILED):
            self.state = SubmissionState.IDLE
            self.error = None


class RecipeDetailService:
    """Load a recipe, its ratings and the viewer's own rating, then compose."""

    def __init__(
        self,
        *,
        recipe_repo: RecipeRepo | None = None,
        rating_repo: RatingRepo | None = None,
        profile_repo: ProfileRepo | None = None,
        composer: RecipeDetailComposer | None = None,
    ) -> None:
        self.recipe_repo = recipe_repo or RecipeRepo()
        self.rating_repo = rating_repo or RatingRepo()
        self.profile_repo = profile_repo or ProfileRepo()
        self.composer = composer or RecipeDetailComposer()

    def load(self, recipe_id, viewer: Optional[SessionContext], *, submission: RatingSubmission | None = None) -> RecipeDetail:
        """Return the detail projection or raise RecipeNotFound."""
        recipe = self.recipe_repo.get_by_id(recipe_id)
        if recipe is None:
            raise RecipeNotFound()
        return self.compose_for(recipe, viewer, submission=submission)

    def compose_for(self, recipe, viewer: Optional[SessionContext], *, submission: RatingSubmission | None = None) -> RecipeDetail:
        viewer = viewer or ANONYMOUS
        recipe_aggregate = aggregate(self.rating_repo.list_ratings(recipe.id))
        own_rating = self.rating_repo.get_user_rating(recipe.id, viewer.user_id)
        author_name = self.profile_repo.display_names([recipe.author_id]).get(recipe.author_id)
        return self.composer.compose(
            recipe,
            recipe_aggregate,
            own_rating,
            viewer,
            author_name=author_name,
            submission_pending=bool(submission and submission.pending),
        )
