import uuid
from unittest.mock import MagicMock

from django.test import TestCase

from cookbook.errors import DuplicateRating, RecipeNotFound, SelfRatingForbidden
from cookbook.services.ratings import Aggregate
from cookbook.services.recipe_detail import (
    RatingSubmission,
    RecipeDetailComposer,
    RecipeDetailService,
    SubmissionState,
)
from cookbook.session import ANONYMOUS, SessionContext
from cookbook.tests.helpers import make_rating, make_recipe, make_user


class CanRateTests(TestCase):
    def setUp(self):
        self.composer = RecipeDetailComposer()
        self.viewer = SessionContext(user_id=1, display_name="Viewer")

    def test_identified_non_owner_without_rating(self):
        self.assertTrue(self.composer.can_rate(self.viewer, False, None, False))

    def test_anonymous(self):
        self.assertFalse(self.composer.can_rate(ANONYMOUS, False, None, False))

    def test_owner(self):
        self.assertFalse(self.composer.can_rate(self.viewer, True, None, False))

    def test_already_rated(self):
        self.assertFalse(self.composer.can_rate(self.viewer, False, 3, False))

    def test_submission_in_flight(self):
        self.assertFalse(self.composer.can_rate(self.viewer, False, None, True))


class RecipeDetailComposerTests(TestCase):
    def setUp(self):
        self.author = make_user("author", display_name="Author")
        self.recipe = make_recipe(
            author=self.author,
            ingredients=(("flour", "2", "cups"), ("salt", None, "")),
            steps=("Mix.", "Bake."),
        )
        self.composer = RecipeDetailComposer()

    def test_projection_contents(self):
        viewer = SessionContext(user_id=self.author.pk + 100)
        detail = self.composer.compose(self.recipe, Aggregate(4.0, 3), None, viewer, author_name="Author")
        self.assertEqual(detail.summary.title, "Tomato soup")
        self.assertEqual(detail.summary.rating_display, "4.0")
        self.assertEqual(detail.summary.ratings_count, 3)
        self.assertEqual([i["text"] for i in detail.ingredients], ["2 cups flour", "salt"])
        self.assertEqual(detail.steps, ["Mix.", "Bake."])
        self.assertFalse(detail.is_owner)
        self.assertTrue(detail.can_rate)

    def test_owner_view(self):
        viewer = SessionContext(user_id=self.author.pk)
        detail = self.composer.compose(self.recipe, None, None, viewer)
        self.assertTrue(detail.is_owner)
        self.assertFalse(detail.can_rate)
        self.assertEqual(detail.summary.rating, 0.0)

    def test_anonymous_viewer(self):
        detail = self.composer.compose(self.recipe, None, None, None)
        self.assertFalse(detail.is_owner)
        self.assertFalse(detail.can_rate)


class RecipeDetailServiceTests(TestCase):
    def setUp(self):
        self.service = RecipeDetailService()
        self.author = make_user("author", display_name="Chef")
        self.rater = make_user("rater")
        self.recipe = make_recipe(author=self.author)

    def test_load_unknown_recipe(self):
        with self.assertRaises(RecipeNotFound):
            self.service.load(uuid.uuid4(), ANONYMOUS)

    def test_load_includes_own_rating(self):
        make_rating(self.recipe, self.rater, 4)
        viewer = SessionContext(user_id=self.rater.pk)
        detail = self.service.load(self.recipe.id, viewer)
        self.assertEqual(detail.viewer_own_rating, 4)
        self.assertFalse(detail.can_rate)
        self.assertEqual(detail.summary.author_name, "Chef")
        self.assertEqual(detail.summary.rating, 4.0)

    def test_pending_submission_disables_rating(self):
        viewer = SessionContext(user_id=self.rater.pk)
        submission = RatingSubmission(self.recipe.id, viewer)
        submission.state = SubmissionState.SUBMITTING
        detail = self.service.load(self.recipe.id, viewer, submission=submission)
        self.assertFalse(detail.can_rate)


class RatingSubmissionTests(TestCase):
    def setUp(self):
        self.author = make_user("author")
        self.rater = make_user("rater")
        self.recipe = make_recipe(author=self.author)
        self.viewer = SessionContext(user_id=self.rater.pk)

    def test_success(self):
        submission = RatingSubmission(self.recipe.id, self.viewer)
        rating = submission.submit(5)
        self.assertEqual(submission.state, SubmissionState.SUCCEEDED)
        self.assertEqual(rating.rating, 5)
        self.assertIsNone(submission.error)

    def test_failure_records_error(self):
        submission = RatingSubmission(self.recipe.id, SessionContext(user_id=self.author.pk))
        with self.assertRaises(SelfRatingForbidden):
            submission.submit(5)
        self.assertEqual(submission.state, SubmissionState.FAILED)
        self.assertIsInstance(submission.error, SelfRatingForbidden)

    def test_second_submission_is_duplicate(self):
        RatingSubmission(self.recipe.id, self.viewer).submit(3)
        with self.assertRaises(DuplicateRating):
            RatingSubmission(self.recipe.id, self.viewer).submit(4)

    def test_refuses_while_in_flight(self):
        repo = MagicMock()
        submission = RatingSubmission(self.recipe.id, self.viewer, rating_repo=repo)
        submission.state = SubmissionState.SUBMITTING
        with self.assertRaises(RuntimeError):
            submission.submit(4)
        repo.submit_rating.assert_not_called()

    def test_reset_after_failure_allows_retry(self):
        repo = MagicMock()
        repo.submit_rating.side_effect = [SelfRatingForbidden(), "stored"]
        submission = RatingSubmission(self.recipe.id, self.viewer, rating_repo=repo)
        with self.assertRaises(SelfRatingForbidden):
            submission.submit(4)
        submission.reset()
        self.assertEqual(submission.state, SubmissionState.IDLE)
        self.assertIsNone(submission.error)
        self.assertEqual(submission.submit(4), "stored")

    def test_reset_is_noop_while_idle(self):
        submission = RatingSubmission(self.recipe.id, self.viewer)
        submission.reset()
        self.assertEqual(submission.state, SubmissionState.IDLE)
        self.assertFalse(submission.pending)
