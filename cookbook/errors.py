"""Error taxonomy for recipe and rating operations.

Every error carries a user-facing message and says whether resubmitting the
same action can succeed. None of them is fatal: views turn them into flash
messages and the API turns them into status codes.
"""


class CookbookError(Exception):
    """Base class for errors raised by the cookbook stores and services."""

    default_message = "Something went wrong."
    retryable = False

    def __init__(self, message=None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(CookbookError):
    """Malformed input, rejected before any query is issued."""

    default_message = "Please check your input and try again."


class UnauthenticatedError(CookbookError):
    """No identified viewer for an action that needs one."""

    default_message = "Please log in to continue."


class SelfRatingForbidden(CookbookError):
    """Owners may not rate their own recipes."""

    default_message = "You cannot rate your own recipe."


class DuplicateRating(CookbookError):
    """A rating already exists for this (recipe, user) pair."""

    default_message = "You have already rated this recipe."


class RecipeNotFound(CookbookError):
    """The referenced recipe does not exist (or was deleted)."""

    default_message = "This recipe is no longer available."


class TransportError(CookbookError):
    """The database or a remote service failed; the user may try again."""

    default_message = "We could not reach the server. Please try again."
    retryable = True
