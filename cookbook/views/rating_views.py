"""Rating submission from the recipe detail page (form post or fetch)."""

from urllib.parse import urlencode

from django.contrib import messages
from django.http import JsonResponse
from django.shortcuts import redirect
from django.urls import reverse
from django.views.decorators.http import require_POST

from cookbook.errors import CookbookError, RecipeNotFound, UnauthenticatedError
from cookbook.exception_handlers import status_for
from cookbook.forms import RatingForm
from cookbook.services.ratings import aggregate, format_rating
from cookbook.services.recipe_detail import RatingSubmission
from cookbook.utils.http import is_ajax

submission_factory = RatingSubmission


@require_POST
def rate_recipe(request, recipe_id):
    """Submit the viewer's one rating for a recipe."""
    ajax = is_ajax(request)
    detail_url = reverse("recipe_detail", kwargs={"recipe_id": recipe_id})

    form = RatingForm(request.POST)
    if not form.is_valid():
        message = next(iter(form.errors.get("rating", ["Please pick a rating."])))
        if ajax:
            return JsonResponse({"ok": False, "error": message, "code": "ValidationError"}, status=400)
        messages.error(request, message)
        return redirect(detail_url)

    submission = submission_factory(recipe_id, request.viewer)
    try:
        submission.submit(form.cleaned_data["rating"])
    except UnauthenticatedError as exc:
        if ajax:
            return _error_json(exc)
        messages.info(request, exc.message)
        return redirect(f"{reverse('log_in')}?{urlencode({'next': detail_url})}")
    except RecipeNotFound as exc:
        if ajax:
            return _error_json(exc)
        messages.error(request, exc.message)
        return redirect("home")
    except CookbookError as exc:
        if ajax:
            return _error_json(exc)
        messages.error(request, exc.message)
        return redirect(detail_url)

    if ajax:
        result = aggregate(submission.rating_repo.list_ratings(recipe_id))
        return JsonResponse(
            {
                "ok": True,
                "rating": submission.rating.rating,
                "average": result.average,
                "average_display": format_rating(result.average),
                "count": result.count,
                "can_rate": False,
            },
            status=201,
        )
    messages.success(request, "Thanks for rating this recipe!")
    return redirect(detail_url)


def _error_json(exc):
    return JsonResponse(
        {"ok": False, "error": exc.message, "code": type(exc).__name__, "retryable": exc.retryable},
        status=status_for(exc),
    )
