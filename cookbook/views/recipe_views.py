from django.contrib import messages
from django.contrib.auth.decorators import login_required
from django.http import Http404
from django.shortcuts import redirect, render
from django.views.decorators.http import require_POST

from cookbook.errors import RecipeNotFound, TransportError
from cookbook.forms import RatingForm, RecipeForm, SearchForm
from cookbook.repos.recipe_repo import RecipeRepo
from cookbook.services.feed import TAB_MINE, RecipeFeedService, RecipeListing
from cookbook.services.recipe_detail import RecipeDetailService
from cookbook.services.recipes import RecipeService

recipe_repo = RecipeRepo()
recipe_service = RecipeService(recipe_repo)
detail_service_factory = RecipeDetailService
feed_service_factory = RecipeFeedService


def recipe_detail(request, recipe_id):
    """Display a single recipe with rating controls when the viewer may rate."""
    try:
        detail = detail_service_factory().load(recipe_id, request.viewer)
    except RecipeNotFound as exc:
        raise Http404(exc.message)
    except TransportError as exc:
        messages.error(request, exc.message)
        return redirect("home")

    return render(
        request,
        "recipes/detail.html",
        {
            "recipe_id": recipe_id,
            "detail": detail,
            "summary": detail.summary,
            "rating_form": RatingForm() if detail.can_rate else None,
        },
    )


@login_required
def recipe_create(request):
    """Create a new recipe from a submitted RecipeForm."""
    form = RecipeForm(request.POST or None)
    if request.method == "POST" and form.is_valid():
        try:
            recipe = recipe_service.create_from_form(form, request.user)
        except TransportError as exc:
            messages.error(request, exc.message)
        else:
            messages.success(request, "Recipe created.")
            return redirect("recipe_detail", recipe_id=recipe.id)

    return _render_form(request, form, recipe=None)


@login_required
def recipe_edit(request, recipe_id):
    """Edit a recipe owned by the current user."""
    recipe = _owned_recipe_or_404(request, recipe_id)
    form = RecipeForm(request.POST or None, instance=recipe)
    if request.method == "POST" and form.is_valid():
        try:
            recipe_service.update_from_form(recipe, form)
        except TransportError as exc:
            messages.error(request, exc.message)
        else:
            messages.success(request, "Recipe updated.")
            return redirect("recipe_detail", recipe_id=recipe.id)

    return _render_form(request, form, recipe=recipe)


@login_required
@require_POST
def delete_my_recipe(request, recipe_id):
    """Hard-delete a recipe owned by the current user, ratings included."""
    if not recipe_service.delete_for_owner(recipe_id, request.user.pk):
        raise Http404("Recipe not found.")
    messages.success(request, "Recipe deleted.")
    return redirect("my_recipes")


@login_required
def my_recipes(request):
    """List the current user's recipes, newest first."""
    form = SearchForm(request.GET or None)
    options = form.to_options(request.viewer.user_id, default_tab=TAB_MINE)
    options.tab = TAB_MINE
    try:
        listing = feed_service_factory().list(options)
    except TransportError as exc:
        messages.error(request, exc.message)
        listing = RecipeListing(tab=TAB_MINE)
    return render(
        request,
        "recipes/my_recipes.html",
        {"form": form, "recipes": listing.recipes, "has_filters": form.has_filters()},
    )


def _owned_recipe_or_404(request, recipe_id):
    recipe = recipe_repo.get_by_id(recipe_id)
    if recipe is None or not recipe.is_owned_by(request.user.pk):
        raise Http404("Recipe not found.")
    return recipe


def _render_form(request, form, recipe):
    response = render(request, "recipes/form.html", {"form": form, "recipe": recipe})
    response["Cache-Control"] = "no-store, must-revalidate"
    return response
