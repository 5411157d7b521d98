"""Home page: recipe tabs plus the search sidebar."""

from django.contrib import messages
from django.shortcuts import render

from cookbook.errors import TransportError
from cookbook.forms import SearchForm
from cookbook.services.feed import TAB_ALL, TABS, RecipeFeedService, RecipeListing

feed_service_factory = RecipeFeedService

HOME_TABS = {value for value, _ in TABS}


def home(request):
    """List recipes for the selected tab, narrowed by the search filters."""
    viewer = request.viewer
    form = SearchForm(request.GET or None)
    options = form.to_options(viewer.user_id)
    if options.tab not in HOME_TABS:
        options.tab = TAB_ALL

    try:
        listing = feed_service_factory().list(options)
    except TransportError as exc:
        messages.error(request, exc.message)
        listing = RecipeListing(tab=options.tab)

    return render(
        request,
        "home.html",
        {
            "form": form,
            "tabs": TABS,
            "active_tab": listing.tab,
            "recipes": listing.recipes,
            "fallback_used": listing.fallback_used,
            "has_filters": form.has_filters(),
        },
    )
