"""Profile edit page."""

from django.contrib import messages
from django.contrib.auth.decorators import login_required
from django.shortcuts import redirect, render

from cookbook import session
from cookbook.forms import ProfileForm
from cookbook.services.profile import ProfileService

profile_service_factory = ProfileService


@login_required
def profile_edit(request):
    """Edit display name and avatar; refreshes the viewer context on save."""
    profile = profile_service_factory().profile_for(request.user)
    form = ProfileForm(request.POST or None, request.FILES or None, instance=profile)
    if request.method == "POST":
        if form.is_valid():
            form.save()
            session.store(request, request.user)
            messages.success(request, "Profile updated.")
            return redirect("profile_edit")
        messages.error(request, "Please correct the errors below.")
    return render(request, "profile/edit.html", {"form": form, "profile": profile})
