from django.contrib import messages
from django.contrib.auth import logout
from django.shortcuts import redirect
from django.views.decorators.http import require_POST


@require_POST
def log_out(request):
    """Sign the user out; user_logged_out clears the viewer context."""
    logout(request)
    messages.add_message(request, messages.INFO, "You have been logged out.")
    return redirect('home')
