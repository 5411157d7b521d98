"""HTTP-related utility helpers."""


def is_ajax(request):
    """Detect HTMX/fetch requests that expect JSON instead of a redirect."""
    hx_header = request.headers.get("HX-Request")
    xhr_header = request.headers.get("x-requested-with")
    accept = request.headers.get("Accept", "")
    return bool(
        hx_header
        or xhr_header == "XMLHttpRequest"
        or "application/json" in accept
        or request.GET.get("ajax") == "1"
    )


def safe_next_url(request, default):
    """Return the ?next= target when it is a local path, else default."""
    candidate = request.POST.get("next") or request.GET.get("next") or ""
    if candidate.startswith("/") and not candidate.startswith("//"):
        return candidate
    return default
