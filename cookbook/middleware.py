"""Attach the viewer session context to every request."""

from django.utils.functional import SimpleLazyObject

from cookbook import session


class ViewerContextMiddleware:
    """Expose `request.viewer`, the SessionContext for the current user.

    Must run after AuthenticationMiddleware. The context is resolved lazily so
    requests that never look at it cost nothing.
    """

    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        request.viewer = SimpleLazyObject(lambda: session.current(request))
        return self.get_response(request)
