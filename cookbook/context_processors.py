from cookbook.session import ANONYMOUS


def viewer(request):
  """Provide the viewer session context (name, avatar) to templates."""
  return {"viewer": getattr(request, "viewer", ANONYMOUS)}
