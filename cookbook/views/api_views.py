from rest_framework import generics, permissions, status
from rest_framework.response import Response
from rest_framework.views import APIView

from cookbook.forms import SearchForm
from cookbook.models import Recipe
from cookbook.permissions import IsOwnerOrReadOnly
from cookbook.serializers import (
    RatingInputSerializer,
    RecipeDetailSerializer,
    RecipeSerializer,
    RecipeSummarySerializer,
)
from cookbook.services.feed import RecipeFeedService
from cookbook.services.ratings import aggregate, format_rating
from cookbook.services.recipe_detail import RatingSubmission, RecipeDetailService
from cookbook.services.recipes import RecipeService
from cookbook.session import context_for_user


def api_viewer(request):
    """Viewer context for the DRF-authenticated user (session or Firebase token)."""
    return context_for_user(request.user)


class RecipeListApi(generics.ListCreateAPIView):
    """List recipe summaries for a tab (with search filters) and allow creation."""
    serializer_class = RecipeSerializer
    permission_classes = [permissions.IsAuthenticatedOrReadOnly]

    def list(self, request, *args, **kwargs):
        """
        Query parameters mirror the home page: `tab` (all, members,
        top_rated, mine), `q`, `ingredient`, `difficulty`, `time_range`.
        """
        form = SearchForm(request.query_params)
        options = form.to_options(api_viewer(request).user_id)
        listing = RecipeFeedService().list(options)
        return Response(
            {
                "tab": listing.tab,
                "fallback_used": listing.fallback_used,
                "results": RecipeSummarySerializer(listing.recipes, many=True).data,
            }
        )

    def perform_create(self, serializer):
        """Assign current user as author on create."""
        serializer.save(author=self.request.user)


class RecipeDetailApi(generics.RetrieveUpdateDestroyAPIView):
    """Retrieve a recipe projection; only its author may update or delete it."""
    queryset = Recipe.objects.select_related("author").prefetch_related("ingredients", "steps")
    serializer_class = RecipeSerializer
    permission_classes = [permissions.IsAuthenticatedOrReadOnly, IsOwnerOrReadOnly]

    def retrieve(self, request, *args, **kwargs):
        recipe = self.get_object()
        detail = RecipeDetailService().compose_for(recipe, api_viewer(request))
        return Response(RecipeDetailSerializer(detail).data)

    def perform_destroy(self, instance):
        RecipeService().delete_for_owner(instance.pk, self.request.user.pk)


class RecipeRatingApi(APIView):
    """Aggregate rating and the caller's own rating; POST submits a rating.

    Anonymous POSTs reach the rating store so they are rejected with the same
    UnauthenticatedError (401) as every other surface.
    """
    permission_classes = [permissions.AllowAny]

    def get(self, request, pk):
        detail = RecipeDetailService().load(pk, api_viewer(request))
        return Response(self._payload(detail.summary.rating, detail.summary.ratings_count,
                                      detail.viewer_own_rating, detail.can_rate))

    def post(self, request, pk):
        serializer = RatingInputSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        submission = RatingSubmission(pk, api_viewer(request))
        submission.submit(serializer.validated_data["rating"])
        result = aggregate(submission.rating_repo.list_ratings(pk))
        return Response(
            self._payload(result.average, result.count, submission.rating.rating, False),
            status=status.HTTP_201_CREATED,
        )

    def _payload(self, average, count, own_rating, can_rate):
        return {
            "average": average,
            "average_display": format_rating(average),
            "count": count,
            "own_rating": own_rating,
            "can_rate": can_rate,
        }
