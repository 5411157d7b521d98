from rest_framework import serializers

from cookbook.models import Ingredient, Recipe
from cookbook.models.rating import RATING_MAX, RATING_MIN
from cookbook.services.recipes import RecipeService


class IngredientSerializer(serializers.ModelSerializer):
    """One ingredient line; position comes from list order."""

    class Meta:
        model = Ingredient
        fields = ["name", "quantity", "unit"]


class StepListField(serializers.ListField):
    """Instruction steps as a list of strings, read from the ordered step rows."""

    child = serializers.CharField(max_length=1000)

    def to_representation(self, data):
        steps = data.all() if hasattr(data, "all") else data
        return [getattr(step, "description", step) for step in steps]


class RecipeSerializer(serializers.ModelSerializer):
    """Writable recipe with nested ingredients and steps."""

    author = serializers.PrimaryKeyRelatedField(read_only=True)
    ingredients = IngredientSerializer(many=True, required=False)
    steps = StepListField(required=False)

    class Meta:
        model = Recipe
        fields = [
            "id",
            "author",
            "title",
            "description",
            "image_url",
            "prep_time",
            "difficulty",
            "ingredients",
            "steps",
            "created_at",
            "updated_at",
        ]
        read_only_fields = [
            "id",
            "author",
            "created_at",
            "updated_at",
        ]

    def create(self, validated_data):
        """Create through RecipeService so relations get positions."""
        author = validated_data.pop("author")
        ingredients = validated_data.pop("ingredients", [])
        steps = validated_data.pop("steps", [])
        return RecipeService().create(author, validated_data, ingredients=ingredients, steps=steps)

    def update(self, instance, validated_data):
        """Partial updates leave relations alone unless they are sent."""
        ingredients = validated_data.pop("ingredients", None)
        steps = validated_data.pop("steps", None)
        return RecipeService().update(instance, validated_data, ingredients=ingredients, steps=steps)


class RecipeSummarySerializer(serializers.Serializer):
    """Read-only view of a RecipeSummary card."""

    id = serializers.UUIDField()
    title = serializers.CharField()
    image_url = serializers.CharField()
    prep_time_display = serializers.CharField()
    difficulty = serializers.CharField()
    author_name = serializers.CharField()
    rating = serializers.FloatField()
    ratings_count = serializers.IntegerField()
    rating_display = serializers.CharField()


class RecipeDetailSerializer(serializers.Serializer):
    """Read-only view of a RecipeDetail projection."""

    summary = RecipeSummarySerializer()
    description = serializers.CharField()
    author_id = serializers.IntegerField()
    ingredients = serializers.ListField(child=serializers.DictField())
    steps = serializers.ListField(child=serializers.CharField())
    is_owner = serializers.BooleanField()
    viewer_own_rating = serializers.IntegerField(allow_null=True)
    can_rate = serializers.BooleanField()


class RatingInputSerializer(serializers.Serializer):
    """Rating payload: a single whole number of stars."""

    rating = serializers.IntegerField(min_value=RATING_MIN, max_value=RATING_MAX)
