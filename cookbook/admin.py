from django.contrib import admin
from django.contrib.auth.admin import UserAdmin

from cookbook.models import Ingredient, Profile, Rating, Recipe, RecipeStep, User
from cookbook.services.ratings import aggregate, format_rating


class IngredientInline(admin.TabularInline):
    """Edit ingredient lines directly on the recipe page."""
    model = Ingredient
    extra = 0
    ordering = ['position']


class RecipeStepInline(admin.TabularInline):
    """Edit instruction steps directly on the recipe page."""
    model = RecipeStep
    extra = 0
    ordering = ['position']


@admin.register(Recipe)
class RecipeAdmin(admin.ModelAdmin):
    """Admin configuration for recipes with their ingredients and steps."""
    list_display = ('title', 'author', 'difficulty', 'prep_time', 'rating_display', 'created_at')
    list_filter = ('difficulty', 'created_at')
    search_fields = ('title', 'description', 'author__username', 'author__email')
    readonly_fields = ('id', 'created_at', 'updated_at')
    inlines = [IngredientInline, RecipeStepInline]

    @admin.display(description="Rating")
    def rating_display(self, obj):
        """Average rating and count, as shown on recipe cards."""
        result = aggregate(obj.ratings.all())
        return f"{format_rating(result.average)} ({result.count})"


@admin.register(Rating)
class RatingAdmin(admin.ModelAdmin):
    list_display = ('recipe', 'user', 'rating', 'created_at')
    list_filter = ('rating',)
    search_fields = ('recipe__title', 'user__username')


@admin.register(Profile)
class ProfileAdmin(admin.ModelAdmin):
    list_display = ('user', 'username', 'updated_at')
    search_fields = ('username', 'user__email')


admin.site.register(User, UserAdmin)
