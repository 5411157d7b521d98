"""
URL configuration for recipebox project.

The `urlpatterns` list routes URLs to views. For more information please see:
    https://docs.djangoproject.com/en/5.2/topics/http/urls/
"""
from django.conf import settings
from django.conf.urls.static import static
from django.contrib import admin
from django.urls import path
from cookbook import views
from cookbook.views.recipe_views import (
    recipe_create,
    recipe_edit,
    recipe_detail,
    delete_my_recipe,
    my_recipes,
)
from cookbook.views.rating_views import rate_recipe
from cookbook.views.api_views import RecipeListApi, RecipeDetailApi, RecipeRatingApi

urlpatterns = [
    path('admin/', admin.site.urls),
    path('', views.home, name='home'),
    path('log_in/', views.LogInView.as_view(), name='log_in'),
    path('log_out/', views.log_out, name='log_out'),
    path('sign_up/', views.SignUpView.as_view(), name='sign_up'),
    path('password/reset/', views.PasswordResetRequestView.as_view(), name='password_reset'),
    path('password/reset/done/', views.PasswordResetDoneView.as_view(), name='password_reset_done'),
    path('profile/edit/', views.profile_edit, name='profile_edit'),
    path('my-recipes/', my_recipes, name='my_recipes'),
    path('recipes/create/', recipe_create, name='recipe_create'),
    path('recipes/<uuid:recipe_id>/', recipe_detail, name='recipe_detail'),
    path('recipes/<uuid:recipe_id>/edit/', recipe_edit, name='recipe_edit'),
    path('recipes/<uuid:recipe_id>/delete/', delete_my_recipe, name='delete_my_recipe'),
    path('recipes/<uuid:recipe_id>/rate/', rate_recipe, name='rate_recipe'),
    path('api/recipes/', RecipeListApi.as_view(), name='recipe_list_api'),
    path('api/recipes/<uuid:pk>/', RecipeDetailApi.as_view(), name='recipe_detail_api'),
    path('api/recipes/<uuid:pk>/rating/', RecipeRatingApi.as_view(), name='recipe_rating_api'),
]

urlpatterns += static(settings.STATIC_URL, document_root=settings.STATIC_ROOT)
urlpatterns += static(settings.MEDIA_URL, document_root=settings.MEDIA_ROOT)
