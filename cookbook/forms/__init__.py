from .log_in_form import LogInForm
from .password_reset_form import PasswordResetRequestForm
from .rating_form import RatingForm
from .recipe_forms import RecipeForm
from .search_form import SearchForm
from .user_forms import NewPasswordMixin, ProfileForm, SignUpForm

__all__ = [
    "LogInForm",
    "NewPasswordMixin",
    "PasswordResetRequestForm",
    "ProfileForm",
    "RatingForm",
    "RecipeForm",
    "SearchForm",
    "SignUpForm",
]
