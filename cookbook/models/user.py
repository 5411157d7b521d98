"""Custom user model; the account itself lives in Firebase Auth."""

from django.core.validators import RegexValidator
from django.contrib.auth.models import AbstractUser
from django.db import models


class User(AbstractUser):
    """Local mirror of a Firebase account, looked up by email at log in."""

    username = models.CharField(
        max_length=30,
        unique=True,
        validators=[RegexValidator(
            regex=r'^\w{3,}$',
            message='Username must consist of at least three alphanumericals'
        )]
    )
    email = models.EmailField(unique=True, blank=False)

    class Meta:
        """Default ordering for users."""
        ordering = ['username']

    def __str__(self):
        return self.username
