import logging

from django.db import models
from django.contrib.auth.base_user import AbstractBaseUser
from django.contrib.auth.models import PermissionsMixin
from django.utils import timezone
from django.utils.translation import gettext_lazy as _

from . import managers

logger = logging.getLogger(__name__)


class CustomUser( AbstractBaseUser, PermissionsMixin ):
    """Trimmed-down version of Django's AbstractUser: users sign in with a
    unique username, must also have a unique email, and carry a single
    display name instead of first/last names.

    Everything except the primary key is mutable, but only by the user
    themselves (or staff through the admin).
    """
    username = models.CharField(
        _('username'),
        max_length = 150,
        unique = True,
        error_messages = {
            'unique': _('A user with that username already exists.'),
        },
    )
    email = models.EmailField(
        _('email address'),
        unique = True,
    )
    name = models.CharField(
        _('name'),
        max_length = 150,
    )
    is_staff = models.BooleanField(
        _('staff status'),
        default = False,
        help_text = _('Designates whether the user can log into this admin site.')
    )
    is_active = models.BooleanField(
        _('active'),
        default = True,
        help_text = _('Designates whether this user should be treated as '
                      'active. Unselect this instead of deleting accounts.')
    )
    date_joined = models.DateTimeField(
        _('date joined'),
        default = timezone.now
    )

    objects = managers.CustomUserManager()

    USERNAME_FIELD = "username"
    EMAIL_FIELD = "email"
    REQUIRED_FIELDS = [ "email", "name" ]

    class Meta:
        verbose_name = _('user')
        verbose_name_plural = _('users')

    def __str__(self):
        return self.username

    def clean(self):
        super().clean()
        self.email = self.__class__.objects.normalize_email(self.email)
        return

    def get_full_name(self):
        return self.name.strip()

    def get_short_name(self):
        return self.name
