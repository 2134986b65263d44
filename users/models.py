# users/models.py
from django.contrib.auth.models import AbstractUser
from django.db import models


class User(AbstractUser):
    email = models.EmailField(unique=True, null=True, blank=True)
    display_name = models.CharField(max_length=150, blank=True)

    REQUIRED_FIELDS = []
    USERNAME_FIELD = 'username'

    def get_display_name(self):
        return self.display_name or self.get_full_name() or self.username

    def save(self, *args, **kwargs):
        # Several accounts may have no email; store NULL so the unique index allows it.
        if not self.email:
            self.email = None
        super().save(*args, **kwargs)
