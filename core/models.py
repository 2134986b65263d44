import uuid

from django.conf import settings
from django.db import models

from core.managers import OwnedQuerySet


class BaseModel(models.Model):
    uuid = models.UUIDField(default=uuid.uuid4, unique=True, editable=False)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        abstract = True


class OwnedModel(BaseModel):
    """A row that belongs to exactly one user.

    Reads must go through ``objects.for_user()`` or ``objects.visible_to()``;
    both refuse to run without a user.
    """
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name='+'
    )

    # Name of the boolean column that makes a row readable by everyone.
    public_field = None

    objects = OwnedQuerySet.as_manager()

    class Meta:
        abstract = True

    def is_owned_by(self, user) -> bool:
        return self.user_id == getattr(user, 'pk', None)
