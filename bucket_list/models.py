from django.db import models

from common.enums import BucketListCategory
from core.models import OwnedModel


class BucketListItem(OwnedModel):
    title = models.CharField(max_length=255)
    description = models.TextField(blank=True)
    category = models.CharField(max_length=30, choices=BucketListCategory.choices, blank=True)
    is_completed = models.BooleanField(default=False)
    target_date = models.DateField(null=True, blank=True)

    class Meta:
        ordering = ['-created_at', '-id']

    def __str__(self):
        return self.title
