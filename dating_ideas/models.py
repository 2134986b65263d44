from django.db import models

from common.enums import CostRange, DurationRange, IdeaCategory, LocationType
from core.models import OwnedModel


class DatingIdea(OwnedModel):
    title = models.CharField(max_length=255)
    description = models.TextField(blank=True)
    category = models.CharField(max_length=30, choices=IdeaCategory.choices, blank=True)
    estimated_cost = models.CharField(max_length=20, choices=CostRange.choices, blank=True)
    estimated_duration = models.CharField(max_length=20, choices=DurationRange.choices, blank=True)
    location_type = models.CharField(max_length=20, choices=LocationType.choices, blank=True)
    is_favorite = models.BooleanField(default=False)

    class Meta:
        ordering = ['-created_at', '-id']

    def __str__(self):
        return self.title
