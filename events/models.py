from django.db import models

from common.enums import EventCategory
from core.models import OwnedModel


class Event(OwnedModel):
    title = models.CharField(max_length=255)
    description = models.TextField(blank=True)
    location = models.CharField(max_length=255, blank=True)
    event_date = models.DateTimeField()
    category = models.CharField(max_length=30, choices=EventCategory.choices, blank=True)
    distance_km = models.DecimalField(max_digits=7, decimal_places=2, null=True, blank=True)
    is_public = models.BooleanField(default=False)

    public_field = 'is_public'

    class Meta:
        ordering = ['event_date', 'id']
        indexes = [
            models.Index(fields=['event_date'], name='events_event_date_idx'),
        ]

    def __str__(self):
        return f"{self.title} @ {self.event_date:%Y-%m-%d}"
