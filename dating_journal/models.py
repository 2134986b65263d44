from django.core.validators import MaxValueValidator, MinValueValidator
from django.db import models

from core.models import OwnedModel


class DatingJournalEntry(OwnedModel):
    person_name = models.CharField(max_length=255)
    date = models.DateField()
    location = models.CharField(max_length=255, blank=True)
    experience_rating = models.PositiveSmallIntegerField(
        default=5, validators=[MinValueValidator(1), MaxValueValidator(5)]
    )
    notes = models.TextField(blank=True)
    # None until the user has made up their mind
    will_see_again = models.BooleanField(null=True, blank=True)

    class Meta:
        ordering = ['-date', '-created_at']
        verbose_name_plural = 'dating journal entries'

    def __str__(self):
        return f"{self.person_name} ({self.date})"
