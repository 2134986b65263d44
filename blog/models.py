from django.db import models
from taggit.managers import TaggableManager

from core.models import OwnedModel

EXCERPT_LENGTH = 200


class BlogPost(OwnedModel):
    title = models.CharField(max_length=255)
    content = models.TextField()
    author = models.CharField(max_length=150, blank=True)
    is_published = models.BooleanField(default=False)
    tags = TaggableManager(blank=True)

    public_field = 'is_published'

    class Meta:
        ordering = ['-created_at', '-id']

    def __str__(self):
        return self.title

    @property
    def excerpt(self) -> str:
        if len(self.content) <= EXCERPT_LENGTH:
            return self.content
        return f"{self.content[:EXCERPT_LENGTH]}..."
