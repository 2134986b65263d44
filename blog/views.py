from core.api import OwnerScopedViewSet
from blog.filters import BlogPostFilter
from blog.models import BlogPost
from blog.serializers import BlogPostSerializer


class BlogPostViewSet(OwnerScopedViewSet):
    """Published posts plus the user's own drafts, newest first."""
    model = BlogPost
    shared = True
    serializer_class = BlogPostSerializer
    filterset_class = BlogPostFilter
    ordering_fields = ['created_at', 'updated_at', 'title']

    def get_queryset(self):
        return super().get_queryset().prefetch_related('tags')

    def perform_create(self, serializer):
        if not serializer.validated_data.get('author'):
            serializer.validated_data['author'] = self.request.user.get_display_name()
        super().perform_create(serializer)
