from drf_spectacular.utils import OpenApiParameter, extend_schema
from rest_framework.decorators import action
from rest_framework.exceptions import NotFound
from rest_framework.response import Response

from core.api import OwnerScopedViewSet
from dating_ideas.filters import DatingIdeaFilter
from dating_ideas.models import DatingIdea
from dating_ideas.serializers import DatingIdeaSerializer


class DatingIdeaViewSet(OwnerScopedViewSet):
    model = DatingIdea
    serializer_class = DatingIdeaSerializer
    filterset_class = DatingIdeaFilter
    ordering_fields = ['created_at', 'title']

    @extend_schema(request=None, responses=DatingIdeaSerializer)
    @action(detail=True, methods=['post'], url_path='toggle-favorite')
    def toggle_favorite(self, request, pk=None):
        idea = self.get_object()
        idea.is_favorite = not idea.is_favorite
        idea.save(update_fields=['is_favorite', 'updated_at'])
        return Response(self.get_serializer(idea).data)

    @extend_schema(
        parameters=[OpenApiParameter(name="category", type=str, location=OpenApiParameter.QUERY)],
        responses=DatingIdeaSerializer,
    )
    @action(detail=False, methods=['get'])
    def random(self, request):
        """Pick one idea at random among those matching the current filters."""
        idea = self.filter_queryset(self.get_queryset()).order_by('?').first()
        if idea is None:
            raise NotFound("No dating ideas match the selected category.")
        return Response(self.get_serializer(idea).data)
