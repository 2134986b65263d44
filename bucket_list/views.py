from drf_spectacular.utils import extend_schema
from rest_framework.decorators import action
from rest_framework.response import Response

from bucket_list.filters import BucketListItemFilter
from bucket_list.models import BucketListItem
from bucket_list.serializers import BucketListItemSerializer
from core.api import OwnerScopedViewSet


class BucketListItemViewSet(OwnerScopedViewSet):
    """Life goals of the authenticated user, newest first."""
    model = BucketListItem
    serializer_class = BucketListItemSerializer
    filterset_class = BucketListItemFilter
    ordering_fields = ['created_at', 'target_date', 'title']

    @extend_schema(request=None, responses=BucketListItemSerializer)
    @action(detail=True, methods=['post'], url_path='toggle-complete')
    def toggle_complete(self, request, pk=None):
        item = self.get_object()
        item.is_completed = not item.is_completed
        item.save(update_fields=['is_completed', 'updated_at'])
        return Response(self.get_serializer(item).data)
