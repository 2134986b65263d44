"""API endpoints for the dashboard layout."""

from drf_spectacular.utils import extend_schema
from rest_framework import generics, mixins, status, viewsets
from rest_framework.decorators import action
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from dashboard.catalog import WIDGET_CATALOG
from dashboard.exceptions import LayoutSyncError
from dashboard.models import DashboardWidget
from dashboard.serializers import (
    DashboardWidgetSerializer,
    ReorderSerializer,
    WidgetDefinitionSerializer,
)
from dashboard.services import (
    get_layout_queryset,
    load_layout,
    reorder_layout,
    reset_layout,
    update_widget,
)


class DashboardLayoutViewSet(mixins.UpdateModelMixin, viewsets.GenericViewSet):
    """The authenticated user's widgets, always returned whole and in order."""

    permission_classes = [IsAuthenticated]
    serializer_class = DashboardWidgetSerializer
    pagination_class = None

    def get_queryset(self):
        if getattr(self, "swagger_fake_view", False):
            return DashboardWidget.objects.none()
        return get_layout_queryset(self.request.user)

    def perform_update(self, serializer):
        serializer.instance = update_widget(
            self.request.user, serializer.instance.pk, **serializer.validated_data
        )

    @extend_schema(responses=DashboardWidgetSerializer(many=True))
    def list(self, request):
        widgets = load_layout(request.user)
        return Response(self.get_serializer(widgets, many=True).data)

    @extend_schema(
        request=ReorderSerializer,
        responses={200: DashboardWidgetSerializer(many=True), 409: DashboardWidgetSerializer(many=True)},
    )
    @action(detail=False, methods=['post'])
    def reorder(self, request):
        serializer = ReorderSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        try:
            widgets = reorder_layout(
                request.user,
                serializer.validated_data['source_index'],
                serializer.validated_data['destination_index'],
            )
        except LayoutSyncError as exc:
            stored = self.get_serializer(get_layout_queryset(request.user), many=True).data
            return Response(
                {"errors": [str(exc.detail)], "layout": stored},
                status=status.HTTP_409_CONFLICT,
            )
        return Response(self.get_serializer(widgets, many=True).data)

    @extend_schema(request=None, responses=DashboardWidgetSerializer(many=True))
    @action(detail=False, methods=['post'])
    def reset(self, request):
        widgets = reset_layout(request.user)
        return Response(self.get_serializer(widgets, many=True).data)


class WidgetCatalogView(generics.GenericAPIView):
    permission_classes = [IsAuthenticated]
    serializer_class = WidgetDefinitionSerializer
    pagination_class = None

    @extend_schema(responses=WidgetDefinitionSerializer(many=True))
    def get(self, request):
        serializer = self.get_serializer(WIDGET_CATALOG, many=True)
        return Response(serializer.data)
