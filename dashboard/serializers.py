from rest_framework import serializers

from dashboard.catalog import get_widget_definition
from dashboard.models import DashboardWidget


class WidgetDefinitionSerializer(serializers.Serializer):
    """Serializer for an entry of the widget catalog."""

    widget_type = serializers.CharField()
    title = serializers.CharField()
    description = serializers.CharField()
    route = serializers.CharField()


class DashboardWidgetSerializer(serializers.ModelSerializer):
    """Serializer for a placed widget; only visibility and size are editable."""

    title = serializers.SerializerMethodField()
    route = serializers.SerializerMethodField()

    class Meta:
        model = DashboardWidget
        fields = ('id', 'widget_type', 'position', 'is_active', 'size', 'title', 'route')
        read_only_fields = ('id', 'widget_type', 'position')

    def get_title(self, obj) -> str | None:
        definition = get_widget_definition(obj.widget_type)
        return definition.title if definition else None

    def get_route(self, obj) -> str | None:
        definition = get_widget_definition(obj.widget_type)
        return definition.route if definition else None


class ReorderSerializer(serializers.Serializer):
    """Serializer for a drag-end event."""

    source_index = serializers.IntegerField(min_value=0)
    destination_index = serializers.IntegerField(min_value=0, allow_null=True, required=False, default=None)
