from rest_framework import serializers

from events.models import Event


class EventSerializer(serializers.ModelSerializer):
    is_owner = serializers.SerializerMethodField()

    class Meta:
        model = Event
        fields = (
            'id', 'uuid', 'title', 'description', 'location', 'event_date', 'category',
            'distance_km', 'is_public', 'is_owner', 'user', 'created_at', 'updated_at',
        )
        read_only_fields = ('uuid', 'user', 'created_at', 'updated_at')

    def get_is_owner(self, obj) -> bool:
        request = self.context.get('request')
        return bool(request) and obj.is_owned_by(request.user)

    def validate_distance_km(self, value):
        if value is not None and value < 0:
            raise serializers.ValidationError("distance_km cannot be negative")
        return value
