from rest_framework import serializers

from dating_ideas.models import DatingIdea


class DatingIdeaSerializer(serializers.ModelSerializer):
    category_label = serializers.CharField(source='get_category_display', read_only=True)

    class Meta:
        model = DatingIdea
        fields = (
            'id', 'uuid', 'title', 'description', 'category', 'category_label',
            'estimated_cost', 'estimated_duration', 'location_type', 'is_favorite',
            'user', 'created_at', 'updated_at',
        )
        read_only_fields = ('uuid', 'user', 'created_at', 'updated_at')
