from rest_framework import serializers

from bucket_list.models import BucketListItem
from common.fields import BlankableDateField


class BucketListItemSerializer(serializers.ModelSerializer):
    target_date = BlankableDateField()

    class Meta:
        model = BucketListItem
        fields = (
            'id', 'uuid', 'title', 'description', 'category', 'is_completed',
            'target_date', 'user', 'created_at', 'updated_at',
        )
        read_only_fields = ('uuid', 'user', 'created_at', 'updated_at')
