from rest_framework import serializers
from taggit.serializers import TaggitSerializer, TagListSerializerField

from blog.models import BlogPost


class BlogPostSerializer(TaggitSerializer, serializers.ModelSerializer):
    tags = TagListSerializerField(required=False)
    excerpt = serializers.CharField(read_only=True)

    class Meta:
        model = BlogPost
        fields = (
            'id', 'uuid', 'title', 'content', 'excerpt', 'author', 'is_published',
            'tags', 'user', 'created_at', 'updated_at',
        )
        read_only_fields = ('uuid', 'user', 'created_at', 'updated_at')
