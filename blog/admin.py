from django.contrib import admin
from .models import BlogPost


@admin.register(BlogPost)
class BlogPostAdmin(admin.ModelAdmin):
    list_display = ('title', 'author', 'user', 'is_published', 'created_at')
    list_filter = ('is_published',)
    search_fields = ('title', 'content', 'author')
    readonly_fields = ('uuid', 'created_at', 'updated_at')
