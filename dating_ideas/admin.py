from django.contrib import admin
from .models import DatingIdea


@admin.register(DatingIdea)
class DatingIdeaAdmin(admin.ModelAdmin):
    list_display = ('title', 'user', 'category', 'estimated_cost', 'estimated_duration', 'location_type', 'is_favorite')
    list_filter = ('category', 'estimated_cost', 'location_type', 'is_favorite')
    search_fields = ('title', 'description', 'user__username')
    readonly_fields = ('uuid', 'created_at', 'updated_at')
