from django.contrib import admin
from .models import Event


@admin.register(Event)
class EventAdmin(admin.ModelAdmin):
    list_display = ('title', 'user', 'event_date', 'category', 'distance_km', 'is_public')
    list_filter = ('category', 'is_public')
    search_fields = ('title', 'description', 'location')
    readonly_fields = ('uuid', 'created_at', 'updated_at')
