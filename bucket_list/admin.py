from django.contrib import admin
from .models import BucketListItem


@admin.register(BucketListItem)
class BucketListItemAdmin(admin.ModelAdmin):
    list_display = ('title', 'user', 'category', 'is_completed', 'target_date', 'created_at')
    list_filter = ('category', 'is_completed')
    search_fields = ('title', 'description', 'user__username')
    readonly_fields = ('uuid', 'created_at', 'updated_at')
