from django.contrib import admin
from .models import DashboardWidget

@admin.register(DashboardWidget)
class DashboardWidgetAdmin(admin.ModelAdmin):
    list_display = ["user", "widget_type", "position", "size", "is_active"]
    list_filter = ["is_active", "widget_type", "size"]
    search_fields = ["widget_type", "user__email", "user__username"]
