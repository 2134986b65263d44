from django.contrib import admin
from .models import DatingJournalEntry


@admin.register(DatingJournalEntry)
class DatingJournalEntryAdmin(admin.ModelAdmin):
    list_display = ('person_name', 'user', 'date', 'location', 'experience_rating', 'will_see_again')
    list_filter = ('experience_rating', 'will_see_again')
    search_fields = ('person_name', 'location', 'notes', 'user__username')
    readonly_fields = ('uuid', 'created_at', 'updated_at')
