from rest_framework import serializers

from dating_journal.models import DatingJournalEntry


class DatingJournalEntrySerializer(serializers.ModelSerializer):
    class Meta:
        model = DatingJournalEntry
        fields = (
            'id', 'uuid', 'person_name', 'date', 'location', 'experience_rating',
            'notes', 'will_see_again', 'user', 'created_at', 'updated_at',
        )
        read_only_fields = ('uuid', 'user', 'created_at', 'updated_at')
