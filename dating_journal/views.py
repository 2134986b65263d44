from core.api import OwnerScopedViewSet
from dating_journal.filters import DatingJournalEntryFilter
from dating_journal.models import DatingJournalEntry
from dating_journal.serializers import DatingJournalEntrySerializer


class DatingJournalEntryViewSet(OwnerScopedViewSet):
    model = DatingJournalEntry
    serializer_class = DatingJournalEntrySerializer
    filterset_class = DatingJournalEntryFilter
    ordering_fields = ['date', 'experience_rating', 'created_at']
