import django_filters

from dating_journal.models import DatingJournalEntry


class DatingJournalEntryFilter(django_filters.FilterSet):
    date = django_filters.DateFromToRangeFilter()
    min_rating = django_filters.NumberFilter(field_name='experience_rating', lookup_expr='gte')
    will_see_again = django_filters.BooleanFilter()

    class Meta:
        model = DatingJournalEntry
        fields = ['date', 'will_see_again']
