import django_filters
from django.db.models import Q

from common.enums import DistanceBucket, EventCategory
from common.filters import ChoiceOrAllFilter
from events.models import Event

# Lookups per distance bucket; events without a distance never match one.
DISTANCE_LOOKUPS = {
    DistanceBucket.UNDER_5.value: {'distance_km__lte': 5},
    DistanceBucket.UNDER_20.value: {'distance_km__lte': 20},
    DistanceBucket.OVER_20.value: {'distance_km__gt': 20},
}


class EventFilter(django_filters.FilterSet):
    search = django_filters.CharFilter(method='filter_search')
    category = ChoiceOrAllFilter(choices=EventCategory.choices)
    distance = django_filters.ChoiceFilter(choices=DistanceBucket.choices, method='filter_distance')
    event_date = django_filters.DateFromToRangeFilter()
    mine = django_filters.BooleanFilter(method='filter_mine')

    class Meta:
        model = Event
        fields = ['category', 'is_public']

    def filter_search(self, queryset, name, value):
        return queryset.filter(
            Q(title__icontains=value) | Q(description__icontains=value) | Q(location__icontains=value)
        )

    def filter_distance(self, queryset, name, value):
        lookup = DISTANCE_LOOKUPS.get(value)
        if lookup is None:
            return queryset
        return queryset.filter(distance_km__isnull=False, **lookup)

    def filter_mine(self, queryset, name, value: bool):
        if not value:
            return queryset
        return queryset.filter(user=self.request.user)
