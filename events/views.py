from core.api import OwnerScopedViewSet
from events.filters import EventFilter
from events.models import Event
from events.serializers import EventSerializer


class EventViewSet(OwnerScopedViewSet):
    """Public events plus the user's private ones, soonest first.

    Anyone may read a public event; only its owner may change or delete it.
    """
    model = Event
    shared = True
    serializer_class = EventSerializer
    filterset_class = EventFilter
    ordering_fields = ['event_date', 'distance_km', 'created_at']
