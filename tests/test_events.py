# tests/test_events.py
import itertools
from datetime import timedelta
from decimal import Decimal

import pytest
from django.urls import reverse
from django.utils import timezone

from common.enums import EventCategory
from events.models import Event
from tests.factories import EventFactory

DISTANCE_PREDICATES = {
    "all": lambda km: True,
    "under5": lambda km: km is not None and km <= 5,
    "under20": lambda km: km is not None and km <= 20,
    "over20": lambda km: km is not None and km > 20,
}


def _ids(response):
    return [row["id"] for row in response.json()["results"]]


class TestEventVisibility:

    def test_list_shows_public_and_own_events(self, api_client, user, other_user):
        mine_private = EventFactory(user=user, is_public=False)
        theirs_public = EventFactory(user=other_user, is_public=True)
        EventFactory(user=other_user, is_public=False)

        response = api_client.get(reverse("event-list"))
        assert set(_ids(response)) == {mine_private.id, theirs_public.id}

    def test_events_are_ordered_soonest_first(self, api_client, user):
        now = timezone.now()
        later = EventFactory(user=user, event_date=now + timedelta(days=10))
        sooner = EventFactory(user=user, event_date=now + timedelta(days=1))

        assert _ids(api_client.get(reverse("event-list"))) == [sooner.id, later.id]

    def test_is_owner_flag(self, api_client, user, other_user):
        EventFactory(user=user)
        EventFactory(user=other_user)

        rows = api_client.get(reverse("event-list")).json()["results"]
        assert sorted(row["is_owner"] for row in rows) == [False, True]

    def test_cannot_edit_someone_elses_public_event(self, api_client, other_user):
        event = EventFactory(user=other_user, is_public=True)
        url = reverse("event-detail", args=[event.id])

        assert api_client.get(url).status_code == 200
        assert api_client.patch(url, {"title": "Hijacked"}, format="json").status_code == 403
        assert api_client.delete(url).status_code == 403
        event.refresh_from_db()
        assert event.title != "Hijacked"

    def test_private_event_of_someone_else_is_hidden(self, api_client, other_user):
        event = EventFactory(user=other_user, is_public=False)
        assert api_client.get(reverse("event-detail", args=[event.id])).status_code == 404


class TestEventWrites:

    def test_create_event(self, api_client, user):
        response = api_client.post(reverse("event-list"), {
            "title": "Jazz night",
            "description": "Live quartet",
            "location": "Blue Note",
            "event_date": (timezone.now() + timedelta(days=7)).isoformat(),
            "category": EventCategory.MUSIC,
            "distance_km": "12.50",
            "is_public": True,
        }, format="json")

        assert response.status_code == 201
        event = Event.objects.get(pk=response.data["id"])
        assert event.user == user
        assert event.distance_km == Decimal("12.50")
        assert response.data["is_owner"] is True

    def test_negative_distance_is_rejected(self, api_client):
        response = api_client.post(reverse("event-list"), {
            "title": "Nowhere",
            "event_date": timezone.now().isoformat(),
            "distance_km": "-1",
        }, format="json")
        assert response.status_code == 400
        assert "distance_km" in response.json()["errors"]

    def test_owner_can_delete(self, api_client, user):
        event = EventFactory(user=user)
        assert api_client.delete(reverse("event-detail", args=[event.id])).status_code == 204
        assert not Event.objects.filter(pk=event.pk).exists()


class TestEventFilters:

    @pytest.fixture
    def events(self, user, other_user):
        rows = []
        specs = [
            ("Rock concert", "Loud guitars", "Arena", EventCategory.MUSIC, Decimal("2.00")),
            ("Food market", "Street food stands", "Old harbour", EventCategory.FOOD, Decimal("5.00")),
            ("Trail run", "Concert of birds at dawn", "Forest", EventCategory.SPORT, Decimal("15.00")),
            ("Startup meetup", "Pitches", "Concert hall", EventCategory.BUSINESS, Decimal("40.00")),
            ("Choir evening", "Classical music", "Cathedral", EventCategory.MUSIC, None),
            ("Derby", "Local football", "Stadium", EventCategory.SPORT, Decimal("0")),
        ]
        for index, (title, description, location, category, distance) in enumerate(specs):
            owner = user if index % 2 else other_user
            rows.append(EventFactory(
                user=owner,
                title=title,
                description=description,
                location=location,
                category=category,
                distance_km=distance,
                is_public=True,
            ))
        return rows

    def test_filtering_is_the_conjunction_of_active_predicates(self, api_client, events):
        categories = ["all", EventCategory.MUSIC, EventCategory.SPORT, EventCategory.BUSINESS]
        distances = list(DISTANCE_PREDICATES)
        searches = ["", "concert", "FOOD"]

        for category, distance, search in itertools.product(categories, distances, searches):
            params = {"category": category, "distance": distance, "page_size": 100}
            if search:
                params["search"] = search
            response = api_client.get(reverse("event-list"), params)
            assert response.status_code == 200

            needle = search.lower()
            expected = {
                event.id for event in events
                if (category == "all" or event.category == category)
                and DISTANCE_PREDICATES[distance](event.distance_km)
                and (
                    not needle
                    or needle in event.title.lower()
                    or needle in event.description.lower()
                    or needle in event.location.lower()
                )
            }
            assert set(_ids(response)) == expected, params

    def test_zero_distance_is_under_five(self, api_client, events):
        response = api_client.get(reverse("event-list"), {"distance": "under5", "category": "sport"})
        assert [row["title"] for row in response.json()["results"]] == ["Derby"]

    def test_unknown_distance_bucket_is_rejected(self, api_client, events):
        response = api_client.get(reverse("event-list"), {"distance": "far-away"})
        assert response.status_code == 400

    def test_mine_limits_to_own_events(self, api_client, user, events):
        response = api_client.get(reverse("event-list"), {"mine": "true", "page_size": 100})
        assert {row["id"] for row in response.json()["results"]} == {
            event.id for event in events if event.user_id == user.id
        }
