# tests/test_dashboard.py
from django.urls import reverse

from common.enums import WidgetSize, WidgetType
from dashboard import services
from dashboard.catalog import WIDGET_CATALOG
from dashboard.models import DashboardWidget
from tests.factories import DashboardWidgetFactory


def _types(data):
    return [row["widget_type"] for row in data]


class TestWidgetCatalog:

    def test_catalog_lists_every_widget_in_order(self, api_client):
        response = api_client.get(reverse("widget-catalog"))

        assert response.status_code == 200
        assert _types(response.data) == [
            WidgetType.BUCKET_LIST,
            WidgetType.DATING_JOURNAL,
            WidgetType.DATING_IDEAS,
            WidgetType.DATING_APP,
        ]
        assert all(row["route"].startswith("/") for row in response.data)


class TestDashboardLayoutApi:

    def test_first_visit_creates_default_layout(self, api_client, user):
        response = api_client.get(reverse("dashboard-layout-list"))

        assert response.status_code == 200
        assert _types(response.data) == [d.widget_type for d in WIDGET_CATALOG]
        assert [row["position"] for row in response.data] == list(range(len(WIDGET_CATALOG)))
        assert response.data[0]["title"] == WIDGET_CATALOG[0].title
        assert DashboardWidget.objects.for_user(user).count() == len(WIDGET_CATALOG)

    def test_layout_is_per_user(self, api_client, user, other_user):
        DashboardWidgetFactory(user=other_user, widget_type=WidgetType.DATING_APP, position=0)
        DashboardWidgetFactory(user=user, widget_type=WidgetType.BUCKET_LIST, position=0)

        response = api_client.get(reverse("dashboard-layout-list"))
        assert _types(response.data) == [WidgetType.BUCKET_LIST]

    def test_reorder(self, api_client, user):
        DashboardWidgetFactory(user=user, widget_type=WidgetType.BUCKET_LIST, position=0)
        DashboardWidgetFactory(user=user, widget_type=WidgetType.DATING_JOURNAL, position=1)
        DashboardWidgetFactory(user=user, widget_type=WidgetType.DATING_IDEAS, position=2)

        response = api_client.post(
            reverse("dashboard-layout-reorder"),
            {"source_index": 2, "destination_index": 0},
            format="json",
        )

        assert response.status_code == 200
        assert [(row["widget_type"], row["position"]) for row in response.data] == [
            (WidgetType.DATING_IDEAS, 0),
            (WidgetType.BUCKET_LIST, 1),
            (WidgetType.DATING_JOURNAL, 2),
        ]
        stored = api_client.get(reverse("dashboard-layout-list")).data
        assert stored == response.data

    def test_drop_outside_target_changes_nothing(self, api_client, user):
        api_client.get(reverse("dashboard-layout-list"))

        response = api_client.post(
            reverse("dashboard-layout-reorder"),
            {"source_index": 1, "destination_index": None},
            format="json",
        )
        assert response.status_code == 200
        assert _types(response.data) == [d.widget_type for d in WIDGET_CATALOG]

    def test_out_of_range_move_is_400(self, api_client):
        response = api_client.post(
            reverse("dashboard-layout-reorder"),
            {"source_index": 0, "destination_index": 42},
            format="json",
        )
        assert response.status_code == 400
        assert "errors" in response.json()

    def test_negative_index_is_400(self, api_client):
        response = api_client.post(
            reverse("dashboard-layout-reorder"), {"source_index": -1}, format="json"
        )
        assert response.status_code == 400
        assert "source_index" in response.json()["errors"]

    def test_unconfirmed_reorder_returns_409_with_stored_layout(self, api_client, user, monkeypatch):
        api_client.get(reverse("dashboard-layout-list"))
        monkeypatch.setattr(services, "_find_mismatches", lambda user, intended: dict(intended))

        response = api_client.post(
            reverse("dashboard-layout-reorder"),
            {"source_index": 3, "destination_index": 0},
            format="json",
        )

        assert response.status_code == 409
        body = response.json()
        assert body["errors"]
        assert _types(body["layout"]) == [d.widget_type for d in WIDGET_CATALOG]

    def test_reset_restores_defaults(self, api_client, user):
        DashboardWidgetFactory(user=user, widget_type=WidgetType.DATING_APP, position=0)

        response = api_client.post(reverse("dashboard-layout-reset"))

        assert response.status_code == 200
        assert _types(response.data) == [d.widget_type for d in WIDGET_CATALOG]
        assert DashboardWidget.objects.for_user(user).count() == len(WIDGET_CATALOG)

    def test_patch_toggles_visibility_and_size(self, api_client, user):
        widget = DashboardWidgetFactory(user=user, position=0)

        response = api_client.patch(
            reverse("dashboard-layout-detail", args=[widget.id]),
            {"is_active": False, "size": WidgetSize.SMALL, "position": 5},
            format="json",
        )

        assert response.status_code == 200
        widget.refresh_from_db()
        assert widget.is_active is False
        assert widget.size == WidgetSize.SMALL
        assert widget.position == 0

    def test_cannot_patch_other_users_widget(self, api_client, other_user):
        widget = DashboardWidgetFactory(user=other_user)

        response = api_client.patch(
            reverse("dashboard-layout-detail", args=[widget.id]), {"is_active": False}, format="json"
        )
        assert response.status_code == 404

    def test_anonymous_is_rejected(self, client):
        assert client.get(reverse("dashboard-layout-list")).status_code == 401
