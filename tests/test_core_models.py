# tests/test_core_models.py
import pytest
from django.contrib.auth.models import AnonymousUser

from bucket_list.models import BucketListItem
from core.managers import MissingUserScope
from core.models import BaseModel, OwnedModel
from events.models import Event
from tests.factories import BucketListItemFactory, EventFactory, UserFactory


class TestCoreModels:

    def test_base_model_is_abstract(self):
        assert BaseModel._meta.abstract is True
        assert OwnedModel._meta.abstract is True

    def test_base_model_fields(self):
        """BaseModel provides uuid and timestamps"""
        item = BucketListItemFactory()

        assert item.uuid is not None
        assert item.created_at is not None
        assert item.updated_at is not None

    def test_base_model_uuid_unique(self):
        first = BucketListItemFactory()
        second = BucketListItemFactory()
        assert first.uuid != second.uuid

    def test_is_owned_by(self):
        item = BucketListItemFactory()
        assert item.is_owned_by(item.user)
        assert not item.is_owned_by(UserFactory())
        assert not item.is_owned_by(AnonymousUser())


class TestRowLevelScoping:

    def test_for_user_only_returns_own_rows(self):
        mine = BucketListItemFactory()
        BucketListItemFactory()

        rows = list(BucketListItem.objects.for_user(mine.user))
        assert rows == [mine]

    @pytest.mark.parametrize("user", [None, AnonymousUser()])
    def test_for_user_rejects_missing_user(self, user):
        with pytest.raises(MissingUserScope):
            BucketListItem.objects.for_user(user)

    @pytest.mark.parametrize("user", [None, AnonymousUser()])
    def test_visible_to_rejects_missing_user(self, user):
        with pytest.raises(MissingUserScope):
            Event.objects.visible_to(user)

    def test_visible_to_includes_public_rows_of_others(self):
        viewer = UserFactory()
        own_private = EventFactory(user=viewer, is_public=False)
        others_public = EventFactory(is_public=True)
        EventFactory(is_public=False)

        visible = set(Event.objects.visible_to(viewer))
        assert visible == {own_private, others_public}

    def test_visible_to_without_public_field_is_owner_only(self):
        mine = BucketListItemFactory()
        BucketListItemFactory()

        assert list(BucketListItem.objects.visible_to(mine.user)) == [mine]
