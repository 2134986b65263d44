import logging

from django_filters.rest_framework import DjangoFilterBackend
from rest_framework.filters import OrderingFilter
from rest_framework.permissions import IsAuthenticated
from rest_framework.viewsets import ModelViewSet

from core.permissions import IsOwnerOrReadOnly

logger = logging.getLogger(__name__)


class OwnerScopedViewSet(ModelViewSet):
    """CRUD over an ``OwnedModel`` restricted to the requesting user.

    Subclasses set ``model``. When ``shared`` is true, reads also include
    rows flagged public and writes are limited to the owner.
    """
    model = None
    shared = False
    permission_classes = [IsAuthenticated, IsOwnerOrReadOnly]
    filter_backends = [DjangoFilterBackend, OrderingFilter]

    def get_queryset(self):
        if getattr(self, "swagger_fake_view", False):
            return self.model.objects.none()
        user = self.request.user
        if self.shared:
            return self.model.objects.visible_to(user)
        return self.model.objects.for_user(user)

    def perform_create(self, serializer):
        instance = serializer.save(user=self.request.user)
        logger.info(
            "Created %s", self.model.__name__,
            extra={"object_id": instance.pk, "user_id": self.request.user.pk},
        )

    def perform_update(self, serializer):
        # The owner is rewritten on every edit, never taken from the payload.
        serializer.save(user=self.request.user)

    def perform_destroy(self, instance):
        logger.info(
            "Deleted %s", self.model.__name__,
            extra={"object_id": instance.pk, "user_id": self.request.user.pk},
        )
        instance.delete()
