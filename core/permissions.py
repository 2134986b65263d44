from rest_framework.permissions import BasePermission, SAFE_METHODS


class IsOwnerOrReadOnly(BasePermission):
    """Shared rows can be read by anyone who sees them; only the owner writes."""

    message = 'Only the owner can change this item.'

    def has_object_permission(self, request, view, obj):
        if request.method in SAFE_METHODS:
            return True
        return obj.is_owned_by(request.user)
