# core/managers.py
from django.db import models
from django.db.models import Q
from rest_framework.exceptions import PermissionDenied


class MissingUserScope(PermissionDenied):
    default_detail = 'An authenticated user is required to access this data.'
    default_code = 'missing_user_scope'


def require_user(user):
    if user is None or not getattr(user, 'is_authenticated', False):
        raise MissingUserScope()
    return user


class OwnedQuerySet(models.QuerySet):
    def for_user(self, user):
        require_user(user)
        return self.filter(user=user)

    def visible_to(self, user):
        """Rows the user owns plus rows flagged public on ``model.public_field``."""
        require_user(user)
        public_field = getattr(self.model, 'public_field', None)
        if not public_field:
            return self.filter(user=user)
        return self.filter(Q(**{public_field: True}) | Q(user=user))
