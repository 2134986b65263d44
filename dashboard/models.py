from django.db import models

from common.enums import WidgetSize, WidgetType
from core.models import OwnedModel


class DashboardWidget(OwnedModel):
    """One tile on a user's dashboard pointing at a micro-app.

    Positions are kept dense (0..N-1) by the layout service; the database
    does not enforce uniqueness.
    """
    widget_type = models.CharField(max_length=30, choices=WidgetType.choices)
    position = models.PositiveIntegerField(default=0)
    is_active = models.BooleanField(default=True)
    size = models.CharField(max_length=10, choices=WidgetSize.choices, default=WidgetSize.MEDIUM)

    class Meta:
        ordering = ['position', 'id']

    def __str__(self):
        return f"{self.user} - {self.widget_type} @ {self.position}"
