"""Dashboard layout persistence.

Every function takes the acting ``user`` explicitly; the scoped querysets
refuse to run without one.
"""
import logging

from django.conf import settings
from django.db import DatabaseError, transaction

from common.enums import WidgetSize
from core.managers import require_user
from dashboard.catalog import WIDGET_CATALOG
from dashboard.exceptions import LayoutError, LayoutSyncError
from dashboard.models import DashboardWidget

logger = logging.getLogger(__name__)


def get_layout_queryset(user):
    return DashboardWidget.objects.for_user(user).order_by('position', 'id')


def create_default_layout(user):
    """Insert one active, medium widget per catalog entry and return them in order."""
    require_user(user)
    DashboardWidget.objects.bulk_create([
        DashboardWidget(
            user=user,
            widget_type=definition.widget_type,
            position=index,
            is_active=True,
            size=WidgetSize.MEDIUM,
        )
        for index, definition in enumerate(WIDGET_CATALOG)
    ])
    logger.info("Created default dashboard layout", extra={"user_id": user.pk})
    return list(get_layout_queryset(user))


def load_layout(user):
    """Return the user's widgets by position, creating the defaults when there are none."""
    try:
        widgets = list(get_layout_queryset(user))
    except DatabaseError:
        logger.exception("Could not load dashboard layout", extra={"user_id": user.pk})
        widgets = []
    if widgets:
        return widgets
    return create_default_layout(user)


def move_item(items, source_index, destination_index):
    """Return a new list with the item at ``source_index`` moved to ``destination_index``.

    A missing destination (dropped outside any target) leaves the order as is.
    """
    items = list(items)
    if destination_index is None:
        return items
    size = len(items)
    if not 0 <= source_index < size:
        raise LayoutError(f"source_index {source_index} is out of range for {size} widgets")
    if not 0 <= destination_index < size:
        raise LayoutError(f"destination_index {destination_index} is out of range for {size} widgets")
    item = items.pop(source_index)
    items.insert(destination_index, item)
    return items


def _write_positions(user, positions):
    for widget_id, position in positions.items():
        DashboardWidget.objects.for_user(user).filter(pk=widget_id).update(position=position)


def _find_mismatches(user, intended):
    confirmed = dict(
        DashboardWidget.objects.for_user(user)
        .filter(pk__in=intended)
        .values_list('pk', 'position')
    )
    return {
        widget_id: position
        for widget_id, position in intended.items()
        if confirmed.get(widget_id) != position
    }


def reorder_layout(user, source_index, destination_index):
    """Move one widget and persist the dense positions of the whole layout.

    Writes run in a single transaction. The stored positions are then read
    back and compared with the intended ones; mismatching rows are written
    again up to ``DASHBOARD_REORDER_RETRIES`` times. If they still disagree
    the transaction is rolled back and ``LayoutSyncError`` is raised, so the
    stored layout is left exactly as it was.
    """
    current = load_layout(user)
    ordered = move_item(current, source_index, destination_index)
    if destination_index is None:
        return ordered

    intended = {widget.pk: index for index, widget in enumerate(ordered)}
    changed = {
        widget.pk: index
        for index, widget in enumerate(ordered)
        if widget.position != index
    }
    retries = getattr(settings, 'DASHBOARD_REORDER_RETRIES', 1)

    with transaction.atomic():
        _write_positions(user, changed)
        mismatched = _find_mismatches(user, intended)
        while mismatched and retries > 0:
            logger.warning(
                "Dashboard positions out of sync, retrying",
                extra={"user_id": user.pk, "mismatched": sorted(mismatched)},
            )
            _write_positions(user, mismatched)
            mismatched = _find_mismatches(user, intended)
            retries -= 1
        if mismatched:
            logger.error(
                "Dashboard reorder rolled back",
                extra={"user_id": user.pk, "mismatched": sorted(mismatched)},
            )
            raise LayoutSyncError(mismatched=mismatched)

    for index, widget in enumerate(ordered):
        widget.position = index
    return ordered


def reset_layout(user):
    """Drop every widget of the user and recreate the default layout."""
    require_user(user)
    with transaction.atomic():
        deleted, _ = DashboardWidget.objects.for_user(user).delete()
        widgets = create_default_layout(user)
    logger.info("Dashboard layout reset", extra={"user_id": user.pk, "deleted": deleted})
    return widgets


def update_widget(user, widget_id, **changes):
    """Change visibility or size of one of the user's widgets."""
    allowed = {key: value for key, value in changes.items() if key in ('is_active', 'size')}
    widget = get_layout_queryset(user).get(pk=widget_id)
    for field, value in allowed.items():
        setattr(widget, field, value)
    widget.user = user
    widget.save(update_fields=[*allowed, 'user', 'updated_at'])
    return widget
