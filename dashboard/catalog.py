"""Widgets a dashboard can show, in default layout order."""
from dataclasses import dataclass

from common.enums import WidgetType


@dataclass(frozen=True)
class WidgetDefinition:
    widget_type: str
    title: str
    description: str
    route: str


WIDGET_CATALOG = (
    WidgetDefinition(
        widget_type=WidgetType.BUCKET_LIST.value,
        title='My Bucket List',
        description='Keep track of your life goals and dreams',
        route='/apps/bucket-list',
    ),
    WidgetDefinition(
        widget_type=WidgetType.DATING_JOURNAL.value,
        title='Dating Journal',
        description='Write down your dating experiences',
        route='/apps/dating-journal',
    ),
    WidgetDefinition(
        widget_type=WidgetType.DATING_IDEAS.value,
        title='Dating Ideas',
        description='Collect creative date suggestions',
        route='/apps/dating-ideas',
    ),
    WidgetDefinition(
        widget_type=WidgetType.DATING_APP.value,
        title='Dating App',
        description='Find interesting people',
        route='/apps/dating-app',
    ),
)

_BY_TYPE = {definition.widget_type: definition for definition in WIDGET_CATALOG}


def get_widget_definition(widget_type):
    return _BY_TYPE.get(widget_type)
