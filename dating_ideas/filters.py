import django_filters

from common.enums import IdeaCategory
from common.filters import ChoiceOrAllFilter
from dating_ideas.models import DatingIdea


class DatingIdeaFilter(django_filters.FilterSet):
    category = ChoiceOrAllFilter(choices=IdeaCategory.choices)
    is_favorite = django_filters.BooleanFilter()

    class Meta:
        model = DatingIdea
        fields = ['category', 'is_favorite', 'estimated_cost', 'location_type']
