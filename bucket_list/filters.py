import django_filters

from bucket_list.models import BucketListItem
from common.enums import BucketListCategory
from common.filters import ChoiceOrAllFilter


class BucketListItemFilter(django_filters.FilterSet):
    category = ChoiceOrAllFilter(choices=BucketListCategory.choices)
    is_completed = django_filters.BooleanFilter()

    class Meta:
        model = BucketListItem
        fields = ['category', 'is_completed']
