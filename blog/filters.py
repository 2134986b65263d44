import django_filters
from django.db.models import Q

from blog.models import BlogPost


class BlogPostFilter(django_filters.FilterSet):
    tag = django_filters.CharFilter(method='filter_tag')
    search = django_filters.CharFilter(method='filter_search')
    is_published = django_filters.BooleanFilter()

    class Meta:
        model = BlogPost
        fields = ['is_published']

    def filter_tag(self, queryset, name, value):
        return queryset.filter(tags__name__in=[value]).distinct()

    def filter_search(self, queryset, name, value):
        return queryset.filter(Q(title__icontains=value) | Q(content__icontains=value))
