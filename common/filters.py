import django_filters

# Value a select box sends when no restriction is chosen.
ALL = 'all'


class ChoiceOrAllFilter(django_filters.ChoiceFilter):
    """Exact match on a choice field; ``all`` disables the filter."""

    def __init__(self, *args, **kwargs):
        choices = list(kwargs.pop('choices', []))
        kwargs['choices'] = [(ALL, 'All')] + choices
        super().__init__(*args, **kwargs)

    def filter(self, qs, value):
        if value == ALL:
            return qs
        return super().filter(qs, value)
