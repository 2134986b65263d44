from rest_framework import serializers


class BlankableDateField(serializers.DateField):
    """DateField that stores an empty form value as null."""

    def __init__(self, **kwargs):
        kwargs.setdefault('allow_null', True)
        kwargs.setdefault('required', False)
        super().__init__(**kwargs)

    def to_internal_value(self, value):
        if value in ('', None):
            return None
        return super().to_internal_value(value)
