import django_filters

from .models import StringRecord


class StringRecordFilter(django_filters.FilterSet):
    """
    ORM translation of a PredicateSet
    """
    is_palindrome = django_filters.BooleanFilter(field_name='properties__is_palindrome')
    word_count = django_filters.NumberFilter(field_name='properties__word_count')
    min_length = django_filters.NumberFilter(field_name='properties__length', lookup_expr='gte')
    max_length = django_filters.NumberFilter(field_name='properties__length', lookup_expr='lte')
    contains_character = django_filters.CharFilter(field_name='value', lookup_expr='icontains', strip=False)

    class Meta:
        model = StringRecord
        fields = []

    @classmethod
    def from_predicates(cls, predicates, queryset=None):
        data = {}
        for key, value in predicates.as_dict().items():
            if isinstance(value, bool):
                value = 'true' if value else 'false'
            data[key] = str(value)
        if queryset is None:
            queryset = StringRecord.objects.select_related('properties')
        return cls(data=data, queryset=queryset)
