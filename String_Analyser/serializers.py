import re
from collections.abc import Mapping

from rest_framework import serializers

from .exceptions import InvalidQuery, InvalidValueType, MissingOrInvalidInput
from .models import StringRecord
from .predicates import PredicateSet


class StringRecordSerializer(serializers.ModelSerializer):
    class Meta:
        model = StringRecord
        fields = ['id', 'value', 'created_at']
        read_only_fields = ['id', 'created_at']

    def to_representation(self, instance):
        properties = instance.properties
        props = {
            'length': properties.length,
            'is_palindrome': properties.is_palindrome,
            'unique_characters': properties.unique_characters,
            'word_count': properties.word_count,
            'sha256_hash': properties.sha256_hash,
            'character_frequency_map': properties.character_frequency_map,
        }

        return {
            'id': instance.id,
            'value': instance.value,
            'properties': props,
            'created_at': instance.created_at.isoformat() if getattr(instance, 'created_at', None) is not None else None,
        }


class StringAnalyzeSerializer(serializers.Serializer):
    value = serializers.CharField(trim_whitespace=False)

    def to_internal_value(self, data):
        # CharField would happily coerce numbers, so check the raw payload first
        value = data.get('value') if isinstance(data, Mapping) else None
        if value is None or value == '':
            raise MissingOrInvalidInput()
        if not isinstance(value, str):
            raise InvalidValueType()
        return super().to_internal_value(data)

    def create(self, validated_data):
        return self.context['service'].create(validated_data['value'])


class StrictIntegerField(serializers.IntegerField):
    """IntegerField that only takes plain digit strings, no "1.0" or " 1"."""
    integer_re = re.compile(r'^-?\d+$')

    def to_internal_value(self, data):
        if isinstance(data, str) and not self.integer_re.match(data):
            self.fail('invalid')
        return super().to_internal_value(data)


class StringQuerySerializer(serializers.Serializer):
    """
    Structured filter parameters for GET /strings
    """
    is_palindrome = serializers.ChoiceField(choices=['true', 'false'], required=False)
    min_length = StrictIntegerField(required=False)
    max_length = StrictIntegerField(required=False)
    word_count = StrictIntegerField(required=False)
    contains_character = serializers.CharField(
        required=False, min_length=1, max_length=1, trim_whitespace=False)

    @classmethod
    def predicates_from_params(cls, query_params):
        """
        Validate query parameters into a PredicateSet.

        Parameters sent without a value count as absent. Any invalid one
        rejects the whole request with InvalidQuery.
        """
        data = {key: value for key, value in query_params.items() if value != ''}
        serializer = cls(data=data)
        if not serializer.is_valid():
            raise InvalidQuery()

        validated = dict(serializer.validated_data)
        if 'is_palindrome' in validated:
            validated['is_palindrome'] = validated['is_palindrome'] == 'true'
        return PredicateSet.from_dict(validated)


class NaturalLanguageQuerySerializer(serializers.Serializer):
    # untrimmed, the phrase is echoed back exactly as sent
    query = serializers.CharField(trim_whitespace=False)

    def validate_query(self, value):
        if not value.strip():
            raise serializers.ValidationError("Query must not be blank.")
        return value

    @classmethod
    def phrase_from_params(cls, query_params):
        serializer = cls(data={'query': query_params.get('query', '')})
        if not serializer.is_valid():
            raise MissingOrInvalidInput("Missing or invalid 'query' parameter in request")
        return serializer.validated_data['query']
