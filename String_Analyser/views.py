from rest_framework.views import APIView
from rest_framework.response import Response
from rest_framework import status
from drf_yasg.utils import swagger_auto_schema
from drf_yasg import openapi

from .serializers import (
    NaturalLanguageQuerySerializer,
    StringAnalyzeSerializer,
    StringQuerySerializer,
    StringRecordSerializer,
)
from .services import get_string_service

error_response = openapi.Schema(
    type=openapi.TYPE_OBJECT,
    properties={'error': openapi.Schema(type=openapi.TYPE_STRING)},
)


class StringServiceMixin:
    """Resolve the StringAnalyserService for the current request."""
    service_factory = staticmethod(get_string_service)

    def get_service(self):
        return self.service_factory()


# 1️⃣ POST & GET /strings


class StringAnalyzerView(StringServiceMixin, APIView):

    @swagger_auto_schema(
        request_body=StringAnalyzeSerializer,
        operation_summary="Analyze and store a new string",
        responses={201: 'Created string with its properties', 400: error_response, 409: error_response,
                   422: error_response},
        tags=['Strings'],
    )
    def post(self, request):
        serializer = StringAnalyzeSerializer(data=request.data, context={'service': self.get_service()})
        serializer.is_valid(raise_exception=True)
        record = serializer.save()
        return Response(StringRecordSerializer(record).data, status=status.HTTP_201_CREATED)

    @swagger_auto_schema(
        operation_summary="List analyzed strings, optionally filtered",
        manual_parameters=[
            openapi.Parameter(
                "is_palindrome",
                openapi.IN_QUERY,
                description="Filter by palindrome (true/false)",
                type=openapi.TYPE_STRING,
                enum=['true', 'false'],
            ),
            openapi.Parameter(
                "min_length",
                openapi.IN_QUERY,
                description="Minimum string length",
                type=openapi.TYPE_INTEGER,
            ),
            openapi.Parameter(
                "max_length",
                openapi.IN_QUERY,
                description="Maximum string length",
                type=openapi.TYPE_INTEGER,
            ),
            openapi.Parameter(
                "word_count",
                openapi.IN_QUERY,
                description="Exact word count",
                type=openapi.TYPE_INTEGER,
            ),
            openapi.Parameter(
                "contains_character",
                openapi.IN_QUERY,
                description="Filter strings that contain this single character (case-insensitive)",
                type=openapi.TYPE_STRING,
            ),
        ],
        responses={400: error_response},
        tags=['Strings'],
    )
    def get(self, request):
        predicates = StringQuerySerializer.predicates_from_params(request.query_params)
        records = self.get_service().list(predicates)

        return Response({
            "data": StringRecordSerializer(records, many=True).data,
            "count": len(records),
            "filters_applied": predicates.as_dict(),
        }, status=status.HTTP_200_OK)

# 2️⃣ GET &  DELETE  /strings/{string_value}


class StringDetailView(StringServiceMixin, APIView):

    @swagger_auto_schema(
        operation_summary="Get a stored string by its value",
        responses={404: error_response},
        tags=['Strings'],
    )
    def get(self, request, value):
        record = self.get_service().get(value)
        return Response(StringRecordSerializer(record).data, status=status.HTTP_200_OK)

    @swagger_auto_schema(
        operation_summary="Delete a stored string and its properties",
        responses={204: 'Deleted', 404: error_response},
        tags=['Strings'],
    )
    def delete(self, request, value):
        self.get_service().delete(value)
        return Response(status=status.HTTP_204_NO_CONTENT)


# 3️⃣ GET /strings/filter-by-natural-language

class NaturalLanguageFilterView(StringServiceMixin, APIView):
    @swagger_auto_schema(
        operation_summary="Filter analyzed strings using natural language queries",
        manual_parameters=[
            openapi.Parameter(
                "query",
                openapi.IN_QUERY,
                description="Natural language query, e.g. 'all single word palindromic strings'",
                type=openapi.TYPE_STRING,
                required=True,
            )
        ],
        responses={400: error_response, 422: error_response},
        tags=['Strings'],
    )
    def get(self, request):
        phrase = NaturalLanguageQuerySerializer.phrase_from_params(request.query_params)
        records, interpreted = self.get_service().filter_by_natural_language(phrase)

        return Response({
            "data": StringRecordSerializer(records, many=True).data,
            "count": len(records),
            "interpreted_query": interpreted.as_dict(),
        }, status=status.HTTP_200_OK)
