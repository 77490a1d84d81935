from django.urls import path
from .views import StringAnalyzerView, StringDetailView, NaturalLanguageFilterView

urlpatterns = [
    path('strings', StringAnalyzerView.as_view(), name='strings'),
    # must precede the <value> route, which would otherwise swallow it
    path('strings/filter-by-natural-language', NaturalLanguageFilterView.as_view(),
         name='strings_nl_filter'),
    path('strings/<str:value>', StringDetailView.as_view(), name='string_detail'),
]
