from dataclasses import dataclass

from django.conf import settings

DEFAULT_REPOSITORY = 'String_Analyser.repository.DjangoStringRepository'


@dataclass(frozen=True)
class AnalyserSettings:
    """
    App options, read once from ``settings.STRING_ANALYSER`` at startup.
    """
    repository_class: str = DEFAULT_REPOSITORY
    swagger: bool = True

    @classmethod
    def from_django_settings(cls):
        options = getattr(settings, 'STRING_ANALYSER', None) or {}
        return cls(
            repository_class=options.get('REPOSITORY', DEFAULT_REPOSITORY),
            swagger=bool(options.get('SWAGGER', True)),
        )
