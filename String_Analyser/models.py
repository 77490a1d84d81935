from django.db import models


class StringRecord(models.Model):
    """
    A stored string, keyed by the sha256 hex digest of its value
    """
    id = models.CharField(primary_key=True, max_length=64, editable=False)  # sha256 hex length = 64
    value = models.TextField(unique=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'string_records'
        ordering = ['-created_at']

    def __str__(self):
        return f"{self.value[:50]} - {self.id[:12]}"


class StringProperties(models.Model):
    """
    Properties derived from a StringRecord's value at creation time
    """
    record = models.OneToOneField(
        StringRecord,
        on_delete=models.CASCADE,
        related_name='properties',
    )
    length = models.PositiveIntegerField()
    is_palindrome = models.BooleanField()
    unique_characters = models.PositiveIntegerField()
    word_count = models.PositiveIntegerField()
    sha256_hash = models.CharField(max_length=64)
    character_frequency_map = models.JSONField()

    class Meta:
        db_table = 'string_properties'
        verbose_name_plural = 'string properties'

    def __str__(self):
        return f"properties of {self.sha256_hash[:12]}"
